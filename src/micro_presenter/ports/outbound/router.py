"""Router port for canonical URL construction.

The router is the inverse of request matching: given a presenter request,
it builds the one URL the request should be reachable at. The dispatcher
redirects GET/HEAD requests that arrived through any other URL.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Optional, Protocol

from micro_presenter.domain.entities.request import PresenterRequest
from micro_presenter.domain.value_objects import Url


class Router(Protocol):
    """Protocol for building URLs from presenter requests."""

    @abstractmethod
    def construct_url(self, request: PresenterRequest, ref_url: Url) -> Optional[str]:
        """Build the absolute canonical URL for a request.

        Args:
            request: Request to build the URL for.
            ref_url: Reference URL supplying scheme, host and script path.

        Returns:
            Absolute URL, or None if the router cannot build one.
        """
        ...
