"""HTTP request port.

Read-only view of the current HTTP request, as far as the dispatcher
needs it: the URL it was requested with and whether it is an AJAX call.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from micro_presenter.domain.value_objects import Url


class HttpRequest(Protocol):
    """Protocol for the current HTTP request."""

    @property
    @abstractmethod
    def url(self) -> Url:
        """URL the request was made to, including the script path."""
        ...

    @abstractmethod
    def is_ajax(self) -> bool:
        """Return True for XMLHttpRequest / fetch calls flagged as AJAX."""
        ...
