"""Starlette adapters for the HTTP request and router ports.

StarletteHttpRequest exposes the current request's URL (with the ASGI
``root_path`` as script path) and AJAX flag. StarletteRouter builds the
canonical URL of a named route from the application's route table.

Usage:
    http_request = StarletteHttpRequest(request)
    router = StarletteRouter(request.app)
    presenter = MicroPresenter(container, http_request, router)
"""

from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import urlencode

from starlette.requests import Request
from starlette.routing import BaseRoute, NoMatchFound
from starlette.types import ASGIApp

from micro_presenter.domain.entities.request import CALLBACK_PARAMETER, PresenterRequest
from micro_presenter.domain.services.argument_resolver import PRESENTER_PARAMETER
from micro_presenter.domain.value_objects import Url

logger = logging.getLogger(__name__)

_RESERVED_PARAMETERS = frozenset({CALLBACK_PARAMETER, PRESENTER_PARAMETER})
_QUERY_SCALARS = (str, int, float, bool)


class StarletteHttpRequest:
    """Read-only view of a Starlette request."""

    def __init__(self, request: Request) -> None:
        self._request = request
        self._url: Url | None = None

    @property
    def url(self) -> Url:
        if self._url is None:
            root_path = self._request.scope.get("root_path", "") or ""
            self._url = Url.parse(str(self._request.url), script_path=root_path.rstrip("/") + "/")
        return self._url

    def is_ajax(self) -> bool:
        return self._request.headers.get("x-requested-with", "").lower() == "xmlhttprequest"


class StarletteRouter:
    """Canonical URL construction from a Starlette/FastAPI route table."""

    def __init__(self, app: ASGIApp) -> None:
        self._app = app

    def construct_url(self, request: PresenterRequest, ref_url: Url) -> Optional[str]:
        """Build the absolute canonical URL for a named route.

        Path parameters fill the route template through its convertors;
        remaining scalar parameters become a sorted query string.

        Returns:
            Absolute URL, or None if the route is unknown or cannot be built.
        """
        route = self._find_route(request.name)
        if route is None:
            return None

        convertors: dict[str, Any] = getattr(route, "param_convertors", {})
        path_params = {k: v for k, v in request.parameters.items() if k in convertors}
        try:
            path = route.url_path_for(request.name, **path_params)
        except (NoMatchFound, AssertionError, ValueError) as e:
            logger.debug(f"Cannot build URL for route {request.name}: {e}")
            return None

        query = sorted(
            (k, _query_value(v))
            for k, v in request.parameters.items()
            if k not in convertors
            and k not in _RESERVED_PARAMETERS
            and isinstance(v, _QUERY_SCALARS)
        )

        url = ref_url.host_url + ref_url.base_path.rstrip("/") + str(path)
        if query:
            url += "?" + urlencode(query)
        return url

    def _find_route(self, name: str) -> Optional[BaseRoute]:
        for route in getattr(self._app, "routes", ()):
            if getattr(route, "name", None) == name:
                return route
        return None


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)
