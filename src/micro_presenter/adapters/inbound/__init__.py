"""Inbound adapters for the micro presenter.

Provides the FastAPI adapter that mounts callback routes.
"""

from micro_presenter.adapters.inbound.rest_api import (
    add_micro_route,
    configure_observability,
    create_app,
    dispatch,
    micro_route,
    to_http_response,
)

__all__ = [
    "add_micro_route",
    "configure_observability",
    "create_app",
    "dispatch",
    "micro_route",
    "to_http_response",
]
