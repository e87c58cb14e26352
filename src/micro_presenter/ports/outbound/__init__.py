"""Outbound ports - interfaces for the host framework's services.

Outbound ports define the contracts for the collaborators the dispatcher
consumes: the DI container, the current HTTP request, the router and the
template engine.
"""

from micro_presenter.ports.outbound.http_request import HttpRequest
from micro_presenter.ports.outbound.router import Router
from micro_presenter.ports.outbound.service_locator import ServiceLocator
from micro_presenter.ports.outbound.template_engine import TemplateEngine, TemplateEngineFactory

__all__ = [
    "HttpRequest",
    "Router",
    "ServiceLocator",
    "TemplateEngine",
    "TemplateEngineFactory",
]
