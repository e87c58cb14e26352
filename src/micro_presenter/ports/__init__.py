"""Ports layer - interface definitions following Hexagonal Architecture.

Ports are abstract interfaces (protocols) that define contracts:
- Inbound ports: what the host framework calls (Presenter)
- Outbound ports: what the dispatcher consumes (DI container, HTTP request,
  router, template engine)

Adapters implement these ports with concrete functionality.
"""

from micro_presenter.ports.inbound import BadRequestError, Presenter
from micro_presenter.ports.outbound import (
    HttpRequest,
    Router,
    ServiceLocator,
    TemplateEngine,
    TemplateEngineFactory,
)

__all__ = [
    # Inbound ports
    "BadRequestError",
    "Presenter",
    # Outbound ports
    "HttpRequest",
    "Router",
    "ServiceLocator",
    "TemplateEngine",
    "TemplateEngineFactory",
]
