"""Infrastructure layer - cross-cutting concerns."""

from micro_presenter.infrastructure.config import Config, get_config
from micro_presenter.infrastructure.container import (
    Container,
    build_container,
    get_container,
    reset_container,
)
from micro_presenter.infrastructure.logging import bind_request_context, get_logger, setup_logging
from micro_presenter.infrastructure.metrics import MetricsRegistry, get_metrics, setup_metrics
from micro_presenter.infrastructure.tracing import get_tracer, setup_tracing, trace_span

__all__ = [
    "Config",
    "get_config",
    "Container",
    "build_container",
    "get_container",
    "reset_container",
    "bind_request_context",
    "setup_logging",
    "get_logger",
    "setup_metrics",
    "get_metrics",
    "MetricsRegistry",
    "setup_tracing",
    "get_tracer",
    "trace_span",
]
