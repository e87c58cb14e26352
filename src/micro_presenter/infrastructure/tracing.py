"""OpenTelemetry tracing for presenter dispatches.

Every ``MicroPresenter.run`` opens a ``micro_presenter.run`` span with the
route name, method and outcome. Without ``setup_tracing`` the spans go to
OpenTelemetry's no-op provider.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

_CONSOLE = "console"

_provider: TracerProvider | None = None
_exporters: set[str] = set()
_tracer: trace.Tracer | None = None


def setup_tracing(
    service_name: str = "micro_presenter",
    otlp_endpoint: str | None = None,
    console_export: bool = False,
) -> trace.Tracer:
    """
    Set up OpenTelemetry tracing.

    The first call installs the global tracer provider. OpenTelemetry does
    not allow replacing it, so later calls (one per ``create_app``) reuse
    it and only add exporters that are not attached yet.

    Args:
        service_name: Service name reported in the trace resource
        otlp_endpoint: OTLP gRPC collector endpoint (e.g., "http://localhost:4317")
        console_export: Also print finished spans to stdout

    Returns:
        Tracer for presenter spans
    """
    global _provider, _tracer

    if _provider is None:
        from micro_presenter import __version__

        _provider = TracerProvider(
            resource=Resource.create({"service.name": service_name, "service.version": __version__})
        )
        trace.set_tracer_provider(_provider)

    if otlp_endpoint and otlp_endpoint not in _exporters:
        _provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True))
        )
        _exporters.add(otlp_endpoint)
    if console_export and _CONSOLE not in _exporters:
        _provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        _exporters.add(_CONSOLE)

    _tracer = trace.get_tracer(service_name, tracer_provider=_provider)
    return _tracer


def get_tracer() -> trace.Tracer:
    """Get the presenter tracer (from the global provider until set up)."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer("micro_presenter")
    return _tracer


@contextmanager
def trace_span(
    name: str,
    attributes: dict[str, Any] | None = None,
) -> Generator[trace.Span, None, None]:
    """
    Open a span around a block; exceptions are recorded on it and re-raised.

    Args:
        name: Span name
        attributes: Span attributes; None values are skipped

    Yields:
        The active span
    """
    with get_tracer().start_as_current_span(name) as span:
        for key, value in (attributes or {}).items():
            if value is not None:
                span.set_attribute(key, value)
        yield span
