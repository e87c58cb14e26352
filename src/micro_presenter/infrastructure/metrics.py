"""Prometheus metrics for the micro presenter."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)

DISPATCH_OUTCOMES = ("redirect", "template", "text", "passthrough", "bad_request", "error")


class MetricsRegistry:
    """Registry of all dispatcher metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        self.dispatch_total = Counter(
            "presenter_dispatch_total",
            "Requests dispatched by outcome",
            ["outcome"],
            registry=self._registry,
        )

        self.dispatch_latency_seconds = Histogram(
            "presenter_dispatch_latency_seconds",
            "Time from request to response object (excludes rendering)",
            buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
            registry=self._registry,
        )

        self.redirects_total = Counter(
            "presenter_redirects_total",
            "Redirect responses by status code",
            ["code"],
            registry=self._registry,
        )

        self.info = Info("micro_presenter", "Micro presenter information", registry=self._registry)

    @property
    def registry(self) -> CollectorRegistry:
        """Collector registry the metrics are registered on."""
        return self._registry

    def record_dispatch(self, outcome: str, duration_seconds: float) -> None:
        """Count one dispatch and observe its latency."""
        self.dispatch_total.labels(outcome=outcome).inc()
        self.dispatch_latency_seconds.observe(duration_seconds)

    def record_redirect(self, code: int) -> None:
        self.redirects_total.labels(code=str(int(code))).inc()


_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 8002, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """Set up Prometheus metrics and start the exposition server.

    Without an explicit registry the metrics already registered on the
    default registry (see get_metrics) are reused.
    """
    global _metrics
    _metrics = MetricsRegistry(registry) if registry is not None else get_metrics()
    from micro_presenter import __version__
    _metrics.info.info({"version": __version__})
    start_http_server(port, registry=registry or REGISTRY)
    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
