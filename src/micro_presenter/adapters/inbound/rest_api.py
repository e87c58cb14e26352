"""FastAPI adapter for micro presenter routes.

Each route carries a plain callback. On every request the adapter builds a
PresenterRequest, runs a fresh MicroPresenter over it, and converts the
result into a Starlette response.

Usage:
    from micro_presenter.adapters.inbound.rest_api import create_app, micro_route

    app = create_app()

    @micro_route(app, "/hello/{name}")
    def hello(name: str, greeter: Greeter):
        return "Hello {{ greeting }}", {"greeting": greeter.greet(name)}

    # Run with: uvicorn module:app --host 0.0.0.0 --port 8000

References:
    - application/micro_presenter.py (dispatcher)
    - ports/inbound/presenter.py (Presenter contract)
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from fastapi import FastAPI, HTTPException
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import HTMLResponse, RedirectResponse as HttpRedirectResponse, Response

from micro_presenter import __version__
from micro_presenter.adapters.outbound.starlette_http import StarletteHttpRequest, StarletteRouter
from micro_presenter.application.micro_presenter import MicroPresenter
from micro_presenter.domain.entities.request import CALLBACK_PARAMETER, PresenterRequest
from micro_presenter.domain.entities.responses import RedirectResponse, TextResponse
from micro_presenter.infrastructure.config import Config, get_config
from micro_presenter.infrastructure.container import Container, build_container
from micro_presenter.infrastructure.logging import bind_request_context, get_logger, setup_logging
from micro_presenter.infrastructure.metrics import MetricsRegistry, setup_metrics
from micro_presenter.infrastructure.tracing import setup_tracing
from micro_presenter.ports.inbound.presenter import BadRequestError, Presenter

logger = get_logger(__name__)

_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = __version__


def create_app(container: Optional[Container] = None, config: Optional[Config] = None) -> FastAPI:
    """Create a FastAPI application for micro presenter routes.

    Args:
        container: DI container holding application services; default
            services (config, metrics, Jinja2 engine factory) are added to it.
        config: Configuration (default: get_config()).

    Returns:
        Configured FastAPI application. Add routes with add_micro_route()
        or the micro_route() decorator.
    """
    config = config or get_config()
    configure_observability(config)
    if config.server.metrics_server:
        setup_metrics(config.server.metrics_port)
    container = build_container(config, container)

    app = FastAPI(
        title="Micro Presenter",
        description="Callback routes with DI-resolved arguments and template responses",
        version=__version__,
    )
    app.state.container = container
    app.state.config = config

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health_check():
        """Check application health status."""
        return HealthResponse(status="healthy")

    @app.get("/metrics", tags=["System"], response_class=Response)
    async def metrics():
        """Expose dispatch metrics in the Prometheus text format."""
        registry = container.get_by_type(MetricsRegistry).registry
        return Response(generate_latest(registry), media_type=CONTENT_TYPE_LATEST)

    return app


def configure_observability(config: Config) -> None:
    """Apply the logging and tracing settings of a configuration."""
    observability = config.observability
    setup_logging(observability.log_level, observability.log_format)
    setup_tracing(observability.otel_service_name, observability.otel_endpoint)


def add_micro_route(
    app: FastAPI,
    path: str,
    callback: Callable[..., Any],
    methods: Sequence[str] = ("GET", "HEAD"),
    name: Optional[str] = None,
) -> None:
    """Register a callback route.

    Args:
        app: Application created by create_app().
        path: Route path, Starlette syntax (``/items/{item_id:int}``).
        callback: Application callback run by the presenter.
        methods: Accepted HTTP methods.
        name: Route name used for canonical URLs (default: callback name).
    """
    route_name = name or getattr(callback, "__name__", None) or path

    async def endpoint(request: Request):
        return await dispatch(request, route_name, callback)

    app.add_api_route(
        path,
        endpoint,
        methods=[m.upper() for m in methods],
        name=route_name,
        include_in_schema=False,
    )


def micro_route(app: FastAPI, path: str, **kwargs: Any) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator form of add_micro_route(); returns the callback unchanged."""

    def decorator(callback: Callable[..., Any]) -> Callable[..., Any]:
        add_micro_route(app, path, callback, **kwargs)
        return callback

    return decorator


async def dispatch(request: Request, route_name: str, callback: Callable[..., Any]) -> Any:
    """Run a fresh presenter for one HTTP request.

    Raises:
        HTTPException: With the status code of a BadRequestError.
    """
    container: Container = request.app.state.container
    config: Config = request.app.state.config

    parameters: dict[str, Any] = dict(request.query_params)
    parameters.update(request.path_params)
    parameters[CALLBACK_PARAMETER] = callback

    post: dict[str, Any] = {}
    if request.method not in ("GET", "HEAD"):
        content_type = request.headers.get("content-type", "")
        if content_type.startswith(_FORM_CONTENT_TYPES):
            post = dict(await request.form())

    presenter_request = PresenterRequest(
        name=route_name,
        method=request.method,
        parameters=parameters,
        post=post,
    )
    presenter = MicroPresenter(
        context=container,
        http_request=StarletteHttpRequest(request),
        router=StarletteRouter(request.app) if config.routing.canonical_redirects else None,
        metrics=container.get_by_type(MetricsRegistry, throw=False),
    )

    bind_request_context(route_name, request.method, request.url.path)
    try:
        response = await run_in_threadpool(_run, presenter, presenter_request)
    except BadRequestError as e:
        logger.info("presenter_bad_request", code=e.code, reason=e.message)
        raise HTTPException(status_code=e.code, detail=e.message or None)

    logger.debug("presenter_dispatched", response=type(response).__name__)
    return response


def to_http_response(response: Any) -> Any:
    """Convert a presenter response into a Starlette response.

    Redirects and text responses are converted; Starlette responses and
    other values are returned unchanged (FastAPI serializes the latter).
    """
    if isinstance(response, RedirectResponse):
        return HttpRedirectResponse(response.url, status_code=int(response.code))
    if isinstance(response, TextResponse):
        return HTMLResponse(response.body)
    return response


def _run(presenter: Presenter, request: PresenterRequest) -> Any:
    # Rendering happens here too, off the event loop
    return to_http_response(presenter.run(request))
