"""Micro presenter - dispatches a request to a plain callback.

The request's ``callback`` parameter is the application code. The
presenter binds its arguments (services from the DI container, request
parameters, and itself as ``presenter``), calls it, and turns the result
into a response:

    "page.html"                      -> rendered file template
    ("Hi {{ name }}", {"name": ...}) -> rendered inline template
    Template instance                -> rendered template
    anything else                    -> returned unchanged

GET and HEAD requests that did not arrive at their canonical URL are
permanently redirected there first, when both a router and the HTTP
request are available.

Usage:
    presenter = MicroPresenter(container, http_request, router)
    response = presenter.run(PresenterRequest("hello", "GET", {"callback": hello}))

References:
    - ports/inbound/presenter.py (Presenter contract)
    - domain/services/argument_resolver.py (argument binding)
"""

from __future__ import annotations

import logging
import time
from http import HTTPStatus
from typing import Any, Callable, NoReturn, Optional

from micro_presenter.domain.entities.request import PresenterRequest
from micro_presenter.domain.entities.responses import RedirectResponse, TextResponse
from micro_presenter.domain.entities.results import (
    Raw,
    TemplateInline,
    TemplatePath,
    classify_result,
)
from micro_presenter.domain.entities.template import Template
from micro_presenter.domain.services.argument_resolver import ArgumentResolver
from micro_presenter.infrastructure.metrics import MetricsRegistry
from micro_presenter.infrastructure.tracing import trace_span
from micro_presenter.ports.inbound.presenter import BadRequestError
from micro_presenter.ports.outbound.http_request import HttpRequest
from micro_presenter.ports.outbound.router import Router
from micro_presenter.ports.outbound.service_locator import ServiceLocator
from micro_presenter.ports.outbound.template_engine import TemplateEngine, TemplateEngineFactory

logger = logging.getLogger(__name__)


class MicroPresenter:
    """Callback-based presenter.

    One instance serves one request at a time; ``run`` stores the request
    for the duration of the dispatch and for ``create_template``.
    """

    def __init__(
        self,
        context: Optional[ServiceLocator] = None,
        http_request: Optional[HttpRequest] = None,
        router: Optional[Router] = None,
        resolver: Optional[ArgumentResolver] = None,
        metrics: Optional[MetricsRegistry] = None,
    ) -> None:
        """Initialize the presenter.

        Args:
            context: DI container used for argument and engine lookup.
            http_request: Current HTTP request.
            router: Router for canonical URL construction.
            resolver: Argument resolver (default: ArgumentResolver()).
            metrics: Metrics registry; dispatches are not counted without one.
        """
        self._context = context
        self._http_request = http_request
        self._router = router
        self._resolver = resolver or ArgumentResolver()
        self._metrics = metrics
        self._request: Optional[PresenterRequest] = None

    @property
    def context(self) -> Optional[ServiceLocator]:
        """The DI container."""
        return self._context

    @property
    def request(self) -> Optional[PresenterRequest]:
        """The last dispatched request, None before the first run."""
        return self._request

    @property
    def can_canonicalize(self) -> bool:
        """True when both the HTTP request and a router are available."""
        return self._http_request is not None and self._router is not None

    def run(self, request: PresenterRequest) -> Any:
        """Dispatch a request to its callback.

        Args:
            request: Request whose ``callback`` parameter holds the callable.

        Returns:
            RedirectResponse, TextResponse, or the callback's own response.

        Raises:
            BadRequestError: If the callback is missing or not callable, or
                its arguments cannot be bound.
        """
        self._request = request
        started = time.perf_counter()
        outcome = "error"
        response: Any = None

        with trace_span("micro_presenter.run", {"route": request.name, "method": request.method}) as span:
            try:
                response = self._dispatch(request)
                outcome = _outcome_of(response)
                return response
            except BadRequestError:
                outcome = "bad_request"
                raise
            finally:
                span.set_attribute("outcome", outcome)
                if self._metrics is not None:
                    self._metrics.record_dispatch(outcome, time.perf_counter() - started)
                    if isinstance(response, RedirectResponse):
                        self._metrics.record_redirect(response.code)

    def create_template(
        self,
        template_class: Optional[type[Template]] = None,
        engine_factory: Optional[Callable[[], TemplateEngine]] = None,
    ) -> Template:
        """Create a template for the current request.

        Args:
            template_class: Template subclass to instantiate (default: Template).
            engine_factory: Callable returning an engine; when omitted the
                engine comes from the container's TemplateEngineFactory.

        Returns:
            Template populated with the request parameters, ``presenter``,
            ``context`` and, with an HTTP request, ``base_url``/``base_path``.

        Raises:
            KeyError: If no engine factory is given or registered.
        """
        if engine_factory is not None:
            engine = engine_factory()
        elif self._context is not None:
            engine = self._context.get_by_type(TemplateEngineFactory).create()
        else:
            raise KeyError("No template engine factory: pass engine_factory or configure a context.")

        template = (template_class or Template)(engine)

        if self._request is not None:
            template.set_parameters(self._request.parameters)
        template.add_parameter("presenter", self)
        template.add_parameter("context", self._context)
        if self._http_request is not None:
            url = self._http_request.url
            template.add_parameter("base_url", url.base_url.rstrip("/"))
            template.add_parameter("base_path", url.base_path.rstrip("/"))
        return template

    def redirect_url(self, url: str, code: int = HTTPStatus.FOUND) -> RedirectResponse:
        """Build a redirect response to an arbitrary URL."""
        return RedirectResponse(url, code)

    def error(self, message: Optional[str] = None, code: int = HTTPStatus.NOT_FOUND) -> NoReturn:
        """Abort the dispatch with an HTTP error.

        Raises:
            BadRequestError: Always.
        """
        raise BadRequestError(message, code)

    def _dispatch(self, request: PresenterRequest) -> Any:
        redirect = self._canonicalize(request)
        if redirect is not None:
            return redirect

        callback = request.callback
        if callback is None or not callable(callback):
            raise BadRequestError("Parameter callback is not a valid closure.", HTTPStatus.BAD_REQUEST)

        binding = self._resolver.bind(callback, request.parameters, self._context, self)
        if not binding.ok:
            raise BadRequestError(" ".join(binding.errors), HTTPStatus.BAD_REQUEST)

        result = callback(*binding.args, **binding.kwargs)
        return self._to_response(result)

    def _canonicalize(self, request: PresenterRequest) -> Optional[RedirectResponse]:
        if not self.can_canonicalize:
            return None
        if self._http_request.is_ajax() or not (request.is_method("GET") or request.is_method("HEAD")):
            return None

        current = self._http_request.url
        ref_url = current.with_path(current.script_path)
        url = self._router.construct_url(request, ref_url)
        if url is not None and not current.is_equal(url):
            logger.info(f"Redirecting {current} to canonical URL {url}")
            return RedirectResponse(url, HTTPStatus.MOVED_PERMANENTLY)
        return None

    def _to_response(self, result: Any) -> Any:
        if isinstance(result, Template):
            return TextResponse(result)

        variant = classify_result(result)
        if isinstance(variant, TemplatePath):
            template = self.create_template().set_parameters(variant.params).set_file(variant.path)
            return TextResponse(template)
        if isinstance(variant, TemplateInline):
            template = self.create_template().set_parameters(variant.params).set_source(variant.source)
            return TextResponse(template)
        if isinstance(variant, Raw):
            return TextResponse(variant.text)
        return variant.value


def _outcome_of(response: Any) -> str:
    if isinstance(response, RedirectResponse):
        return "redirect"
    if isinstance(response, TextResponse):
        return "template" if isinstance(response.source, Template) else "text"
    return "passthrough"
