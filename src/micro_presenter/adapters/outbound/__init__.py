"""Outbound adapters - implementations of the outbound ports.

Exports:
    - JinjaTemplateEngine, JinjaEngineFactory: Jinja2 template engine
    - StarletteHttpRequest: HttpRequest over a Starlette request
    - StarletteRouter: Router over a Starlette/FastAPI route table
"""

from micro_presenter.adapters.outbound.jinja_engine import JinjaEngineFactory, JinjaTemplateEngine
from micro_presenter.adapters.outbound.starlette_http import StarletteHttpRequest, StarletteRouter

__all__ = [
    "JinjaEngineFactory",
    "JinjaTemplateEngine",
    "StarletteHttpRequest",
    "StarletteRouter",
]
