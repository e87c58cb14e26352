"""Domain entities for the micro presenter.

Exports:
    Request:
        - PresenterRequest: Framework request handed to a presenter
        - CALLBACK_PARAMETER: Name of the parameter carrying the callback
    Responses:
        - RedirectResponse: Redirect with status code
        - TextResponse: Text or rendered template body
    Results:
        - TemplatePath, TemplateInline, Raw, Passthrough: Callback result variants
        - CallbackResult: Union of the variants
        - classify_result: Map a callback return value onto a variant
    Template:
        - Template: Per-request template bound to an engine
"""

from micro_presenter.domain.entities.request import CALLBACK_PARAMETER, PresenterRequest
from micro_presenter.domain.entities.responses import RedirectResponse, TextResponse
from micro_presenter.domain.entities.results import (
    CallbackResult,
    Passthrough,
    Raw,
    TemplateInline,
    TemplatePath,
    classify_result,
)
from micro_presenter.domain.entities.template import Template

__all__ = [
    "CALLBACK_PARAMETER",
    "PresenterRequest",
    "RedirectResponse",
    "TextResponse",
    "CallbackResult",
    "Passthrough",
    "Raw",
    "TemplateInline",
    "TemplatePath",
    "classify_result",
    "Template",
]
