"""Micro presenter domain layer."""

from micro_presenter.domain.entities import (
    CALLBACK_PARAMETER,
    CallbackResult,
    Passthrough,
    PresenterRequest,
    Raw,
    RedirectResponse,
    Template,
    TemplateInline,
    TemplatePath,
    TextResponse,
    classify_result,
)
from micro_presenter.domain.services.argument_resolver import (
    ArgumentBinding,
    ArgumentResolver,
    PRESENTER_PARAMETER,
)
from micro_presenter.domain.value_objects import Url

__all__ = [
    # Value objects
    "Url",
    # Entities
    "CALLBACK_PARAMETER",
    "CallbackResult",
    "Passthrough",
    "PresenterRequest",
    "Raw",
    "RedirectResponse",
    "Template",
    "TemplateInline",
    "TemplatePath",
    "TextResponse",
    "classify_result",
    # Services
    "ArgumentBinding",
    "ArgumentResolver",
    "PRESENTER_PARAMETER",
]
