"""Callback result variants.

Callbacks may return one of the explicit variants below, or one of the
loose shapes accepted for convenience, which ``classify_result`` maps onto
a variant:

    "page.html"                       -> TemplatePath("page.html", {})
    ("Hello {{ name }}", {"name": x}) -> TemplateInline(source, params)
    (Path("page.html"), {...})        -> TemplatePath(Path(...), params)
    anything else                     -> Passthrough(value)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class TemplatePath:
    """Render a template file with extra parameters."""

    path: Union[str, Path]
    params: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class TemplateInline:
    """Render an inline template source with extra parameters."""

    source: str
    params: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Raw:
    """Send text as is, without templating."""

    text: str


@dataclass(frozen=True)
class Passthrough:
    """Opaque application response, handed to the framework unchanged."""

    value: Any


CallbackResult = Union[TemplatePath, TemplateInline, Raw, Passthrough]


def classify_result(value: Any) -> CallbackResult:
    """Map a callback return value onto a result variant.

    Args:
        value: Whatever the callback returned.

    Returns:
        The matching variant. Values that already are variants are returned
        unchanged.
    """
    if isinstance(value, (TemplatePath, TemplateInline, Raw, Passthrough)):
        return value
    if isinstance(value, str):
        return TemplatePath(value, {})
    if _is_template_pair(value):
        source, params = value
        if isinstance(source, Path):
            return TemplatePath(source, dict(params))
        return TemplateInline(source, dict(params))
    return Passthrough(value)


def _is_template_pair(value: Any) -> bool:
    return (
        isinstance(value, (tuple, list))
        and len(value) == 2
        and isinstance(value[0], (str, Path))
        and isinstance(value[1], Mapping)
    )
