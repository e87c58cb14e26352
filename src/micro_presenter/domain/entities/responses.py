"""Responses produced by the dispatcher.

Only two response shapes are built here: a redirect and a text response
wrapping a template or a plain string. Any other object a callback returns
is an opaque application response and is handed to the framework as is.
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from micro_presenter.domain.entities.template import Template


@dataclass(frozen=True)
class RedirectResponse:
    """Redirect to ``url`` with the given HTTP status code."""

    url: str
    code: int = HTTPStatus.FOUND

    @property
    def is_permanent(self) -> bool:
        return self.code in (HTTPStatus.MOVED_PERMANENTLY, HTTPStatus.PERMANENT_REDIRECT)


@dataclass(frozen=True)
class TextResponse:
    """Text body, either a string or a template rendered on demand."""

    source: Union[str, "Template"]

    @property
    def body(self) -> str:
        """Render the source to a string."""
        if isinstance(self.source, str):
            return self.source
        return self.source.render()
