"""Presenter port - the contract the host framework dispatches to.

References:
    - Hexagonal Architecture pattern
"""

from __future__ import annotations

from abc import abstractmethod
from http import HTTPStatus
from typing import Any, Protocol

from micro_presenter.domain.entities.request import PresenterRequest


class Presenter(Protocol):
    """Protocol for request-handling units.

    A presenter turns exactly one request into exactly one response, or
    raises. The response is whatever the framework's response-sending stage
    accepts: a RedirectResponse, a TextResponse, or an opaque application
    object.
    """

    @abstractmethod
    def run(self, request: PresenterRequest) -> Any:
        """Handle a request.

        Args:
            request: Request to handle.

        Returns:
            Response object.

        Raises:
            BadRequestError: If the request cannot be served.
        """
        ...


class BadRequestError(Exception):
    """Raised when a request cannot be served; carries an HTTP status code."""

    def __init__(self, message: str | None = None, code: int = HTTPStatus.BAD_REQUEST) -> None:
        super().__init__(message or "")
        self.message = message or ""
        self.code = int(code)
