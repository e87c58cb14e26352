"""Presenter request entity.

A PresenterRequest is what the host framework hands to a presenter: the
name of the matched route, the HTTP method, and the parameters collected
from the route and query string. For micro presenters one parameter,
``callback``, carries the application function to run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

CALLBACK_PARAMETER = "callback"


@dataclass
class PresenterRequest:
    """Framework-level request handed to a presenter.

    Attributes:
        name: Route (presenter) name, used for canonical URL construction.
        method: HTTP method, upper-cased.
        parameters: Route and query parameters, including ``callback``.
        post: Submitted form fields (empty for GET/HEAD).
    """

    name: str
    method: str = "GET"
    parameters: dict[str, Any] = field(default_factory=dict)
    post: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.method = self.method.upper()

    def is_method(self, method: str) -> bool:
        """Check the HTTP method, case-insensitively."""
        return self.method == method.upper()

    def get_parameter(self, name: str, default: Any = None) -> Any:
        return self.parameters.get(name, default)

    @property
    def callback(self) -> Any:
        """Raw ``callback`` parameter (not validated)."""
        return self.parameters.get(CALLBACK_PARAMETER)
