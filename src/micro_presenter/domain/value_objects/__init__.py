"""Value objects for the micro presenter domain.

Value objects are immutable types that represent domain concepts.
They have no identity - two value objects with the same attributes are equal.

Exports:
    - Url: Absolute URL with script path, base URL/path and equality check
    - DEFAULT_PORTS: Default port per URL scheme
"""

from micro_presenter.domain.value_objects.url import DEFAULT_PORTS, Url

__all__ = [
    "DEFAULT_PORTS",
    "Url",
]
