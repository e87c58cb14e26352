"""Inbound ports - API contracts for the micro presenter."""

from micro_presenter.ports.inbound.presenter import BadRequestError, Presenter

__all__ = [
    "BadRequestError",
    "Presenter",
]
