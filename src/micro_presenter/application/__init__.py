"""Application layer for the micro presenter.

Exports:
    - MicroPresenter: Dispatches a request to its callback and normalizes the result
"""

from micro_presenter.application.micro_presenter import MicroPresenter

__all__ = [
    "MicroPresenter",
]
