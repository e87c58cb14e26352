"""Domain services for the micro presenter.

Exports:
    - ArgumentResolver: Binds callback parameters from the DI container and request
    - ArgumentBinding: Bound arguments plus binding errors
    - PRESENTER_PARAMETER: Reserved parameter name for the dispatcher
    - service_type_of: Service class requested by an annotation
"""

from micro_presenter.domain.services.argument_resolver import (
    PRESENTER_PARAMETER,
    ArgumentBinding,
    ArgumentResolver,
    service_type_of,
)

__all__ = [
    "ArgumentBinding",
    "ArgumentResolver",
    "PRESENTER_PARAMETER",
    "service_type_of",
]
