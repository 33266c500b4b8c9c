"""
Employee Management Portal Core Module.

Exports configuration and the error taxonomy. The REST client, record
transfer and navigation host live in their own modules.
"""

from employee_portal.core.config import settings
from employee_portal.core.errors import (
    DraftValidationError,
    EmployeeApiError,
    TransportFailure,
    UnexpectedPayload,
    UnexpectedStatus,
    UnknownRoute,
)

__all__ = [
    # Config
    "settings",
    # Errors
    "EmployeeApiError",
    "TransportFailure",
    "UnexpectedStatus",
    "UnexpectedPayload",
    "DraftValidationError",
    "UnknownRoute",
]
