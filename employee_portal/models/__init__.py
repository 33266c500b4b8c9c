"""
Employee Management Portal Models.

Exports all model classes for easy importing.
"""

from employee_portal.models.employee import (
    Department,
    Employee,
    EmployeeCreatePayload,
    EmployeeDraft,
    EmployeeEditForm,
    EmployeeRecord,
    EmployeeStatus,
    EmployeeUpdate,
    EmployeeUpdatePayload,
)

__all__ = [
    # Database Model
    "EmployeeRecord",
    # Enums
    "Department",
    "EmployeeStatus",
    # Wire Schemas
    "Employee",
    "EmployeeCreatePayload",
    "EmployeeUpdatePayload",
    "EmployeeUpdate",
    # Form Drafts
    "EmployeeDraft",
    "EmployeeEditForm",
]
