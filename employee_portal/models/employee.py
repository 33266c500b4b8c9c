"""
Employee models and schemas for the Employee Management Portal.

Includes:
- The ORM table used by the reference employee service
- Wire schemas exchanged over ``/api/employees`` (camelCase JSON)
- String-typed form drafts held by the Creator and Editor screens, with the
  validate-then-coerce step that turns them into wire payloads
"""

import math
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic import Field as PydanticField
from pydantic.alias_generators import to_camel
from sqlmodel import Field, SQLModel

from employee_portal.core.errors import DraftValidationError


class Department(str, Enum):
    """Closed set of departments."""

    HR = "HR"
    IT = "IT"
    FINANCE = "Finance"
    SALES = "Sales"
    MARKETING = "Marketing"


class EmployeeStatus(str, Enum):
    """Employee status in the system."""

    ACTIVE = "ACTIVE"
    NOT_ACTIVE = "NOT_ACTIVE"


REQUIRED_MESSAGE = "Please fill out this field."
CHOICE_MESSAGE = "Please select an item in the list."


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as UTC with millisecond precision, e.g. 2025-08-18T00:00:00.000Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def display_number(value: Optional[float | int]) -> str:
    """String form of a number for a form input; whole floats drop their fraction."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# Database Models


class EmployeeRecord(SQLModel, table=True):
    """ORM model for the employees table of the reference service."""

    __tablename__ = "employees"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, min_length=1)
    date_of_joining: datetime
    department: str = Field(max_length=50)
    salary: float = Field(default=0.0, ge=0)
    manager_id: Optional[int] = Field(default=None)
    status: str = Field(default=EmployeeStatus.ACTIVE.value, max_length=20)


# Wire Schemas


class WireModel(BaseModel):
    """Base for JSON exchanged with the employee API (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class Employee(WireModel):
    """
    An employee record as listed by the API.

    Only ``id`` is guaranteed; the remaining fields may be missing on a
    partially populated record and the Editor falls back accordingly.
    ``department`` is read as plain text; the closed set is enforced when a
    form is submitted.
    """

    id: int
    name: Optional[str] = None
    date_of_joining: Optional[datetime] = None
    department: Optional[str] = None
    salary: Optional[float] = None
    manager_id: Optional[int] = None
    status: Optional[EmployeeStatus] = None

    @field_serializer("date_of_joining")
    def serialize_date_of_joining(self, value: Optional[datetime]) -> Optional[str]:
        return format_timestamp(value) if value is not None else None

    @classmethod
    def from_record(cls, record: EmployeeRecord) -> "Employee":
        return cls.model_validate(record, from_attributes=True)


class EmployeeCreatePayload(WireModel):
    """Body of ``POST /api/employees``."""

    name: str = PydanticField(min_length=1)
    date_of_joining: datetime
    department: Department
    salary: float = PydanticField(ge=0)
    manager_id: int
    status: EmployeeStatus = EmployeeStatus.ACTIVE

    @field_serializer("date_of_joining")
    def serialize_date_of_joining(self, value: datetime) -> str:
        return format_timestamp(value)


class EmployeeUpdatePayload(WireModel):
    """Body of ``PATCH /api/employees/{id}``. Never carries id or dateOfJoining."""

    model_config = ConfigDict(extra="forbid")

    name: str = PydanticField(min_length=1)
    department: Department
    salary: float = PydanticField(ge=0)
    manager_id: int
    status: EmployeeStatus


class EmployeeUpdate(WireModel):
    """Partial update accepted by the reference service."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = PydanticField(default=None, min_length=1)
    department: Optional[Department] = None
    salary: Optional[float] = PydanticField(default=None, ge=0)
    manager_id: Optional[int] = None
    status: Optional[EmployeeStatus] = None


# Form Drafts


def _parse_text(value: str, field: str, errors: dict[str, str]) -> Optional[str]:
    if not value or not value.strip():
        errors[field] = REQUIRED_MESSAGE
        return None
    return value


def _parse_date(value: str, field: str, errors: dict[str, str]) -> Optional[datetime]:
    if not value or not value.strip():
        errors[field] = REQUIRED_MESSAGE
        return None
    try:
        parsed = datetime.strptime(value.strip(), "%Y-%m-%d")
    except ValueError:
        errors[field] = "Please enter a valid date."
        return None
    return parsed.replace(tzinfo=timezone.utc)


def _parse_decimal(value: str, field: str, errors: dict[str, str]) -> Optional[Decimal]:
    if not value or not value.strip():
        errors[field] = REQUIRED_MESSAGE
        return None
    try:
        number = Decimal(value.strip())
    except InvalidOperation:
        errors[field] = "Please enter a number."
        return None
    if not number.is_finite():
        errors[field] = "Please enter a number."
        return None
    return number


def _parse_salary(value: str, field: str, errors: dict[str, str]) -> Optional[float]:
    number = _parse_decimal(value, field, errors)
    if number is None:
        return None
    if number < 0:
        errors[field] = "Value must be greater than or equal to 0."
        return None
    # step="0.01"
    if number.normalize().as_tuple().exponent < -2:
        errors[field] = "Please enter a valid value with at most two decimal places."
        return None
    salary = float(number)
    if not math.isfinite(salary):
        errors[field] = "Value is out of range."
        return None
    return salary


def _parse_manager_id(value: str, field: str, errors: dict[str, str]) -> Optional[int]:
    number = _parse_decimal(value, field, errors)
    if number is None:
        return None
    if number != number.to_integral_value():
        errors[field] = "Please enter a whole number."
        return None
    if number < 1:
        errors[field] = "Value must be greater than or equal to 1."
        return None
    return int(number)


def _parse_choice(value: str, choices: type[Enum], field: str, errors: dict[str, str]):
    if not value:
        errors[field] = CHOICE_MESSAGE
        return None
    try:
        return choices(value)
    except ValueError:
        errors[field] = CHOICE_MESSAGE
        return None


class FormModel(WireModel):
    """String-typed form state; values are coerced only on submit."""

    def with_field(self, field: str, value: str) -> "FormModel":
        """Return a copy with one field replaced. ``field`` may be the python or the wire name."""
        return self.model_copy(update={self.resolve_field(field): value})

    @classmethod
    def resolve_field(cls, field: str) -> str:
        if field in cls.model_fields:
            return field
        for name, info in cls.model_fields.items():
            if info.alias == field:
                return name
        raise KeyError(f"Unknown form field: {field}")


class EmployeeDraft(FormModel):
    """Creator form: every Employee field except ``id``, as entered."""

    name: str = ""
    date_of_joining: str = ""
    department: str = ""
    salary: str = ""
    manager_id: str = ""
    status: str = EmployeeStatus.ACTIVE.value

    def to_payload(self) -> EmployeeCreatePayload:
        """Validate every field, then coerce into the create payload."""
        errors: dict[str, str] = {}
        name = _parse_text(self.name, "name", errors)
        joined = _parse_date(self.date_of_joining, "dateOfJoining", errors)
        department = _parse_choice(self.department, Department, "department", errors)
        salary = _parse_salary(self.salary, "salary", errors)
        manager_id = _parse_manager_id(self.manager_id, "managerId", errors)
        status = _parse_choice(self.status, EmployeeStatus, "status", errors)
        if errors:
            raise DraftValidationError(errors)
        return EmployeeCreatePayload(
            name=name,
            date_of_joining=joined,
            department=department,
            salary=salary,
            manager_id=manager_id,
            status=status,
        )


class EmployeeEditForm(FormModel):
    """Editor form: every Employee field except ``id`` and ``dateOfJoining``."""

    name: str = ""
    department: str = ""
    salary: str = ""
    manager_id: str = ""
    status: str = EmployeeStatus.ACTIVE.value

    @classmethod
    def from_employee(cls, employee: Employee) -> "EmployeeEditForm":
        """Pre-fill from a record; missing fields become empty, status falls back to ACTIVE."""
        return cls(
            name=employee.name or "",
            department=employee.department or "",
            salary=display_number(employee.salary),
            manager_id=display_number(employee.manager_id),
            status=(employee.status or EmployeeStatus.ACTIVE).value,
        )

    def to_payload(self) -> EmployeeUpdatePayload:
        errors: dict[str, str] = {}
        name = _parse_text(self.name, "name", errors)
        department = _parse_choice(self.department, Department, "department", errors)
        salary = _parse_salary(self.salary, "salary", errors)
        manager_id = _parse_manager_id(self.manager_id, "managerId", errors)
        status = _parse_choice(self.status, EmployeeStatus, "status", errors)
        if errors:
            raise DraftValidationError(errors)
        return EmployeeUpdatePayload(
            name=name,
            department=department,
            salary=salary,
            manager_id=manager_id,
            status=status,
        )
