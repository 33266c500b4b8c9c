"""
Presentation helpers and per-screen view models.

Views are plain snapshots of what a screen shows; they carry no behaviour.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from pydantic import Field as PydanticField

from employee_portal.models.employee import Department, EmployeeStatus

PORTAL_TITLE = "Employee Management Portal"
LOADING_TEXT = "Loading employees..."
NO_DATA_TEXT = "No data available"

DIRECTORY_COLUMNS = [
    "Employee ID",
    "Name",
    "Date of Joining",
    "Department",
    "Salary",
    "Manager ID",
    "Status",
    "Actions",
]

DEPARTMENT_CHOICES = [department.value for department in Department]
STATUS_CHOICES = [status.value for status in EmployeeStatus]


def format_salary(salary: Optional[float]) -> str:
    """USD currency, e.g. $80,000.00."""
    if salary is None:
        return ""
    sign = "-" if salary < 0 else ""
    return f"{sign}${abs(salary):,.2f}"


def format_date(value: Optional[datetime]) -> str:
    """Short US date, e.g. 8/18/2025."""
    if value is None:
        return ""
    return f"{value.month}/{value.day}/{value.year}"


def status_class(status: Optional[EmployeeStatus]) -> str:
    if status is None:
        return "status"
    return f"status {status.value.lower().replace('_', '-')}"


class Modal(BaseModel):
    title: str
    actions: list[str]


class EmployeeRow(BaseModel):
    id: int
    name: str
    date_of_joining: str
    department: str
    salary: str
    manager_id: str
    status: str
    status_class: str
    delete_disabled: bool = False
    delete_label: str = "Delete"


class DirectoryView(BaseModel):
    title: str = PORTAL_TITLE
    loading: Optional[str] = None
    error: Optional[str] = None
    empty_message: Optional[str] = None
    columns: list[str] = PydanticField(default_factory=list)
    rows: list[EmployeeRow] = PydanticField(default_factory=list)
    modal: Optional[Modal] = None


class FormView(BaseModel):
    title: str
    error: Optional[str] = None
    values: dict[str, str] = PydanticField(default_factory=dict)
    field_errors: dict[str, str] = PydanticField(default_factory=dict)
    choices: dict[str, list[str]] = PydanticField(default_factory=dict)
    read_only: dict[str, str] = PydanticField(default_factory=dict)
    submit_label: str = "Submit"
    controls_disabled: bool = False
    modal: Optional[Modal] = None


class NoDataView(BaseModel):
    title: str = "No Employee Data"
    message: str = "Please select an employee from the dashboard to edit."
    actions: list[str] = PydanticField(default_factory=lambda: ["Go Back to Dashboard"])
