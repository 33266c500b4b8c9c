"""
Editor screen: the update-employee workflow.

The record to edit arrives through a RecordTransfer claimed at entry. Without
one the screen only offers a way back to the Directory; it never falls back
to fetching by id.
"""

from typing import Optional

from employee_portal.core.formatting import (
    DEPARTMENT_CHOICES,
    STATUS_CHOICES,
    FormView,
    Modal,
    NoDataView,
    format_date,
)
from employee_portal.core.logging import get_logger
from employee_portal.models.employee import (
    Employee,
    EmployeeEditForm,
    EmployeeUpdatePayload,
)
from employee_portal.screens.base import FormScreen, FormStatus

logger = get_logger(__name__)


class EditorScreen(FormScreen):
    name = "editor"
    failure_prefix = "Failed to edit employee. Please try again."

    def __init__(self, client, navigate, employee: Optional[Employee] = None):
        self.employee = employee
        super().__init__(client, navigate)

    @property
    def no_data(self) -> bool:
        return self.employee is None

    def blank_form(self) -> EmployeeEditForm:
        if self.employee is None:
            return EmployeeEditForm()
        return EmployeeEditForm.from_employee(self.employee)

    async def submit(self) -> bool:
        if self.no_data:
            return False
        return await super().submit()

    async def send(self, payload: EmployeeUpdatePayload):
        logger.info(f"Updating employee {self.employee.id}")
        await self.client.update_employee(self.employee.id, payload)
        logger.info(f"Employee {self.employee.id} updated successfully")

    def view(self) -> FormView | NoDataView:
        if self.no_data:
            return NoDataView()

        state = self.state
        view = FormView(
            title="Edit Employee",
            error=state.error_message,
            values=state.form.model_dump(by_alias=True),
            field_errors=dict(state.validation_errors),
            choices={"department": DEPARTMENT_CHOICES, "status": STATUS_CHOICES},
            read_only={
                "Employee ID": str(self.employee.id),
                "Date of Joining": format_date(self.employee.date_of_joining),
            },
            submit_label="Updating..." if state.submitting else "Submit",
            controls_disabled=state.submitting,
        )
        if state.status == FormStatus.SUCCESS:
            view.modal = Modal(title="Employee Data Modified Successfully", actions=["Go Back"])
        return view
