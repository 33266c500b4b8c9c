"""Creator screen: the create-employee workflow."""

from employee_portal.core.formatting import (
    DEPARTMENT_CHOICES,
    STATUS_CHOICES,
    FormView,
    Modal,
)
from employee_portal.core.logging import get_logger
from employee_portal.models.employee import EmployeeCreatePayload, EmployeeDraft
from employee_portal.screens.base import FormScreen, FormStatus

logger = get_logger(__name__)


class CreatorScreen(FormScreen):
    name = "creator"
    failure_prefix = "Failed to create employee. Please try again."

    def blank_form(self) -> EmployeeDraft:
        return EmployeeDraft()

    async def send(self, payload: EmployeeCreatePayload):
        logger.info(f"Creating employee: {payload.name}")
        await self.client.create_employee(payload)
        logger.info(f"Employee created: {payload.name}")

    def create_another(self) -> bool:
        """Clear the form after a successful creation and stay on this screen."""
        if self.state.status != FormStatus.SUCCESS:
            return False
        self.state.form = self.blank_form()
        self.state.validation_errors = {}
        self.state.error_message = None
        self.state.status = FormStatus.IDLE
        return True

    def view(self) -> FormView:
        state = self.state
        view = FormView(
            title="Create Employee",
            error=state.error_message,
            values=state.form.model_dump(by_alias=True),
            field_errors=dict(state.validation_errors),
            choices={"department": DEPARTMENT_CHOICES, "status": STATUS_CHOICES},
            submit_label="Creating..." if state.submitting else "Submit",
            controls_disabled=state.submitting,
        )
        if state.status == FormStatus.SUCCESS:
            view.modal = Modal(
                title="Employee Created Successfully",
                actions=["Create New Employee", "Go Back"],
            )
        return view
