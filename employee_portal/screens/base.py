"""
Shared screen plumbing.

A screen owns its local state and nothing else. Network calls suspend only
the calling workflow; if the screen is unmounted before a call completes,
the result is dropped instead of being applied to state that nobody renders.
"""

from enum import Enum
from typing import Awaitable, Callable, Optional

from pydantic import BaseModel
from pydantic import Field as PydanticField

from employee_portal.core.client import EmployeeApiClient
from employee_portal.core.errors import DraftValidationError, EmployeeApiError
from employee_portal.core.logging import get_logger
from employee_portal.core.transfer import RecordTransfer
from employee_portal.models.employee import FormModel, WireModel

logger = get_logger(__name__)

DIRECTORY_PATH = "/"
CREATE_PATH = "/create-employee"
EDIT_PATH = "/edit-employee"

Navigate = Callable[[str, Optional[RecordTransfer]], Awaitable[None]]


class Screen:
    name = "screen"

    def __init__(self, client: EmployeeApiClient, navigate: Navigate):
        self.client = client
        self._navigate = navigate
        self.mounted = False

    async def mount(self):
        self.mounted = True
        logger.debug(f"{self.name} mounted")

    def unmount(self):
        self.mounted = False
        logger.debug(f"{self.name} unmounted")

    def _discarded(self, action: str) -> bool:
        """True when a completed call must be dropped because the screen is gone."""
        if self.mounted:
            return False
        logger.debug(f"{self.name}: discarding {action} result after unmount")
        return True

    async def navigate(self, path: str, transfer: Optional[RecordTransfer] = None):
        if not self.mounted:
            logger.debug(f"{self.name}: ignoring navigation to {path} after unmount")
            return
        await self._navigate(path, transfer)


class FormStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    ERROR = "error"
    SUCCESS = "success"


class FormState(BaseModel):
    form: FormModel
    status: FormStatus = FormStatus.IDLE
    error_message: Optional[str] = None
    validation_errors: dict[str, str] = PydanticField(default_factory=dict)

    @property
    def submitting(self) -> bool:
        return self.status == FormStatus.SUBMITTING


class FormScreen(Screen):
    """
    Common workflow of the Creator and Editor screens.

    Subclasses provide the initial form, the failure message prefix and the
    API call that sends the coerced payload.
    """

    failure_prefix = "Failed to submit."

    def __init__(self, client: EmployeeApiClient, navigate: Navigate):
        super().__init__(client, navigate)
        self.state = FormState(form=self.blank_form())

    def blank_form(self) -> FormModel:
        raise NotImplementedError

    async def send(self, payload: WireModel):
        raise NotImplementedError

    def update_field(self, field: str, value: str):
        """Edit one form field. Clears any pending error."""
        name = self.state.form.resolve_field(field)
        self.state.form = self.state.form.with_field(name, str(value))
        alias = type(self.state.form).model_fields[name].alias or name
        self.state.validation_errors.pop(alias, None)
        self.state.error_message = None
        if self.state.status == FormStatus.ERROR:
            self.state.status = FormStatus.IDLE

    async def submit(self) -> bool:
        """
        Validate, coerce and send the form.

        Returns True when the API accepted the submission. Blocked (returns
        False without any request) while a submission is in flight, after a
        success, or when the form is invalid.
        """
        if self.state.status in (FormStatus.SUBMITTING, FormStatus.SUCCESS):
            logger.debug(f"{self.name}: submit ignored while {self.state.status.value}")
            return False

        try:
            payload = self.state.form.to_payload()
        except DraftValidationError as e:
            logger.info(f"{self.name}: submission blocked, {e}")
            self.state.validation_errors = e.errors
            return False

        self.state.validation_errors = {}
        self.state.error_message = None
        self.state.status = FormStatus.SUBMITTING

        try:
            await self.send(payload)
        except EmployeeApiError as e:
            if self._discarded("submit"):
                return False
            logger.warning(f"{self.name}: submission failed: {e}")
            self.state.status = FormStatus.ERROR
            self.state.error_message = f"{self.failure_prefix} {e}"
            return False

        if self._discarded("submit"):
            return True
        self.state.status = FormStatus.SUCCESS
        return True

    async def cancel(self) -> bool:
        if self.state.submitting:
            return False
        await self.navigate(DIRECTORY_PATH)
        return True

    async def go_back(self):
        await self.navigate(DIRECTORY_PATH)
