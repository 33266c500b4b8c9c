"""
Directory screen: lists every employee and owns delete.

Selecting a row for edit hands the record from the current snapshot to the
Editor through a RecordTransfer; nothing is fetched by id.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel
from pydantic import Field as PydanticField

from employee_portal.core.errors import EmployeeApiError
from employee_portal.core.formatting import (
    DIRECTORY_COLUMNS,
    LOADING_TEXT,
    NO_DATA_TEXT,
    DirectoryView,
    EmployeeRow,
    Modal,
    format_date,
    format_salary,
    status_class,
)
from employee_portal.core.logging import get_logger
from employee_portal.core.transfer import RecordTransfer
from employee_portal.models.employee import Employee, display_number
from employee_portal.screens.base import CREATE_PATH, EDIT_PATH, Screen

logger = get_logger(__name__)


class DirectoryStatus(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class DirectoryState(BaseModel):
    status: DirectoryStatus = DirectoryStatus.LOADING
    records: list[Employee] = PydanticField(default_factory=list)
    error_message: Optional[str] = None
    busy_record_ids: set[int] = PydanticField(default_factory=set)
    show_delete_confirmation: bool = False


class DirectoryScreen(Screen):
    name = "directory"

    def __init__(self, client, navigate):
        super().__init__(client, navigate)
        self.state = DirectoryState()

    async def mount(self):
        await super().mount()
        await self.fetch_employees()

    async def fetch_employees(self):
        """Load the full employee set, replacing the current snapshot."""
        self.state.status = DirectoryStatus.LOADING
        self.state.error_message = None

        try:
            records = await self.client.list_employees()
        except EmployeeApiError as e:
            if self._discarded("list"):
                return
            logger.warning(f"Failed to fetch employees: {e}")
            self.state.records = []
            self.state.status = DirectoryStatus.ERROR
            self.state.error_message = f"Failed to fetch employees: {e}"
            return

        if self._discarded("list"):
            return
        logger.info(f"Loaded {len(records)} employee(s)")
        self.state.records = records
        self.state.status = DirectoryStatus.LOADED

    def is_busy(self, employee_id: int) -> bool:
        return employee_id in self.state.busy_record_ids

    async def delete_employee(self, employee_id: int) -> bool:
        """
        Delete one employee and resynchronise the list.

        Only the row being deleted is disabled; deleting a different id at
        the same time is allowed. Returns True when the API confirmed the
        delete.
        """
        if self.is_busy(employee_id):
            logger.debug(f"Delete of employee {employee_id} already in flight")
            return False

        self.state.busy_record_ids.add(employee_id)
        self.state.error_message = None
        try:
            deleted = await self._delete(employee_id)
            if deleted and not self._discarded("delete"):
                self.state.show_delete_confirmation = True
                await self.fetch_employees()
            return deleted
        finally:
            self.state.busy_record_ids.discard(employee_id)

    async def _delete(self, employee_id: int) -> bool:
        logger.info(f"Deleting employee {employee_id}")
        try:
            await self.client.delete_employee(employee_id)
        except EmployeeApiError as e:
            if self._discarded("delete"):
                return False
            logger.warning(f"Failed to delete employee {employee_id}: {e}")
            self.state.error_message = f"Failed to delete employee. Please try again. {e}"
            return False
        logger.info(f"Employee {employee_id} deleted successfully")
        return True

    def dismiss_confirmation(self):
        self.state.show_delete_confirmation = False

    def find_employee(self, employee_id: int) -> Optional[Employee]:
        return next((e for e in self.state.records if e.id == employee_id), None)

    async def edit_employee(self, employee_id: int) -> bool:
        """
        Open the Editor for a record of the current snapshot.

        A stale id (no longer in the snapshot) does nothing.
        """
        employee = self.find_employee(employee_id)
        if employee is None:
            logger.info(f"Employee {employee_id} not in current list, not opening editor")
            return False
        await self.navigate(EDIT_PATH, RecordTransfer(employee))
        return True

    async def create_employee(self):
        await self.navigate(CREATE_PATH)

    def view(self) -> DirectoryView:
        state = self.state
        view = DirectoryView(error=state.error_message)

        if state.show_delete_confirmation:
            view.modal = Modal(title="Employee Deleted Successfully", actions=["OK"])

        if state.status == DirectoryStatus.LOADING:
            view.loading = LOADING_TEXT
        elif state.status == DirectoryStatus.LOADED and not state.records:
            view.empty_message = NO_DATA_TEXT
        elif state.status == DirectoryStatus.LOADED:
            view.columns = list(DIRECTORY_COLUMNS)
            view.rows = [self._row(employee) for employee in state.records]
        return view

    def _row(self, employee: Employee) -> EmployeeRow:
        busy = self.is_busy(employee.id)
        return EmployeeRow(
            id=employee.id,
            name=employee.name or "",
            date_of_joining=format_date(employee.date_of_joining),
            department=employee.department or "",
            salary=format_salary(employee.salary),
            manager_id=display_number(employee.manager_id),
            status=employee.status.value if employee.status else "",
            status_class=status_class(employee.status),
            delete_disabled=busy,
            delete_label="Deleting..." if busy else "Delete",
        )
