"""
One-shot handoff of a selected employee record from the Directory to the Editor.

A transfer belongs to a single navigation. It is never written to history,
so reloading the Editor or returning to it through back/forward finds nothing.
"""

from typing import Optional

from employee_portal.models.employee import Employee


class RecordTransfer:
    def __init__(self, employee: Employee):
        self._employee: Optional[Employee] = employee

    @property
    def claimed(self) -> bool:
        return self._employee is None

    def claim(self) -> Optional[Employee]:
        """Return the carried record the first time; None on every later call."""
        employee, self._employee = self._employee, None
        return employee

    def __repr__(self) -> str:
        state = "claimed" if self.claimed else f"employee={self._employee.id}"
        return f"RecordTransfer({state})"
