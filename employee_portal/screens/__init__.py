"""
Portal screens.

Each screen is an independent state machine:
- DirectoryScreen: list and delete employees
- CreatorScreen: create an employee
- EditorScreen: update an employee handed over by the Directory
"""

from employee_portal.screens.base import (
    CREATE_PATH,
    DIRECTORY_PATH,
    EDIT_PATH,
    FormStatus,
)
from employee_portal.screens.creator import CreatorScreen
from employee_portal.screens.directory import DirectoryScreen, DirectoryStatus
from employee_portal.screens.editor import EditorScreen

__all__ = [
    "DIRECTORY_PATH",
    "CREATE_PATH",
    "EDIT_PATH",
    "FormStatus",
    "DirectoryStatus",
    "DirectoryScreen",
    "CreatorScreen",
    "EditorScreen",
]
