"""
Navigation host for the portal screens.

Owns the routing table and the single mounted screen. History keeps paths
only, so a RecordTransfer is visible to exactly one navigation.
"""

from typing import Callable, Optional

from employee_portal.core.client import EmployeeApiClient
from employee_portal.core.errors import UnknownRoute
from employee_portal.core.logging import get_logger
from employee_portal.core.transfer import RecordTransfer
from employee_portal.screens import (
    CREATE_PATH,
    DIRECTORY_PATH,
    EDIT_PATH,
    CreatorScreen,
    DirectoryScreen,
    EditorScreen,
)
from employee_portal.screens.base import Screen

logger = get_logger(__name__)

ScreenFactory = Callable[[Optional[RecordTransfer]], Screen]


class Portal:
    def __init__(self, client: EmployeeApiClient):
        self.client = client
        self.screen: Optional[Screen] = None
        self.history: list[str] = []
        self._routes: dict[str, ScreenFactory] = {
            DIRECTORY_PATH: lambda _: DirectoryScreen(self.client, self.navigate),
            CREATE_PATH: lambda _: CreatorScreen(self.client, self.navigate),
            EDIT_PATH: lambda transfer: EditorScreen(
                self.client,
                self.navigate,
                transfer.claim() if transfer is not None else None,
            ),
        }

    @property
    def current_path(self) -> Optional[str]:
        return self.history[-1] if self.history else None

    async def start(self, path: str = DIRECTORY_PATH):
        await self.navigate(path)

    async def navigate(self, path: str, transfer: Optional[RecordTransfer] = None):
        """Leave the current screen and mount the one registered for ``path``."""
        if path not in self._routes:
            raise UnknownRoute(path)
        logger.info(f"Navigating to {path}")
        self.history.append(path)
        await self._enter(path, transfer)

    async def back(self) -> bool:
        """Return to the previous path. Transfers are never replayed."""
        if len(self.history) < 2:
            return False
        self.history.pop()
        logger.info(f"Navigating back to {self.current_path}")
        await self._enter(self.current_path, None)
        return True

    async def reload(self):
        """Re-enter the current path from scratch."""
        if self.current_path is None:
            return
        logger.info(f"Reloading {self.current_path}")
        await self._enter(self.current_path, None)

    async def _enter(self, path: str, transfer: Optional[RecordTransfer]):
        if self.screen is not None:
            self.screen.unmount()
        screen = self._routes[path](transfer)
        self.screen = screen
        await screen.mount()
