"""
REST client for the employee API.

Wraps the four operations the portal screens invoke:
- list:   GET    /api/employees        -> 200
- create: POST   /api/employees        -> 201
- update: PATCH  /api/employees/{id}   -> 200
- delete: DELETE /api/employees/{id}   -> 204

Any other status code is a failure regardless of the body. Timeouts are
owned here; no call is retried.
"""

from typing import Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from employee_portal.core.config import settings
from employee_portal.core.errors import (
    TransportFailure,
    UnexpectedPayload,
    UnexpectedStatus,
)
from employee_portal.core.logging import get_logger
from employee_portal.models.employee import (
    Employee,
    EmployeeCreatePayload,
    EmployeeUpdatePayload,
)

logger = get_logger(__name__)

EMPLOYEES_PATH = "/api/employees"

_employee_list = TypeAdapter(list[Employee])


def employee_path(employee_id: int) -> str:
    return f"{EMPLOYEES_PATH}/{employee_id}"


class EmployeeApiClient:
    """Async client for the employee REST API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(
                base_url=base_url or settings.API_BASE_URL,
                timeout=timeout if timeout is not None else settings.REQUEST_TIMEOUT,
            )
        self._http = http_client

    async def __aenter__(self) -> "EmployeeApiClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def close(self):
        if self._owns_client:
            await self._http.aclose()

    async def _request(
        self, method: str, path: str, expected: int, json: Optional[dict] = None
    ) -> httpx.Response:
        logger.debug(f"{method} {path}")
        try:
            response = await self._http.request(method, path, json=json)
        except httpx.TransportError as e:
            logger.warning(f"{method} {path} failed: {e!r}")
            raise TransportFailure(str(e) or type(e).__name__) from e

        if response.status_code != expected:
            logger.warning(
                f"{method} {path} returned {response.status_code}, expected {expected}"
            )
            raise UnexpectedStatus(response.status_code, expected)
        return response

    async def list_employees(self) -> list[Employee]:
        response = await self._request("GET", EMPLOYEES_PATH, 200)
        try:
            return _employee_list.validate_json(response.content)
        except ValidationError as e:
            raise UnexpectedPayload(
                f"Invalid employee list: {e.error_count()} validation error(s)"
            ) from e

    async def create_employee(self, payload: EmployeeCreatePayload) -> httpx.Response:
        return await self._request("POST", EMPLOYEES_PATH, 201, json=payload.to_wire())

    async def update_employee(
        self, employee_id: int, payload: EmployeeUpdatePayload
    ) -> httpx.Response:
        return await self._request(
            "PATCH", employee_path(employee_id), 200, json=payload.to_wire()
        )

    async def delete_employee(self, employee_id: int) -> None:
        await self._request("DELETE", employee_path(employee_id), 204)
