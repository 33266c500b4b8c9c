import asyncio
from collections import deque
from typing import Any, Optional

import httpx

from employee_portal.core.client import EmployeeApiClient
from employee_portal.models.employee import EmployeeDraft

MOCK_EMPLOYEES = [
    {
        "id": 1,
        "name": "John Doe",
        "dateOfJoining": "2025-08-18T10:00:00.000+00:00",
        "status": "ACTIVE",
        "department": "IT",
        "salary": 80000.0,
        "managerId": 1,
    },
    {
        "id": 2,
        "name": "Heman",
        "dateOfJoining": "2025-08-18T10:00:00.000+00:00",
        "status": "ACTIVE",
        "department": "Marketing",
        "salary": 20000.0,
        "managerId": 2,
    },
    {
        "id": 3,
        "name": "Spider Man",
        "dateOfJoining": "2025-08-18T10:00:00.000+00:00",
        "status": "ACTIVE",
        "department": "Finance",
        "salary": 120000.0,
        "managerId": 1,
    },
    {
        "id": 4,
        "name": "Joker",
        "dateOfJoining": "2025-08-01T10:00:00.000+00:00",
        "status": "NOT_ACTIVE",
        "department": "Finance",
        "salary": 120000.0,
        "managerId": 1,
    },
]


class FakeEmployeeApi:
    """
    Scripted stand-in for the employee REST API.

    Responses are queued in order and consumed one per request. A queued
    response may wait on a gate (asyncio.Event) before answering, which lets
    tests hold a request in flight.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: deque = deque()
        self.http_client: Optional[httpx.AsyncClient] = None

    def respond(
        self,
        status_code: int = 200,
        json: Any = None,
        gate: Optional[asyncio.Event] = None,
    ):
        self._responses.append(("response", status_code, json, gate))

    def fail(self, message: str = "Server Error", gate: Optional[asyncio.Event] = None):
        self._responses.append(("error", None, message, gate))

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url.path}")
        kind, status_code, body, gate = self._responses.popleft()
        if gate is not None:
            await gate.wait()
        if kind == "error":
            raise httpx.ConnectError(body, request=request)
        if body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=body)

    def client(self) -> EmployeeApiClient:
        self.http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(self.handler),
            base_url="http://testserver",
        )
        return EmployeeApiClient(http_client=self.http_client)

    async def close(self):
        if self.http_client is not None:
            await self.http_client.aclose()

    def calls(self, method: Optional[str] = None) -> list[tuple[str, str]]:
        return [
            (r.method, r.url.path)
            for r in self.requests
            if method is None or r.method == method
        ]


class NavigationRecorder:
    """Records navigation requests made by a screen."""

    def __init__(self):
        self.calls = []

    async def __call__(self, path, transfer=None):
        self.calls.append((path, transfer))

    @property
    def paths(self) -> list[str]:
        return [path for path, _ in self.calls]


async def settle():
    """Let scheduled tasks run up to their next suspension point."""
    for _ in range(5):
        await asyncio.sleep(0)


def filled_draft(**overrides) -> EmployeeDraft:
    values = {
        "name": "Jane Smith",
        "date_of_joining": "2025-08-18",
        "department": "IT",
        "salary": "75000.50",
        "manager_id": "2",
        "status": "ACTIVE",
    }
    values.update(overrides)
    return EmployeeDraft(**values)
