"""
Error taxonomy for the employee portal.

Every failure of a REST call surfaces as an ``EmployeeApiError``:
- ``TransportFailure``: the request never completed (DNS, connection, timeout)
- ``UnexpectedStatus``: a response arrived with a non-success status code
- ``UnexpectedPayload``: a success response whose body is not the documented shape

Form validation failures are raised before any request is made and are kept
outside that hierarchy.
"""


class EmployeeApiError(Exception):
    """Base class for failed calls against the employee REST API."""


class TransportFailure(EmployeeApiError):
    """The request did not complete."""


class UnexpectedStatus(EmployeeApiError):
    def __init__(self, status_code: int, expected: int):
        self.status_code = status_code
        self.expected = expected
        super().__init__(f"HTTP error! status: {status_code}")


class UnexpectedPayload(EmployeeApiError):
    """The response body could not be read as the documented payload."""


class DraftValidationError(ValueError):
    """A form draft failed validation; ``errors`` maps field name to message."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Invalid form fields: {fields}")


class UnknownRoute(LookupError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No screen registered for path: {path}")
