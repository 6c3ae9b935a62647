"""Error taxonomy shared by repositories, services and the HTTP layer."""

from __future__ import annotations

from typing import Any


class NominaError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = 500

    def __init__(self, message: str, details: Any = None):
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(NominaError):
    """Malformed or missing request fields."""

    status_code = 400


class NotFoundError(NominaError):
    """Referenced entity does not exist."""

    status_code = 404


class ReferentialError(NominaError):
    """Payroll insert referenced an employee that does not exist."""

    status_code = 409

    def __init__(self, employee_id: int, details: Any = None):
        self.employee_id = employee_id
        super().__init__(
            f"Employee with internal id {employee_id} does not exist",
            details,
        )


class IntegrityError(NominaError):
    """Storage reported success but the affected row cannot be found.

    Signals a storage-layer consistency bug, never a user error.
    """

    status_code = 500


class StorageUnavailableError(NominaError):
    """Connection failure, pool exhaustion or engine outage."""

    status_code = 500
