"""
Domain errors raised by the aggregation core and the record store.
"""

from typing import Optional


class PlacementDataError(ValueError):
    """Base class for malformed placement data."""


class InvalidStatusError(PlacementDataError):
    """A status value is not one of the known application statuses."""

    def __init__(self, status: object, application_id: Optional[str] = None):
        self.status = status
        self.application_id = application_id
        if application_id is not None:
            message = f"Application {application_id} has invalid status {status!r}"
        else:
            message = f"Invalid application status {status!r}"
        super().__init__(message)


class DanglingReferenceError(PlacementDataError):
    """An application references a student that is not in the supplied collection."""

    def __init__(self, application_id: str, student_id: str):
        self.application_id = application_id
        self.student_id = student_id
        super().__init__(
            f"Application {application_id} references unknown student {student_id}"
        )


class RecordNotFoundError(KeyError):
    """Lookup miss in the record store."""

    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} {record_id} not found")

    def __str__(self) -> str:
        return self.args[0]
