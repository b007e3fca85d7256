"""
Exceptions raised by the scheduling core.

Booking errors are recoverable: the caller may retry with different
parameters. Appointment log errors come from save/load of the persisted log.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any


class SchedulingError(Exception):
    """Base exception for all scheduling-related errors."""

    def to_dict(self) -> dict[str, Any]:
        return {'detail': str(self)}


class ValidationError(SchedulingError):
    """Raised when a required field is missing or has an unusable value."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result = {'detail': str(self)}
        if self.field:
            result['field'] = self.field
        return result


# ---------------------------------------------------------------------------
# Booking rejections
# ---------------------------------------------------------------------------

class BookingError(SchedulingError):
    """Base class for rejected booking requests."""
    pass


class PastDateError(BookingError):
    def __init__(self, *, requested: datetime, now: datetime,
                 message: str = "Cannot schedule an appointment in the past"):
        self.requested = requested
        self.now = now
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            'detail': str(self),
            'requested': self.requested.isoformat(),
            'now': self.now.isoformat(),
        }


class InvalidCostError(BookingError):
    def __init__(self, *, cost: Any, message: str = "Cost must be greater than zero"):
        self.cost = cost
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {'detail': str(self), 'cost': str(self.cost)}


class _SlotTakenError(BookingError):
    """
    Shared shape of the doctor/room unavailability errors.

    Attributes:
        key: Natural key of the busy doctor or room
        requested: Requested start time
        conflicting_start: Start time of the booked appointment in the way
    """
    resource: str = ''

    def __init__(self, *, key: str, requested: datetime, conflicting_start: datetime | None = None,
                 message: str | None = None):
        self.key = key
        self.requested = requested
        self.conflicting_start = conflicting_start
        super().__init__(message or f"The {self.resource} is not available at the requested date and time")

    def to_dict(self) -> dict[str, Any]:
        result = {
            'detail': str(self),
            self.resource: self.key,
            'requested': self.requested.isoformat(),
        }
        if self.conflicting_start is not None:
            result['conflicting_start'] = self.conflicting_start.isoformat()
        return result


class DoctorUnavailableError(_SlotTakenError):
    resource = 'doctor'


class RoomUnavailableError(_SlotTakenError):
    resource = 'room'


class SpecialtyMismatchError(BookingError):
    def __init__(self, *, doctor_specialty: Any, room_specialty: Any,
                 message: str = "The doctor's specialty does not match the room's department"):
        self.doctor_specialty = doctor_specialty
        self.room_specialty = room_specialty
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            'detail': str(self),
            'doctor_specialty': getattr(self.doctor_specialty, 'name', str(self.doctor_specialty)),
            'room_specialty': getattr(self.room_specialty, 'name', str(self.room_specialty)),
        }


# ---------------------------------------------------------------------------
# Appointment log errors
# ---------------------------------------------------------------------------

class AppointmentLogError(SchedulingError):
    """Base class for errors while reading or writing the appointment log."""
    pass


class FormatError(AppointmentLogError):
    """Raised when a persisted line cannot be parsed into an appointment."""

    def __init__(self, message: str, line: str | None = None, line_number: int | None = None):
        self.line = line
        self.line_number = line_number
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result = {'detail': str(self)}
        if self.line is not None:
            result['line'] = self.line
        if self.line_number is not None:
            result['line_number'] = self.line_number
        return result


class EntityReferenceError(AppointmentLogError):
    """
    Raised when a persisted line names a patient, doctor or room that is not
    present in the supplied directories.
    """

    def __init__(self, *, kind: str, key: str, line_number: int | None = None):
        self.kind = kind
        self.key = key
        self.line_number = line_number
        super().__init__(f"{kind.capitalize()} not found: {key}")

    def to_dict(self) -> dict[str, Any]:
        result = {'detail': str(self), 'kind': self.kind, 'key': self.key}
        if self.line_number is not None:
            result['line_number'] = self.line_number
        return result


class AppointmentLogIOError(AppointmentLogError, OSError):
    """Raised when the appointment log file cannot be opened, read or written."""

    def __init__(self, message: str, path: str):
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {'detail': str(self), 'path': self.path}
