from .exceptions import (
    AppointmentLogError,
    AppointmentLogIOError,
    BookingError,
    DoctorUnavailableError,
    EntityReferenceError,
    FormatError,
    InvalidCostError,
    PastDateError,
    RoomUnavailableError,
    SchedulingError,
    SpecialtyMismatchError,
    ValidationError,
)
from .models import Appointment, AppointmentStatus, Department, Doctor, Patient, Room, Specialty
from .application.services import AvailabilityIndex, SchedulingManager
from .factory import create_scheduling_manager

__all__ = [
    "Appointment",
    "AppointmentLogError",
    "AppointmentLogIOError",
    "AppointmentStatus",
    "AvailabilityIndex",
    "BookingError",
    "Department",
    "Doctor",
    "DoctorUnavailableError",
    "EntityReferenceError",
    "FormatError",
    "InvalidCostError",
    "PastDateError",
    "Patient",
    "Room",
    "RoomUnavailableError",
    "SchedulingError",
    "SchedulingManager",
    "Specialty",
    "SpecialtyMismatchError",
    "ValidationError",
    "create_scheduling_manager",
]
