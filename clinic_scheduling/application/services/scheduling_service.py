"""
Scheduling manager for the clinic.

Owns the canonical appointment log plus the by-patient and availability
indices, and is the only way appointments get created. Booking and reloading
run under a single manager-wide lock so that the availability check and the
recording of a new appointment are observed atomically by concurrent callers.
"""

import logging
import threading
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from ...config import settings
from ...exceptions import (
    BookingError,
    DoctorUnavailableError,
    InvalidCostError,
    PastDateError,
    RoomUnavailableError,
    SpecialtyMismatchError,
    ValidationError,
)
from ...models import Appointment, Doctor, Patient, Room
from ..ports.appointment_log_repo import AppointmentLogRepository
from ..ports.audit_logger import AuditLogger
from .availability_index import AvailabilityIndex

logger = logging.getLogger(__name__)


class SchedulingManager:
    def __init__(
        self,
        log_repository: AppointmentLogRepository,
        audit_logger: Optional[AuditLogger] = None,
        min_separation: Optional[timedelta] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.log_repository = log_repository
        self.audit_logger = audit_logger
        self.clock = clock
        self._lock = threading.RLock()
        self._log: List[Appointment] = []
        self._by_patient: Dict[str, List[Appointment]] = {}
        self._availability = AvailabilityIndex(min_separation if min_separation is not None else settings.min_separation)

    @property
    def min_separation(self) -> timedelta:
        return self._availability.min_separation

    # ------------------------------------------------------------------
    # Booking
    # ------------------------------------------------------------------

    def book_appointment(self, patient: Patient, doctor: Doctor, room: Room, start_time: datetime, cost) -> Appointment:
        for name, value in (("patient", patient), ("doctor", doctor), ("room", room),
                            ("start_time", start_time), ("cost", cost)):
            if value is None:
                raise ValidationError(f"Appointment {name} is required", field=name)
        if start_time.tzinfo is not None:
            raise ValidationError("Appointment start_time must be a local date-time without timezone", field="start_time")
        cost = _to_decimal(cost)

        try:
            with self._lock:
                self._check_booking(doctor, room, start_time, cost)
                appointment = Appointment(patient, doctor, room, start_time, cost)
                self._apply(appointment)
        except BookingError as e:
            logger.warning(f"Booking rejected for doctor {doctor.key} in room {room.key} at {start_time.isoformat()}: {e}")
            self._audit("book_appointment", patient, doctor, room, success=False,
                        details={"error": type(e).__name__, **e.to_dict()})
            raise

        logger.info(f"Appointment booked with doctor {doctor.key} in room {room.key} at {start_time.isoformat()}")
        self._audit("book_appointment", patient, doctor, room, success=True,
                    details={"start_time": start_time.isoformat(), "cost": str(cost)})
        return appointment

    def _check_booking(self, doctor: Doctor, room: Room, start_time: datetime, cost: Decimal) -> None:
        now = self.clock()
        if start_time < now:
            raise PastDateError(requested=start_time, now=now)
        if cost <= 0:
            raise InvalidCostError(cost=cost)

        conflict = self._availability.find_doctor_conflict(doctor, start_time)
        if conflict is not None:
            raise DoctorUnavailableError(key=doctor.key, requested=start_time, conflicting_start=conflict.start_time)
        conflict = self._availability.find_room_conflict(room, start_time)
        if conflict is not None:
            raise RoomUnavailableError(key=room.key, requested=start_time, conflicting_start=conflict.start_time)

        if doctor.specialty != room.department.specialty:
            raise SpecialtyMismatchError(doctor_specialty=doctor.specialty, room_specialty=room.department.specialty)

    def _apply(self, appointment: Appointment) -> None:
        self._log.append(appointment)
        self._by_patient.setdefault(appointment.patient.key, []).append(appointment)
        self._availability.record(appointment)

    def _audit(self, action: str, patient: Patient, doctor: Doctor, room: Room, success: bool, details: dict) -> None:
        if self.audit_logger is None:
            return
        self.audit_logger.log(action, patient.key, doctor_key=doctor.key, room_key=room.key,
                              success=success, details=details)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def appointments_for_patient(self, patient: Patient) -> Tuple[Appointment, ...]:
        return self.appointments_for_patient_key(patient.key)

    def appointments_for_doctor(self, doctor: Doctor) -> Tuple[Appointment, ...]:
        return self.appointments_for_doctor_key(doctor.key)

    def appointments_for_room(self, room: Room) -> Tuple[Appointment, ...]:
        return self.appointments_for_room_key(room.key)

    def appointments_for_patient_key(self, national_id: str) -> Tuple[Appointment, ...]:
        with self._lock:
            return tuple(self._by_patient.get(national_id, ()))

    def appointments_for_doctor_key(self, national_id: str) -> Tuple[Appointment, ...]:
        with self._lock:
            return tuple(self._availability.for_doctor_key(national_id))

    def appointments_for_room_key(self, number: str) -> Tuple[Appointment, ...]:
        with self._lock:
            return tuple(self._availability.for_room_key(number))

    @property
    def appointments(self) -> Tuple[Appointment, ...]:
        with self._lock:
            return tuple(self._log)

    def __len__(self) -> int:
        with self._lock:
            return len(self._log)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, path: Optional[str] = None) -> None:
        path = path or settings.APPOINTMENT_LOG_PATH
        with self._lock:
            self.log_repository.write(path, list(self._log))

    def load(
        self,
        path: str,
        patients_by_key: Mapping[str, Patient],
        doctors_by_key: Mapping[str, Doctor],
        rooms_by_key: Mapping[str, Room],
    ) -> int:
        """Replace the in-memory log with the contents of ``path``.

        Destructive: the log and every index are cleared before reading. The
        first bad line aborts the load and the appointments applied before it
        stay in place. Returns the number of appointments loaded.
        """
        with self._lock:
            self._log.clear()
            self._by_patient.clear()
            self._availability.clear()
            for appointment in self.log_repository.read(path, patients_by_key, doctors_by_key, rooms_by_key):
                self._apply(appointment)
            count = len(self._log)
        logger.info(f"Loaded {count} appointments from {path}")
        return count


def _to_decimal(cost) -> Decimal:
    if isinstance(cost, Decimal) and cost.is_finite():
        return cost
    if isinstance(cost, bool):
        raise ValidationError(f"Invalid appointment cost: {cost!r}", field="cost")
    try:
        value = Decimal(str(cost))
    except (InvalidOperation, ValueError, TypeError):
        raise ValidationError(f"Invalid appointment cost: {cost!r}", field="cost")
    if not value.is_finite():
        raise ValidationError(f"Invalid appointment cost: {cost!r}", field="cost")
    return value
