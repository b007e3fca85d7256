from datetime import datetime, timedelta
from typing import Dict, List, Optional

from ...exceptions import ValidationError
from ...models import Appointment, Doctor, Room


class AvailabilityIndex:
    """Per-doctor and per-room buckets of booked appointments, keyed by natural key.

    A slot is free when no booked appointment in the bucket starts less than
    ``min_separation`` before or after the candidate time. Not synchronized;
    callers serialize access.
    """

    def __init__(self, min_separation: timedelta) -> None:
        if min_separation <= timedelta(0):
            raise ValidationError(f"Minimum separation must be positive, got {min_separation}", field="min_separation")
        self.min_separation = min_separation
        self._by_doctor: Dict[str, List[Appointment]] = {}
        self._by_room: Dict[str, List[Appointment]] = {}

    def _find_conflict(self, bucket: List[Appointment], when: datetime) -> Optional[Appointment]:
        return next((a for a in bucket if abs(a.start_time - when) < self.min_separation), None)

    def find_doctor_conflict(self, doctor: Doctor, when: datetime) -> Optional[Appointment]:
        return self._find_conflict(self._by_doctor.get(doctor.key, []), when)

    def find_room_conflict(self, room: Room, when: datetime) -> Optional[Appointment]:
        return self._find_conflict(self._by_room.get(room.key, []), when)

    def is_doctor_available(self, doctor: Doctor, when: datetime) -> bool:
        return self.find_doctor_conflict(doctor, when) is None

    def is_room_available(self, room: Room, when: datetime) -> bool:
        return self.find_room_conflict(room, when) is None

    def record(self, appointment: Appointment) -> None:
        self._by_doctor.setdefault(appointment.doctor.key, []).append(appointment)
        self._by_room.setdefault(appointment.room.key, []).append(appointment)

    def for_doctor_key(self, doctor_key: str) -> List[Appointment]:
        return list(self._by_doctor.get(doctor_key, []))

    def for_room_key(self, room_key: str) -> List[Appointment]:
        return list(self._by_room.get(room_key, []))

    def clear(self) -> None:
        self._by_doctor.clear()
        self._by_room.clear()
