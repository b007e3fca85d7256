# clinic_scheduling/models.py
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Mapping, Optional

from .exceptions import EntityReferenceError, FormatError, ValidationError

FIELD_SEPARATOR = ","
NOTES_COMMA_SUBSTITUTE = ";"
FIELD_COUNT = 7


class Specialty(Enum):
    CARDIOLOGY = "Cardiology"
    NEUROLOGY = "Neurology"
    PEDIATRICS = "Pediatrics"
    TRAUMATOLOGY = "Traumatology"
    GYNECOLOGY = "Gynecology"
    UROLOGY = "Urology"
    OPHTHALMOLOGY = "Ophthalmology"
    DERMATOLOGY = "Dermatology"
    PSYCHIATRY = "Psychiatry"
    GENERAL_MEDICINE = "General Medicine"
    GENERAL_SURGERY = "General Surgery"
    ANESTHESIOLOGY = "Anesthesiology"

    @property
    def description(self) -> str:
        return self.value


class AppointmentStatus(Enum):
    SCHEDULED = "Scheduled"
    INPROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    NOSHOW = "No Show"

    @property
    def description(self) -> str:
        return self.value


@dataclass(frozen=True)
class Department:
    name: str
    specialty: Specialty

    @property
    def key(self) -> str:
        return self.name


@dataclass(frozen=True)
class Patient:
    national_id: str
    first_name: str = field(default="", compare=False)
    last_name: str = field(default="", compare=False)
    phone: str = field(default="", compare=False)
    address: str = field(default="", compare=False)

    @property
    def key(self) -> str:
        return self.national_id

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip() or self.national_id


@dataclass(frozen=True)
class Doctor:
    national_id: str
    specialty: Specialty = field(compare=False)
    first_name: str = field(default="", compare=False)
    last_name: str = field(default="", compare=False)
    license_number: str = field(default="", compare=False)

    @property
    def key(self) -> str:
        return self.national_id

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip() or self.national_id


@dataclass(frozen=True)
class Room:
    number: str
    department: Department = field(compare=False)
    kind: str = field(default="", compare=False)

    @property
    def key(self) -> str:
        return self.number

    @property
    def specialty(self) -> Specialty:
        return self.department.specialty


class Appointment:
    """
    A booked slot linking one patient, one doctor and one room.

    patient, doctor, room, start_time and cost are fixed at construction;
    status and notes are plain mutable attributes.
    """

    def __init__(self, patient: Patient, doctor: Doctor, room: Room, start_time: datetime, cost: Decimal,
                 status: AppointmentStatus = AppointmentStatus.SCHEDULED, notes: str = "") -> None:
        for name, value in (("patient", patient), ("doctor", doctor), ("room", room),
                            ("start_time", start_time), ("cost", cost)):
            if value is None:
                raise ValidationError(f"Appointment {name} is required", field=name)
        self._patient = patient
        self._doctor = doctor
        self._room = room
        self._start_time = start_time
        self._cost = cost
        self.status = status
        self.notes = notes or ""

    @property
    def patient(self) -> Patient:
        return self._patient

    @property
    def doctor(self) -> Doctor:
        return self._doctor

    @property
    def room(self) -> Room:
        return self._room

    @property
    def start_time(self) -> datetime:
        return self._start_time

    @property
    def cost(self) -> Decimal:
        return self._cost

    def _fields(self) -> tuple:
        return (self.patient, self.doctor, self.room, self.start_time, self.cost, self.status, self.notes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Appointment):
            return NotImplemented
        return self._fields() == other._fields()

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Appointment(patient={self.patient.key!r}, doctor={self.doctor.key!r}, room={self.room.key!r}, "
            f"start_time={self.start_time.isoformat()!r}, cost={str(self.cost)!r}, status={self.status.name})"
        )

    def summary(self) -> str:
        return (
            f"{self.patient.full_name} with {self.doctor.full_name} in room {self.room.number} "
            f"at {self.start_time.isoformat()} ({self.status.description}, cost {self.cost})"
        )

    __str__ = summary

    def encode(self) -> str:
        for name, key in (("patient", self.patient.key), ("doctor", self.doctor.key), ("room", self.room.key)):
            if FIELD_SEPARATOR in key or "\n" in key or "\r" in key:
                raise ValidationError(f"The {name} key {key!r} cannot be written to the appointment log", field=name)
        notes = self.notes.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")
        return FIELD_SEPARATOR.join([
            self.patient.key,
            self.doctor.key,
            self.room.key,
            self.start_time.isoformat(),
            str(self.cost),
            self.status.name,
            notes.replace(FIELD_SEPARATOR, NOTES_COMMA_SUBSTITUTE),
        ])

    @classmethod
    def decode(
        cls,
        line: str,
        patients_by_key: Mapping[str, Patient],
        doctors_by_key: Mapping[str, Doctor],
        rooms_by_key: Mapping[str, Room],
    ) -> "Appointment":
        values = line.split(FIELD_SEPARATOR)
        if len(values) != FIELD_COUNT:
            raise FormatError(f"Invalid appointment record, expected {FIELD_COUNT} fields: {line}", line=line)

        patient_key, doctor_key, room_key, raw_time, raw_cost, raw_status, raw_notes = values

        try:
            start_time = datetime.fromisoformat(raw_time)
        except ValueError:
            raise FormatError(f"Invalid appointment date-time: {raw_time}", line=line)
        if start_time.tzinfo is not None:
            raise FormatError(f"Appointment date-time must not carry a timezone: {raw_time}", line=line)

        try:
            cost = Decimal(raw_cost)
        except InvalidOperation:
            raise FormatError(f"Invalid appointment cost: {raw_cost}", line=line)
        if not cost.is_finite():
            raise FormatError(f"Invalid appointment cost: {raw_cost}", line=line)

        try:
            status = AppointmentStatus[raw_status]
        except KeyError:
            raise FormatError(f"Unknown appointment status: {raw_status}", line=line)

        patient = _resolve(patients_by_key, patient_key, "patient")
        doctor = _resolve(doctors_by_key, doctor_key, "doctor")
        room = _resolve(rooms_by_key, room_key, "room")

        return cls(
            patient,
            doctor,
            room,
            start_time,
            cost,
            status=status,
            notes=raw_notes.replace(NOTES_COMMA_SUBSTITUTE, FIELD_SEPARATOR),
        )


def _resolve(directory: Mapping, key: str, kind: str):
    entity: Optional[object] = directory.get(key)
    if entity is None:
        raise EntityReferenceError(kind=kind, key=key)
    return entity
