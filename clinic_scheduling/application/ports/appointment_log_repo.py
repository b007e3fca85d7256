from typing import Iterable, Iterator, Mapping, Protocol

from ...models import Appointment, Doctor, Patient, Room


class AppointmentLogRepository(Protocol):
    def write(self, path: str, appointments: Iterable[Appointment]) -> None:
        ...

    def read(self, path: str, patients_by_key: Mapping[str, Patient], doctors_by_key: Mapping[str, Doctor], rooms_by_key: Mapping[str, Room]) -> Iterator[Appointment]:
        ...
