import logging
from typing import Iterable, Iterator, Mapping

from ....exceptions import AppointmentLogIOError, EntityReferenceError, FormatError
from ....models import Appointment, Doctor, Patient, Room
from ....application.ports.appointment_log_repo import AppointmentLogRepository

logger = logging.getLogger(__name__)


class CsvAppointmentLogRepository(AppointmentLogRepository):
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def write(self, path: str, appointments: Iterable[Appointment]) -> None:
        lines = [appointment.encode() for appointment in appointments]
        try:
            with open(path, "w", encoding=self.encoding, newline="") as f:
                for line in lines:
                    f.write(line)
                    f.write("\n")
        except OSError as e:
            logger.error(f"Error writing appointment log {path}: {e}")
            raise AppointmentLogIOError(f"Cannot write appointment log {path}: {e}", path=path) from e
        logger.info(f"Saved {len(lines)} appointments to {path}")

    def read(self, path: str, patients_by_key: Mapping[str, Patient], doctors_by_key: Mapping[str, Doctor], rooms_by_key: Mapping[str, Room]) -> Iterator[Appointment]:
        try:
            f = open(path, "r", encoding=self.encoding, newline="")
        except OSError as e:
            logger.error(f"Error opening appointment log {path}: {e}")
            raise AppointmentLogIOError(f"Cannot read appointment log {path}: {e}", path=path) from e

        with f:
            line_number = 0
            while True:
                try:
                    raw = f.readline()
                except (OSError, UnicodeDecodeError) as e:
                    raise AppointmentLogIOError(f"Cannot read appointment log {path}: {e}", path=path) from e
                if raw == "":
                    break
                line_number += 1
                line = raw.rstrip("\r\n")
                try:
                    appointment = Appointment.decode(line, patients_by_key, doctors_by_key, rooms_by_key)
                except (FormatError, EntityReferenceError) as e:
                    e.line_number = line_number
                    logger.error(f"Error loading appointment from line {line_number}: {line} - {e}")
                    raise
                yield appointment
