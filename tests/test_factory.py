from datetime import datetime, timedelta

from clinic_scheduling import create_scheduling_manager
from clinic_scheduling.config import Settings
from clinic_scheduling.infrastructure.audit.std_logger import StdAuditLogger
from clinic_scheduling.infrastructure.persistence.csv_log.appointment_log_repository_csv import CsvAppointmentLogRepository

NOW = datetime(2030, 1, 6, 9, 0)


def test_factory_wires_csv_log_and_audit_from_settings():
    mgr = create_scheduling_manager(Settings(MIN_SEPARATION_MINUTES=45, APPOINTMENT_LOG_ENCODING="latin-1"))
    assert isinstance(mgr.log_repository, CsvAppointmentLogRepository)
    assert mgr.log_repository.encoding == "latin-1"
    assert isinstance(mgr.audit_logger, StdAuditLogger)
    assert mgr.min_separation == timedelta(minutes=45)


def test_factory_skips_audit_when_disabled():
    mgr = create_scheduling_manager(Settings(AUDIT_ENABLED=False))
    assert mgr.audit_logger is None


def test_factory_passes_window_and_clock_through(tmp_path, patient, cardiologist, cardio_room):
    mgr = create_scheduling_manager(Settings(AUDIT_ENABLED=False), min_separation=timedelta(minutes=30),
                                    clock=lambda: NOW)
    assert mgr.min_separation == timedelta(minutes=30)
    mgr.book_appointment(patient, cardiologist, cardio_room, datetime(2030, 1, 7, 10, 0), 100)
    path = tmp_path / "appointments.csv"
    mgr.save(str(path))
    assert path.read_text(encoding="utf-8").startswith("30111222,20123456,101,")
