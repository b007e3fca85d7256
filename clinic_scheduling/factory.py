# clinic_scheduling/factory.py
from datetime import datetime, timedelta
from typing import Callable, Optional

from .application.services.scheduling_service import SchedulingManager
from .config import Settings, settings as default_settings
from .infrastructure.audit.std_logger import StdAuditLogger
from .infrastructure.persistence.csv_log.appointment_log_repository_csv import CsvAppointmentLogRepository


def create_scheduling_manager(
    cfg: Optional[Settings] = None,
    min_separation: Optional[timedelta] = None,
    clock: Callable[[], datetime] = datetime.now,
) -> SchedulingManager:
    """Build a manager wired to the CSV appointment log and, when enabled, the audit log."""
    cfg = cfg or default_settings
    return SchedulingManager(
        log_repository=CsvAppointmentLogRepository(encoding=cfg.APPOINTMENT_LOG_ENCODING),
        audit_logger=StdAuditLogger() if cfg.AUDIT_ENABLED else None,
        min_separation=min_separation if min_separation is not None else cfg.min_separation,
        clock=clock,
    )
