# clinic_scheduling/config.py
import logging
from datetime import timedelta
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application Settings
    APP_NAME: str = "Clinic Scheduling"
    APP_VERSION: str = "1.0.0"

    # Scheduling Settings
    MIN_SEPARATION_MINUTES: int = Field(default=120, ge=1)

    # Appointment Log Settings
    APPOINTMENT_LOG_PATH: str = "appointments.csv"
    APPOINTMENT_LOG_ENCODING: str = "utf-8"

    # Audit Settings
    AUDIT_ENABLED: bool = True

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def min_separation(self) -> timedelta:
        return timedelta(minutes=self.MIN_SEPARATION_MINUTES)


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings: Settings = get_settings()


def configure_logging(cfg: Settings | None = None) -> None:
    cfg = cfg or settings
    logging.basicConfig(
        level=getattr(logging, cfg.LOG_LEVEL.upper(), logging.INFO),
        format=cfg.LOG_FORMAT,
    )
