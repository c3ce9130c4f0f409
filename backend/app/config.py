"""
Application settings, read from the environment and `.env`.
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import Any, Dict, List
import logging


class Settings(BaseSettings):
    """Bed management dashboard settings."""

    # ============================================
    # APPLICATION
    # ============================================
    APP_TITLE: str = "Bed Management Dashboard"
    APP_DESCRIPTION: str = "Hospital bed lifecycle, admission history and occupancy KPIs"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"
    DEBUG: bool = False  # uvicorn auto-reload

    # ============================================
    # DATABASE
    # ============================================
    DATABASE_URL: str = "sqlite:///./bed_management.db"
    SQL_ECHO: bool = False

    # ============================================
    # CORS (dashboard frontend)
    # ============================================
    CORS_ORIGINS: List[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: List[str] = ["*"]
    CORS_ALLOW_HEADERS: List[str] = ["*"]

    # ============================================
    # LEDGERS
    # ============================================
    AUDIT_LOG_CAPACITY: int = 300  # rows kept in the audit ring
    DEFAULT_ACTOR: str = "SISTEMA"  # recorded when a request names no actor

    # ============================================
    # KPIs
    # ============================================
    MIN_STAY_DAYS: float = 0.5  # floor for same-day discharges

    # ============================================
    # STARTUP
    # ============================================
    SEED_REFERENCE_DATA: bool = True  # default procedure list

    # ============================================
    # LOGGING
    # ============================================
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

    class Config:
        env_file = ".env"
        case_sensitive = True

    @field_validator("AUDIT_LOG_CAPACITY")
    @classmethod
    def validate_capacity(cls, v):
        if v < 1:
            raise ValueError("AUDIT_LOG_CAPACITY must be at least 1")
        return v

    @field_validator("MIN_STAY_DAYS")
    @classmethod
    def validate_min_stay(cls, v):
        if v < 0:
            raise ValueError("MIN_STAY_DAYS cannot be negative")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown LOG_LEVEL '{v}'")
        return level

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def engine_connect_args(self) -> Dict[str, Any]:
        """Driver arguments for create_engine."""
        if self.is_sqlite:
            # Sessions are handed across FastAPI worker threads
            return {"check_same_thread": False}
        return {}


settings = Settings()
