"""
Core module: database access, exception taxonomy and the bed lifecycle engine.
"""
from app.core.database import create_db_and_tables, get_session, get_session_direct, engine
from app.core.exceptions import (
    BaseAppException,
    ValidationError,
    NotFoundError,
    BedNotFoundError,
    SectorNotFoundError,
    CatalogItemNotFoundError,
    InvalidTransitionError,
    ConcurrencyConflictError,
)

__all__ = [
    "create_db_and_tables",
    "get_session",
    "get_session_direct",
    "engine",
    "BaseAppException",
    "ValidationError",
    "NotFoundError",
    "BedNotFoundError",
    "SectorNotFoundError",
    "CatalogItemNotFoundError",
    "InvalidTransitionError",
    "ConcurrencyConflictError",
]
