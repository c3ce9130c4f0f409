"""
Data access repositories.
They hide the SQL queries behind a clean interface.
"""
from app.repositories.base import BaseRepository
from app.repositories.bed_repo import BedRepository
from app.repositories.sector_repo import SectorRepository
from app.repositories.catalog_repo import (
    CatalogRepository,
    payer_repository,
    cid_repository,
    doctor_repository,
    procedure_repository,
)
from app.repositories.history_repo import HistoryRepository
from app.repositories.audit_repo import AuditRepository

__all__ = [
    "BaseRepository",
    "BedRepository",
    "SectorRepository",
    "CatalogRepository",
    "payer_repository",
    "cid_repository",
    "doctor_repository",
    "procedure_repository",
    "HistoryRepository",
    "AuditRepository",
]
