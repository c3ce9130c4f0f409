"""
Business logic services.
They hold the main logic of the system.
"""
from app.services.ledger_service import LedgerService, HistoryLedger, AuditTrail
from app.services.bed_service import BedService, TransferResult
from app.services.catalog_service import SectorService, CatalogService
from app.services.kpi_service import KpiService, KpiSnapshot, compute_kpis

__all__ = [
    "LedgerService",
    "HistoryLedger",
    "AuditTrail",
    "BedService",
    "TransferResult",
    "SectorService",
    "CatalogService",
    "KpiService",
    "KpiSnapshot",
    "compute_kpis",
]
