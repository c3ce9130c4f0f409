"""
System data models.
Re-exports every model for simpler imports.
"""
from app.models.enums import (
    BedStatusEnum,
    AdmissionTypeEnum,
    AuditActionEnum,
)

from app.models.sector import Sector
from app.models.bed import Bed
from app.models.catalog import Payer, Cid, Doctor, Procedure
from app.models.history import InternmentHistory
from app.models.audit import AuditLog

__all__ = [
    # Enums
    "BedStatusEnum",
    "AdmissionTypeEnum",
    "AuditActionEnum",
    # Models
    "Sector",
    "Bed",
    "Payer",
    "Cid",
    "Doctor",
    "Procedure",
    "InternmentHistory",
    "AuditLog",
]
