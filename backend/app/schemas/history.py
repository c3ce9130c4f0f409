"""
History and audit schemas.
"""
from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime

from app.models.enums import AdmissionTypeEnum


class HistoryEntryResponse(BaseModel):
    """One admission episode."""
    id: int
    episode_id: str
    bed_id: str
    sector_id: str
    patient_name: str
    doctor_name: Optional[str] = None
    admission_type: Optional[AdmissionTypeEnum] = None
    admission_date: date
    payer_id: Optional[str] = None
    cid_id: Optional[str] = None
    entitled_category: Optional[str] = None
    opened_at: datetime
    release_date: Optional[datetime] = None

    class Config:
        from_attributes = True


class AuditEntryResponse(BaseModel):
    """One administrative action."""
    id: int
    timestamp: datetime
    action: str
    bed_number: str
    actor: str
    details: str

    class Config:
        from_attributes = True
