"""
Bed schemas.
"""
from pydantic import BaseModel, Field
from typing import Any, Dict, Optional
from datetime import date, datetime

from app.models.enums import AdmissionTypeEnum, BedStatusEnum


class OccupancyResponse(BaseModel):
    """Patient data shown on an occupied, reserved or cleaning bed."""
    episode_id: str
    patient_name: str
    patient_age: Optional[int] = None
    birth_date: Optional[date] = None
    medical_record: Optional[str] = None
    notes: Optional[str] = None
    doctor_name: Optional[str] = None
    payer_id: Optional[str] = None
    cid_id: Optional[str] = None
    procedure_id: Optional[str] = None
    diagnosis: Optional[str] = None
    admission_type: Optional[AdmissionTypeEnum] = None
    admission_date: Optional[date] = None
    admission_time: Optional[str] = None
    entitled_category: Optional[str] = None
    occupied_at: Optional[datetime] = None
    reserved_until: Optional[date] = None
    reservation_time: Optional[str] = None


class BedResponse(BaseModel):
    """Bed as shown on the dashboard."""
    id: str
    number: str
    category: str
    sector_id: str
    sector_name: Optional[str] = None
    status: BedStatusEnum
    status_updated_at: datetime
    version: int

    occupancy: Optional[OccupancyResponse] = None
    # Discharged patient, only while the bed is being cleaned
    last_occupancy: Optional[OccupancyResponse] = None
    category_mismatch: bool = False

    class Config:
        from_attributes = True


class BedCreate(BaseModel):
    """Request to add a bed to a sector."""
    sector_id: str
    number: str = Field(min_length=1)
    category: str = Field(min_length=1)


class StatusUpdateRequest(BaseModel):
    """Request for a plain status change."""
    status: BedStatusEnum
    actor: Optional[str] = None
    expected_version: Optional[int] = None


class OccupyRequest(BaseModel):
    """
    Request to admit a patient.
    `data` is validated by the service so missing fields come back as 400.
    """
    data: Dict[str, Any]
    actor: Optional[str] = None
    expected_version: Optional[int] = None


class ReserveRequest(BaseModel):
    """Request to reserve a free bed."""
    data: Dict[str, Any]
    actor: Optional[str] = None
    expected_version: Optional[int] = None


class TransferRequest(BaseModel):
    """Request to move the patient to another bed."""
    target_bed_id: str
    actor: Optional[str] = None
    expected_version: Optional[int] = None
    target_expected_version: Optional[int] = None


class BlockRequest(BaseModel):
    """Request to block or unblock a bed."""
    block: bool
    actor: Optional[str] = None
    expected_version: Optional[int] = None


class TransferResponse(BaseModel):
    """Both beds after a transfer or swap."""
    success: bool
    message: str
    source: BedResponse
    target: BedResponse
