"""
Bed state values used by the lifecycle engine.

A bed is either empty (no occupancy) or holds an Occupancy value with every
patient/admission field. Clearing a bed replaces the occupancy with None, so
no field can be forgotten.
"""
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import AdmissionTypeEnum, BedStatusEnum, PATIENT_STATUSES


class Occupancy(BaseModel):
    """Patient data attached to an occupied or reserved bed."""

    model_config = ConfigDict(frozen=True)

    # Identifies the admission episode across transfers
    episode_id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    patient_name: str
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

    # Reservation
    reserved_until: Optional[date] = None
    reservation_time: Optional[str] = None

    def patient_age(self, today: Optional[date] = None) -> Optional[int]:
        """Age in full years at `today`, or None without a birth date."""
        if self.birth_date is None:
            return None
        today = today or date.today()
        age = today.year - self.birth_date.year
        if (today.month, today.day) < (self.birth_date.month, self.birth_date.day):
            age -= 1
        return age


@dataclass(frozen=True)
class BedState:
    """
    Immutable view of a bed as seen by the lifecycle engine.

    `last_occupancy` is only set while the bed is CLEANING after a discharge,
    so staff can still see who was last there.
    """
    id: str
    number: str
    category: str
    sector_id: str
    status: BedStatusEnum
    occupancy: Optional[Occupancy] = None
    last_occupancy: Optional[Occupancy] = None

    @property
    def category_mismatch(self) -> bool:
        """Occupied with an entitled category different from the bed category."""
        return (
            self.status == BedStatusEnum.OCCUPIED
            and self.occupancy is not None
            and bool(self.occupancy.entitled_category)
            and self.occupancy.entitled_category != self.category
        )

    def emptied(self, status: BedStatusEnum) -> "BedState":
        """Same bed in the empty shape with the given status."""
        return replace(self, status=status, occupancy=None, last_occupancy=None)

    def holding(self, status: BedStatusEnum, occupancy: Occupancy) -> "BedState":
        """Same bed carrying `occupancy` with the given status."""
        return replace(self, status=status, occupancy=occupancy, last_occupancy=None)

    def is_consistent(self) -> bool:
        """Occupancy present iff the status carries a patient."""
        return (self.occupancy is not None) == (self.status in PATIENT_STATUSES)
