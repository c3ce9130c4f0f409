"""
Internment history model.
One entry per admission episode, used for length of stay and turnover.
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import DateTime
from typing import Optional
from datetime import date, datetime

from app.models.enums import AdmissionTypeEnum
from app.utils.helpers import utcnow


class InternmentHistory(SQLModel, table=True):
    """
    Admission episode.

    Everything except `release_date` is fixed when the entry is opened.
    `release_date` is set exactly once, on discharge; an entry without it
    is an ongoing stay.
    """
    __tablename__ = "internment_history"

    # Autoincrement keeps the opening order
    id: Optional[int] = Field(default=None, primary_key=True)
    episode_id: str = Field(index=True)

    bed_id: str = Field(index=True)
    sector_id: str = Field(index=True)
    patient_name: str
    doctor_name: Optional[str] = Field(default=None)
    admission_type: Optional[AdmissionTypeEnum] = Field(default=None)
    admission_date: date
    payer_id: Optional[str] = Field(default=None)
    cid_id: Optional[str] = Field(default=None)
    entitled_category: Optional[str] = Field(default=None)

    opened_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    release_date: Optional[datetime] = Field(
        default=None, index=True, sa_type=DateTime(timezone=True)
    )

    def __repr__(self) -> str:
        return (
            f"InternmentHistory(id={self.id}, bed_id={self.bed_id}, "
            f"patient={self.patient_name}, released={self.release_date})"
        )

    @property
    def is_open(self) -> bool:
        """Ongoing stay (not discharged yet)."""
        return self.release_date is None
