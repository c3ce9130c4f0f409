"""
Audit log model.
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import DateTime
from typing import Optional
from datetime import datetime

from app.utils.helpers import utcnow


class AuditLog(SQLModel, table=True):
    """
    Administrative action record.

    Immutable once written. The table is a bounded ring: the oldest rows are
    evicted when the configured capacity is exceeded.
    """
    __tablename__ = "audit_log"

    # Autoincrement gives the FIFO eviction order
    id: Optional[int] = Field(default=None, primary_key=True)
    timestamp: datetime = Field(
        default_factory=utcnow, index=True, sa_type=DateTime(timezone=True)
    )
    action: str = Field(index=True)  # ADMISSION, DISCHARGE, BLOCKED...
    bed_number: str
    actor: str
    details: str

    def __repr__(self) -> str:
        return f"AuditLog(action={self.action}, bed={self.bed_number}, actor={self.actor})"
