"""
Sector model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import List, TYPE_CHECKING
import uuid

if TYPE_CHECKING:
    from app.models.bed import Bed


class Sector(SQLModel, table=True):
    """
    Hospital sector (ward) grouping beds.
    Examples: UTI Adulto, Clínica Médica, Maternidade.
    """
    __tablename__ = "sector"

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True
    )
    name: str = Field(index=True)
    code: str  # UTIA, CM, MAT...
    order: int = Field(default=0)  # display order on the dashboard

    # Relationships
    beds: List["Bed"] = Relationship(back_populates="sector")

    def __repr__(self) -> str:
        return f"Sector(id={self.id}, name={self.name}, code={self.code})"
