"""
Bed model.
"""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import DateTime
from typing import Optional, TYPE_CHECKING
from datetime import datetime
import uuid

from app.models.enums import BedStatusEnum, PATIENT_STATUSES
from app.utils.helpers import utcnow

if TYPE_CHECKING:
    from app.core.bed_state import BedState, Occupancy
    from app.models.sector import Sector


def _load_occupancy(data: Optional[str]) -> Optional["Occupancy"]:
    # app.core.bed_state imports app.models.enums
    from app.core.bed_state import Occupancy

    if not data:
        return None
    return Occupancy.model_validate_json(data)


class Bed(SQLModel, table=True):
    """
    Hospital bed model.

    A physical bed inside a sector. The patient data lives in a single
    serialized occupancy value: an empty bed simply has none.
    """
    __tablename__ = "bed"

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True
    )
    number: str = Field(index=True)  # display number, e.g. "101-A"
    category: str  # accommodation tier: Enfermaria, Apartamento, UTI...
    sector_id: str = Field(foreign_key="sector.id", index=True)
    status: BedStatusEnum = Field(default=BedStatusEnum.FREE, index=True)

    # Serialized Occupancy (JSON), present iff status is OCCUPIED/RESERVED
    occupancy_data: Optional[str] = Field(default=None)
    # Last discharged occupant, kept while the bed is being cleaned
    last_occupancy_data: Optional[str] = Field(default=None)

    # Optimistic concurrency counter
    version: int = Field(default=1)

    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    status_updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))

    # Relationships
    sector: Optional["Sector"] = Relationship(back_populates="beds")

    def __repr__(self) -> str:
        return f"Bed(id={self.id}, number={self.number}, status={self.status})"

    @property
    def occupancy(self) -> Optional["Occupancy"]:
        """Current patient data, if any."""
        return _load_occupancy(self.occupancy_data)

    @property
    def last_occupancy(self) -> Optional["Occupancy"]:
        """Patient discharged from this bed while it is still being cleaned."""
        return _load_occupancy(self.last_occupancy_data)

    @property
    def has_patient(self) -> bool:
        """Checks whether the bed currently carries patient data."""
        return self.status in PATIENT_STATUSES

    def to_state(self) -> "BedState":
        """Immutable snapshot for the lifecycle engine."""
        from app.core.bed_state import BedState

        return BedState(
            id=self.id,
            number=self.number,
            category=self.category,
            sector_id=self.sector_id,
            status=self.status,
            occupancy=self.occupancy,
            last_occupancy=self.last_occupancy,
        )

    def apply_state(self, state: "BedState", at: Optional[datetime] = None) -> None:
        """
        Writes an engine result back onto the row.
        The version is bumped when the write is claimed, see
        BedRepository.claim_version.

        Args:
            state: New bed state computed by the engine
            at: Moment of the change
        """
        if state.status != self.status:
            self.status_updated_at = at or utcnow()
        self.status = state.status
        self.occupancy_data = (
            state.occupancy.model_dump_json() if state.occupancy else None
        )
        self.last_occupancy_data = (
            state.last_occupancy.model_dump_json() if state.last_occupancy else None
        )
