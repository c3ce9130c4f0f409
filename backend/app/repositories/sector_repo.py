"""
Sector repository.
"""
from typing import List
from sqlmodel import Session, select

from app.repositories.base import BaseRepository
from app.models.sector import Sector
from app.core.exceptions import SectorNotFoundError


class SectorRepository(BaseRepository[Sector]):
    """Repository for sector operations."""

    def __init__(self, session: Session):
        super().__init__(session, Sector)

    def get_or_raise(self, sector_id: str) -> Sector:
        """
        Returns a sector or raises SectorNotFoundError.

        Args:
            sector_id: Sector ID

        Returns:
            The sector
        """
        sector = self.get_by_id(sector_id)
        if not sector:
            raise SectorNotFoundError(sector_id)
        return sector

    def list_ordered(self) -> List[Sector]:
        """Sectors in dashboard display order."""
        query = select(Sector).order_by(Sector.order, Sector.name)
        return list(self.session.exec(query).all())

    def next_order(self) -> int:
        """Display position for a newly created sector."""
        return self.count() + 1
