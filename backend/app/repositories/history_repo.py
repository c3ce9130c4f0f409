"""
Internment history repository.
"""
from typing import Optional, List
from sqlmodel import Session, select

from app.repositories.base import BaseRepository
from app.models.history import InternmentHistory


class HistoryRepository(BaseRepository[InternmentHistory]):
    """Repository for admission episodes."""

    def __init__(self, session: Session):
        super().__init__(session, InternmentHistory)

    def get_open_by_episode(self, episode_id: str) -> Optional[InternmentHistory]:
        """
        Returns the still-open entry opened by an occupancy episode.

        Args:
            episode_id: Episode ID carried by the occupancy

        Returns:
            The entry or None
        """
        query = select(InternmentHistory).where(
            InternmentHistory.episode_id == episode_id,
            InternmentHistory.release_date.is_(None),
        )
        return self.session.exec(query).first()

    def get_latest_open(self, bed_id: str) -> Optional[InternmentHistory]:
        """
        Returns the most recently opened entry of a bed that is still open.

        Args:
            bed_id: Bed ID

        Returns:
            The entry or None
        """
        query = (
            select(InternmentHistory)
            .where(
                InternmentHistory.bed_id == bed_id,
                InternmentHistory.release_date.is_(None),
            )
            .order_by(InternmentHistory.id.desc())
        )
        return self.session.exec(query).first()

    def list_entries(
        self,
        bed_id: Optional[str] = None,
        sector_id: Optional[str] = None,
        open_only: bool = False,
    ) -> List[InternmentHistory]:
        """
        Lists history entries in opening order.

        Args:
            bed_id: Restrict to one bed
            sector_id: Restrict to one sector
            open_only: Only ongoing stays

        Returns:
            List of entries
        """
        query = select(InternmentHistory)
        if bed_id:
            query = query.where(InternmentHistory.bed_id == bed_id)
        if sector_id:
            query = query.where(InternmentHistory.sector_id == sector_id)
        if open_only:
            query = query.where(InternmentHistory.release_date.is_(None))
        query = query.order_by(InternmentHistory.id)
        return list(self.session.exec(query).all())
