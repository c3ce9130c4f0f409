"""
Bed repository.
"""
from typing import Optional, List
from sqlmodel import Session, select, func
from sqlalchemy import update

from app.repositories.base import BaseRepository
from app.models.bed import Bed
from app.core.exceptions import BedNotFoundError, ConcurrencyConflictError


class BedRepository(BaseRepository[Bed]):
    """Repository for bed operations."""

    def __init__(self, session: Session):
        super().__init__(session, Bed)

    def get_or_raise(self, bed_id: str, expected_version: Optional[int] = None) -> Bed:
        """
        Returns a bed, checking its version when one is expected.

        Args:
            bed_id: Bed ID
            expected_version: Version the caller last read, if any

        Returns:
            The bed

        Raises:
            BedNotFoundError: the bed does not exist
            ConcurrencyConflictError: the bed changed since it was read
        """
        bed = self.get_by_id(bed_id)
        if not bed:
            raise BedNotFoundError(bed_id)

        if expected_version is not None and bed.version != expected_version:
            raise ConcurrencyConflictError(bed_id, expected_version, bed.version)

        return bed

    def claim_version(self, bed: Bed) -> None:
        """
        Bumps the stored version of a bed about to be written.

        The UPDATE only matches while the row still holds the version the
        bed was read at, so a writer that committed first makes it match
        nothing. Call it with autoflush off, before the bed row is flushed.

        Args:
            bed: Bed loaded in this session

        Raises:
            ConcurrencyConflictError: the stored version moved on
        """
        read_version = bed.version
        result = self.session.execute(
            update(Bed)
            .where(Bed.id == bed.id, Bed.version == read_version)
            .values(version=read_version + 1)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            current = self.session.exec(
                select(Bed.version).where(Bed.id == bed.id)
            ).first()
            raise ConcurrencyConflictError(bed.id, read_version, current)

        bed.version = read_version + 1

    def list_beds(self, sector_id: Optional[str] = None) -> List[Bed]:
        """
        Lists beds ordered by number, optionally restricted to a sector.

        Args:
            sector_id: Sector ID filter

        Returns:
            List of beds
        """
        query = select(Bed)
        if sector_id:
            query = query.where(Bed.sector_id == sector_id)
        query = query.order_by(Bed.number)
        return list(self.session.exec(query).all())

    def count_by_sector(self, sector_id: str) -> int:
        """
        Counts the beds of a sector.

        Args:
            sector_id: Sector ID

        Returns:
            Number of beds
        """
        result = self.session.exec(
            select(func.count()).select_from(Bed).where(Bed.sector_id == sector_id)
        ).first()
        return result or 0
