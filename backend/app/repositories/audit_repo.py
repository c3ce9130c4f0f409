"""
Audit log repository.
"""
from typing import List
from sqlmodel import Session, select

from app.repositories.base import BaseRepository
from app.models.audit import AuditLog


class AuditRepository(BaseRepository[AuditLog]):
    """Repository for the capped audit log."""

    def __init__(self, session: Session):
        super().__init__(session, AuditLog)

    def append(self, entry: AuditLog, capacity: int) -> int:
        """
        Stages an entry and evicts the oldest ones beyond capacity.
        Does not commit.

        Args:
            entry: The new audit entry
            capacity: Maximum number of entries kept

        Returns:
            Number of evicted entries
        """
        self.session.add(entry)
        self.session.flush()

        overflow = self.count() - capacity
        if overflow <= 0:
            return 0

        oldest = self.session.exec(
            select(AuditLog).order_by(AuditLog.id).limit(overflow)
        ).all()
        for old in oldest:
            self.session.delete(old)
        self.session.flush()
        return len(oldest)

    def recent(self, limit: int = 100) -> List[AuditLog]:
        """
        Returns the newest entries first.

        Args:
            limit: Maximum number of entries

        Returns:
            List of entries
        """
        query = select(AuditLog).order_by(AuditLog.id.desc()).limit(limit)
        return list(self.session.exec(query).all())
