"""
Ledger service.
Turns lifecycle domain events into history and audit records.

Nothing here commits: records are staged in the caller's session so the bed
change and its ledger entries are persisted together.
"""
from typing import Iterable, List, Optional
from sqlmodel import Session
import logging

from app.config import settings
from app.core.events import AdmissionRecorded, BedEvent, DischargeRecorded
from app.models.audit import AuditLog
from app.models.history import InternmentHistory
from app.repositories.audit_repo import AuditRepository
from app.repositories.history_repo import HistoryRepository

logger = logging.getLogger("bed_management.ledger")


class HistoryLedger:
    """Append-only admission episodes."""

    def __init__(self, session: Session):
        self.repo = HistoryRepository(session)

    def open(self, event: AdmissionRecorded) -> InternmentHistory:
        """
        Opens a history entry for an admission.

        Args:
            event: The admission event

        Returns:
            The staged entry, with no release date
        """
        occupancy = event.occupancy
        entry = InternmentHistory(
            episode_id=occupancy.episode_id,
            bed_id=event.bed_id,
            sector_id=event.sector_id,
            patient_name=occupancy.patient_name,
            doctor_name=occupancy.doctor_name,
            admission_type=occupancy.admission_type,
            admission_date=occupancy.admission_date or event.at.date(),
            payer_id=occupancy.payer_id,
            cid_id=occupancy.cid_id,
            entitled_category=occupancy.entitled_category,
            opened_at=event.at,
        )
        return self.repo.add(entry)

    def close(self, event: DischargeRecorded) -> Optional[InternmentHistory]:
        """
        Closes the open entry of a discharged patient.

        The entry opened by the same episode is closed when still open
        (it may have been opened on another bed before a transfer);
        otherwise the most recently opened open entry of the bed.

        Args:
            event: The discharge event

        Returns:
            The closed entry, or None if nothing was open
        """
        entry = None
        if event.occupancy is not None:
            entry = self.repo.get_open_by_episode(event.occupancy.episode_id)
        if entry is None:
            entry = self.repo.get_latest_open(event.bed_id)

        if entry is None:
            logger.warning(f"Discharge on bed {event.bed_number} without an open history entry")
            return None

        entry.release_date = event.at
        return self.repo.add(entry)


class AuditTrail:
    """Capped, append-only record of administrative actions."""

    def __init__(self, session: Session, capacity: Optional[int] = None):
        self.repo = AuditRepository(session)
        self.capacity = capacity if capacity is not None else settings.AUDIT_LOG_CAPACITY

    def append(self, action: str, bed_number: str, actor: str, details: str, at=None) -> AuditLog:
        """
        Appends an entry, evicting the oldest ones beyond capacity.

        Args:
            action: Action name (ADMISSION, DISCHARGE...)
            bed_number: Display number of the bed
            actor: Who performed the action
            details: Human readable description
            at: Moment of the action

        Returns:
            The staged entry
        """
        entry = AuditLog(action=action, bed_number=bed_number, actor=actor, details=details)
        if at is not None:
            entry.timestamp = at

        evicted = self.repo.append(entry, self.capacity)
        if evicted:
            logger.debug(f"Audit log over capacity, {evicted} oldest entries evicted")
        return entry


class LedgerService:
    """
    Consumes lifecycle events.

    - AdmissionRecorded opens a history entry
    - DischargeRecorded closes one
    - every event produces an audit entry
    """

    def __init__(self, session: Session, audit_capacity: Optional[int] = None):
        self.history = HistoryLedger(session)
        self.audit = AuditTrail(session, audit_capacity)

    def record(self, events: Iterable[BedEvent], actor: str) -> List[AuditLog]:
        """
        Records a batch of events.

        Args:
            events: Events emitted by the lifecycle engine
            actor: User responsible for the operation

        Returns:
            The staged audit entries
        """
        entries = []
        for event in events:
            if isinstance(event, AdmissionRecorded):
                self.history.open(event)
            elif isinstance(event, DischargeRecorded):
                self.history.close(event)

            entries.append(
                self.audit.append(
                    action=event.audit_action.value,
                    bed_number=event.bed_number,
                    actor=actor,
                    details=event.describe(),
                    at=event.at,
                )
            )
        return entries
