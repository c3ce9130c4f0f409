"""
Bed lifecycle service.
Loads beds, runs the lifecycle engine and persists the result together with
its history and audit records in a single commit.
"""
from typing import Any, List, Optional, Type, TypeVar, Union
from sqlmodel import Session
from dataclasses import dataclass
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
import logging

from app.config import settings
from app.core import lifecycle
from app.core.events import BedEvent
from app.core.exceptions import (
    ConcurrencyConflictError,
    InvalidTransitionError,
    ValidationError,
)
from app.core.lifecycle import AdmissionData, ReservationData
from app.models.bed import Bed
from app.models.enums import BedStatusEnum, PATIENT_STATUSES
from app.repositories.bed_repo import BedRepository
from app.repositories.catalog_repo import (
    cid_repository,
    payer_repository,
    procedure_repository,
)
from app.repositories.sector_repo import SectorRepository
from app.services.ledger_service import LedgerService
from app.utils.helpers import utcnow

logger = logging.getLogger("bed_management.beds")

M = TypeVar("M", bound=BaseModel)


@dataclass
class TransferResult:
    """Result of a transfer or swap."""
    success: bool
    message: str
    source: Bed
    target: Bed


def parse_input(model: Type[M], data: Union[M, dict, Any], label: str) -> M:
    """
    Validates raw input into a pydantic model.

    Args:
        model: Target model class
        data: Raw dictionary or an instance of the model
        label: Name used in the error message

    Returns:
        The validated model

    Raises:
        ValidationError: required fields missing or invalid
    """
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data or {})
    except PydanticValidationError as e:
        fields = []
        problems = []
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            if location:
                fields.append(location)
                problems.append(f"{location}: {error['msg']}")
            else:
                problems.append(error["msg"])
        raise ValidationError(f"Invalid {label}: {'; '.join(problems)}", fields)


class BedService:
    """
    Service for the bed lifecycle.

    Handles:
    - Registry edits (add, remove)
    - Admission and reservation
    - Status changes (discharge, cleaning, block, unblock)
    - Transfer and swap between beds
    """

    def __init__(self, session: Session):
        self.session = session
        self.bed_repo = BedRepository(session)
        self.sector_repo = SectorRepository(session)
        self.ledger = LedgerService(session)

    # ============================================
    # REGISTRY
    # ============================================

    def list_beds(self, sector_id: Optional[str] = None) -> List[Bed]:
        """Beds ordered by number, optionally for one sector."""
        return self.bed_repo.list_beds(sector_id)

    def get_bed(self, bed_id: str) -> Bed:
        """Returns a bed or raises BedNotFoundError."""
        return self.bed_repo.get_or_raise(bed_id)

    def add_bed(self, sector_id: str, number: str, category: str) -> Bed:
        """
        Adds a FREE bed to a sector.

        Args:
            sector_id: Sector ID
            number: Display number
            category: Accommodation tier

        Returns:
            The created bed
        """
        if not number or not number.strip():
            raise ValidationError("Bed number is required", ["number"])

        self.sector_repo.get_or_raise(sector_id)

        bed = Bed(
            number=number.strip(),
            category=category,
            sector_id=sector_id,
            status=BedStatusEnum.FREE,
        )
        bed = self.bed_repo.save(bed)

        logger.info(f"Bed {bed.number} added to sector {sector_id}")
        return bed

    def remove_bed(self, bed_id: str) -> None:
        """
        Removes a bed from the registry.
        Beds holding a patient cannot be removed.
        """
        bed = self.bed_repo.get_or_raise(bed_id)

        if bed.has_patient:
            raise InvalidTransitionError(
                "remove bed",
                bed.status.value,
                [s.value for s in BedStatusEnum if s not in PATIENT_STATUSES],
            )

        self.bed_repo.delete(bed)
        logger.info(f"Bed {bed.number} removed")

    # ============================================
    # ADMISSION AND RESERVATION
    # ============================================

    def admit(
        self,
        bed_id: str,
        data: Union[AdmissionData, dict],
        actor: Optional[str] = None,
        expected_version: Optional[int] = None,
    ) -> Bed:
        """
        Admits a patient into a FREE or RESERVED bed.

        Args:
            bed_id: Bed ID
            data: Admission data
            actor: User performing the admission
            expected_version: Bed version the caller last read

        Returns:
            The OCCUPIED bed
        """
        admission = parse_input(AdmissionData, data, "admission data")
        bed = self.bed_repo.get_or_raise(bed_id, expected_version)

        payer_repository(self.session).get_or_raise(admission.payer_id)
        cid_repository(self.session).get_or_raise(admission.cid_id)
        if admission.procedure_id:
            procedure_repository(self.session).get_or_raise(admission.procedure_id)

        now = utcnow()
        result = lifecycle.admit(bed.to_state(), admission, now)
        bed.apply_state(result.bed, now)
        self._commit([bed], result.events, actor)

        if result.bed.category_mismatch:
            logger.warning(
                f"Bed {bed.number}: entitled category {admission.entitled_category} "
                f"differs from bed category {bed.category}"
            )
        logger.info(f"Patient {admission.patient_name} admitted to bed {bed.number}")
        return bed

    def reserve(
        self,
        bed_id: str,
        data: Union[ReservationData, dict],
        actor: Optional[str] = None,
        expected_version: Optional[int] = None,
    ) -> Bed:
        """
        Reserves a FREE bed for an expected patient.

        Args:
            bed_id: Bed ID
            data: Provisional patient data
            actor: User performing the reservation
            expected_version: Bed version the caller last read

        Returns:
            The RESERVED bed
        """
        reservation = parse_input(ReservationData, data, "reservation data")
        bed = self.bed_repo.get_or_raise(bed_id, expected_version)

        now = utcnow()
        result = lifecycle.reserve(bed.to_state(), reservation, now)
        bed.apply_state(result.bed, now)
        self._commit([bed], result.events, actor)

        logger.info(f"Bed {bed.number} reserved for {reservation.patient_name}")
        return bed

    # ============================================
    # STATUS CHANGES
    # ============================================

    def change_status(
        self,
        bed_id: str,
        next_status: BedStatusEnum,
        actor: Optional[str] = None,
        expected_version: Optional[int] = None,
    ) -> Bed:
        """
        Applies a plain status change.

        OCCUPIED -> CLEANING is the discharge and closes the history entry;
        any -> FREE clears the patient data.

        Args:
            bed_id: Bed ID
            next_status: Requested status
            actor: User performing the change
            expected_version: Bed version the caller last read

        Returns:
            The updated bed
        """
        bed = self.bed_repo.get_or_raise(bed_id, expected_version)
        previous = bed.status

        now = utcnow()
        result = lifecycle.transition(bed.to_state(), BedStatusEnum(next_status), now)
        bed.apply_state(result.bed, now)
        self._commit([bed], result.events, actor)

        logger.info(f"Bed {bed.number}: {previous.value} -> {bed.status.value}")
        return bed

    def discharge(
        self, bed_id: str, actor: Optional[str] = None, expected_version: Optional[int] = None
    ) -> Bed:
        """Discharges the patient: OCCUPIED -> CLEANING."""
        return self.change_status(bed_id, BedStatusEnum.CLEANING, actor, expected_version)

    def finish_cleaning(
        self, bed_id: str, actor: Optional[str] = None, expected_version: Optional[int] = None
    ) -> Bed:
        """Cleaning done: CLEANING -> FREE."""
        return self.change_status(bed_id, BedStatusEnum.FREE, actor, expected_version)

    def block(
        self, bed_id: str, actor: Optional[str] = None, expected_version: Optional[int] = None
    ) -> Bed:
        """Blocks a FREE or CLEANING bed."""
        return self.change_status(bed_id, BedStatusEnum.BLOCKED, actor, expected_version)

    def unblock(
        self, bed_id: str, actor: Optional[str] = None, expected_version: Optional[int] = None
    ) -> Bed:
        """Unblocks a BLOCKED bed."""
        bed = self.bed_repo.get_or_raise(bed_id, expected_version)
        if bed.status != BedStatusEnum.BLOCKED:
            raise InvalidTransitionError(
                "unblock", bed.status.value, [BedStatusEnum.BLOCKED.value]
            )
        return self.change_status(bed_id, BedStatusEnum.FREE, actor, expected_version)

    # ============================================
    # TRANSFER
    # ============================================

    def transfer_or_swap(
        self,
        source_id: str,
        target_id: str,
        actor: Optional[str] = None,
        expected_version: Optional[int] = None,
        target_expected_version: Optional[int] = None,
    ) -> TransferResult:
        """
        Moves a patient to a FREE bed, or swaps two patients.
        Both beds are written in the same commit.

        Args:
            source_id: Bed currently holding the patient
            target_id: Destination bed
            actor: User performing the move
            expected_version: Source bed version the caller last read
            target_expected_version: Target bed version the caller last read

        Returns:
            Result with both updated beds
        """
        source = self.bed_repo.get_or_raise(source_id, expected_version)
        target = self.bed_repo.get_or_raise(target_id, target_expected_version)
        target_status = target.status

        now = utcnow()
        result = lifecycle.transfer_or_swap(source.to_state(), target.to_state(), now)
        source.apply_state(result.source, now)
        target.apply_state(result.target, now)
        self._commit([source, target], result.events, actor)

        if target_status == BedStatusEnum.FREE:
            message = f"Patient moved from bed {source.number} to bed {target.number}"
        else:
            message = f"Beds {source.number} and {target.number} swapped"

        logger.info(message)
        return TransferResult(success=True, message=message, source=source, target=target)

    # ============================================
    # INTERNAL
    # ============================================

    def _commit(self, beds: List[Bed], events: List[BedEvent], actor: Optional[str]) -> None:
        """
        Claims the bed versions, stages beds and ledger records, then
        commits once. A lost version claim rolls everything back.
        """
        try:
            with self.session.no_autoflush:
                for bed in beds:
                    self.bed_repo.claim_version(bed)
        except ConcurrencyConflictError:
            self.session.rollback()
            raise

        for bed in beds:
            self.bed_repo.add(bed)

        self.ledger.record(events, actor or settings.DEFAULT_ACTOR)
        self.session.commit()

        for bed in beds:
            self.session.refresh(bed)
