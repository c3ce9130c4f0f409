"""
Bed lifecycle engine.

Pure state machine over BedState values: every operation validates the
transition, returns the new state(s) and the domain events describing what
happened. Persistence and ledgers are handled by the services.

States: FREE, OCCUPIED, CLEANING, BLOCKED, RESERVED. New beds start FREE.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, model_validator

from app.core.bed_state import BedState, Occupancy
from app.core.events import (
    AdmissionRecorded,
    BedBlocked,
    BedEvent,
    BedsSwapped,
    BedTransferred,
    BedUnblocked,
    CleaningCompleted,
    DischargeRecorded,
    ReservationCancelled,
    ReservationRecorded,
    StatusChanged,
)
from app.core.exceptions import InvalidTransitionError, ValidationError
from app.models.enums import (
    ADMITTABLE_STATUSES,
    ALLOWED_TRANSITIONS,
    PATIENT_STATUSES,
    AdmissionTypeEnum,
    BedStatusEnum,
)


# ============================================
# INPUT DATA
# ============================================

class AdmissionData(BaseModel):
    """Fields required to admit a patient."""
    patient_name: str
    birth_date: date
    payer_id: str
    entitled_category: str
    cid_id: str
    admission_type: AdmissionTypeEnum
    doctor_name: str
    admission_date: date

    admission_time: Optional[str] = None
    procedure_id: Optional[str] = None
    diagnosis: Optional[str] = None
    medical_record: Optional[str] = None
    notes: Optional[str] = None

    @model_validator(mode="after")
    def check_procedure(self) -> "AdmissionData":
        if self.admission_type == AdmissionTypeEnum.SURGICAL and not self.procedure_id:
            raise ValueError("procedure_id is required for surgical admissions")
        if self.admission_type == AdmissionTypeEnum.CLINICAL:
            self.procedure_id = None
        return self


class ReservationData(BaseModel):
    """Provisional data of the patient expected in a reserved bed."""
    patient_name: str
    birth_date: Optional[date] = None
    admission_date: Optional[date] = None
    reserved_until: Optional[date] = None
    reservation_time: Optional[str] = None
    notes: Optional[str] = None


# ============================================
# RESULTS
# ============================================

@dataclass
class TransitionResult:
    """New state of one bed plus the events produced."""
    bed: BedState
    events: List[BedEvent] = field(default_factory=list)


@dataclass
class SwapResult:
    """New states of both beds in a transfer or swap."""
    source: BedState
    target: BedState
    events: List[BedEvent] = field(default_factory=list)


def _statuses(values) -> List[str]:
    return [s.value for s in values]


# ============================================
# OPERATIONS
# ============================================

def admit(bed: BedState, data: AdmissionData, at: datetime) -> TransitionResult:
    """
    Admits a patient into a FREE or RESERVED bed.

    A mismatch between the entitled category and the bed category does not
    fail; it is flagged on the emitted event.

    Args:
        bed: Current bed state
        data: Validated admission data
        at: Moment of the admission

    Returns:
        The OCCUPIED bed and an AdmissionRecorded event
    """
    if bed.status not in ADMITTABLE_STATUSES:
        raise InvalidTransitionError(
            "admit", bed.status.value, _statuses(ADMITTABLE_STATUSES)
        )

    occupancy = Occupancy(**data.model_dump(), occupied_at=at)
    new_bed = bed.holding(BedStatusEnum.OCCUPIED, occupancy)

    event = AdmissionRecorded(
        bed_id=bed.id,
        bed_number=bed.number,
        at=at,
        sector_id=bed.sector_id,
        occupancy=occupancy,
        category_mismatch=new_bed.category_mismatch,
    )
    return TransitionResult(bed=new_bed, events=[event])


def reserve(bed: BedState, data: ReservationData, at: datetime) -> TransitionResult:
    """
    Reserves a FREE bed for an expected patient.
    No history entry is opened until the patient is admitted.
    """
    if bed.status != BedStatusEnum.FREE:
        raise InvalidTransitionError(
            "reserve", bed.status.value, [BedStatusEnum.FREE.value]
        )

    occupancy = Occupancy(**data.model_dump())
    new_bed = bed.holding(BedStatusEnum.RESERVED, occupancy)

    event = ReservationRecorded(
        bed_id=bed.id, bed_number=bed.number, at=at, occupancy=occupancy
    )
    return TransitionResult(bed=new_bed, events=[event])


def transition(bed: BedState, next_status: BedStatusEnum, at: datetime) -> TransitionResult:
    """
    General status change used for discharge, cleaning, block and unblock.

    - OCCUPIED -> CLEANING is the discharge: the occupancy moves to
      `last_occupancy` and a DischargeRecorded event is emitted.
    - any -> FREE clears every patient field.
    - any -> BLOCKED clears every patient field.

    Args:
        bed: Current bed state
        next_status: Requested status
        at: Moment of the change

    Returns:
        The updated bed and its events
    """
    current = bed.status
    allowed = ALLOWED_TRANSITIONS.get(current, [])

    if next_status not in allowed:
        raise InvalidTransitionError(
            f"change status to {next_status.value}",
            current.value,
            _statuses(allowed),
        )

    common = dict(bed_id=bed.id, bed_number=bed.number, at=at)

    if current == BedStatusEnum.OCCUPIED and next_status == BedStatusEnum.CLEANING:
        new_bed = BedState(
            id=bed.id,
            number=bed.number,
            category=bed.category,
            sector_id=bed.sector_id,
            status=BedStatusEnum.CLEANING,
            occupancy=None,
            last_occupancy=bed.occupancy,
        )
        return TransitionResult(
            bed=new_bed,
            events=[DischargeRecorded(occupancy=bed.occupancy, **common)],
        )

    new_bed = bed.emptied(next_status)

    if next_status == BedStatusEnum.FREE:
        if current == BedStatusEnum.CLEANING:
            event = CleaningCompleted(**common)
        elif current == BedStatusEnum.BLOCKED:
            event = BedUnblocked(**common)
        else:
            event = ReservationCancelled(
                patient_name=bed.occupancy.patient_name if bed.occupancy else "",
                **common,
            )
    elif next_status == BedStatusEnum.BLOCKED:
        event = BedBlocked(**common)
    else:
        event = StatusChanged(previous_status=current, new_status=next_status, **common)

    return TransitionResult(bed=new_bed, events=[event])


def transfer_or_swap(source: BedState, target: BedState, at: datetime) -> SwapResult:
    """
    Moves a patient to another bed.

    If the target is FREE, the target receives the source's status and
    occupancy and the source goes to CLEANING with no patient data.
    If the target also holds a patient, both occupancies are exchanged.

    Args:
        source: Bed currently holding the patient
        target: Destination bed
        at: Moment of the move

    Returns:
        Both updated beds and the event
    """
    if source.id == target.id:
        raise ValidationError("Source and destination beds must be different")

    if source.status not in PATIENT_STATUSES:
        raise InvalidTransitionError(
            "transfer", source.status.value, _statuses(PATIENT_STATUSES)
        )

    if target.status == BedStatusEnum.FREE:
        new_target = target.holding(source.status, source.occupancy)
        new_source = source.emptied(BedStatusEnum.CLEANING)
        event = BedTransferred(
            bed_id=source.id,
            bed_number=source.number,
            at=at,
            target_bed_id=target.id,
            target_bed_number=target.number,
            patient_name=source.occupancy.patient_name,
        )
        return SwapResult(source=new_source, target=new_target, events=[event])

    if target.status in PATIENT_STATUSES:
        new_source = source.holding(target.status, target.occupancy)
        new_target = target.holding(source.status, source.occupancy)
        event = BedsSwapped(
            bed_id=source.id,
            bed_number=source.number,
            at=at,
            target_bed_id=target.id,
            target_bed_number=target.number,
            source_patient_name=source.occupancy.patient_name,
            target_patient_name=target.occupancy.patient_name,
        )
        return SwapResult(source=new_source, target=new_target, events=[event])

    raise InvalidTransitionError(
        "transfer into destination bed",
        target.status.value,
        _statuses([BedStatusEnum.FREE] + PATIENT_STATUSES),
    )
