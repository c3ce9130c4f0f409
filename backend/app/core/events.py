"""
Domain events emitted by the lifecycle engine.

The engine never writes ledgers itself; it returns these events and the
ledger service turns them into history and audit records.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional

from app.core.bed_state import Occupancy
from app.models.enums import AuditActionEnum, BedStatusEnum


@dataclass(frozen=True)
class BedEvent:
    """Base event: something happened to a bed at a given moment."""
    bed_id: str
    bed_number: str
    at: datetime

    audit_action: ClassVar[AuditActionEnum] = AuditActionEnum.STATUS_CHANGE

    def describe(self) -> str:
        return f"Bed {self.bed_number} updated."


@dataclass(frozen=True)
class AdmissionRecorded(BedEvent):
    """A patient was admitted; opens a history entry."""
    sector_id: str = ""
    occupancy: Optional[Occupancy] = None
    category_mismatch: bool = False

    audit_action: ClassVar[AuditActionEnum] = AuditActionEnum.ADMISSION

    def describe(self) -> str:
        details = f"Patient {self.occupancy.patient_name} admitted."
        if self.category_mismatch:
            details += (
                f" Entitled category {self.occupancy.entitled_category}"
                " differs from the bed category."
            )
        return details


@dataclass(frozen=True)
class DischargeRecorded(BedEvent):
    """The patient left the bed; closes the open history entry."""
    occupancy: Optional[Occupancy] = None

    audit_action: ClassVar[AuditActionEnum] = AuditActionEnum.DISCHARGE

    def describe(self) -> str:
        return f"Discharge recorded for patient {self.occupancy.patient_name}."


@dataclass(frozen=True)
class ReservationRecorded(BedEvent):
    occupancy: Optional[Occupancy] = None

    audit_action: ClassVar[AuditActionEnum] = AuditActionEnum.RESERVATION

    def describe(self) -> str:
        details = f"Bed reserved for {self.occupancy.patient_name}"
        if self.occupancy.admission_date:
            details += f", expected on {self.occupancy.admission_date.isoformat()}"
        return details + "."


@dataclass(frozen=True)
class ReservationCancelled(BedEvent):
    patient_name: str = ""

    audit_action: ClassVar[AuditActionEnum] = AuditActionEnum.RESERVATION_CANCELLED

    def describe(self) -> str:
        return f"Reservation for {self.patient_name} cancelled. Bed available."


@dataclass(frozen=True)
class CleaningCompleted(BedEvent):
    audit_action: ClassVar[AuditActionEnum] = AuditActionEnum.CLEAN_COMPLETE

    def describe(self) -> str:
        return "Cleaning finished. Bed available."


@dataclass(frozen=True)
class BedBlocked(BedEvent):
    audit_action: ClassVar[AuditActionEnum] = AuditActionEnum.BLOCKED

    def describe(self) -> str:
        return "Bed blocked for maintenance."


@dataclass(frozen=True)
class BedUnblocked(BedEvent):
    audit_action: ClassVar[AuditActionEnum] = AuditActionEnum.UNBLOCKED

    def describe(self) -> str:
        return "Bed unblocked. Bed available."


@dataclass(frozen=True)
class StatusChanged(BedEvent):
    """Plain status write with no ledger side effect besides the audit entry."""
    previous_status: Optional[BedStatusEnum] = None
    new_status: Optional[BedStatusEnum] = None

    def describe(self) -> str:
        return f"Status changed from {self.previous_status.value} to {self.new_status.value}."


@dataclass(frozen=True)
class BedTransferred(BedEvent):
    """Occupancy moved to a free bed; the source bed goes to cleaning."""
    target_bed_id: str = ""
    target_bed_number: str = ""
    patient_name: str = ""

    audit_action: ClassVar[AuditActionEnum] = AuditActionEnum.TRANSFER

    def describe(self) -> str:
        return (
            f"Patient {self.patient_name} moved from bed {self.bed_number} "
            f"to bed {self.target_bed_number}."
        )


@dataclass(frozen=True)
class BedsSwapped(BedEvent):
    """Occupancies of two beds exchanged."""
    target_bed_id: str = ""
    target_bed_number: str = ""
    source_patient_name: str = ""
    target_patient_name: str = ""

    audit_action: ClassVar[AuditActionEnum] = AuditActionEnum.SWAP

    def describe(self) -> str:
        return (
            f"Beds {self.bed_number} and {self.target_bed_number} swapped "
            f"({self.source_patient_name} <-> {self.target_patient_name})."
        )
