"""
System enumerations.
Centralized to avoid circular imports.
"""
from enum import Enum


class BedStatusEnum(str, Enum):
    """Status of a hospital bed."""
    FREE = "free"
    OCCUPIED = "occupied"
    CLEANING = "cleaning"
    BLOCKED = "blocked"
    RESERVED = "reserved"


class AdmissionTypeEnum(str, Enum):
    """Kind of admission."""
    CLINICAL = "clinical"
    SURGICAL = "surgical"


class AuditActionEnum(str, Enum):
    """Administrative actions recorded in the audit log."""
    ADMISSION = "ADMISSION"
    DISCHARGE = "DISCHARGE"
    RESERVATION = "RESERVATION"
    RESERVATION_CANCELLED = "RESERVATION_CANCELLED"
    CLEAN_COMPLETE = "CLEAN_COMPLETE"
    BLOCKED = "BLOCKED"
    UNBLOCKED = "UNBLOCKED"
    STATUS_CHANGE = "STATUS_CHANGE"
    TRANSFER = "TRANSFER"
    SWAP = "SWAP"


# ============================================
# ENUM-RELATED CONSTANTS
# ============================================

# Statuses in which the bed carries patient data
PATIENT_STATUSES = [
    BedStatusEnum.OCCUPIED,
    BedStatusEnum.RESERVED,
]

# Statuses from which a patient can be admitted
ADMITTABLE_STATUSES = [
    BedStatusEnum.FREE,
    BedStatusEnum.RESERVED,
]

# Targets reachable through a plain status change.
# OCCUPIED and RESERVED are only reachable through admit/reserve/transfer.
ALLOWED_TRANSITIONS = {
    BedStatusEnum.FREE: [BedStatusEnum.CLEANING, BedStatusEnum.BLOCKED],
    BedStatusEnum.OCCUPIED: [BedStatusEnum.CLEANING],
    BedStatusEnum.CLEANING: [BedStatusEnum.FREE, BedStatusEnum.BLOCKED],
    BedStatusEnum.BLOCKED: [BedStatusEnum.FREE],
    BedStatusEnum.RESERVED: [BedStatusEnum.FREE],
}
