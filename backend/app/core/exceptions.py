"""
Custom system exceptions.
Semantic exceptions so callers can surface precise errors to the user.
"""
from typing import List, Optional


class BaseAppException(Exception):
    """
    Base application exception.
    Every custom exception inherits from this one.
    """
    def __init__(self, message: str, code: str = "ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


# ============================================
# VALIDATION ERRORS
# ============================================

class ValidationError(BaseAppException):
    """Invalid or incomplete input data."""
    def __init__(self, message: str, fields: Optional[List[str]] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.fields = fields or []


# ============================================
# NOT FOUND ERRORS
# ============================================

class NotFoundError(BaseAppException):
    """Referenced resource does not exist."""
    def __init__(self, resource: str, identifier: str):
        super().__init__(
            f"{resource} with identifier '{identifier}' not found",
            "NOT_FOUND"
        )
        self.resource = resource
        self.identifier = identifier


class BedNotFoundError(NotFoundError):
    """Bed not found."""
    def __init__(self, bed_id: str):
        super().__init__("Bed", bed_id)


class SectorNotFoundError(NotFoundError):
    """Sector not found."""
    def __init__(self, sector_id: str):
        super().__init__("Sector", sector_id)


class CatalogItemNotFoundError(NotFoundError):
    """Payer, CID, doctor or procedure not found."""
    pass


# ============================================
# BED STATE ERRORS
# ============================================

class InvalidTransitionError(BaseAppException):
    """The bed's current status does not allow the requested operation."""
    def __init__(
        self,
        operation: str,
        current_status: str,
        valid_statuses: list = None
    ):
        valid_msg = ""
        if valid_statuses:
            valid_msg = f" Valid statuses: {', '.join(valid_statuses)}"

        super().__init__(
            f"Cannot perform '{operation}'. Current status: {current_status}.{valid_msg}",
            "INVALID_TRANSITION"
        )
        self.operation = operation
        self.current_status = current_status
        self.valid_statuses = valid_statuses or []


class ConcurrencyConflictError(BaseAppException):
    """The bed was modified by someone else since it was read."""
    def __init__(self, bed_id: str, expected_version: int, current_version: int):
        super().__init__(
            f"Bed {bed_id} was modified concurrently "
            f"(expected version {expected_version}, current version {current_version})",
            "CONCURRENCY_CONFLICT"
        )
        self.bed_id = bed_id
        self.expected_version = expected_version
        self.current_version = current_version
