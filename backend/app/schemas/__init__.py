"""
Pydantic schemas for request and response validation.
"""
from app.schemas.bed import (
    OccupancyResponse,
    BedResponse,
    BedCreate,
    StatusUpdateRequest,
    OccupyRequest,
    ReserveRequest,
    TransferRequest,
    BlockRequest,
    TransferResponse,
)
from app.schemas.catalog import (
    SectorCreate,
    SectorResponse,
    PayerCreate,
    PayerResponse,
    CidCreate,
    CidResponse,
    DoctorCreate,
    DoctorResponse,
    ProcedureCreate,
    ProcedureResponse,
)
from app.schemas.history import HistoryEntryResponse, AuditEntryResponse
from app.schemas.kpi import KpiResponse
from app.schemas.responses import MessageResponse

__all__ = [
    "OccupancyResponse",
    "BedResponse",
    "BedCreate",
    "StatusUpdateRequest",
    "OccupyRequest",
    "ReserveRequest",
    "TransferRequest",
    "BlockRequest",
    "TransferResponse",
    "SectorCreate",
    "SectorResponse",
    "PayerCreate",
    "PayerResponse",
    "CidCreate",
    "CidResponse",
    "DoctorCreate",
    "DoctorResponse",
    "ProcedureCreate",
    "ProcedureResponse",
    "HistoryEntryResponse",
    "AuditEntryResponse",
    "KpiResponse",
    "MessageResponse",
]
