"""
History and audit endpoints.
"""
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from typing import List, Optional

from app.core.database import get_session
from app.repositories.audit_repo import AuditRepository
from app.repositories.history_repo import HistoryRepository
from app.schemas.history import AuditEntryResponse, HistoryEntryResponse

router = APIRouter()


@router.get("/history", response_model=List[HistoryEntryResponse], tags=["History"])
def list_history(
    bed_id: Optional[str] = None,
    open_only: bool = False,
    session: Session = Depends(get_session)
):
    """Admission episodes in opening order."""
    repo = HistoryRepository(session)
    return repo.list_entries(bed_id=bed_id, open_only=open_only)


@router.get("/audit", response_model=List[AuditEntryResponse], tags=["Audit"])
def list_audit(
    limit: int = Query(100, ge=1, le=1000),
    session: Session = Depends(get_session)
):
    """Administrative actions, newest first."""
    repo = AuditRepository(session)
    return repo.recent(limit)
