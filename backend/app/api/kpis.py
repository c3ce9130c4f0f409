"""
KPI endpoints.
"""
from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
from typing import Optional

from app.core.database import get_session
from app.schemas.kpi import KpiResponse
from app.services.kpi_service import KpiService

router = APIRouter()


@router.get("", response_model=KpiResponse)
def get_kpis(
    sector_id: Optional[str] = None,
    month: Optional[str] = None,
    session: Session = Depends(get_session)
):
    """
    Dashboard indicators, recomputed on every request.

    - **sector_id**: restrict to one sector
    - **month**: YYYY-MM used for the monthly admission turnover
    """
    service = KpiService(session)

    try:
        snapshot = service.snapshot(sector_id, month)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return KpiResponse(**asdict(snapshot))
