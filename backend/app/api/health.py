"""
Health check endpoints.
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlmodel import Session

from app.config import settings
from app.core.database import check_database_health, get_session
from app.utils.helpers import utcnow

router = APIRouter(
    prefix="/health",
    tags=["health"],
    responses={
        200: {"description": "System healthy"},
        503: {"description": "System unavailable"}
    }
)


@router.get(
    "",
    summary="Health Check",
    description="Application liveness plus a database check",
    response_model=None
)
def health_check(session: Session = Depends(get_session)) -> JSONResponse:
    """
    Returns 200 when the application runs and the database answers,
    503 otherwise.
    """
    db_health = check_database_health(session)
    healthy = db_health.get("status") == "healthy"

    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": utcnow().isoformat(),
            "version": settings.APP_VERSION,
            "environment": settings.APP_ENV,
            "components": {"database": db_health},
        }
    )
