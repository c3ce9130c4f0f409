"""
Main router grouping every sub-router.
"""
from fastapi import APIRouter

from app.api import health
from app.api import sectors
from app.api import beds
from app.api import catalogs
from app.api import history
from app.api import kpis

api_router = APIRouter()

# ============================================
# INCLUDE EVERY ROUTER
# ============================================

api_router.include_router(health.router)

api_router.include_router(
    sectors.router,
    prefix="/sectors",
    tags=["Sectors"]
)

api_router.include_router(
    beds.router,
    prefix="/beds",
    tags=["Beds"]
)

api_router.include_router(catalogs.router)

api_router.include_router(history.router)

api_router.include_router(
    kpis.router,
    prefix="/kpis",
    tags=["KPIs"]
)
