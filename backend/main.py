"""
Bed Management Dashboard - Backend
FastAPI application entry point.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from app.api.router import api_router
from app.config import settings
from app.core.database import create_db_and_tables, get_session_direct
from app.utils.init_data import initialize_data
from app.utils.logger import configure_logging

logger = logging.getLogger("bed_management.main")


# ============================================
# STARTUP
# ============================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    create_db_and_tables()

    if settings.SEED_REFERENCE_DATA:
        session = get_session_direct()
        try:
            initialize_data(session)
        finally:
            session.close()

    logger.info(f"{settings.APP_TITLE} {settings.APP_VERSION} started ({settings.APP_ENV})")
    yield


# Create the application
app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)

app.include_router(api_router, prefix="/api")


@app.get("/")
def root():
    return {
        "name": settings.APP_TITLE,
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
