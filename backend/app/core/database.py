"""
Database configuration.
Connection and session management with SQLModel.
"""
from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy import text
from typing import Generator, Dict, Any
import logging

from app.config import settings

logger = logging.getLogger("bed_management.database")


engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.SQL_ECHO,
    connect_args=settings.engine_connect_args(),
)


def create_db_and_tables() -> None:
    """
    Creates every table in the database.
    Called when the application starts.
    """
    # Import models so they register on the metadata
    import app.models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session() -> Generator[Session, None, None]:
    """
    Session generator for FastAPI dependency injection.

    Usage:
        @app.get("/endpoint")
        def endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session


def get_session_direct() -> Session:
    """
    Returns a plain session (not a generator).
    Useful for startup hooks and scripts.

    IMPORTANT: the caller is responsible for closing the session.
    """
    return Session(engine)


def check_database_health(session: Session) -> Dict[str, Any]:
    """
    Runs a trivial query to verify the database answers.

    Args:
        session: Database session

    Returns:
        Dictionary with the component status
    """
    try:
        session.execute(text("SELECT 1"))
        return {"status": "healthy"}
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return {"status": "unhealthy", "error": str(e)}
