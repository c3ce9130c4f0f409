"""
System data initialization.
Seeds the reference tables that a fresh installation needs.
"""
from sqlmodel import Session, select
import logging

from app.models.catalog import Procedure

logger = logging.getLogger("bed_management.init_data")


DEFAULT_PROCEDURES = [
    "Apendicectomia",
    "Colecistectomia",
    "Angioplastia Coronária",
    "Artroplastia de Quadril",
]


def initialize_data(session: Session) -> None:
    """
    Creates the default procedures if the table is empty.

    Args:
        session: Database session
    """
    existing = session.exec(select(Procedure)).first()
    if existing:
        return

    for name in DEFAULT_PROCEDURES:
        session.add(Procedure(name=name))
    session.commit()

    logger.info(f"{len(DEFAULT_PROCEDURES)} default procedures created")
