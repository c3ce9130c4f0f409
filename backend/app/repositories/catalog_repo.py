"""
Repositories for the reference tables (payers, CIDs, doctors, procedures).
"""
from typing import Type, TypeVar
from sqlmodel import Session

from app.repositories.base import BaseRepository
from app.models.catalog import Payer, Cid, Doctor, Procedure
from app.core.exceptions import CatalogItemNotFoundError

T = TypeVar("T")


class CatalogRepository(BaseRepository[T]):
    """Repository for a flat id-keyed lookup table."""

    def __init__(self, session: Session, model: Type[T], label: str):
        super().__init__(session, model)
        self.label = label

    def get_or_raise(self, item_id: str) -> T:
        """
        Returns an item or raises CatalogItemNotFoundError.

        Args:
            item_id: Item ID

        Returns:
            The item
        """
        item = self.get_by_id(item_id)
        if not item:
            raise CatalogItemNotFoundError(self.label, item_id)
        return item


def payer_repository(session: Session) -> CatalogRepository[Payer]:
    return CatalogRepository(session, Payer, "Payer")


def cid_repository(session: Session) -> CatalogRepository[Cid]:
    return CatalogRepository(session, Cid, "CID")


def doctor_repository(session: Session) -> CatalogRepository[Doctor]:
    return CatalogRepository(session, Doctor, "Doctor")


def procedure_repository(session: Session) -> CatalogRepository[Procedure]:
    return CatalogRepository(session, Procedure, "Procedure")
