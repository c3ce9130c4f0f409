"""
Sector and reference table service.
"""
from typing import List, Optional
from sqlmodel import Session
import logging

from app.core.exceptions import ValidationError
from app.models.catalog import Cid, Doctor, Payer, Procedure
from app.models.sector import Sector
from app.repositories.bed_repo import BedRepository
from app.repositories.catalog_repo import (
    CatalogRepository,
    cid_repository,
    doctor_repository,
    payer_repository,
    procedure_repository,
)
from app.repositories.sector_repo import SectorRepository

logger = logging.getLogger("bed_management.catalogs")


class SectorService:
    """Sector registry."""

    def __init__(self, session: Session):
        self.repo = SectorRepository(session)
        self.bed_repo = BedRepository(session)

    def list_sectors(self) -> List[Sector]:
        return self.repo.list_ordered()

    def create_sector(self, name: str, code: str, order: Optional[int] = None) -> Sector:
        """
        Creates a sector, appended at the end of the display order by default.

        Args:
            name: Sector name
            code: Short code
            order: Display position

        Returns:
            The created sector
        """
        if not name.strip():
            raise ValidationError("Sector name is required", ["name"])

        sector = Sector(
            name=name.strip(),
            code=code.strip(),
            order=order if order is not None else self.repo.next_order(),
        )
        sector = self.repo.save(sector)
        logger.info(f"Sector {sector.name} created")
        return sector

    def delete_sector(self, sector_id: str) -> None:
        """Deletes an empty sector. Sectors that still have beds are kept."""
        sector = self.repo.get_or_raise(sector_id)

        remaining = self.bed_repo.count_by_sector(sector_id)
        if remaining:
            raise ValidationError(
                f"Sector {sector.name} still has {remaining} beds"
            )

        self.repo.delete(sector)
        logger.info(f"Sector {sector.name} deleted")


class CatalogService:
    """Create, list and delete for payers, CIDs, doctors and procedures."""

    def __init__(self, session: Session):
        self.payers = payer_repository(session)
        self.cids = cid_repository(session)
        self.doctors = doctor_repository(session)
        self.procedures = procedure_repository(session)

    def list_items(self, repo: CatalogRepository) -> list:
        return repo.get_all()

    def create_payer(self, name: str) -> Payer:
        return self._create(self.payers, Payer(name=self._required(name, "name")))

    def create_cid(self, code: str, description: str) -> Cid:
        return self._create(
            self.cids,
            Cid(code=self._required(code, "code"), description=description.strip()),
        )

    def create_doctor(self, name: str, specialty: Optional[str] = None) -> Doctor:
        return self._create(
            self.doctors,
            Doctor(name=self._required(name, "name"), specialty=specialty),
        )

    def create_procedure(self, name: str) -> Procedure:
        return self._create(self.procedures, Procedure(name=self._required(name, "name")))

    def delete_item(self, repo: CatalogRepository, item_id: str) -> None:
        """Deletes an item or raises CatalogItemNotFoundError."""
        item = repo.get_or_raise(item_id)
        repo.delete(item)
        logger.info(f"{repo.label} {item_id} deleted")

    @staticmethod
    def _required(value: str, field: str) -> str:
        if not value or not value.strip():
            raise ValidationError(f"{field} is required", [field])
        return value.strip()

    @staticmethod
    def _create(repo: CatalogRepository, item):
        item = repo.save(item)
        logger.info(f"{repo.label} {item.id} created")
        return item
