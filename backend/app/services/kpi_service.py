"""
KPI service.
Dashboard indicators recomputed from the current beds and the history.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple
from sqlmodel import Session
import logging

from app.config import settings
from app.core.bed_state import BedState
from app.models.enums import AdmissionTypeEnum, BedStatusEnum
from app.models.history import InternmentHistory
from app.repositories.bed_repo import BedRepository
from app.repositories.history_repo import HistoryRepository
from app.utils.helpers import parse_month, stay_days

logger = logging.getLogger("bed_management.kpis")


@dataclass
class KpiSnapshot:
    """Indicators of one dashboard refresh."""
    total_beds: int = 0
    occupied: int = 0
    free: int = 0
    reserved: int = 0
    cleaning: int = 0
    blocked: int = 0
    clinical: int = 0
    surgical: int = 0

    occupancy_rate: float = 0.0
    bed_turnover: float = 0.0
    monthly_admission_turnover: float = 0.0
    avg_stay_days: float = 0.0
    mismatch_count: int = 0

    month: str = ""
    sector_id: Optional[str] = None
    status_distribution: Dict[str, int] = field(default_factory=dict)


def count_beds_by_status(beds: Iterable[BedState]) -> Dict[str, int]:
    """Number of beds in each status, every status present."""
    counts = {status.value: 0 for status in BedStatusEnum}
    for bed in beds:
        counts[bed.status.value] += 1
    return counts


def average_stay(entries: Iterable[InternmentHistory], min_stay: float) -> float:
    """
    Mean length of stay of discharged entries.

    Each stay counts at least `min_stay` days, so same-day discharges are
    not zero.

    Args:
        entries: History entries; open ones are ignored
        min_stay: Lower bound of a single stay, in days

    Returns:
        Average in days, 0 without discharged entries
    """
    stays = [
        max(min_stay, stay_days(entry.admission_date, entry.release_date))
        for entry in entries
        if entry.release_date is not None
    ]
    if not stays:
        return 0.0
    return sum(stays) / len(stays)


def compute_kpis(
    beds: List[BedState],
    history: List[InternmentHistory],
    year_month: Tuple[int, int],
    min_stay: Optional[float] = None,
) -> KpiSnapshot:
    """
    Computes the dashboard indicators.

    Args:
        beds: Current bed states
        history: History entries of the same beds
        year_month: (year, month) used for the monthly admission turnover
        min_stay: Lower bound of a stay in days (defaults to settings)

    Returns:
        KpiSnapshot
    """
    if min_stay is None:
        min_stay = settings.MIN_STAY_DAYS

    distribution = count_beds_by_status(beds)
    total = len(beds)
    occupied = distribution[BedStatusEnum.OCCUPIED.value]

    occupied_beds = [b for b in beds if b.status == BedStatusEnum.OCCUPIED]
    clinical = sum(
        1 for b in occupied_beds
        if b.occupancy and b.occupancy.admission_type == AdmissionTypeEnum.CLINICAL
    )
    surgical = sum(
        1 for b in occupied_beds
        if b.occupancy and b.occupancy.admission_type == AdmissionTypeEnum.SURGICAL
    )

    discharged = [h for h in history if h.release_date is not None]
    year, month = year_month
    admitted_in_month = [
        h for h in history
        if h.admission_date.year == year and h.admission_date.month == month
    ]

    snapshot = KpiSnapshot(
        total_beds=total,
        occupied=occupied,
        free=distribution[BedStatusEnum.FREE.value],
        reserved=distribution[BedStatusEnum.RESERVED.value],
        cleaning=distribution[BedStatusEnum.CLEANING.value],
        blocked=distribution[BedStatusEnum.BLOCKED.value],
        clinical=clinical,
        surgical=surgical,
        mismatch_count=sum(1 for b in beds if b.category_mismatch),
        avg_stay_days=round(average_stay(discharged, min_stay), 2),
        month=f"{year:04d}-{month:02d}",
        status_distribution=distribution,
    )

    if total > 0:
        snapshot.occupancy_rate = round(occupied / total * 100, 2)
        snapshot.bed_turnover = round(len(discharged) / total, 2)
        snapshot.monthly_admission_turnover = round(len(admitted_in_month) / total, 2)

    return snapshot


class KpiService:
    """Loads the current snapshot and computes the indicators."""

    def __init__(self, session: Session):
        self.bed_repo = BedRepository(session)
        self.history_repo = HistoryRepository(session)

    def snapshot(self, sector_id: Optional[str] = None, month: Optional[str] = None) -> KpiSnapshot:
        """
        Indicators for all beds or for one sector.

        Args:
            sector_id: Restrict to one sector
            month: 'YYYY-MM' for the monthly turnover, current month by default

        Returns:
            KpiSnapshot

        Raises:
            ValueError: malformed month
        """
        year_month = parse_month(month)

        beds = [bed.to_state() for bed in self.bed_repo.list_beds(sector_id)]
        history = self.history_repo.list_entries(sector_id=sector_id)

        snapshot = compute_kpis(beds, history, year_month)
        snapshot.sector_id = sector_id

        logger.debug(
            f"KPIs computed: {snapshot.total_beds} beds, "
            f"occupancy {snapshot.occupancy_rate}%"
        )
        return snapshot
