"""
KPI schemas.
"""
from pydantic import BaseModel
from typing import Dict, Optional


class KpiResponse(BaseModel):
    """Dashboard indicators."""
    total_beds: int
    occupied: int
    free: int
    reserved: int
    cleaning: int
    blocked: int
    clinical: int
    surgical: int

    occupancy_rate: float
    # Discharged episodes per bed
    bed_turnover: float
    # Admissions in `month` per bed
    monthly_admission_turnover: float
    avg_stay_days: float
    mismatch_count: int

    month: str
    sector_id: Optional[str] = None
    status_distribution: Dict[str, int]

    class Config:
        from_attributes = True
