"""
Tests for the KPI aggregator.
"""
import pytest
from datetime import date, datetime, timezone
from fastapi import status

from app.core.bed_state import BedState, Occupancy
from app.models.enums import AdmissionTypeEnum, BedStatusEnum
from app.models.history import InternmentHistory
from app.services.kpi_service import average_stay, compute_kpis
from app.utils.helpers import stay_days, utcnow

MARCH = (2026, 3)


def bed(status=BedStatusEnum.FREE, category="Enfermaria", entitled=None, admission_type=None, n=1):
    occupancy = None
    if status in (BedStatusEnum.OCCUPIED, BedStatusEnum.RESERVED):
        occupancy = Occupancy(
            patient_name=f"Patient {n}",
            entitled_category=entitled,
            admission_type=admission_type,
        )
    return BedState(
        id=f"bed-{n}",
        number=str(100 + n),
        category=category,
        sector_id="sector-1",
        status=status,
        occupancy=occupancy,
    )


def at(day, hour=12, month=3):
    return datetime(2026, month, day, hour, 0, tzinfo=timezone.utc)


def entry(admitted, released=None, n=1):
    return InternmentHistory(
        episode_id=f"ep-{n}",
        bed_id=f"bed-{n}",
        sector_id="sector-1",
        patient_name=f"Patient {n}",
        admission_date=admitted,
        release_date=released,
    )


class TestComputeKpis:
    """Tests for compute_kpis."""

    def test_no_beds(self):
        kpis = compute_kpis([], [], MARCH)

        assert kpis.total_beds == 0
        assert kpis.occupancy_rate == 0
        assert kpis.bed_turnover == 0
        assert kpis.monthly_admission_turnover == 0
        assert kpis.avg_stay_days == 0
        assert kpis.mismatch_count == 0

    def test_occupancy_rate(self):
        beds = [
            bed(BedStatusEnum.OCCUPIED, n=1),
            bed(BedStatusEnum.OCCUPIED, n=2),
            bed(BedStatusEnum.FREE, n=3),
            bed(BedStatusEnum.CLEANING, n=4),
        ]
        kpis = compute_kpis(beds, [], MARCH)

        assert kpis.occupancy_rate == 50.0
        assert kpis.occupied == 2
        assert kpis.free == 1
        assert kpis.cleaning == 1

    def test_mismatch_count(self):
        beds = [
            bed(BedStatusEnum.OCCUPIED, category="Enfermaria", entitled="Enfermaria", n=1),
            bed(BedStatusEnum.OCCUPIED, category="Enfermaria", entitled="UTI", n=2),
            bed(BedStatusEnum.OCCUPIED, category="Enfermaria", entitled="Enfermaria", n=3),
        ]
        assert compute_kpis(beds, [], MARCH).mismatch_count == 1

    def test_reserved_beds_never_mismatch(self):
        beds = [bed(BedStatusEnum.RESERVED, category="Enfermaria", entitled="UTI")]
        assert compute_kpis(beds, [], MARCH).mismatch_count == 0

    def test_same_day_discharge_counts_half_a_day(self):
        history = [entry(date(2026, 3, 2), at(2, hour=15))]
        kpis = compute_kpis([bed()], history, MARCH, min_stay=0.5)
        assert kpis.avg_stay_days == 0.5

    def test_average_stay(self):
        history = [
            entry(date(2026, 3, 1), at(4, hour=23), n=1),  # 3 days
            entry(date(2026, 3, 1), at(2, hour=1), n=2),  # 1 day
            entry(date(2026, 3, 5), None, n=3),  # still admitted
        ]
        assert average_stay(history, 0.5) == pytest.approx(2.0)

    def test_stay_ignores_time_of_day(self):
        assert stay_days(date(2026, 3, 2), at(2, hour=0)) == 0
        assert stay_days(date(2026, 3, 2), at(2, hour=23)) == 0
        assert stay_days(date(2026, 3, 2), at(3, hour=1)) == 1

    def test_now_is_timezone_aware(self):
        now = utcnow()
        assert now.tzinfo is not None
        assert now.utcoffset().total_seconds() == 0

    def test_turnover_counts_discharged_entries(self):
        beds = [bed(n=i) for i in range(1, 5)]
        history = [
            entry(date(2026, 3, 1), at(3), n=1),
            entry(date(2026, 3, 2), at(4), n=2),
            entry(date(2026, 3, 3), None, n=3),
        ]
        kpis = compute_kpis(beds, history, MARCH)

        assert kpis.bed_turnover == 0.5
        assert kpis.monthly_admission_turnover == 0.75

    def test_monthly_turnover_only_counts_the_month(self):
        beds = [bed(n=1), bed(n=2)]
        history = [
            entry(date(2026, 2, 27), at(1), n=1),
            entry(date(2026, 3, 10), None, n=2),
        ]
        kpis = compute_kpis(beds, history, MARCH)

        assert kpis.monthly_admission_turnover == 0.5
        assert kpis.month == "2026-03"

    def test_clinical_and_surgical_counts(self):
        beds = [
            bed(BedStatusEnum.OCCUPIED, admission_type=AdmissionTypeEnum.CLINICAL, n=1),
            bed(BedStatusEnum.OCCUPIED, admission_type=AdmissionTypeEnum.SURGICAL, n=2),
            bed(BedStatusEnum.OCCUPIED, admission_type=AdmissionTypeEnum.SURGICAL, n=3),
            bed(BedStatusEnum.RESERVED, n=4),
        ]
        kpis = compute_kpis(beds, [], MARCH)

        assert kpis.clinical == 1
        assert kpis.surgical == 2
        assert kpis.reserved == 1

    def test_status_distribution_lists_every_status(self):
        kpis = compute_kpis([bed(BedStatusEnum.BLOCKED)], [], MARCH)
        assert kpis.status_distribution == {
            "free": 0,
            "occupied": 0,
            "cleaning": 0,
            "blocked": 1,
            "reserved": 0,
        }


class TestKpiEndpoint:
    """Tests for GET /kpis."""

    def test_get_kpis(self, client, ward, admission_data):
        bed_id = ward["beds"][0].id
        client.post(f"/api/beds/{bed_id}/occupy", json={"data": admission_data})

        response = client.get("/api/kpis?month=2026-03")
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["total_beds"] == 4
        assert data["occupied"] == 1
        assert data["occupancy_rate"] == 25.0
        assert data["monthly_admission_turnover"] == 0.25
        assert data["bed_turnover"] == 0
        assert data["month"] == "2026-03"

    def test_kpis_for_one_sector(self, client, ward, create_sector, create_bed):
        other = create_sector(name="UTI Adulto", code="UTIA", order=2)
        create_bed(other.id, number="201", category="UTI", status=BedStatusEnum.BLOCKED)

        response = client.get(f"/api/kpis?sector_id={other.id}")
        data = response.json()

        assert data["total_beds"] == 1
        assert data["blocked"] == 1
        assert data["sector_id"] == other.id

    def test_invalid_month(self, client):
        response = client.get("/api/kpis?month=2026-13")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
