"""
Tests for the bed endpoints.
"""
import pytest
from fastapi import status
from sqlmodel import Session

from app.core.exceptions import ConcurrencyConflictError
from app.models.bed import Bed
from app.models.enums import BedStatusEnum
from app.repositories.history_repo import HistoryRepository
from app.services.bed_service import BedService


class TestBedRegistry:
    """Tests for listing, adding and removing beds."""

    def test_list_beds(self, client, ward):
        response = client.get("/api/beds")
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert [b["number"] for b in data] == ["101", "102", "103", "104"]
        assert all(b["status"] == "free" for b in data)
        assert data[0]["sector_name"] == ward["sector"].name

    def test_list_beds_by_sector(self, client, ward, create_sector, create_bed):
        other = create_sector(name="UTI Adulto", code="UTIA", order=2)
        create_bed(other.id, number="201", category="UTI")

        response = client.get(f"/api/beds?sector_id={other.id}")
        assert [b["number"] for b in response.json()] == ["201"]

    def test_add_bed(self, client, ward):
        response = client.post(
            "/api/beds",
            json={"sector_id": ward["sector"].id, "number": "105", "category": "Apartamento"}
        )
        assert response.status_code == status.HTTP_201_CREATED

        data = response.json()
        assert data["status"] == "free"
        assert data["occupancy"] is None
        assert data["version"] == 1

    def test_add_bed_unknown_sector(self, client):
        response = client.post(
            "/api/beds",
            json={"sector_id": "no-such-sector", "number": "105", "category": "Enfermaria"}
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_get_bed_not_found(self, client):
        response = client.get("/api/beds/no-such-bed")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_remove_free_bed(self, client, ward):
        bed = ward["beds"][0]

        response = client.delete(f"/api/beds/{bed.id}")
        assert response.status_code == status.HTTP_200_OK
        assert client.get(f"/api/beds/{bed.id}").status_code == status.HTTP_404_NOT_FOUND

    def test_remove_occupied_bed_fails(self, client, ward, admission_data):
        bed = ward["beds"][0]
        client.post(f"/api/beds/{bed.id}/occupy", json={"data": admission_data})

        response = client.delete(f"/api/beds/{bed.id}")
        assert response.status_code == status.HTTP_409_CONFLICT


class TestOccupy:
    """Tests for admissions."""

    def test_occupy_free_bed(self, client, ward, admission_data):
        bed = ward["beds"][0]

        response = client.post(
            f"/api/beds/{bed.id}/occupy",
            json={"data": admission_data, "actor": "Enf. Paula"}
        )
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["status"] == "occupied"
        assert data["version"] == 2
        assert data["category_mismatch"] is False

        occupancy = data["occupancy"]
        assert occupancy["patient_name"] == "Maria Silva"
        assert occupancy["occupied_at"] is not None
        assert occupancy["patient_age"] is not None
        assert occupancy["admission_type"] == "clinical"

    def test_occupied_at_is_utc(self, session, ward, admission_data):
        bed = BedService(session).admit(ward["beds"][0].id, admission_data)

        occupied_at = bed.occupancy.occupied_at
        assert occupied_at.tzinfo is not None
        assert occupied_at.utcoffset().total_seconds() == 0

    def test_occupy_flags_category_mismatch(self, client, ward, admission_data):
        bed = ward["beds"][0]
        admission_data["entitled_category"] = "UTI"

        response = client.post(f"/api/beds/{bed.id}/occupy", json={"data": admission_data})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["category_mismatch"] is True

    def test_occupy_missing_fields(self, client, ward, admission_data):
        bed = ward["beds"][0]
        del admission_data["doctor_name"]

        response = client.post(f"/api/beds/{bed.id}/occupy", json={"data": admission_data})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "doctor_name" in response.json()["detail"]

    def test_occupy_surgical_requires_procedure(self, client, ward, admission_data, create_procedure):
        bed = ward["beds"][0]
        admission_data["admission_type"] = "surgical"

        response = client.post(f"/api/beds/{bed.id}/occupy", json={"data": admission_data})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

        admission_data["procedure_id"] = create_procedure().id
        response = client.post(f"/api/beds/{bed.id}/occupy", json={"data": admission_data})
        assert response.status_code == status.HTTP_200_OK

    def test_occupy_unknown_payer(self, client, ward, admission_data):
        bed = ward["beds"][0]
        admission_data["payer_id"] = "no-such-payer"

        response = client.post(f"/api/beds/{bed.id}/occupy", json={"data": admission_data})
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_occupy_occupied_bed_fails(self, client, ward, admission_data):
        bed = ward["beds"][0]
        client.post(f"/api/beds/{bed.id}/occupy", json={"data": admission_data})

        response = client.post(f"/api/beds/{bed.id}/occupy", json={"data": admission_data})
        assert response.status_code == status.HTTP_409_CONFLICT

    def test_stale_version_is_rejected(self, client, ward, admission_data):
        bed = ward["beds"][0]
        client.post(f"/api/beds/{bed.id}/block", json={"block": True})

        response = client.patch(
            f"/api/beds/{bed.id}/status",
            json={"status": "free", "expected_version": 1}
        )
        assert response.status_code == status.HTTP_409_CONFLICT

        response = client.patch(
            f"/api/beds/{bed.id}/status",
            json={"status": "free", "expected_version": 2}
        )
        assert response.status_code == status.HTTP_200_OK


class TestReserve:
    """Tests for reservations."""

    def test_reserve_then_admit(self, client, ward, admission_data):
        bed = ward["beds"][0]

        response = client.post(
            f"/api/beds/{bed.id}/reserve",
            json={"data": {"patient_name": "Maria Silva", "reserved_until": "2026-03-05"}}
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "reserved"
        assert response.json()["occupancy"]["reserved_until"] == "2026-03-05"

        response = client.post(f"/api/beds/{bed.id}/occupy", json={"data": admission_data})
        assert response.json()["status"] == "occupied"

    def test_cancel_reservation(self, client, ward):
        bed = ward["beds"][0]
        client.post(f"/api/beds/{bed.id}/reserve", json={"data": {"patient_name": "João"}})

        response = client.patch(f"/api/beds/{bed.id}/status", json={"status": "free"})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["occupancy"] is None

    def test_reserve_without_patient_name(self, client, ward):
        bed = ward["beds"][0]

        response = client.post(f"/api/beds/{bed.id}/reserve", json={"data": {}})
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestStatusChanges:
    """Tests for discharge, cleaning and blocking."""

    def test_discharge_then_clean(self, client, ward, admission_data):
        bed = ward["beds"][0]
        client.post(f"/api/beds/{bed.id}/occupy", json={"data": admission_data})

        response = client.patch(f"/api/beds/{bed.id}/status", json={"status": "cleaning"})
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "cleaning"
        assert data["occupancy"] is None
        assert data["last_occupancy"]["patient_name"] == "Maria Silva"

        response = client.patch(f"/api/beds/{bed.id}/status", json={"status": "free"})
        data = response.json()
        assert data["status"] == "free"
        assert data["last_occupancy"] is None

    def test_occupied_bed_cannot_be_freed_directly(self, client, ward, admission_data):
        bed = ward["beds"][0]
        client.post(f"/api/beds/{bed.id}/occupy", json={"data": admission_data})

        response = client.patch(f"/api/beds/{bed.id}/status", json={"status": "free"})
        assert response.status_code == status.HTTP_409_CONFLICT

    def test_unknown_status_value(self, client, ward):
        bed = ward["beds"][0]
        response = client.patch(f"/api/beds/{bed.id}/status", json={"status": "broken"})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_block_and_unblock(self, client, ward):
        bed = ward["beds"][0]

        response = client.post(f"/api/beds/{bed.id}/block", json={"block": True})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "blocked"

        response = client.post(f"/api/beds/{bed.id}/block", json={"block": False})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "free"

    def test_block_occupied_bed_fails(self, client, ward, admission_data):
        bed = ward["beds"][0]
        client.post(f"/api/beds/{bed.id}/occupy", json={"data": admission_data})

        response = client.post(f"/api/beds/{bed.id}/block", json={"block": True})
        assert response.status_code == status.HTTP_409_CONFLICT

    def test_unblock_free_bed_fails(self, client, ward):
        bed = ward["beds"][0]
        response = client.post(f"/api/beds/{bed.id}/block", json={"block": False})
        assert response.status_code == status.HTTP_409_CONFLICT

    @pytest.mark.parametrize("target", ["free", "cleaning", "blocked"])
    def test_patient_fields_follow_status(self, client, ward, target):
        bed = ward["beds"][0]
        client.patch(f"/api/beds/{bed.id}/status", json={"status": target})

        data = client.get(f"/api/beds/{bed.id}").json()
        assert data["occupancy"] is None
        assert data["status"] in [s.value for s in BedStatusEnum]

    def test_block_with_stale_version(self, client, ward):
        bed = ward["beds"][0]
        client.post(f"/api/beds/{bed.id}/block", json={"block": True})

        response = client.post(
            f"/api/beds/{bed.id}/block",
            json={"block": False, "expected_version": 1}
        )
        assert response.status_code == status.HTTP_409_CONFLICT

        response = client.post(
            f"/api/beds/{bed.id}/block",
            json={"block": False, "expected_version": 2}
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["version"] == 3

    def test_transfer_with_stale_target_version(self, client, ward, admission_data):
        source, target = ward["beds"][0], ward["beds"][1]
        client.post(f"/api/beds/{source.id}/occupy", json={"data": admission_data})
        client.post(f"/api/beds/{target.id}/block", json={"block": True})
        client.post(f"/api/beds/{target.id}/block", json={"block": False})

        response = client.post(
            f"/api/beds/{source.id}/transfer",
            json={"target_bed_id": target.id, "expected_version": 2, "target_expected_version": 1}
        )
        assert response.status_code == status.HTTP_409_CONFLICT
        assert client.get(f"/api/beds/{source.id}").json()["status"] == "occupied"


class TestConcurrentWrites:
    """Two sessions writing the same bed."""

    def test_stale_copy_cannot_overwrite_newer_row(self, file_engine, shared_bed):
        bed_id = shared_bed["bed_id"]

        with Session(file_engine) as first, Session(file_engine) as second:
            stale = first.get(Bed, bed_id)
            assert stale.version == 1

            BedService(second).admit(bed_id, shared_bed["admission"], expected_version=1)

            # first still holds version 1 in its identity map
            with pytest.raises(ConcurrencyConflictError):
                BedService(first).admit(bed_id, shared_bed["admission"], expected_version=1)

        with Session(file_engine) as check:
            assert check.get(Bed, bed_id).version == 2
            open_entries = HistoryRepository(check).list_entries(bed_id=bed_id, open_only=True)
            assert len(open_entries) == 1

    def test_sequential_writes_keep_counting(self, file_engine, shared_bed):
        bed_id = shared_bed["bed_id"]

        with Session(file_engine) as session:
            service = BedService(session)
            service.admit(bed_id, shared_bed["admission"], expected_version=1)
            bed = service.discharge(bed_id, expected_version=2)

        assert bed.version == 3
