"""
Tests for sectors, reference tables, seeding and health.
"""
from fastapi import status
from sqlmodel import select

from app.models.catalog import Procedure
from app.utils.init_data import DEFAULT_PROCEDURES, initialize_data


class TestSectors:
    """Tests for the sector endpoints."""

    def test_create_and_list_sectors(self, client):
        client.post("/api/sectors", json={"name": "UTI Adulto", "code": "UTIA"})
        client.post("/api/sectors", json={"name": "Clínica Médica", "code": "CM"})

        response = client.get("/api/sectors")
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert [s["code"] for s in data] == ["UTIA", "CM"]
        assert [s["order"] for s in data] == [1, 2]

    def test_create_sector_requires_name(self, client):
        response = client.post("/api/sectors", json={"name": "", "code": "X"})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_delete_empty_sector(self, client, create_sector):
        sector = create_sector()

        response = client.delete(f"/api/sectors/{sector.id}")
        assert response.status_code == status.HTTP_200_OK
        assert client.get("/api/sectors").json() == []

    def test_delete_sector_with_beds_fails(self, client, ward):
        response = client.delete(f"/api/sectors/{ward['sector'].id}")
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_unknown_sector(self, client):
        response = client.delete("/api/sectors/no-such-sector")
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestReferenceTables:
    """Tests for doctors, payers, CIDs and procedures."""

    def test_payers(self, client):
        response = client.post("/api/payers", json={"name": "Bradesco Saúde"})
        assert response.status_code == status.HTTP_201_CREATED
        payer_id = response.json()["id"]

        assert [p["name"] for p in client.get("/api/payers").json()] == ["Bradesco Saúde"]

        response = client.delete(f"/api/payers/{payer_id}")
        assert response.status_code == status.HTTP_200_OK
        assert client.get("/api/payers").json() == []

    def test_cids(self, client):
        response = client.post(
            "/api/cids",
            json={"code": "I21.9", "description": "Infarto agudo do miocárdio"}
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["code"] == "I21.9"

    def test_doctors(self, client):
        response = client.post(
            "/api/doctors",
            json={"name": "Dra. Helena Prado", "specialty": "Cardiologia"}
        )
        assert response.status_code == status.HTTP_201_CREATED

        data = client.get("/api/doctors").json()
        assert data[0]["specialty"] == "Cardiologia"

    def test_procedures(self, client):
        response = client.post("/api/procedures", json={"name": "Herniorrafia"})
        assert response.status_code == status.HTTP_201_CREATED

    def test_blank_name_is_rejected(self, client):
        response = client.post("/api/doctors", json={"name": "   "})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_unknown_item(self, client):
        for path in ("doctors", "payers", "cids", "procedures"):
            response = client.delete(f"/api/{path}/no-such-item")
            assert response.status_code == status.HTTP_404_NOT_FOUND


class TestInitData:
    """Tests for startup seeding."""

    def test_seeds_default_procedures_once(self, session):
        initialize_data(session)
        initialize_data(session)

        names = [p.name for p in session.exec(select(Procedure)).all()]
        assert sorted(names) == sorted(DEFAULT_PROCEDURES)


class TestHealth:
    """Tests for the health check."""

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["status"] == "healthy"
        assert data["components"]["database"]["status"] == "healthy"
