"""
Pytest fixtures: database engines, API client and data factories.
"""
import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session, create_engine
from sqlmodel.pool import StaticPool

from app.core.database import get_session
from app.models.bed import Bed
from app.models.catalog import Cid, Payer, Procedure
from app.models.enums import BedStatusEnum
from app.models.sector import Sector
from main import app


def make_engine(url: str, **kwargs):
    engine = create_engine(url, connect_args={"check_same_thread": False}, **kwargs)
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite shared by every session of a test."""
    engine = make_engine("sqlite://", poolclass=StaticPool)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def file_engine(tmp_path):
    """File-backed SQLite, one connection per session."""
    engine = make_engine(f"sqlite:///{tmp_path / 'beds.db'}")
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session):
    """API client bound to the test session."""
    app.dependency_overrides[get_session] = lambda: session

    # No context manager: the startup hook would touch the real database
    yield TestClient(app)

    app.dependency_overrides.clear()


# ============================================
# FACTORIES
# ============================================

@pytest.fixture
def persist(session):
    """Commits a row and returns it refreshed."""
    def _persist(row):
        session.add(row)
        session.commit()
        session.refresh(row)
        return row

    return _persist


@pytest.fixture
def create_sector(persist):
    def _create_sector(name="Clínica Médica", code="CM", order=1):
        return persist(Sector(name=name, code=code, order=order))

    return _create_sector


@pytest.fixture
def create_bed(persist):
    def _create_bed(sector_id, number="101", category="Enfermaria", status=BedStatusEnum.FREE):
        return persist(Bed(number=number, category=category, sector_id=sector_id, status=status))

    return _create_bed


@pytest.fixture
def create_payer(persist):
    return lambda name="Unimed": persist(Payer(name=name))


@pytest.fixture
def create_cid(persist):
    def _create_cid(code="J18.9", description="Pneumonia não especificada"):
        return persist(Cid(code=code, description=description))

    return _create_cid


@pytest.fixture
def create_procedure(persist):
    return lambda name="Apendicectomia": persist(Procedure(name=name))


# ============================================
# SCENARIOS
# ============================================

def admission_payload(payer_id: str, cid_id: str, **overrides) -> dict:
    """Admission form as the dashboard sends it."""
    payload = {
        "patient_name": "Maria Silva",
        "birth_date": "1980-05-10",
        "payer_id": payer_id,
        "entitled_category": "Enfermaria",
        "cid_id": cid_id,
        "admission_type": "clinical",
        "doctor_name": "Dr. Carlos Souza",
        "admission_date": "2026-03-02",
        "admission_time": "14:30",
        "diagnosis": "Pneumonia",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def ward(create_sector, create_bed):
    """A sector with four free beds, 101 to 104."""
    sector = create_sector()
    beds = [create_bed(sector.id, number=f"10{i}") for i in range(1, 5)]
    return {"sector": sector, "beds": beds}


@pytest.fixture
def admission_data(create_payer, create_cid):
    return admission_payload(create_payer().id, create_cid().id)


@pytest.fixture
def shared_bed(file_engine):
    """One free bed plus its reference data in the file-backed database."""
    with Session(file_engine) as session:
        sector = Sector(name="Clínica Médica", code="CM", order=1)
        payer = Payer(name="Unimed")
        cid = Cid(code="J18.9", description="Pneumonia não especificada")
        session.add_all([sector, payer, cid])
        session.commit()

        bed = Bed(number="101", category="Enfermaria", sector_id=sector.id)
        session.add(bed)
        session.commit()

        return {"bed_id": bed.id, "admission": admission_payload(payer.id, cid.id)}
