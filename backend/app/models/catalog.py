"""
Reference tables: payers, CIDs, doctors and procedures.
Flat id-keyed lookups with no lifecycle beyond create/delete.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
import uuid


def _new_id() -> str:
    return str(uuid.uuid4())


class Payer(SQLModel, table=True):
    """Health plan or payer (convênio) covering the admission."""
    __tablename__ = "payer"

    id: str = Field(default_factory=_new_id, primary_key=True)
    name: str = Field(index=True)


class Cid(SQLModel, table=True):
    """Diagnosis code (CID-10)."""
    __tablename__ = "cid"

    id: str = Field(default_factory=_new_id, primary_key=True)
    code: str = Field(index=True)  # e.g. J18.9
    description: str


class Doctor(SQLModel, table=True):
    """Attending physician."""
    __tablename__ = "doctor"

    id: str = Field(default_factory=_new_id, primary_key=True)
    name: str = Field(index=True)
    specialty: Optional[str] = Field(default=None)


class Procedure(SQLModel, table=True):
    """Surgical procedure."""
    __tablename__ = "procedure"

    id: str = Field(default_factory=_new_id, primary_key=True)
    name: str
