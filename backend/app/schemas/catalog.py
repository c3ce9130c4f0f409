"""
Sector and reference table schemas.
"""
from pydantic import BaseModel, Field
from typing import Optional


# ============================================
# SECTORS
# ============================================

class SectorCreate(BaseModel):
    """Request to create a sector."""
    name: str = Field(min_length=1)
    code: str = Field(min_length=1)
    order: Optional[int] = None


class SectorResponse(BaseModel):
    id: str
    name: str
    code: str
    order: int

    class Config:
        from_attributes = True


# ============================================
# REFERENCE TABLES
# ============================================

class PayerCreate(BaseModel):
    name: str = Field(min_length=1)


class PayerResponse(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True


class CidCreate(BaseModel):
    code: str = Field(min_length=1)
    description: str = ""


class CidResponse(BaseModel):
    id: str
    code: str
    description: str

    class Config:
        from_attributes = True


class DoctorCreate(BaseModel):
    name: str = Field(min_length=1)
    specialty: Optional[str] = None


class DoctorResponse(BaseModel):
    id: str
    name: str
    specialty: Optional[str] = None

    class Config:
        from_attributes = True


class ProcedureCreate(BaseModel):
    name: str = Field(min_length=1)


class ProcedureResponse(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True
