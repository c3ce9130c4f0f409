"""
Reference table endpoints: doctors, payers, CIDs and procedures.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List

from app.core.database import get_session
from app.core.exceptions import NotFoundError, ValidationError
from app.schemas.catalog import (
    CidCreate,
    CidResponse,
    DoctorCreate,
    DoctorResponse,
    PayerCreate,
    PayerResponse,
    ProcedureCreate,
    ProcedureResponse,
)
from app.schemas.responses import MessageResponse
from app.services.catalog_service import CatalogService

router = APIRouter()


def _delete(service: CatalogService, repo, item_id: str) -> MessageResponse:
    try:
        service.delete_item(repo, item_id)
        return MessageResponse(success=True, message=f"{repo.label} deleted")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


# ============================================
# DOCTORS
# ============================================

@router.get("/doctors", response_model=List[DoctorResponse], tags=["Doctors"])
def list_doctors(session: Session = Depends(get_session)):
    service = CatalogService(session)
    return service.list_items(service.doctors)


@router.post(
    "/doctors",
    response_model=DoctorResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Doctors"]
)
def create_doctor(request: DoctorCreate, session: Session = Depends(get_session)):
    try:
        return CatalogService(session).create_doctor(request.name, request.specialty)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.delete("/doctors/{item_id}", response_model=MessageResponse, tags=["Doctors"])
def delete_doctor(item_id: str, session: Session = Depends(get_session)):
    service = CatalogService(session)
    return _delete(service, service.doctors, item_id)


# ============================================
# PAYERS
# ============================================

@router.get("/payers", response_model=List[PayerResponse], tags=["Payers"])
def list_payers(session: Session = Depends(get_session)):
    service = CatalogService(session)
    return service.list_items(service.payers)


@router.post(
    "/payers",
    response_model=PayerResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Payers"]
)
def create_payer(request: PayerCreate, session: Session = Depends(get_session)):
    try:
        return CatalogService(session).create_payer(request.name)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.delete("/payers/{item_id}", response_model=MessageResponse, tags=["Payers"])
def delete_payer(item_id: str, session: Session = Depends(get_session)):
    service = CatalogService(session)
    return _delete(service, service.payers, item_id)


# ============================================
# CIDS
# ============================================

@router.get("/cids", response_model=List[CidResponse], tags=["CIDs"])
def list_cids(session: Session = Depends(get_session)):
    service = CatalogService(session)
    return service.list_items(service.cids)


@router.post(
    "/cids",
    response_model=CidResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["CIDs"]
)
def create_cid(request: CidCreate, session: Session = Depends(get_session)):
    try:
        return CatalogService(session).create_cid(request.code, request.description)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.delete("/cids/{item_id}", response_model=MessageResponse, tags=["CIDs"])
def delete_cid(item_id: str, session: Session = Depends(get_session)):
    service = CatalogService(session)
    return _delete(service, service.cids, item_id)


# ============================================
# PROCEDURES
# ============================================

@router.get("/procedures", response_model=List[ProcedureResponse], tags=["Procedures"])
def list_procedures(session: Session = Depends(get_session)):
    service = CatalogService(session)
    return service.list_items(service.procedures)


@router.post(
    "/procedures",
    response_model=ProcedureResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Procedures"]
)
def create_procedure(request: ProcedureCreate, session: Session = Depends(get_session)):
    try:
        return CatalogService(session).create_procedure(request.name)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.delete("/procedures/{item_id}", response_model=MessageResponse, tags=["Procedures"])
def delete_procedure(item_id: str, session: Session = Depends(get_session)):
    service = CatalogService(session)
    return _delete(service, service.procedures, item_id)
