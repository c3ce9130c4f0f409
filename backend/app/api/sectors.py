"""
Sector endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List

from app.core.database import get_session
from app.core.exceptions import NotFoundError, ValidationError
from app.schemas.catalog import SectorCreate, SectorResponse
from app.schemas.responses import MessageResponse
from app.services.catalog_service import SectorService

router = APIRouter()


@router.get("", response_model=List[SectorResponse])
def list_sectors(session: Session = Depends(get_session)):
    """Sectors in display order."""
    return SectorService(session).list_sectors()


@router.post("", response_model=SectorResponse, status_code=status.HTTP_201_CREATED)
def create_sector(request: SectorCreate, session: Session = Depends(get_session)):
    """Creates a sector."""
    service = SectorService(session)

    try:
        return service.create_sector(request.name, request.code, request.order)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.delete("/{sector_id}", response_model=MessageResponse)
def delete_sector(sector_id: str, session: Session = Depends(get_session)):
    """Deletes a sector with no beds."""
    service = SectorService(session)

    try:
        service.delete_sector(sector_id)
        return MessageResponse(success=True, message="Sector deleted")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
