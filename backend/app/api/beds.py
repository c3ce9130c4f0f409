"""
Bed endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List, Optional

from app.core.database import get_session
from app.core.exceptions import (
    ConcurrencyConflictError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from app.models.bed import Bed
from app.schemas.bed import (
    BedCreate,
    BedResponse,
    BlockRequest,
    OccupancyResponse,
    OccupyRequest,
    ReserveRequest,
    StatusUpdateRequest,
    TransferRequest,
    TransferResponse,
)
from app.schemas.responses import MessageResponse
from app.services.bed_service import BedService

router = APIRouter()


def _occupancy_response(occupancy) -> Optional[OccupancyResponse]:
    if occupancy is None:
        return None
    return OccupancyResponse(
        **occupancy.model_dump(),
        patient_age=occupancy.patient_age(),
    )


def bed_response(bed: Bed) -> BedResponse:
    """Builds the dashboard view of a bed."""
    state = bed.to_state()
    return BedResponse(
        id=bed.id,
        number=bed.number,
        category=bed.category,
        sector_id=bed.sector_id,
        sector_name=bed.sector.name if bed.sector else None,
        status=bed.status,
        status_updated_at=bed.status_updated_at,
        version=bed.version,
        occupancy=_occupancy_response(state.occupancy),
        last_occupancy=_occupancy_response(state.last_occupancy),
        category_mismatch=state.category_mismatch,
    )


@router.get("", response_model=List[BedResponse])
def list_beds(sector_id: Optional[str] = None, session: Session = Depends(get_session)):
    """Lists every bed, or the beds of one sector."""
    service = BedService(session)
    return [bed_response(bed) for bed in service.list_beds(sector_id)]


@router.post("", response_model=BedResponse, status_code=status.HTTP_201_CREATED)
def add_bed(request: BedCreate, session: Session = Depends(get_session)):
    """Adds a free bed to a sector."""
    service = BedService(session)

    try:
        bed = service.add_bed(request.sector_id, request.number, request.category)
        return bed_response(bed)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.get("/{bed_id}", response_model=BedResponse)
def get_bed(bed_id: str, session: Session = Depends(get_session)):
    """Returns one bed."""
    service = BedService(session)

    try:
        return bed_response(service.get_bed(bed_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.delete("/{bed_id}", response_model=MessageResponse)
def remove_bed(bed_id: str, session: Session = Depends(get_session)):
    """Removes a bed that holds no patient."""
    service = BedService(session)

    try:
        service.remove_bed(bed_id)
        return MessageResponse(success=True, message="Bed removed")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except InvalidTransitionError as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.patch("/{bed_id}/status", response_model=BedResponse)
def change_status(
    bed_id: str,
    request: StatusUpdateRequest,
    session: Session = Depends(get_session)
):
    """
    Changes the status of a bed.

    OCCUPIED -> CLEANING discharges the patient; any -> FREE clears the
    patient data.
    """
    service = BedService(session)

    try:
        bed = service.change_status(
            bed_id, request.status, request.actor, request.expected_version
        )
        return bed_response(bed)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except (InvalidTransitionError, ConcurrencyConflictError) as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.post("/{bed_id}/occupy", response_model=BedResponse)
def occupy_bed(
    bed_id: str,
    request: OccupyRequest,
    session: Session = Depends(get_session)
):
    """Admits a patient into a free or reserved bed."""
    service = BedService(session)

    try:
        bed = service.admit(bed_id, request.data, request.actor, request.expected_version)
        return bed_response(bed)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except (InvalidTransitionError, ConcurrencyConflictError) as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.post("/{bed_id}/reserve", response_model=BedResponse)
def reserve_bed(
    bed_id: str,
    request: ReserveRequest,
    session: Session = Depends(get_session)
):
    """Reserves a free bed for an expected patient."""
    service = BedService(session)

    try:
        bed = service.reserve(bed_id, request.data, request.actor, request.expected_version)
        return bed_response(bed)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except (InvalidTransitionError, ConcurrencyConflictError) as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.post("/{bed_id}/transfer", response_model=TransferResponse)
def transfer_patient(
    bed_id: str,
    request: TransferRequest,
    session: Session = Depends(get_session)
):
    """Moves the patient to a free bed, or swaps with an occupied/reserved one."""
    service = BedService(session)

    try:
        result = service.transfer_or_swap(
            bed_id,
            request.target_bed_id,
            request.actor,
            request.expected_version,
            request.target_expected_version,
        )
        return TransferResponse(
            success=result.success,
            message=result.message,
            source=bed_response(result.source),
            target=bed_response(result.target),
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except (InvalidTransitionError, ConcurrencyConflictError) as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.post("/{bed_id}/block", response_model=BedResponse)
def block_bed(
    bed_id: str,
    request: BlockRequest,
    session: Session = Depends(get_session)
):
    """Blocks or unblocks a bed."""
    service = BedService(session)

    try:
        if request.block:
            bed = service.block(bed_id, request.actor, request.expected_version)
        else:
            bed = service.unblock(bed_id, request.actor, request.expected_version)
        return bed_response(bed)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except (InvalidTransitionError, ConcurrencyConflictError) as e:
        raise HTTPException(status_code=409, detail=e.message)
