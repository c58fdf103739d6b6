"""Schedule API routes."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.exceptions import BookingRejected, RecordNotFound, WelfareStoreError
from app.schemas import (
    ScheduleBookingResponse,
    ScheduleCompleteResponse,
    ScheduleCreate,
    ScheduleListResponse,
    ScheduleResponse,
    ScheduleUpdate,
    WelfareCheckRequest,
    WelfareCheckResponse,
)
from app.services import ScheduleService

router = APIRouter(prefix="/schedules", tags=["schedules"])


def _rejected(exc: BookingRejected) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={"error": "Welfare validation failed", "details": exc.errors},
    )


def _store_unavailable() -> HTTPException:
    return HTTPException(status_code=503, detail="Schedule store unavailable")


@router.get("/date/{day}", response_model=ScheduleListResponse)
async def get_schedules_for_date(
    day: date,
    db: AsyncSession = Depends(get_db),
):
    """Get every schedule on a day."""
    service = ScheduleService(db)
    items = await service.get_by_date(day)
    return ScheduleListResponse(items=items, total=len(items))


@router.get("/rider/{rider_id}", response_model=list[ScheduleResponse])
async def get_rider_schedules(
    rider_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a rider's upcoming sessions."""
    service = ScheduleService(db)
    return await service.get_rider_schedules(rider_id)


@router.get("/trainer/{trainer_id}", response_model=list[ScheduleResponse])
async def get_trainer_schedules(
    trainer_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a trainer's upcoming sessions."""
    service = ScheduleService(db)
    return await service.get_trainer_schedules(trainer_id)


@router.post("/validate", response_model=WelfareCheckResponse)
async def validate_schedule(
    data: WelfareCheckRequest,
    db: AsyncSession = Depends(get_db),
):
    """Check a proposed session against the horse's welfare limits."""
    service = ScheduleService(db)
    result = await service.check_welfare(data)
    return WelfareCheckResponse(
        valid=result.valid,
        errors=result.errors,
        warnings=result.warnings,
    )


@router.get("/{schedule_id}", response_model=ScheduleResponse)
async def get_schedule(
    schedule_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a schedule by ID."""
    service = ScheduleService(db)
    schedule = await service.get_schedule(schedule_id)
    if not schedule:
        raise HTTPException(status_code=404, detail="Schedule not found")
    return schedule


@router.post("", response_model=ScheduleBookingResponse, status_code=201)
async def create_schedule(
    data: ScheduleCreate,
    db: AsyncSession = Depends(get_db),
):
    """Book a session."""
    service = ScheduleService(db)
    try:
        schedule, warnings = await service.create_schedule(data)
    except BookingRejected as e:
        raise _rejected(e)
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except WelfareStoreError:
        raise _store_unavailable()
    return ScheduleBookingResponse(schedule=schedule, warnings=warnings)


@router.put("/{schedule_id}", response_model=ScheduleResponse)
async def update_schedule(
    schedule_id: int,
    data: ScheduleUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Edit a session."""
    service = ScheduleService(db)
    try:
        schedule = await service.update_schedule(schedule_id, data)
    except BookingRejected as e:
        raise _rejected(e)
    except WelfareStoreError:
        raise _store_unavailable()
    if not schedule:
        raise HTTPException(status_code=404, detail="Schedule not found")
    return schedule


@router.post("/{schedule_id}/complete", response_model=ScheduleCompleteResponse)
async def complete_schedule(
    schedule_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Mark a session completed."""
    service = ScheduleService(db)
    result = await service.complete_schedule(schedule_id)
    if not result:
        raise HTTPException(status_code=404, detail="Schedule not found")
    return result


@router.delete("/{schedule_id}", status_code=204)
async def delete_schedule(
    schedule_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Cancel a session."""
    service = ScheduleService(db)
    deleted = await service.delete_schedule(schedule_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Schedule not found")
