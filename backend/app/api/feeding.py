"""Feeding task API routes."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas import (
    FeedingCompleteRequest,
    FeedingGenerateResponse,
    FeedingTaskListResponse,
    FeedingTaskResponse,
)
from app.services import FeedingService

router = APIRouter(prefix="/feeding", tags=["feeding"])


@router.get("/date/{day}", response_model=FeedingTaskListResponse)
async def get_feeding_tasks(
    day: date,
    db: AsyncSession = Depends(get_db),
):
    """Get a day's feeding tasks, earliest ride end first."""
    service = FeedingService(db)
    tasks = await service.get_by_date(day)
    return FeedingTaskListResponse(
        items=[FeedingTaskResponse.model_validate(t) for t in tasks],
        total=len(tasks),
    )


@router.put("/{task_id}/complete", response_model=FeedingTaskResponse)
async def complete_feeding_task(
    task_id: int,
    data: FeedingCompleteRequest | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Mark a horse as fed."""
    service = FeedingService(db)
    task = await service.set_completed(
        task_id, True, completed_by=data.completed_by if data else None
    )
    if not task:
        raise HTTPException(status_code=404, detail="Feeding task not found")
    return FeedingTaskResponse.model_validate(task)


@router.put("/{task_id}/uncomplete", response_model=FeedingTaskResponse)
async def uncomplete_feeding_task(
    task_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Undo a feeding confirmation."""
    service = FeedingService(db)
    task = await service.set_completed(task_id, False)
    if not task:
        raise HTTPException(status_code=404, detail="Feeding task not found")
    return FeedingTaskResponse.model_validate(task)


@router.post("/generate/{day}", response_model=FeedingGenerateResponse)
async def generate_feeding_tasks(
    day: date,
    db: AsyncSession = Depends(get_db),
):
    """Create missing feeding tasks for a day's rides."""
    service = FeedingService(db)
    tasks = await service.generate_for_date(day)
    return FeedingGenerateResponse(
        message=f"Generated {len(tasks)} feeding tasks",
        tasks=[FeedingTaskResponse.model_validate(t) for t in tasks],
    )
