"""Horse API routes."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.repositories import HorseRepository
from app.schemas import (
    HorseCreate,
    HorseListResponse,
    HorseResponse,
    HorseUpdate,
)

router = APIRouter(prefix="/horses", tags=["horses"])


@router.get("", response_model=HorseListResponse)
async def get_horses(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: AsyncSession = Depends(get_db),
):
    """Get active horses ordered by name."""
    repo = HorseRepository(db)
    horses = await repo.get_active(skip=skip, limit=limit)
    total = await repo.count_active()
    return HorseListResponse(
        items=[HorseResponse.model_validate(h) for h in horses],
        total=total,
    )


@router.get("/{horse_id}", response_model=HorseResponse)
async def get_horse(
    horse_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a horse by ID, including deactivated ones."""
    repo = HorseRepository(db)
    horse = await repo.get(horse_id)
    if not horse:
        raise HTTPException(status_code=404, detail="Horse not found")
    return HorseResponse.model_validate(horse)


@router.post("", response_model=HorseResponse, status_code=201)
async def create_horse(
    data: HorseCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new horse."""
    repo = HorseRepository(db)
    horse = await repo.create(data.model_dump(mode="json"))
    return HorseResponse.model_validate(horse)


@router.put("/{horse_id}", response_model=HorseResponse)
async def update_horse(
    horse_id: int,
    data: HorseUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a horse."""
    changes = {
        key: value
        for key, value in data.model_dump(mode="json", exclude_unset=True).items()
        if value is not None or key in ("breed", "post_training_meal", "notes")
    }
    repo = HorseRepository(db)
    horse = await repo.update(horse_id, changes)
    if not horse:
        raise HTTPException(status_code=404, detail="Horse not found")
    return HorseResponse.model_validate(horse)


@router.delete("/{horse_id}", status_code=204)
async def delete_horse(
    horse_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Deactivate a horse. Its past schedules are kept."""
    repo = HorseRepository(db)
    horse = await repo.deactivate(horse_id)
    if not horse:
        raise HTTPException(status_code=404, detail="Horse not found")
