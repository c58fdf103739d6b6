"""User API routes."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models import Role
from app.repositories import UserRepository
from app.schemas import (
    RoleEnum,
    UserCreate,
    UserListResponse,
    UserResponse,
    UserUpdate,
)

router = APIRouter(prefix="/users", tags=["users"])


def _to_row(data: dict) -> dict:
    """Store roles as a sorted list of tags."""
    if data.get("roles") is not None:
        data["roles"] = sorted(data["roles"])
    return data


@router.get("", response_model=UserListResponse)
async def get_users(db: AsyncSession = Depends(get_db)):
    """Get all users ordered by name."""
    repo = UserRepository(db)
    users = await repo.get_all_by_name()
    return UserListResponse(
        items=[UserResponse.model_validate(u) for u in users],
        total=len(users),
    )


@router.get("/riders", response_model=list[UserResponse])
async def get_riders(db: AsyncSession = Depends(get_db)):
    """Get users holding the rider role."""
    repo = UserRepository(db)
    return [UserResponse.model_validate(u) for u in await repo.get_by_role(Role.RIDER)]


@router.get("/trainers", response_model=list[UserResponse])
async def get_trainers(db: AsyncSession = Depends(get_db)):
    """Get users holding the trainer role."""
    repo = UserRepository(db)
    return [UserResponse.model_validate(u) for u in await repo.get_by_role(Role.TRAINER)]


@router.get("/role/{role}", response_model=list[UserResponse])
async def get_users_by_role(
    role: RoleEnum,
    db: AsyncSession = Depends(get_db),
):
    """Get users holding a role."""
    repo = UserRepository(db)
    users = await repo.get_by_role(Role(role.value))
    return [UserResponse.model_validate(u) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a user by ID."""
    repo = UserRepository(db)
    user = await repo.get(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserResponse.model_validate(user)


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(
    data: UserCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new user."""
    repo = UserRepository(db)
    if await repo.get_by_email(data.email):
        raise HTTPException(status_code=409, detail="Email already registered")

    user = await repo.create(_to_row(data.model_dump(mode="json")))
    return UserResponse.model_validate(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    data: UserUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a user."""
    repo = UserRepository(db)
    changes = {
        key: value
        for key, value in data.model_dump(mode="json", exclude_unset=True).items()
        if value is not None or key in ("level", "specialization", "payment_method")
    }

    if "email" in changes:
        other = await repo.get_by_email(changes["email"])
        if other is not None and other.id != user_id:
            raise HTTPException(status_code=409, detail="Email already registered")

    user = await repo.update(user_id, _to_row(changes))
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", status_code=204)
async def delete_user(
    user_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a user."""
    repo = UserRepository(db)
    deleted = await repo.delete(user_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="User not found")
