"""API routers."""

from app.api.feeding import router as feeding_router
from app.api.horses import router as horses_router
from app.api.schedules import router as schedules_router
from app.api.users import router as users_router

__all__ = [
    "horses_router",
    "users_router",
    "schedules_router",
    "feeding_router",
]
