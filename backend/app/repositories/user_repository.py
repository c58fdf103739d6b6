"""User repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Role, User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model."""

    def __init__(self, session: AsyncSession):
        super().__init__(User, session)

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email, case-insensitively."""
        result = await self.session.execute(
            select(User).where(User.email == email.lower())
        )
        return result.scalar_one_or_none()

    async def get_all_by_name(self) -> list[User]:
        """Get all users ordered by name."""
        result = await self.session.execute(select(User).order_by(User.name))
        return list(result.scalars().all())

    async def get_by_role(self, role: Role) -> list[User]:
        """Get users holding a role, ordered by name."""
        # roles is a JSON list, so membership is tested in Python
        users = await self.get_all_by_name()
        return [u for u in users if u.has_role(role)]
