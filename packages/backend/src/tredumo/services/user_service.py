"""User service — login lookups and account creation for the CLI."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tredumo.auth.password import hash_password, verify_password
from tredumo.db.models import User
from tredumo.services.errors import UserNotFound


class UserService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def authenticate(self, email: str, password: str) -> Optional[User]:
        """Return the user if email and password match, else None."""
        result = await self.db.execute(select(User).where(User.email == email))
        user = result.scalars().first()
        if not user or not verify_password(password, user.password):
            return None
        return user

    async def get_user(self, user_id: int) -> User:
        user = await self.db.get(User, user_id)
        if user is None:
            raise UserNotFound(user_id)
        return user

    async def create_user(
        self, username: str, email: str, password: str, role: str = "viewer"
    ) -> User:
        user = User(
            username=username,
            email=email,
            password=hash_password(password),
            role=role,
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        await self.db.refresh(user)
        return user
