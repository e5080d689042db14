"""
In-memory user repository.
"""

from typing import Optional

from core.logger import logger
from repositories.base_repository import BaseRepository, Clock
from repositories.interfaces import IUserRepository
from repositories.models import User, UserCreate


class UserRepository(BaseRepository[User], IUserRepository):
    """Back-office users keyed by ID."""

    def __init__(self, clock: Optional[Clock] = None):
        super().__init__("users", clock)

    async def get_by_id(self, user_id: str) -> Optional[User]:
        return self._get(user_id)

    async def get_by_username(self, username: str) -> Optional[User]:
        return self._find_one(lambda user: user.username == username)

    async def create(self, data: UserCreate) -> User:
        user = User(id=self._new_id(), **data.model_dump())
        self._put(user.id, user)
        logger.info(f"User created: id={user.id}, username={user.username}")
        return user
