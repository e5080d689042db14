"""
Interface for User Repository.
Defines the contract that all user repositories must implement.
"""

from abc import ABC, abstractmethod
from typing import Optional

from repositories.models import User, UserCreate


class IUserRepository(ABC):
    """Interface for back-office user operations."""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Find a user by ID.

        Args:
            user_id: ID of the user

        Returns:
            Optional[User]: User if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """
        Find a user by exact username.

        Args:
            username: Login name

        Returns:
            Optional[User]: User if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, data: UserCreate) -> User:
        """
        Create a new user.

        Args:
            data: Username and password hash

        Returns:
            User: Created user with generated ID
        """
        pass
