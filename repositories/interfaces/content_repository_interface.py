"""
Interface for Content Repository.
Content is addressed by its string key, never duplicated.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from repositories.models import Content, ContentCreate


class IContentRepository(ABC):
    """Interface for site content key/value operations."""

    @abstractmethod
    async def get_all(self) -> List[Content]:
        """List every content record."""
        pass

    @abstractmethod
    async def get_by_key(self, key: str) -> Optional[Content]:
        """
        Find content by key.

        Args:
            key: Dotted content key, e.g. ``hero.title``

        Returns:
            Optional[Content]: Content if found, None otherwise
        """
        pass

    @abstractmethod
    async def set(self, data: ContentCreate) -> Content:
        """
        Create or replace the value stored under a key.

        Args:
            data: Key and value

        Returns:
            Content: Stored record with refreshed updated_at
        """
        pass

    @abstractmethod
    async def update(self, key: str, value: str) -> Optional[Content]:
        """
        Change the value of an existing key.

        Args:
            key: Content key
            value: New value

        Returns:
            Optional[Content]: Updated record, None if the key does not exist
        """
        pass
