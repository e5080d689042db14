"""
Service for editable site content.
"""

from typing import Dict, List, Optional

from core.logger import logger
from repositories.interfaces import IContentRepository
from repositories.models import Content, ContentCreate


class ContentService:
    """Reads and bulk-updates the content key/value store."""

    def __init__(self, repository: IContentRepository):
        self.repository = repository

    async def get_content_map(self) -> Dict[str, str]:
        """All content as a ``{key: value}`` mapping, as the public pages consume it."""
        return {item.key: item.value for item in await self.repository.get_all()}

    async def get_content(self, key: str) -> Optional[Content]:
        return await self.repository.get_by_key(key)

    async def set_many(self, items: List[ContentCreate]) -> List[Content]:
        """
        Upsert several content entries.

        Args:
            items: Key/value pairs; later items win on duplicate keys

        Returns:
            Stored records in request order
        """
        results = [await self.repository.set(item) for item in items]
        logger.info(f"Content updated: keys={[item.key for item in items]}")
        return results

    async def update(self, key: str, value: str) -> Optional[Content]:
        return await self.repository.update(key, value)
