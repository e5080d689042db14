"""
In-memory content repository keyed by content key.
"""

from typing import List, Optional

from core.logger import logger
from repositories.base_repository import BaseRepository, Clock
from repositories.interfaces import IContentRepository
from repositories.models import Content, ContentCreate


class ContentRepository(BaseRepository[Content], IContentRepository):
    """Site copy keyed by its dotted key, so a key is never stored twice."""

    def __init__(self, clock: Optional[Clock] = None):
        super().__init__("content", clock)

    async def get_all(self) -> List[Content]:
        return self._values()

    async def get_by_key(self, key: str) -> Optional[Content]:
        return self._get(key)

    async def set(self, data: ContentCreate) -> Content:
        existing = self._get(data.key)
        content = Content(
            id=existing.id if existing else self._new_id(),
            key=data.key,
            value=data.value,
            updated_at=self._now(),
        )
        self._put(data.key, content)
        logger.debug(f"Content set: key={data.key}, created={existing is None}")
        return content

    async def update(self, key: str, value: str) -> Optional[Content]:
        updated = self._merge(key, {"value": value, "updated_at": self._now()})
        if updated is None:
            logger.warning(f"Content key not found for update: key={key}")
        return updated
