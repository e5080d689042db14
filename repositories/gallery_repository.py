"""
In-memory gallery image repository.
"""

from typing import List, Optional

from core.logger import logger
from repositories.base_repository import BaseRepository, Clock
from repositories.interfaces import IGalleryRepository
from repositories.models import GalleryImage, GalleryImageCreate


class GalleryRepository(BaseRepository[GalleryImage], IGalleryRepository):
    def __init__(self, clock: Optional[Clock] = None):
        super().__init__("gallery", clock)

    async def get_all(self) -> List[GalleryImage]:
        return self._find_many(lambda image: image.is_active)

    async def get_by_id(self, image_id: str) -> Optional[GalleryImage]:
        return self._get(image_id)

    async def create(self, data: GalleryImageCreate) -> GalleryImage:
        image = GalleryImage(
            id=self._new_id(),
            image_url=data.image_url,
            caption=data.caption,
            created_at=self._now(),
        )
        self._put(image.id, image)
        logger.info(f"Gallery image added: id={image.id}")
        return image

    async def delete(self, image_id: str) -> bool:
        if self._merge(image_id, {"is_active": False}) is None:
            logger.warning(f"Gallery image not found for deletion: id={image_id}")
            return False
        return True
