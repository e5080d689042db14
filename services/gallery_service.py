"""
Service for the public photo gallery.
"""

from typing import List

from repositories.interfaces import IGalleryRepository
from repositories.models import GalleryImage, GalleryImageCreate


class GalleryService:
    def __init__(self, repository: IGalleryRepository):
        self.repository = repository

    async def list_images(self) -> List[GalleryImage]:
        return await self.repository.get_all()

    async def add_image(self, data: GalleryImageCreate) -> GalleryImage:
        return await self.repository.create(data)

    async def remove_image(self, image_id: str) -> bool:
        return await self.repository.delete(image_id)
