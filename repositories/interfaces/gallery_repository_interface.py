"""
Interface for Gallery Repository.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from repositories.models import GalleryImage, GalleryImageCreate


class IGalleryRepository(ABC):
    """Interface for gallery image operations. Deletion is logical."""

    @abstractmethod
    async def get_all(self) -> List[GalleryImage]:
        """List active gallery images, oldest first."""
        pass

    @abstractmethod
    async def get_by_id(self, image_id: str) -> Optional[GalleryImage]:
        """Find an image by ID, including inactive ones."""
        pass

    @abstractmethod
    async def create(self, data: GalleryImageCreate) -> GalleryImage:
        """Add an image to the gallery."""
        pass

    @abstractmethod
    async def delete(self, image_id: str) -> bool:
        """Hide an image. Returns False if it does not exist."""
        pass
