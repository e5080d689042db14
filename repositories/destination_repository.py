"""
In-memory destination repository.
Deletion is logical: records are flagged inactive and stay retrievable by ID.
"""

from typing import List, Optional

from core.logger import logger
from repositories.base_repository import BaseRepository, Clock, patch_fields
from repositories.interfaces import IDestinationRepository
from repositories.models import (
    DEFAULT_DESTINATION_ICON,
    Destination,
    DestinationCreate,
    DestinationType,
    DestinationUpdate,
)


class DestinationRepository(BaseRepository[Destination], IDestinationRepository):
    """Destinations keyed by ID."""

    def __init__(self, clock: Optional[Clock] = None):
        super().__init__("destinations", clock)

    async def get_all(self) -> List[Destination]:
        return self._find_many(lambda d: d.is_active)

    async def get_by_type(self, destination_type: DestinationType) -> List[Destination]:
        # str Enum compares equal to its plain value; unknown types match nothing
        return self._find_many(lambda d: d.type == destination_type and d.is_active)

    async def get_by_id(self, destination_id: str) -> Optional[Destination]:
        return self._get(destination_id)

    async def create(self, data: DestinationCreate) -> Destination:
        destination = Destination(
            id=self._new_id(),
            name=data.name,
            type=data.type,
            image_url=data.image_url,
            form_url=data.form_url,
            # Empty icon falls back to the default as well
            icon=data.icon or DEFAULT_DESTINATION_ICON,
            is_active=True if data.is_active is None else data.is_active,
            created_at=self._now(),
        )
        self._put(destination.id, destination)
        logger.info(
            f"Destination created: id={destination.id}, name={destination.name}, type={destination.type.value}"
        )
        return destination

    async def update(
        self, destination_id: str, data: DestinationUpdate
    ) -> Optional[Destination]:
        updated = self._merge(destination_id, patch_fields(data))
        if updated is None:
            logger.warning(f"Destination not found for update: id={destination_id}")
        return updated

    async def delete(self, destination_id: str) -> bool:
        if self._merge(destination_id, {"is_active": False}) is None:
            logger.warning(f"Destination not found for deletion: id={destination_id}")
            return False
        logger.info(f"Destination deactivated: id={destination_id}")
        return True
