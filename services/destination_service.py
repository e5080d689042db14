"""
Service for destination management.
"""

from typing import List, Optional

from core.logger import logger
from repositories.interfaces import IDestinationRepository
from repositories.models import (
    Destination,
    DestinationCreate,
    DestinationType,
    DestinationUpdate,
)


class DestinationService:
    """Thin business layer over the destination repository."""

    def __init__(self, repository: IDestinationRepository):
        self.repository = repository

    async def list_destinations(self) -> List[Destination]:
        return await self.repository.get_all()

    async def list_by_type(self, destination_type: DestinationType) -> List[Destination]:
        return await self.repository.get_by_type(destination_type)

    async def get_destination(self, destination_id: str) -> Optional[Destination]:
        return await self.repository.get_by_id(destination_id)

    async def create_destination(self, data: DestinationCreate) -> Destination:
        logger.info(f"Creating destination: name={data.name}, type={data.type.value}")
        return await self.repository.create(data)

    async def update_destination(
        self, destination_id: str, data: DestinationUpdate
    ) -> Optional[Destination]:
        return await self.repository.update(destination_id, data)

    async def delete_destination(self, destination_id: str) -> bool:
        return await self.repository.delete(destination_id)
