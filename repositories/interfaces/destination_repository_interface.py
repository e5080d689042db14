"""
Interface for Destination Repository.
Defines the contract that all destination repositories must implement.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from repositories.models import (
    Destination,
    DestinationCreate,
    DestinationType,
    DestinationUpdate,
)


class IDestinationRepository(ABC):
    """Interface for destination operations. Deletion is logical."""

    @abstractmethod
    async def get_all(self) -> List[Destination]:
        """
        List active destinations.

        Returns:
            List[Destination]: Destinations with is_active=True
        """
        pass

    @abstractmethod
    async def get_by_type(self, destination_type: DestinationType) -> List[Destination]:
        """
        List active destinations of one type.

        Args:
            destination_type: domestic or international

        Returns:
            List[Destination]: Matching active destinations
        """
        pass

    @abstractmethod
    async def get_by_id(self, destination_id: str) -> Optional[Destination]:
        """
        Find a destination by ID, including inactive ones.

        Args:
            destination_id: ID of the destination

        Returns:
            Optional[Destination]: Destination if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, data: DestinationCreate) -> Destination:
        """
        Create a destination. Missing icon/is_active fall back to defaults.

        Args:
            data: Destination fields

        Returns:
            Destination: Created destination
        """
        pass

    @abstractmethod
    async def update(
        self, destination_id: str, data: DestinationUpdate
    ) -> Optional[Destination]:
        """
        Shallow-merge a partial update onto a destination.

        Args:
            destination_id: ID of the destination
            data: Fields to change

        Returns:
            Optional[Destination]: Updated destination, None if not found
        """
        pass

    @abstractmethod
    async def delete(self, destination_id: str) -> bool:
        """
        Soft-delete a destination by marking it inactive.

        Args:
            destination_id: ID of the destination

        Returns:
            bool: True if the destination existed, False otherwise
        """
        pass
