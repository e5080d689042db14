"""
Interface for Package Repository.
Defines the contract that all package repositories must implement.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from repositories.models import Package, PackageCreate, PackageUpdate


class IPackageRepository(ABC):
    """Interface for travel package operations. Deletion is logical."""

    @abstractmethod
    async def get_all(self) -> List[Package]:
        """List active packages."""
        pass

    @abstractmethod
    async def get_featured(self) -> List[Package]:
        """List active packages flagged as featured."""
        pass

    @abstractmethod
    async def get_by_destination(self, destination_id: str) -> List[Package]:
        """
        List active packages for a destination.

        Args:
            destination_id: Referenced destination ID (not validated)

        Returns:
            List[Package]: Matching active packages
        """
        pass

    @abstractmethod
    async def get_by_id(self, package_id: str) -> Optional[Package]:
        """Find a package by ID, including inactive ones."""
        pass

    @abstractmethod
    async def create(self, data: PackageCreate) -> Package:
        """
        Create a package.

        Args:
            data: Package fields

        Returns:
            Package: Created package
        """
        pass

    @abstractmethod
    async def update(self, package_id: str, data: PackageUpdate) -> Optional[Package]:
        """
        Shallow-merge a partial update onto a package.

        Args:
            package_id: ID of the package
            data: Fields to change

        Returns:
            Optional[Package]: Updated package, None if not found
        """
        pass

    @abstractmethod
    async def delete(self, package_id: str) -> bool:
        """
        Soft-delete a package by marking it inactive.

        Returns:
            bool: True if the package existed, False otherwise
        """
        pass
