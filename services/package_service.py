"""
Service for travel package management.
"""

from typing import List, Optional

from core.logger import logger
from repositories.interfaces import IPackageRepository
from repositories.models import Package, PackageCreate, PackageUpdate


def clean_highlights(highlights: List[str]) -> List[str]:
    """Drop blank highlight rows left over from the admin form, keeping order."""
    return [h.strip() for h in highlights if h and h.strip()]


class PackageService:
    """Business layer over the package repository."""

    def __init__(self, repository: IPackageRepository):
        self.repository = repository

    async def list_packages(self) -> List[Package]:
        return await self.repository.get_all()

    async def list_featured(self) -> List[Package]:
        return await self.repository.get_featured()

    async def list_for_destination(self, destination_id: str) -> List[Package]:
        return await self.repository.get_by_destination(destination_id)

    async def get_package(self, package_id: str) -> Optional[Package]:
        return await self.repository.get_by_id(package_id)

    async def get_active_package(self, package_id: str) -> Optional[Package]:
        """Package by ID for the public site; inactive packages count as missing."""
        package = await self.repository.get_by_id(package_id)
        if package is None or not package.is_active:
            return None
        return package

    async def create_package(self, data: PackageCreate) -> Package:
        data = data.model_copy(update={"highlights": clean_highlights(data.highlights)})
        logger.info(f"Creating package: name={data.name}, destination_id={data.destination_id}")
        return await self.repository.create(data)

    async def update_package(
        self, package_id: str, data: PackageUpdate
    ) -> Optional[Package]:
        if data.highlights is not None:
            data = data.model_copy(
                update={"highlights": clean_highlights(data.highlights)}
            )
        return await self.repository.update(package_id, data)

    async def delete_package(self, package_id: str) -> bool:
        return await self.repository.delete(package_id)
