"""
In-memory travel package repository.
Deletion is logical: records are flagged inactive and stay retrievable by ID.
"""

from typing import List, Optional

from core.logger import logger
from repositories.base_repository import BaseRepository, Clock, patch_fields
from repositories.interfaces import IPackageRepository
from repositories.models import Package, PackageCreate, PackageUpdate


class PackageRepository(BaseRepository[Package], IPackageRepository):
    """Packages keyed by ID. destination_id is stored as given."""

    def __init__(self, clock: Optional[Clock] = None):
        super().__init__("packages", clock)

    async def get_all(self) -> List[Package]:
        return self._find_many(lambda p: p.is_active)

    async def get_featured(self) -> List[Package]:
        return self._find_many(lambda p: p.is_active and p.is_featured)

    async def get_by_destination(self, destination_id: str) -> List[Package]:
        return self._find_many(
            lambda p: p.destination_id == destination_id and p.is_active
        )

    async def get_by_id(self, package_id: str) -> Optional[Package]:
        return self._get(package_id)

    async def create(self, data: PackageCreate) -> Package:
        fields = data.model_dump(exclude={"is_active"})
        package = Package(
            id=self._new_id(),
            **fields,
            is_active=True if data.is_active is None else data.is_active,
            created_at=self._now(),
        )
        self._put(package.id, package)
        logger.info(f"Package created: id={package.id}, name={package.name}")
        return package

    async def update(self, package_id: str, data: PackageUpdate) -> Optional[Package]:
        updated = self._merge(package_id, patch_fields(data))
        if updated is None:
            logger.warning(f"Package not found for update: id={package_id}")
        return updated

    async def delete(self, package_id: str) -> bool:
        if self._merge(package_id, {"is_active": False}) is None:
            logger.warning(f"Package not found for deletion: id={package_id}")
            return False
        logger.info(f"Package deactivated: id={package_id}")
        return True
