"""Service catalog store.

Every operation awaits the injected ``LatencyPolicy`` before touching the
repository, so callers always see "network" latency.
"""
from collections import OrderedDict
from typing import Dict, Iterable, List, Mapping, Optional, Union

from barberapp.core import LatencyPolicy, new_record_id, normalize_category
from barberapp.errors import NotFoundError
from barberapp.logging_config import get_logger
from barberapp.repositories import ServiceRepository
from barberapp.schemas import ServiceCreate, ServicePublic, ServiceUpdate
from barberapp.validation import validate_service_form, validate_service_patch

logger = get_logger(__name__)


class ServiceCatalog:

    def __init__(self, repository: ServiceRepository, latency: Optional[LatencyPolicy] = None):
        self.repository = repository
        self.latency = latency or LatencyPolicy.none()

    async def list_services(self) -> List[ServicePublic]:
        """Snapshot of all services, most recently added first."""
        await self.latency.wait("list_services")
        return self.repository.list()

    async def list_active_services(self) -> List[ServicePublic]:
        return [s for s in await self.list_services() if s.active]

    async def get_service(self, service_id: str) -> Optional[ServicePublic]:
        """Returns None when no service has ``service_id``."""
        await self.latency.wait("get_service")
        return self.repository.get(service_id)

    async def add_service(self, data: Union[ServiceCreate, Mapping]) -> ServicePublic:
        if not isinstance(data, ServiceCreate):
            data = validate_service_form(data)
        await self.latency.wait("add_service")

        service_id = new_record_id("service")
        while self.repository.exists(service_id):
            service_id = new_record_id("service")

        created = self.repository.insert_first(ServicePublic(id=service_id, **data.model_dump()))
        logger.info("service_added", service_id=created.id, name=created.name)
        return created

    async def update_service(self, service_id: str, patch: Union[ServiceUpdate, Mapping]) -> ServicePublic:
        """Merge ``patch`` onto the stored service. ``id`` is never patched."""
        if not isinstance(patch, ServiceUpdate):
            patch = validate_service_patch(patch)
        changes = patch.model_dump(exclude_unset=True, exclude_none=True)
        await self.latency.wait("update_service")

        existing = self.repository.get(service_id)
        if existing is None:
            raise NotFoundError("service", service_id)
        merged = existing.model_copy(update=changes)
        if not self.repository.replace(merged):
            raise NotFoundError("service", service_id)

        logger.info("service_updated", service_id=service_id, fields=sorted(changes))
        return merged

    async def delete_service(self, service_id: str) -> None:
        await self.latency.wait("delete_service")
        if not self.repository.delete(service_id):
            logger.warning("delete_missing_service", service_id=service_id)
            return
        logger.info("service_deleted", service_id=service_id)


def services_by_category(services: Iterable[ServicePublic]) -> Dict[str, dict]:
    """Group services under normalized category keys, keys sorted.

    Each group keeps the first original category name seen for its key.
    """
    groups: Dict[str, dict] = {}
    for service in services:
        key = normalize_category(service.category)
        if key not in groups:
            groups[key] = {"name": service.category, "services": []}
        groups[key]["services"].append(service)
    return OrderedDict((key, groups[key]) for key in sorted(groups))
