import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import ValidationError as PydanticValidationError

from courtcheck.core.errors import NotFoundError
from courtcheck.models.resource import Resource

logger = logging.getLogger(__name__)

# Demo courts, one seeded booking on C001 to show a conflict
DEFAULT_RESOURCES: list[dict] = [
    {
        "id": "C001",
        "name": "Court 1",
        "open": "08:00",
        "close": "22:00",
        "hourly_rate": "20.00",
        "peak_start": "17:00",
        "peak_end": "22:00",
        "peak_hourly_rate": "30.00",
        "bookings": {"2025-10-09": [{"start": "14:00", "end": "15:00"}]},
    },
    {"id": "C002", "name": "Court 2", "open": "09:00", "close": "21:00", "hourly_rate": "15.00"},
]


class RegistryError(Exception):
    """Seed data could not be turned into a registry."""


class ResourceRegistry:
    """Read-only id -> Resource mapping built once at startup and shared by all requests."""

    def __init__(self, resources: Iterable[Resource]) -> None:
        by_id: dict[str, Resource] = {}
        for r in resources:
            if r.id in by_id:
                raise RegistryError(f"Duplicate resource id: {r.id!r}")
            by_id[r.id] = r
        self._resources: Mapping[str, Resource] = MappingProxyType(by_id)

    def __len__(self) -> int:
        return len(self._resources)

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._resources

    def get(self, resource_id: str) -> Resource:
        resource = self._resources.get(resource_id)
        if resource is None:
            raise NotFoundError(resource_id)
        return resource

    def all(self) -> list[Resource]:
        return [self._resources[k] for k in sorted(self._resources)]

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "ResourceRegistry":
        resources: list[Resource] = []
        for i, record in enumerate(records):
            try:
                resources.append(Resource.model_validate(record))
            except PydanticValidationError as e:
                raise RegistryError(f"Invalid resource at index {i}: {e}") from e
        return cls(resources)


def load_registry(path: Path | None = None) -> ResourceRegistry:
    """Build the registry from a JSON seed file (a list of resources) or the built-in demo courts."""
    if path is None:
        registry = ResourceRegistry.from_records(DEFAULT_RESOURCES)
        logger.info("Loaded %d built-in resource(s)", len(registry))
        return registry
    try:
        records = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise RegistryError(f"Cannot read resources file {path}: {e}") from e
    if not isinstance(records, list):
        raise RegistryError(f"Resources file {path} must contain a JSON list")
    registry = ResourceRegistry.from_records(records)
    logger.info("Loaded %d resource(s) from %s", len(registry), path)
    return registry
