"""In-memory, versioned Location store."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from transfercenter.common.schemas import Location, StatusCoding
from transfercenter.store.base import LocationConflictError, LocationMissingError


@dataclass(frozen=True)
class PatchRecord:
    """A status patch applied to the store."""

    location_id: str
    location_name: str
    code: str
    display: str | None


class InMemoryLocationStore:
    """Location store kept in a dict, keyed by id."""

    def __init__(self, locations: list[Location] | None = None) -> None:
        self._locations: dict[str, Location] = {}
        self.patches: list[PatchRecord] = []
        for location in locations or []:
            self.add(location)

    def add(self, location: Location) -> Location:
        """Add or replace a Location, assigning an id and version when missing."""
        stored = location.model_copy(
            update={
                "id": location.id or str(uuid.uuid4()),
                "version_id": location.version_id or "1",
            }
        )
        self._locations[stored.id] = stored
        return stored

    def get(self, location_id: str) -> Location | None:
        return self._locations.get(location_id)

    async def find_location_by_name(self, name: str) -> Location | None:
        for location in self._locations.values():
            if location.name == name:
                return location
        return None

    async def patch_location_status(
        self,
        location_id: str,
        status: StatusCoding,
        version_id: str | None = None,
    ) -> Location:
        current = self._locations.get(location_id)
        if current is None:
            msg = f"Location/{location_id} not found"
            raise LocationMissingError(msg)
        if version_id is not None and current.version_id != version_id:
            msg = f"Location/{location_id} is at version {current.version_id}, expected {version_id}"
            raise LocationConflictError(msg)

        updated = current.model_copy(
            update={
                "operational_status": status,
                "version_id": str(int(current.version_id or "0") + 1),
            }
        )
        self._locations[location_id] = updated
        self.patches.append(
            PatchRecord(
                location_id=location_id,
                location_name=updated.name,
                code=status.code,
                display=status.display,
            )
        )
        return updated

    async def list_locations(self) -> list[Location]:
        return list(self._locations.values())


__all__ = ["InMemoryLocationStore", "PatchRecord"]
