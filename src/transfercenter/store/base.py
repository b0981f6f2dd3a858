"""Resource store boundary for Location lookup and status updates."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from transfercenter.common.schemas import Location, StatusCoding


class StoreError(Exception):
    """Base error raised by a location store."""


class LocationConflictError(StoreError):
    """A conditional write lost against a concurrent writer."""


class LocationMissingError(StoreError):
    """The Location to update no longer exists."""


@runtime_checkable
class LocationStore(Protocol):
    """Async capability set the occupancy logic depends on."""

    async def find_location_by_name(self, name: str) -> Location | None:
        """Return the Location with exactly this name, or None."""
        ...

    async def patch_location_status(
        self,
        location_id: str,
        status: StatusCoding,
        version_id: str | None = None,
    ) -> Location:
        """Replace only the operational status of a Location.

        When ``version_id`` is given the write is conditional on the stored
        version still matching it.
        """
        ...

    async def list_locations(self) -> list[Location]:
        """Return every Location known to the store."""
        ...


__all__ = [
    "StoreError",
    "LocationConflictError",
    "LocationMissingError",
    "LocationStore",
]
