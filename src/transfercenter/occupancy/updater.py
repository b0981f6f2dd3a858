"""Idempotent bed occupancy updates against a Location store."""

from __future__ import annotations

import logging

from transfercenter.common.reporting import DiagnosticKind, EventReporter
from transfercenter.common.constants import OccupancyStatus
from transfercenter.common.schemas import StatusCoding
from transfercenter.store.base import LocationStore, StoreError

logger = logging.getLogger(__name__)


class OccupancyUpdater:
    """Set a named Location's operational status, skipping redundant writes.

    The status patch is conditional on the version read during lookup when
    the store reports one, so a concurrent writer causes a reported conflict
    rather than a lost update. Store failures are reported, never raised.
    """

    def __init__(self, store: LocationStore, reporter: EventReporter | None = None) -> None:
        self._store = store
        self._reporter = reporter or EventReporter()

    @property
    def reporter(self) -> EventReporter:
        return self._reporter

    async def set_occupancy(self, location_name: str, status: OccupancyStatus) -> bool:
        """Set the status of the Location named ``location_name``.

        Returns:
            True if a patch was written, False for a no-op or a reported failure.
        """
        try:
            location = await self._store.find_location_by_name(location_name)
        except StoreError as exc:
            self._reporter.report(
                DiagnosticKind.STORE_ERROR,
                f"Lookup of {location_name!r} failed: {exc}",
                location_name=location_name,
            )
            return False

        if location is None:
            self._reporter.report(
                DiagnosticKind.LOCATION_NOT_FOUND,
                f"No Location named {location_name!r}",
                location_name=location_name,
            )
            return False

        if location.status_code == status.value:
            logger.debug("%s already %s", location_name, status.display)
            return False

        try:
            await self._store.patch_location_status(
                location.id,
                StatusCoding.for_status(status),
                version_id=location.version_id,
            )
        except StoreError as exc:
            self._reporter.report(
                DiagnosticKind.STORE_ERROR,
                f"Setting {location_name!r} to {status.display} failed: {exc}",
                location_name=location_name,
            )
            return False

        self._reporter.report(
            DiagnosticKind.STATUS_UPDATED,
            f"{location_name} set to {status.display}",
            location_name=location_name,
        )
        return True


__all__ = ["OccupancyUpdater"]
