"""Tests for the occupancy updater."""

from __future__ import annotations

from transfercenter.common.constants import OccupancyStatus
from transfercenter.common.reporting import DiagnosticKind, EventReporter
from transfercenter.common.schemas import Location, StatusCoding
from transfercenter.occupancy.updater import OccupancyUpdater
from transfercenter.store.base import LocationConflictError, StoreError
from transfercenter.store.memory import InMemoryLocationStore


class _FailingStore(InMemoryLocationStore):
    """Store whose writes always fail."""

    async def patch_location_status(
        self,
        location_id: str,
        status: StatusCoding,
        version_id: str | None = None,
    ) -> Location:
        raise StoreError("write refused")


class _RacingStore(InMemoryLocationStore):
    """Store where another writer bumps the version between read and write."""

    async def find_location_by_name(self, name: str) -> Location | None:
        location = await super().find_location_by_name(name)
        if location is not None:
            self.add(location.model_copy(update={"version_id": "99"}))
        return location


class TestSetOccupancy:
    async def test_patches_when_status_differs(
        self, ward: InMemoryLocationStore, reporter: EventReporter
    ) -> None:
        updater = OccupancyUpdater(ward, reporter)
        assert await updater.set_occupancy("ED 305", OccupancyStatus.OCCUPIED) is True

        assert len(ward.patches) == 1
        assert ward.patches[0].code == "O"
        assert ward.patches[0].display == "Occupied"
        updated = ward.get("loc-ed-305")
        assert updated is not None
        assert updated.status_code == "O"
        assert updated.version_id == "2"
        assert [d.kind for d in reporter.diagnostics] == [DiagnosticKind.STATUS_UPDATED]

    async def test_noop_when_already_in_status(self, ward: InMemoryLocationStore) -> None:
        updater = OccupancyUpdater(ward)
        assert await updater.set_occupancy("ACUTE 201", OccupancyStatus.OCCUPIED) is False
        assert ward.patches == []

    async def test_repeated_call_patches_once(self, ward: InMemoryLocationStore) -> None:
        updater = OccupancyUpdater(ward)
        await updater.set_occupancy("ACUTE 202", OccupancyStatus.OCCUPIED)
        await updater.set_occupancy("ACUTE 202", OccupancyStatus.OCCUPIED)
        assert len(ward.patches) == 1

    async def test_unknown_status_is_overwritten(self, ward: InMemoryLocationStore) -> None:
        updater = OccupancyUpdater(ward)
        assert await updater.set_occupancy("PCU 4", OccupancyStatus.UNOCCUPIED) is True
        assert ward.patches[0].code == "U"
        assert ward.patches[0].display == "Unoccupied"

    async def test_lookup_miss_is_reported(
        self, ward: InMemoryLocationStore, reporter: EventReporter
    ) -> None:
        updater = OccupancyUpdater(ward, reporter)
        assert await updater.set_occupancy("ED 999", OccupancyStatus.OCCUPIED) is False
        assert ward.patches == []
        assert len(reporter.warnings) == 1
        assert reporter.warnings[0].kind == DiagnosticKind.LOCATION_NOT_FOUND
        assert reporter.warnings[0].location_name == "ED 999"

    async def test_store_failure_is_reported(self, reporter: EventReporter) -> None:
        store = _FailingStore([Location(id="x", name="ED 1")])
        updater = OccupancyUpdater(store, reporter)
        assert await updater.set_occupancy("ED 1", OccupancyStatus.OCCUPIED) is False
        assert [d.kind for d in reporter.warnings] == [DiagnosticKind.STORE_ERROR]

    async def test_concurrent_write_conflict(self, reporter: EventReporter) -> None:
        store = _RacingStore([Location(id="x", name="ED 1")])
        updater = OccupancyUpdater(store, reporter)
        assert await updater.set_occupancy("ED 1", OccupancyStatus.OCCUPIED) is False
        assert store.patches == []
        assert [d.kind for d in reporter.warnings] == [DiagnosticKind.STORE_ERROR]
        assert "expected 1" in reporter.warnings[0].message

    async def test_conflict_error_is_store_error(self) -> None:
        assert issubclass(LocationConflictError, StoreError)

    async def test_default_reporter(self, ward: InMemoryLocationStore) -> None:
        updater = OccupancyUpdater(ward)
        await updater.set_occupancy("ED 999", OccupancyStatus.OCCUPIED)
        assert updater.reporter.of_kind(DiagnosticKind.LOCATION_NOT_FOUND)
