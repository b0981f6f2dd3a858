"""Shared fixtures: a small ward in an in-memory Location store."""

from __future__ import annotations

import pytest

from transfercenter.common.constants import OccupancyStatus
from transfercenter.common.reporting import EventReporter
from transfercenter.common.schemas import Location, StatusCoding
from transfercenter.store.memory import InMemoryLocationStore


def make_location(
    location_id: str,
    name: str,
    status: OccupancyStatus | None = None,
    version_id: str = "1",
) -> Location:
    return Location(
        id=location_id,
        name=name,
        operational_status=StatusCoding.for_status(status) if status else None,
        version_id=version_id,
    )


@pytest.fixture
def ward() -> InMemoryLocationStore:
    return InMemoryLocationStore(
        [
            make_location("loc-acute-201", "ACUTE 201", OccupancyStatus.OCCUPIED),
            make_location("loc-acute-202", "ACUTE 202", OccupancyStatus.UNOCCUPIED),
            make_location("loc-ed-305", "ED 305", OccupancyStatus.UNOCCUPIED),
            make_location("loc-pcu-4", "PCU 4"),
        ]
    )


@pytest.fixture
def reporter() -> EventReporter:
    return EventReporter()
