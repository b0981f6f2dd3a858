"""Bed availability census per level."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass

from transfercenter.common.constants import OccupancyStatus
from transfercenter.common.schemas import Location


@dataclass(frozen=True)
class UnitAvailability:
    """Bed counts for one level."""

    level: str
    total_beds: int
    available_beds: int
    rooms: tuple[Location, ...] = ()

    @property
    def occupied_beds(self) -> int:
        return self.total_beds - self.available_beds

    @property
    def availability_pct(self) -> int:
        if self.total_beds == 0:
            return 0
        return round(self.available_beds / self.total_beds * 100)


def summarize_bed_availability(locations: list[Location]) -> list[UnitAvailability]:
    """Group rooms by level and count the ones not marked occupied.

    Rooms with no status or an unrecognized status count as available.
    """
    by_level: dict[str, list[Location]] = defaultdict(list)
    for location in locations:
        if location.name:
            by_level[location.level].append(location)

    summary: list[UnitAvailability] = []
    for level in sorted(by_level):
        rooms = tuple(sorted(by_level[level], key=lambda loc: loc.name))
        available = sum(1 for room in rooms if room.status_code != OccupancyStatus.OCCUPIED)
        summary.append(
            UnitAvailability(
                level=level,
                total_beds=len(rooms),
                available_beds=available,
                rooms=rooms,
            )
        )
    return summary


__all__ = ["UnitAvailability", "summarize_bed_availability"]
