"""Constants, enums and normalization tables for the transfer center."""

import re
from enum import StrEnum
from types import MappingProxyType
from typing import Callable, Final, Mapping


class OccupancyStatus(StrEnum):
    """Bed status codes written by ADT processing (HL7 table 0116)."""

    OCCUPIED = "O"
    UNOCCUPIED = "U"

    @property
    def display(self) -> str:
        return OCCUPANCY_DISPLAY[self]


OCCUPANCY_DISPLAY: Final[Mapping[OccupancyStatus, str]] = MappingProxyType(
    {
        OccupancyStatus.OCCUPIED: "Occupied",
        OccupancyStatus.UNOCCUPIED: "Unoccupied",
    }
)

BED_STATUS_SYSTEM: Final[str] = "http://terminology.hl7.org/CodeSystem/v2-0116"

# Raw level tokens used by upstream systems -> canonical level tokens
LEVEL_ALIASES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "ER": "ED",
        "CPCU": "PCU",
        "IPREH": "IPREHAB",
    }
)

# Levels whose beds are tracked for occupancy
RELEVANT_LEVELS: Final[frozenset[str]] = frozenset(
    {"PCU", "3SURG", "OBGYN", "IPREHAB", "ACUTE", "MPCU", "MSICU", "ED"}
)

_ACUTE_WING_MARKER = re.compile("A")


def _strip_acute_marker(room: str) -> str:
    # ACUTE feeds embed the wing letter in the room code ("A12")
    return _ACUTE_WING_MARKER.sub("", room)


# Canonical level -> room token cleanup
ROOM_CLEANUP: Final[Mapping[str, Callable[[str], str]]] = MappingProxyType(
    {
        "ACUTE": _strip_acute_marker,
    }
)

__all__ = [
    "OccupancyStatus",
    "OCCUPANCY_DISPLAY",
    "BED_STATUS_SYSTEM",
    "LEVEL_ALIASES",
    "RELEVANT_LEVELS",
    "ROOM_CLEANUP",
]
