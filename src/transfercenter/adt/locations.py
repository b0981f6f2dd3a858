"""Normalization of HL7 (level, room) pairs into canonical location names.

The alias, cleanup and relevance tables live in ``common.constants``;
new source-system quirks are added there, not here.
"""

from __future__ import annotations

from transfercenter.common.reporting import DiagnosticKind, EventReporter
from transfercenter.common.constants import LEVEL_ALIASES, RELEVANT_LEVELS, ROOM_CLEANUP


def normalize_level(level: str) -> str:
    """Map a raw level token to its canonical form."""
    return LEVEL_ALIASES.get(level, level)


def clean_room(level: str, room: str) -> str:
    """Strip level-specific extraneous characters from a room token.

    ``level`` must already be normalized.
    """
    cleanup = ROOM_CLEANUP.get(level)
    return cleanup(room) if cleanup else room


def parse_location(
    level: str | None,
    room: str | None,
    reporter: EventReporter | None = None,
) -> str | None:
    """Convert a raw (level, room) pair into a canonical ``"<LEVEL> <ROOM>"`` name.

    Empty strings count as absent. Returns None when neither component is
    present, when only one is or the room is empty after cleanup (reported as
    a missing component), or when the normalized level is not tracked
    (reported as out of scope).
    """
    if not level and not room:
        return None

    if not level or not room:
        if reporter is not None:
            missing = "level" if not level else "room"
            reporter.report(
                DiagnosticKind.MISSING_COMPONENT,
                f"Location is missing its {missing} (level={level!r}, room={room!r})",
            )
        return None

    canonical_level = normalize_level(level)
    if canonical_level not in RELEVANT_LEVELS:
        if reporter is not None:
            reporter.report(
                DiagnosticKind.OUT_OF_SCOPE,
                f"Level {canonical_level!r} is not tracked for occupancy",
            )
        return None

    cleaned = clean_room(canonical_level, room)
    if not cleaned:
        if reporter is not None:
            reporter.report(
                DiagnosticKind.MISSING_COMPONENT,
                f"Room {room!r} on {canonical_level} is empty after cleanup",
            )
        return None

    return f"{canonical_level} {cleaned}"


__all__ = ["normalize_level", "clean_room", "parse_location"]
