"""Common configuration, constants and schemas for the transfer center."""

from transfercenter.common.config import TransferCenterConfig, configure_logging
from transfercenter.common.constants import (
    BED_STATUS_SYSTEM,
    LEVEL_ALIASES,
    RELEVANT_LEVELS,
    ROOM_CLEANUP,
    OccupancyStatus,
)
from transfercenter.common.reporting import Diagnostic, DiagnosticKind, EventReporter
from transfercenter.common.schemas import Location, StatusCoding

__all__ = [
    "TransferCenterConfig",
    "configure_logging",
    "OccupancyStatus",
    "BED_STATUS_SYSTEM",
    "LEVEL_ALIASES",
    "RELEVANT_LEVELS",
    "ROOM_CLEANUP",
    "Location",
    "StatusCoding",
    "Diagnostic",
    "DiagnosticKind",
    "EventReporter",
]
