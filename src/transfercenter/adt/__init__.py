"""ADT (admit/discharge/transfer) processing for bed occupancy."""

from transfercenter.adt.classifier import (
    AdtAction,
    AdtEvent,
    RawLocation,
    classify,
    extract_event,
)
from transfercenter.adt.handlers import AdtMessageHandler
from transfercenter.adt.locations import clean_room, normalize_level, parse_location
from transfercenter.common.reporting import Diagnostic, DiagnosticKind, EventReporter

__all__ = [
    "AdtAction",
    "AdtEvent",
    "RawLocation",
    "classify",
    "extract_event",
    "AdtMessageHandler",
    "clean_room",
    "normalize_level",
    "parse_location",
    "Diagnostic",
    "DiagnosticKind",
    "EventReporter",
]
