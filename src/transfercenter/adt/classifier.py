"""Classification of inbound HL7 messages into ADT actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Final, Mapping

from transfercenter.hl7.parser import HL7Message

ADT_MESSAGE_TYPE: Final[str] = "ADT"

# PV1-3 assigned patient location, PV1-6 prior patient location
ASSIGNED_LOCATION_FIELD: Final[int] = 3
PRIOR_LOCATION_FIELD: Final[int] = 6
LEVEL_COMPONENT: Final[int] = 1
ROOM_COMPONENT: Final[int] = 2


class AdtAction(StrEnum):
    """What ADT processing does with a message."""

    IGNORE = "ignore"
    ADMIT = "admit"
    DISCHARGE = "discharge"
    UPDATE = "update"


# A01 admit, A03 discharge, A08 update patient information
TRIGGER_ACTIONS: Final[Mapping[str, AdtAction]] = MappingProxyType(
    {
        "A01": AdtAction.ADMIT,
        "A03": AdtAction.DISCHARGE,
        "A08": AdtAction.UPDATE,
    }
)


@dataclass(frozen=True)
class RawLocation:
    """Level and room components of a PV1 location field."""

    level: str
    room: str

    @property
    def is_empty(self) -> bool:
        return not self.level and not self.room


@dataclass(frozen=True)
class AdtEvent:
    """Transient view of one inbound ADT message."""

    action: AdtAction
    message_type: str
    trigger_event: str
    current: RawLocation
    previous: RawLocation | None = None


def classify(message: HL7Message) -> AdtAction:
    """Decide which ADT action, if any, a message calls for."""
    if message.message_type != ADT_MESSAGE_TYPE:
        return AdtAction.IGNORE
    return TRIGGER_ACTIONS.get(message.trigger_event, AdtAction.IGNORE)


def _read_location(message: HL7Message, field_index: int) -> RawLocation:
    pv1 = message.get_segment("PV1")
    if pv1 is None:
        return RawLocation(level="", room="")
    return RawLocation(
        level=pv1.get_component(field_index, LEVEL_COMPONENT).strip(),
        room=pv1.get_component(field_index, ROOM_COMPONENT).strip(),
    )


def extract_event(message: HL7Message) -> AdtEvent:
    """Classify a message and pull out the location fields it carries.

    The prior location is only read for update events.
    """
    action = classify(message)
    return AdtEvent(
        action=action,
        message_type=message.message_type,
        trigger_event=message.trigger_event,
        current=_read_location(message, ASSIGNED_LOCATION_FIELD),
        previous=_read_location(message, PRIOR_LOCATION_FIELD) if action == AdtAction.UPDATE else None,
    )


__all__ = [
    "AdtAction",
    "AdtEvent",
    "RawLocation",
    "TRIGGER_ACTIONS",
    "classify",
    "extract_event",
]
