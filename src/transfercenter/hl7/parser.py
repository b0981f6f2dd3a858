"""HL7 v2.x message accessor for ADT processing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

FIELD_SEPARATOR: Final[str] = "|"
COMPONENT_SEPARATOR: Final[str] = "^"
REPETITION_SEPARATOR: Final[str] = "~"
SEGMENT_SEPARATOR: Final[str] = "\r"


@dataclass
class HL7Segment:
    """A single HL7 segment (e.g., MSH, PID, PV1)."""

    segment_id: str
    fields: list[str]

    def get_field(self, index: int) -> str:
        """Get field by 1-based index (HL7 convention).

        MSH-1 is the field separator itself, so MSH fields are shifted by one
        relative to the split list.
        """
        position = index - 1 if self.segment_id == "MSH" else index
        if self.segment_id == "MSH" and index == 1:
            return FIELD_SEPARATOR
        if position < 1 or position > len(self.fields):
            return ""
        return self.fields[position - 1]

    def get_component(self, field_index: int, component_index: int) -> str:
        """Get component from the first repetition of a field (1-based indices)."""
        field_value = self.get_field(field_index).split(REPETITION_SEPARATOR)[0]
        components = field_value.split(COMPONENT_SEPARATOR)
        if component_index < 1 or component_index > len(components):
            return ""
        return components[component_index - 1]

    def set_field(self, index: int, value: str) -> None:
        """Set a field by 1-based index, padding with empty fields as needed."""
        position = index - 1 if self.segment_id == "MSH" else index
        if position < 1:
            msg = f"Cannot set {self.segment_id}-{index}"
            raise ValueError(msg)
        while len(self.fields) < position:
            self.fields.append("")
        self.fields[position - 1] = value

    def to_er7(self) -> str:
        return FIELD_SEPARATOR.join([self.segment_id, *self.fields])


@dataclass
class HL7Message:
    """Parsed HL7 v2.x message."""

    raw: str
    segments: list[HL7Segment] = field(default_factory=list)
    message_type: str = ""
    trigger_event: str = ""

    def get_segment(self, segment_id: str) -> HL7Segment | None:
        """Get first segment matching the ID."""
        for seg in self.segments:
            if seg.segment_id == segment_id:
                return seg
        return None

    @property
    def control_id(self) -> str:
        """MSH-10 message control ID."""
        msh = self.get_segment("MSH")
        return msh.get_field(10) if msh else ""

    def to_er7(self) -> str:
        """Serialize to ER7 (pipe-delimited) text."""
        return SEGMENT_SEPARATOR.join(seg.to_er7() for seg in self.segments)


def parse_hl7_message(raw_message: str) -> HL7Message:
    """Parse a raw HL7 v2.x message string into structured data.

    Args:
        raw_message: Raw HL7 message with segment separators.

    Returns:
        Parsed HL7Message with segments, message type, and trigger event.

    Raises:
        ValueError: If message is empty or missing MSH segment.
    """
    if not raw_message or not raw_message.strip():
        msg = "HL7 message cannot be empty"
        raise ValueError(msg)

    # Normalize line endings
    normalized = raw_message.lstrip("\ufeff").replace("\r\n", SEGMENT_SEPARATOR)
    normalized = normalized.replace("\n", SEGMENT_SEPARATOR)
    segment_lines = [line.strip() for line in normalized.split(SEGMENT_SEPARATOR) if line.strip()]

    if not segment_lines:
        msg = "No segments found in HL7 message"
        raise ValueError(msg)

    message = HL7Message(raw=raw_message)

    for line in segment_lines:
        parts = line.split(FIELD_SEPARATOR)
        segment_id = parts[0]
        fields = parts[1:] if len(parts) > 1 else []
        message.segments.append(HL7Segment(segment_id=segment_id, fields=fields))

    msh = message.get_segment("MSH")
    if msh is None:
        msg = "HL7 message missing MSH segment"
        raise ValueError(msg)

    # MSH-9: Message Type (type^trigger^structure)
    message.message_type = msh.get_component(9, 1)
    message.trigger_event = msh.get_component(9, 2)

    return message


__all__ = [
    "HL7Segment",
    "HL7Message",
    "parse_hl7_message",
    "FIELD_SEPARATOR",
    "COMPONENT_SEPARATOR",
    "SEGMENT_SEPARATOR",
]
