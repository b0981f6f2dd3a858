"""HL7 v2 message access and acknowledgement."""

from transfercenter.hl7.ack import AckCode, build_ack
from transfercenter.hl7.parser import HL7Message, HL7Segment, parse_hl7_message

__all__ = [
    "AckCode",
    "build_ack",
    "HL7Message",
    "HL7Segment",
    "parse_hl7_message",
]
