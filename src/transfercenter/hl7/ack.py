"""HL7 v2 general acknowledgement (ACK) construction."""

from __future__ import annotations

from enum import StrEnum

import hl7

from transfercenter.hl7.parser import HL7Message, parse_hl7_message


class AckCode(StrEnum):
    """MSA-1 acknowledgement codes."""

    ACCEPT = "AA"
    ERROR = "AE"
    REJECT = "AR"


def build_ack(
    message: HL7Message,
    ack_code: AckCode = AckCode.ACCEPT,
    sending_application: str = "",
    sending_facility: str = "",
    text: str = "",
) -> HL7Message:
    """Build an ACK mirroring the inbound message's control fields.

    Sending and receiving application/facility are swapped; when no
    sending application or facility is given, the inbound receiver's
    values are used.

    Args:
        message: The inbound message being acknowledged.
        ack_code: MSA-1 code.
        sending_application: MSH-3 of the acknowledgement.
        sending_facility: MSH-4 of the acknowledgement.
        text: Optional MSA-3 text message.

    Returns:
        The acknowledgement message.

    Raises:
        ValueError: If the inbound message has no MSH segment.
    """
    if message.get_segment("MSH") is None:
        msg = "Cannot acknowledge a message without an MSH segment"
        raise ValueError(msg)

    ack = hl7.parse(message.to_er7()).create_ack(
        ack_code.value,
        application=sending_application or None,
        facility=sending_facility or None,
    )
    parsed = parse_hl7_message(str(ack))

    if text:
        msa = parsed.get_segment("MSA")
        if msa is not None:
            msa.set_field(3, text)
            parsed.raw = parsed.to_er7()
    return parsed


__all__ = ["AckCode", "build_ack"]
