"""ADT event handling: admit, discharge and update transitions.

Each inbound message is classified, its PV1 locations normalized, and at
most two occupancy updates applied. Every parsed message is acknowledged
with AA regardless of what happened along the way.
"""

from __future__ import annotations

import logging

from transfercenter.adt.classifier import AdtAction, AdtEvent, extract_event
from transfercenter.adt.locations import parse_location
from transfercenter.common.reporting import DiagnosticKind, EventReporter
from transfercenter.common.config import TransferCenterConfig
from transfercenter.common.constants import OccupancyStatus
from transfercenter.hl7.ack import AckCode, build_ack
from transfercenter.hl7.parser import HL7Message, parse_hl7_message
from transfercenter.occupancy.updater import OccupancyUpdater
from transfercenter.store.base import LocationStore

logger = logging.getLogger(__name__)


class AdtMessageHandler:
    """Apply ADT messages to bed occupancy and acknowledge them."""

    def __init__(
        self,
        store: LocationStore,
        reporter: EventReporter | None = None,
        config: TransferCenterConfig | None = None,
    ) -> None:
        self._reporter = reporter or EventReporter()
        self._updater = OccupancyUpdater(store, self._reporter)
        self._config = config or TransferCenterConfig()

    @property
    def reporter(self) -> EventReporter:
        return self._reporter

    async def handle(self, message: HL7Message) -> HL7Message:
        """Process one parsed message and return its acknowledgement."""
        event = extract_event(message)
        logger.debug(
            "Message %s %s^%s -> %s",
            message.control_id,
            event.message_type,
            event.trigger_event,
            event.action.value,
        )

        if event.action == AdtAction.ADMIT:
            await self._admit(event)
        elif event.action == AdtAction.DISCHARGE:
            await self._discharge(event)
        elif event.action == AdtAction.UPDATE:
            await self._update(event)
        else:
            self._reporter.report(
                DiagnosticKind.IGNORED,
                f"Ignoring {event.message_type}^{event.trigger_event} message {message.control_id}",
            )

        return build_ack(
            message,
            AckCode.ACCEPT,
            sending_application=self._config.ack_sending_application,
            sending_facility=self._config.ack_sending_facility,
        )

    async def handle_raw(self, raw_message: str) -> str:
        """Parse ER7 text, process it, and return the serialized acknowledgement.

        Raises:
            ValueError: If the message is empty or has no MSH segment.
        """
        ack = await self.handle(parse_hl7_message(raw_message))
        return ack.to_er7()

    def _current_location(self, event: AdtEvent) -> str | None:
        name = parse_location(event.current.level, event.current.room, self._reporter)
        if name is None and event.current.is_empty:
            self._reporter.report(
                DiagnosticKind.MISSING_LOCATION,
                f"{event.trigger_event} message has no assigned patient location",
            )
        return name

    async def _admit(self, event: AdtEvent) -> None:
        current = self._current_location(event)
        if current is not None:
            await self._updater.set_occupancy(current, OccupancyStatus.OCCUPIED)

    async def _discharge(self, event: AdtEvent) -> None:
        # At discharge PV1-3 still holds the bed being vacated
        current = self._current_location(event)
        if current is not None:
            await self._updater.set_occupancy(current, OccupancyStatus.UNOCCUPIED)

    async def _update(self, event: AdtEvent) -> None:
        current = parse_location(event.current.level, event.current.room, self._reporter)
        previous = None
        if event.previous is not None:
            previous = parse_location(event.previous.level, event.previous.room, self._reporter)

        if previous is not None and previous != current:
            await self._updater.set_occupancy(previous, OccupancyStatus.UNOCCUPIED)
        if current is not None:
            await self._updater.set_occupancy(current, OccupancyStatus.OCCUPIED)


__all__ = ["AdtMessageHandler"]
