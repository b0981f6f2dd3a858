#!/usr/bin/env python3
"""
Transfer Center ADT Demo Script.

Runs a short sequence of HL7 ADT messages against an in-memory ward and
prints the acknowledgements, the diagnostics raised along the way, and the
resulting bed census:
1. A01 admit into ACUTE 201 (room sent as "A201").
2. A08 update moving the patient from ACUTE 201 to the ED (sent as "ER").
3. A02 transfer, which is acknowledged but ignored.
4. A03 discharge from ED 305.

Usage:
    python demo.py
"""

import asyncio
import os
import sys

# Ensure src is in python path
sys.path.append(os.path.join(os.getcwd(), "src"))

try:
    from transfercenter.adt.handlers import AdtMessageHandler
    from transfercenter.common.config import TransferCenterConfig, configure_logging
    from transfercenter.common.constants import OccupancyStatus
    from transfercenter.common.reporting import EventReporter
    from transfercenter.common.schemas import Location, StatusCoding
    from transfercenter.hl7.parser import SEGMENT_SEPARATOR
    from transfercenter.occupancy.census import summarize_bed_availability
    from transfercenter.store.memory import InMemoryLocationStore
except ImportError as e:
    print(f"Error importing modules: {e}")
    print("Please install the package first: pip install -e .")
    sys.exit(1)


def _msh(trigger: str, control_id: str) -> str:
    return f"MSH|^~\\&|EPIC|HOSP|TRANSFER-CENTER|HOSP|20250101120000||ADT^{trigger}|{control_id}|P|2.5"


MESSAGES = [
    _msh("A01", "MSG001") + "\rPID|||PAT001^^^HOSP^MR||DOE^JOHN\rPV1||I|ACUTE^A201^A",
    _msh("A08", "MSG002") + "\rPID|||PAT001^^^HOSP^MR||DOE^JOHN\rPV1||I|ER^305|||ACUTE^201^A",
    _msh("A02", "MSG003") + "\rPID|||PAT001^^^HOSP^MR||DOE^JOHN\rPV1||I|PCU^4|||ED^305",
    _msh("A03", "MSG004") + "\rPID|||PAT001^^^HOSP^MR||DOE^JOHN\rPV1||I|ED^305",
]


def _ward() -> InMemoryLocationStore:
    vacant = StatusCoding.for_status(OccupancyStatus.UNOCCUPIED)
    names = ["ACUTE 201", "ACUTE 202", "ED 305", "ED 306", "PCU 4"]
    return InMemoryLocationStore(
        [Location(id=f"loc-{i}", name=name, operational_status=vacant) for i, name in enumerate(names)]
    )


async def run_demo():
    config = TransferCenterConfig()
    configure_logging(config)

    print("========================================")
    print("   Transfer Center ADT Demo")
    print("========================================")

    store = _ward()
    reporter = EventReporter()
    handler = AdtMessageHandler(store, reporter, config)

    for raw in MESSAGES:
        reporter.clear()
        print(f"\n[>] {raw.split(SEGMENT_SEPARATOR)[0]}")
        ack = await handler.handle_raw(raw)
        print(f"    ACK: {ack.split(SEGMENT_SEPARATOR)[1]}")
        for diagnostic in reporter.diagnostics:
            print(f"    - {diagnostic.kind}: {diagnostic.message}")

    print("\n[Census]")
    for unit in summarize_bed_availability(await store.list_locations()):
        print(f"    {unit.level}: {unit.available_beds} of {unit.total_beds} available ({unit.availability_pct}%)")

    print("\n========================================")
    print("Demo complete.")


if __name__ == "__main__":
    asyncio.run(run_demo())
