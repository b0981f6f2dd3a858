"""Bed occupancy updates and availability census."""

from transfercenter.occupancy.census import UnitAvailability, summarize_bed_availability
from transfercenter.occupancy.updater import OccupancyUpdater

__all__ = ["OccupancyUpdater", "UnitAvailability", "summarize_bed_availability"]
