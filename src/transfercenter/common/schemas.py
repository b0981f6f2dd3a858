"""Pydantic v2 schemas for the FHIR Location fields used by occupancy tracking."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from transfercenter.common.constants import BED_STATUS_SYSTEM, OccupancyStatus


class StatusCoding(BaseModel):
    """A FHIR Coding for a Location's operational status."""

    system: str = BED_STATUS_SYSTEM
    code: str | None = None
    display: str | None = None

    @classmethod
    def for_status(cls, status: OccupancyStatus) -> StatusCoding:
        """Canonical code/display pair for a tracked occupancy status."""
        return cls(code=status.value, display=status.display)


class Location(BaseModel):
    """A bed or room Location, reduced to what occupancy tracking needs."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    operational_status: StatusCoding | None = Field(default=None, alias="operationalStatus")
    version_id: str | None = None
    description: str | None = None

    @property
    def status_code(self) -> str | None:
        return self.operational_status.code if self.operational_status else None

    @property
    def level(self) -> str:
        """Level token of a canonical ``"<LEVEL> <ROOM>"`` name."""
        return self.name.split(" ", 1)[0]

    @classmethod
    def from_fhir(cls, resource: dict[str, Any]) -> Location:
        """Build from a FHIR R4 Location resource dictionary.

        Raises:
            ValueError: If the resource is not a Location.
        """
        if resource.get("resourceType") != "Location":
            msg = f"Expected a Location resource, got {resource.get('resourceType')!r}"
            raise ValueError(msg)
        return cls(
            id=resource.get("id", ""),
            name=resource.get("name", ""),
            operationalStatus=resource.get("operationalStatus"),
            version_id=resource.get("meta", {}).get("versionId"),
            description=resource.get("description"),
        )


__all__ = ["StatusCoding", "Location"]
