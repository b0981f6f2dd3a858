"""Location stores used by occupancy tracking."""

from transfercenter.store.base import (
    LocationConflictError,
    LocationMissingError,
    LocationStore,
    StoreError,
)
from transfercenter.store.fhir import FhirLocationStore, FhirStoreError
from transfercenter.store.memory import InMemoryLocationStore, PatchRecord

__all__ = [
    "LocationConflictError",
    "LocationMissingError",
    "LocationStore",
    "StoreError",
    "FhirLocationStore",
    "FhirStoreError",
    "InMemoryLocationStore",
    "PatchRecord",
]
