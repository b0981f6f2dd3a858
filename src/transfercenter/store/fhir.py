"""FHIR R4 REST implementation of the Location store.

Lookups use ``GET /Location?name:exact=...``; status updates are JSON
Patch requests touching only ``/operationalStatus``, made conditional with
``If-Match`` when the caller knows the resource version.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from transfercenter.common.config import TransferCenterConfig
from transfercenter.common.schemas import Location, StatusCoding
from transfercenter.store.base import (
    LocationConflictError,
    LocationMissingError,
    StoreError,
)

logger = logging.getLogger(__name__)

FHIR_JSON: str = "application/fhir+json"
JSON_PATCH: str = "application/json-patch+json"
PAGE_SIZE: int = 100


class FhirStoreError(StoreError):
    """Non-2xx response, transport failure or unusable body from the FHIR server."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"FHIR server error {status_code}: {body}")


class FhirLocationStore:
    """Async Location store backed by a FHIR R4 server.

    Use as an async context manager, or call ``connect()``/``close()``.
    A pre-built ``httpx.AsyncClient`` may be passed in, in which case its
    ``base_url`` is used and the store does not close it.
    """

    def __init__(
        self,
        base_url: str = "",
        access_token: str = "",
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.access_token = access_token
        self.timeout = timeout
        self._http = client
        self._owns_client = client is None

    @classmethod
    def from_config(cls, config: TransferCenterConfig) -> FhirLocationStore:
        return cls(
            base_url=config.fhir_base_url,
            access_token=config.fhir_access_token,
            timeout=config.http_timeout_seconds,
        )

    async def connect(self) -> None:
        """Open the underlying HTTP connection pool."""
        if self._http is None:
            self._http = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout)
            self._owns_client = True

    async def close(self) -> None:
        """Close the underlying HTTP connection pool if this store opened it."""
        if self._http is not None and self._owns_client:
            await self._http.aclose()
            self._http = None

    async def __aenter__(self) -> FhirLocationStore:
        await self.connect()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()

    def _headers(self, content_type: str | None = None) -> dict[str, str]:
        headers = {"Accept": FHIR_JSON}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        if content_type:
            headers["Content-Type"] = content_type
        return headers

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, str] | None = None,
        content: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        if self._http is None:
            msg = "FhirLocationStore is not connected; use 'async with' or call connect()"
            raise RuntimeError(msg)

        try:
            resp = await self._http.request(
                method,
                url,
                params=params,
                content=content,
                headers=headers or self._headers(),
            )
        except httpx.HTTPError as exc:
            raise FhirStoreError(0, str(exc)) from exc

        if resp.status_code == 404:
            raise LocationMissingError(resp.text)
        if resp.status_code in (409, 412):
            raise LocationConflictError(resp.text)
        if resp.status_code not in range(200, 300):
            raise FhirStoreError(resp.status_code, resp.text)

        if not resp.content:
            return {}
        try:
            body: dict[str, Any] = resp.json()
        except ValueError as exc:
            raise FhirStoreError(resp.status_code, f"Response is not JSON: {exc}") from exc
        if not isinstance(body, dict):
            raise FhirStoreError(resp.status_code, "Response is not a JSON object")
        return body

    @staticmethod
    def _to_location(resource: dict[str, Any]) -> Location:
        try:
            return Location.from_fhir(resource)
        except (ValidationError, ValueError) as exc:
            raise FhirStoreError(200, f"Unusable Location resource: {exc}") from exc

    async def find_location_by_name(self, name: str) -> Location | None:
        logger.debug("GET /Location name:exact=%s", name)
        bundle = await self._request("GET", "/Location", params={"name:exact": name})
        matches = [
            entry["resource"]
            for entry in bundle.get("entry", [])
            if entry.get("resource", {}).get("resourceType") == "Location"
        ]
        if not matches:
            return None
        if len(matches) > 1:
            logger.warning("%d Locations named %r; using the first", len(matches), name)
        return self._to_location(matches[0])

    async def patch_location_status(
        self,
        location_id: str,
        status: StatusCoding,
        version_id: str | None = None,
    ) -> Location:
        operations = [
            {
                "op": "add",
                "path": "/operationalStatus",
                "value": status.model_dump(exclude_none=True),
            }
        ]
        headers = self._headers(JSON_PATCH)
        headers["Prefer"] = "return=representation"
        if version_id is not None:
            headers["If-Match"] = f'W/"{version_id}"'

        logger.debug("PATCH /Location/%s operationalStatus=%s", location_id, status.code)
        resource = await self._request(
            "PATCH",
            f"/Location/{location_id}",
            content=json.dumps(operations),
            headers=headers,
        )
        if not resource:
            # server ignored Prefer and answered with an empty body
            resource = await self._request("GET", f"/Location/{location_id}")
        return self._to_location(resource)

    async def list_locations(self) -> list[Location]:
        locations: list[Location] = []
        url: str = "/Location"
        params: dict[str, str] | None = {"_count": str(PAGE_SIZE)}
        while url:
            bundle = await self._request("GET", url, params=params)
            for entry in bundle.get("entry", []):
                resource = entry.get("resource", {})
                if resource.get("resourceType") == "Location":
                    locations.append(self._to_location(resource))
            url = next(
                (link["url"] for link in bundle.get("link", []) if link.get("relation") == "next"),
                "",
            )
            # next links carry their own query string
            params = None
        return locations


__all__ = ["FhirLocationStore", "FhirStoreError"]
