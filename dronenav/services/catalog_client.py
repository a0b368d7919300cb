"""HTTP client for the web application's reference catalogs.

Fetches ``GET {base_url}/api/airspaces`` and ``GET {base_url}/api/regulations``.
There is no retry: a failed fetch comes back as a failed
:class:`ServiceResult` and the caller works with an empty catalog.
"""

from __future__ import annotations

import logging
import time

import httpx

from dronenav.contracts.airspace import AirspaceZone
from dronenav.contracts.regulation import Regulation
from dronenav.contracts.result import ServiceResult
from dronenav.persistence.catalog_loader import parse_records

logger = logging.getLogger(__name__)

AIRSPACES_PATH = "/api/airspaces"
REGULATIONS_PATH = "/api/regulations"


class CatalogClient:
    """Async HTTP client for zone and regulation catalogs."""

    def __init__(self, base_url: str, http_client: httpx.AsyncClient | None = None):
        self._base_url = base_url.rstrip("/")
        self._client = http_client or httpx.AsyncClient(timeout=15.0)

    async def fetch_zones(self) -> ServiceResult[list[AirspaceZone]]:
        return await self._fetch(AIRSPACES_PATH, AirspaceZone)

    async def fetch_regulations(self) -> ServiceResult[list[Regulation]]:
        return await self._fetch(REGULATIONS_PATH, Regulation)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _fetch(self, path: str, model: type) -> ServiceResult:
        url = f"{self._base_url}{path}"
        start = time.perf_counter()
        try:
            resp = await self._client.get(url)
            resp.raise_for_status()
            payload = resp.json()
        except httpx.HTTPStatusError as exc:
            logger.warning("Catalog fetch %s failed: HTTP %d", url, exc.response.status_code)
            return ServiceResult.fail(
                "catalog_unavailable",
                f"GET {path} returned HTTP {exc.response.status_code}",
                status_code=exc.response.status_code,
            )
        except httpx.HTTPError as exc:
            logger.warning("Catalog fetch %s failed: %s", url, exc)
            return ServiceResult.fail("catalog_unavailable", f"GET {path} failed: {exc}")
        except ValueError:
            logger.warning("Catalog fetch %s returned invalid JSON", url)
            return ServiceResult.fail("catalog_invalid", f"GET {path} returned invalid JSON")

        if not isinstance(payload, list):
            return ServiceResult.fail("catalog_invalid", f"GET {path} did not return a list")

        records = parse_records(payload, model, url)
        duration_ms = (time.perf_counter() - start) * 1000
        return ServiceResult.ok(records, duration_ms=duration_ms)
