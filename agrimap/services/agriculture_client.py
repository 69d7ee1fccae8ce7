"""
Upstream agriculture data client
Fetches the sector region dataset and per-country detail payloads
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from ..config import settings
from ..data.fallback import FALLBACK_DATASET
from ..errors import DatasetUnavailable, DetailFetchFailed
from ..models import RegionDetails
from .catalog import RegionCatalog

class AgricultureApiClient:
    """Client for the real-data and region-details routes of the agriculture service"""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = (base_url or settings.AGRICULTURE_API_URL).rstrip('/')
        self.timeout = timeout or settings.REQUEST_TIMEOUT
        self.session = session or requests.Session()
        self.logger = logging.getLogger(__name__)

    def fetch_dataset(self) -> Dict[str, Any]:
        """Raw ``{sectors: {...}}`` payload. Raises DatasetUnavailable on any failure."""

        url = f"{self.base_url}/api/agriculture/real-data"
        try:
            response = self.session.get(url, headers={"Content-Type": "application/json"}, timeout=self.timeout)
        except requests.RequestException as e:
            raise DatasetUnavailable(f"Request to {url} failed: {e}") from e

        if response.status_code != 200:
            raise DatasetUnavailable(f"API Error: {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise DatasetUnavailable(f"Invalid JSON from {url}") from e

        if not isinstance(payload, dict) or not isinstance(payload.get("sectors"), dict):
            raise DatasetUnavailable("Dataset response has no sectors")

        return payload

    def fetch_region_details(self, country: str, sector: str) -> RegionDetails:
        """Detail payload for a country/sector pair. Raises DetailFetchFailed on any failure."""

        url = f"{self.base_url}/api/agriculture/region-details"
        self.logger.info(f"🔍 Fetching detailed data for {country} in {sector} sector")
        try:
            response = self.session.get(url, params={"country": country, "sector": sector}, timeout=self.timeout)
        except requests.RequestException as e:
            raise DetailFetchFailed(f"Request to {url} failed: {e}") from e

        if response.status_code != 200:
            raise DetailFetchFailed(f"HTTP error! status: {response.status_code}")

        try:
            details = RegionDetails.model_validate(response.json())
        except ValueError as e:
            raise DetailFetchFailed(f"Invalid detail payload for {country}: {e}") from e

        if not details.success:
            raise DetailFetchFailed(f"Detail source reported failure for {country}")

        total = (details.summary or {}).get("totalRecords", 0)
        self.logger.info(f"✅ Loaded {total} records for {country}")
        return details

@dataclass
class CatalogLoad:
    catalog: RegionCatalog
    degraded: bool
    source: str

def load_fallback_catalog() -> CatalogLoad:
    return CatalogLoad(catalog=RegionCatalog.from_payload(FALLBACK_DATASET), degraded=True, source="fallback")

def load_catalog(client: Optional["AgricultureApiClient"] = None) -> CatalogLoad:
    """
    Load the region catalog from the upstream source, substituting the bundled
    fallback dataset when it is unavailable or yields no usable regions.
    """

    client = client or agriculture_api
    try:
        payload = client.fetch_dataset()
    except DatasetUnavailable as e:
        logging.warning(f"⚠️ Using fallback agriculture dataset: {e}")
        return load_fallback_catalog()

    catalog = RegionCatalog.from_payload(payload)
    if catalog.total_regions() == 0:
        logging.warning("⚠️ Upstream dataset contained no usable regions, using fallback")
        return load_fallback_catalog()

    logging.info(f"✅ Loaded {catalog.total_regions()} regions across {len(catalog)} sectors")
    return CatalogLoad(catalog=catalog, degraded=False, source="upstream")

# Global instance
agriculture_api = AgricultureApiClient()
