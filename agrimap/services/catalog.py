"""
Region catalog: ingestion of the sector dataset into canonical regions
"""

import logging
import re
from typing import Any, Dict, Iterator, List, Optional, Sequence

from ..models import LatLng, Region, SectorData

logger = logging.getLogger(__name__)

def _to_latlng(pair: Any, lng_first: bool = False) -> LatLng:
    if isinstance(pair, dict):
        return LatLng(lat=float(pair["lat"]), lng=float(pair["lng"]))
    first, second = pair[0], pair[1]
    if lng_first:
        return LatLng(lat=float(second), lng=float(first))
    return LatLng(lat=float(first), lng=float(second))

def _first_ring(coordinates: Sequence[Any]) -> Sequence[Any]:
    # [[ [a, b], ... ]] vs [ [a, b], ... ]
    if coordinates and coordinates[0] and isinstance(coordinates[0][0], (list, tuple)):
        return coordinates[0]
    return coordinates

def parse_ring(raw_region: Dict[str, Any]) -> List[LatLng]:
    """
    Convert whichever polygon encoding a raw region carries into [LatLng].

    Priority: ``polygon`` ({lat, lng} records or [lat, lng] pairs), then
    ``coordinates`` ([lat, lng] rings, dataset convention), then GeoJSON
    ``geometry.coordinates`` ([lng, lat] rings). Only the first ring is used.
    A repeated closing vertex is dropped.
    """

    if raw_region.get("polygon"):
        ring = [_to_latlng(p) for p in raw_region["polygon"]]
    elif raw_region.get("coordinates"):
        ring = [_to_latlng(p) for p in _first_ring(raw_region["coordinates"])]
    elif (raw_region.get("geometry") or {}).get("coordinates"):
        ring = [_to_latlng(p, lng_first=True) for p in _first_ring(raw_region["geometry"]["coordinates"])]
    else:
        ring = []

    if len(ring) > 1 and ring[0] == ring[-1]:
        ring = ring[:-1]
    return ring

_WHITESPACE = re.compile(r"\s+")

def synthesize_region_id(sector_key: str, name: str) -> str:
    return f"{sector_key}_{_WHITESPACE.sub('_', name)}"

class RegionCatalog:
    """Ordered, read-only view of sectors and their regions"""

    def __init__(self, sectors: Optional[List[SectorData]] = None):
        self._sectors: Dict[str, SectorData] = {}
        for sector in sectors or []:
            self._sectors[sector.key] = sector

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "RegionCatalog":
        """
        Build a catalog from ``{sectors: {key: {name, icon, color, regions}}}``.
        Rows that cannot be parsed are skipped; declared order is preserved.
        """

        sectors: List[SectorData] = []
        for sector_key, raw_sector in (payload.get("sectors") or {}).items():
            if not isinstance(raw_sector, dict):
                logger.warning(f"⚠️ Skipping sector {sector_key}: expected mapping")
                continue

            regions: List[Region] = []
            for index, raw_region in enumerate(raw_sector.get("regions") or []):
                region = cls._parse_region(sector_key, index, raw_region)
                if region is not None:
                    regions.append(region)

            sectors.append(SectorData(
                key=sector_key,
                name=raw_sector.get("name") or sector_key,
                icon=raw_sector.get("icon") or "",
                color=raw_sector.get("color"),
                regions=regions
            ))

        return cls(sectors)

    @staticmethod
    def _parse_region(sector_key: str, index: int, raw_region: Any) -> Optional[Region]:
        try:
            ring = parse_ring(raw_region)
            name = str(raw_region.get("name") or "")
            region_id = raw_region.get("id")
            if region_id is None and name:
                region_id = synthesize_region_id(sector_key, name)
            region = Region(
                id=str(region_id) if region_id is not None else None,
                name=name,
                country=raw_region.get("country"),
                sector_key=sector_key,
                polygon=ring,
                properties=dict(raw_region.get("properties") or {})
            )
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"⚠️ Skipping invalid region #{index} in {sector_key}: {e}")
            return None

        if len(region.polygon) < 3:
            logger.warning(f"⚠️ Region {region.id or region.name or index} in {sector_key} has fewer than 3 vertices")
        return region

    @property
    def sector_keys(self) -> List[str]:
        return list(self._sectors)

    def sectors(self) -> Iterator[SectorData]:
        return iter(self._sectors.values())

    def get_sector(self, sector_key: str) -> Optional[SectorData]:
        return self._sectors.get(sector_key)

    def regions_for(self, sector_key: str) -> List[Region]:
        """Regions of one sector, empty when the sector is unknown or not loaded yet"""
        sector = self._sectors.get(sector_key)
        return list(sector.regions) if sector else []

    def total_regions(self) -> int:
        return sum(len(sector.regions) for sector in self._sectors.values())

    def __len__(self) -> int:
        return len(self._sectors)
