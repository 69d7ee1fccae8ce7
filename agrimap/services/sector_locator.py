"""
Coordinate to sector lookup using the region polygons of the catalog
"""

import logging

from ..data.sectors import DEFAULT_SECTOR_KEY
from ..geometry import point_in_polygon
from ..models import ALL_SECTORS, LatLng
from .catalog import RegionCatalog

logger = logging.getLogger(__name__)

def find_sector_at(lat: float, lng: float, catalog: RegionCatalog, active_sector_key: str = ALL_SECTORS) -> str:
    """
    Sector of the first region polygon (catalog order) containing the point.

    Runs once per click, so a linear scan over every vertex is fine.
    Falls back to the active sector, or the default sector when 'all' is active.
    """

    point = LatLng(lat=float(lat), lng=float(lng))
    for sector in catalog.sectors():
        for region in sector.regions:
            if point_in_polygon(point, region.polygon):
                logger.debug(f"🎯 ({lat}, {lng}) is inside {region.name or region.id} [{sector.key}]")
                return sector.key

    return active_sector_key if active_sector_key != ALL_SECTORS else DEFAULT_SECTOR_KEY
