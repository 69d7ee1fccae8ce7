"""
Region filtering and annotation per active sector
"""

from typing import List, Optional

from ..data.sectors import get_sector_config
from ..models import ALL_SECTORS, AnnotatedRegion, Region
from .catalog import RegionCatalog

def region_unique_id(sector_key: str, region: Region, index: int) -> str:
    return f"{sector_key}-{region.id or region.name or index}"

def _annotate(sector_key: str, regions: List[Region]) -> List[AnnotatedRegion]:
    config = get_sector_config(sector_key)
    return [
        AnnotatedRegion(
            unique_id=region_unique_id(sector_key, region, index),
            sector_key=sector_key,
            region=region,
            sector_config=config
        )
        for index, region in enumerate(regions)
    ]

def get_filtered_regions(active_sector_key: str, catalog: RegionCatalog) -> List[AnnotatedRegion]:
    """
    Regions to draw for the active sector selector.

    'all' flattens every sector in catalog order. A specific key returns only
    that sector, or an empty list while its data is not loaded.
    """

    if active_sector_key == ALL_SECTORS:
        annotated: List[AnnotatedRegion] = []
        for sector in catalog.sectors():
            annotated.extend(_annotate(sector.key, sector.regions))
        return annotated

    return _annotate(active_sector_key, catalog.regions_for(active_sector_key))

def find_annotated_region(unique_id: str, catalog: RegionCatalog) -> Optional[AnnotatedRegion]:
    """Look up a drawn region by the key the renderer was given"""
    for annotated in get_filtered_regions(ALL_SECTORS, catalog):
        if annotated.unique_id == unique_id:
            return annotated
    return None
