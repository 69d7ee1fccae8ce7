"""
Click handling and selection state transitions

Every function takes the caller's SelectionState and returns an updated
copy; nothing here keeps session state of its own.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional

from ..data.countries import COUNTRY_NAME_HINTS, UNKNOWN_COUNTRY
from ..geometry import polygon_centroid
from ..errors import DetailFetchFailed
from ..models import (
    AnnotatedRegion, LatLng, Region, RegionDetails, SelectedRegion,
    SelectionState, VisualizationMode,
)
from .catalog import RegionCatalog
from .click_arbiter import ClickArbiter, Clock, monotonic_ms
from .country_locator import CountryLocator, country_locator
from .drawing import add_drawing_point
from .sector_locator import find_sector_at

logger = logging.getLogger(__name__)

DetailFetcher = Callable[[str, str], RegionDetails]

@dataclass
class MapClickResult:
    handled: bool
    state: SelectionState
    country: Optional[str] = None
    sector_key: Optional[str] = None

# =====================================
# NAMING HELPERS
# =====================================

def format_sector_label(sector_key: str) -> str:
    """'crops_production' -> 'Crops Production' (only the first underscore is replaced)"""
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), sector_key.replace("_", " ", 1))

def infer_country_from_name(name: Optional[str]) -> Optional[str]:
    """Country implied by a region name such as 'US Midwest Corn Belt'"""

    if not name:
        return None

    for pattern, country in COUNTRY_NAME_HINTS.items():
        if pattern in name:
            return country

    words = name.split(" ")
    return COUNTRY_NAME_HINTS.get(words[0])

def resolve_region_country(region: Region, locator: Optional[CountryLocator] = None) -> str:
    """Declared country, then name hints, then the box containing the polygon's vertex mean"""

    if region.country:
        return region.country

    hinted = infer_country_from_name(region.name)
    if hinted:
        return hinted

    if len(region.polygon) >= 3:
        centroid = polygon_centroid(region.polygon)
        return (locator or country_locator).locate(centroid.lat, centroid.lng)

    return UNKNOWN_COUNTRY

# =====================================
# DETAIL ENRICHMENT
# =====================================

def attach_details(selected: SelectedRegion, detail_fetcher: Optional[DetailFetcher]) -> SelectedRegion:
    """Enrich a selection with the upstream detail payload; failures leave details empty"""

    if detail_fetcher is None:
        return selected

    try:
        details = detail_fetcher(selected.country, selected.sector_key)
    except DetailFetchFailed as e:
        logger.warning(f"⚠️ Failed to fetch country details for {selected.country}: {e}")
        return selected

    return selected.model_copy(update={"details": details})

# =====================================
# CLICK HANDLERS
# =====================================

def handle_map_click(state: SelectionState, lat: float, lng: float, catalog: RegionCatalog,
                     locator: Optional[CountryLocator] = None,
                     detail_fetcher: Optional[DetailFetcher] = None,
                     clock: Clock = monotonic_ms, now_ms: Optional[float] = None) -> MapClickResult:
    """
    Bare map click: debounce against the last region click, then either
    extend the current drawing or resolve country and sector into a selection.
    """

    arbiter = ClickArbiter(clock=clock, last_region_click_ms=state.last_region_click_ms)
    if not arbiter.should_handle_map_click(now_ms):
        return MapClickResult(handled=False, state=state)

    if state.drawing_mode:
        return MapClickResult(handled=True, state=add_drawing_point(state, lat, lng))

    logger.info(f"🖱️ Map clicked at coordinates: ({lat}, {lng})")
    country = (locator or country_locator).locate(lat, lng)
    sector_key = find_sector_at(lat, lng, catalog, state.active_sector_key)
    logger.info(f"🌍 Detected: Country={country}, Sector={sector_key}")

    selected = SelectedRegion(
        name=f"{country} {format_sector_label(sector_key)}",
        country=country,
        sector_key=sector_key,
        coordinates=LatLng(lat=lat, lng=lng)
    )
    selected = attach_details(selected, detail_fetcher)

    return MapClickResult(
        handled=True,
        state=state.model_copy(update={"selected_region": selected}),
        country=country,
        sector_key=sector_key
    )

def handle_region_click(state: SelectionState, annotated: AnnotatedRegion,
                        locator: Optional[CountryLocator] = None,
                        detail_fetcher: Optional[DetailFetcher] = None,
                        clock: Clock = monotonic_ms, now_ms: Optional[float] = None) -> SelectionState:
    """Drawn region click: record the click time and select the region"""

    arbiter = ClickArbiter(clock=clock)
    clicked_at = arbiter.register_region_click(now_ms)

    region = annotated.region
    logger.info(f"🖱️ Region clicked: {region.name or annotated.unique_id}")
    country = resolve_region_country(region, locator)

    selected = SelectedRegion(
        name=region.name or country,
        country=country,
        sector_key=annotated.sector_key,
        coordinates=polygon_centroid(region.polygon) if len(region.polygon) >= 3 else None,
        region=region
    )
    selected = attach_details(selected, detail_fetcher)

    return state.model_copy(update={"selected_region": selected, "last_region_click_ms": clicked_at})

# =====================================
# STATE TRANSITIONS
# =====================================

def clear_selection(state: SelectionState) -> SelectionState:
    return state.model_copy(update={"selected_region": None})

def change_sector(state: SelectionState, sector_key: str) -> SelectionState:
    return state.model_copy(update={"active_sector_key": sector_key})

def change_mode(state: SelectionState, mode: VisualizationMode) -> SelectionState:
    return state.model_copy(update={"visualization_mode": VisualizationMode(mode), "selected_region": None})
