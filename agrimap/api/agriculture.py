"""
Agriculture map API endpoints: sectors, styled regions and click handling
"""

from fastapi import APIRouter, HTTPException, Depends, Query, Request
from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Any
import logging

from ..config import settings
from ..data.sectors import SECTOR_CONFIGURATIONS, get_tile_layer
from ..models import ALL_SECTORS, LatLng, PolygonStyle, SelectionState, VisualizationMode
from ..services.agriculture_client import CatalogLoad, agriculture_api, load_catalog
from ..services.country_locator import country_locator
from ..services.drawing import clear_drawings, finish_drawing, start_drawing, toggle_drawing
from ..services.region_filter import find_annotated_region, get_filtered_regions
from ..services.sector_locator import find_sector_at
from ..services.selection import (
    DetailFetcher, change_mode, change_sector, clear_selection,
    handle_map_click, handle_region_click,
)
from ..services.style_resolver import resolve_style

router = APIRouter(prefix="/agriculture", tags=["agriculture"])

# =====================================
# DEPENDENCIES
# =====================================

def get_catalog_load(request: Request) -> CatalogLoad:
    """Catalog loaded once per process and kept on app.state"""
    catalog_load = getattr(request.app.state, "catalog_load", None)
    if catalog_load is None:
        catalog_load = load_catalog()
        request.app.state.catalog_load = catalog_load
    return catalog_load

def get_detail_fetcher() -> Optional[DetailFetcher]:
    if not settings.FETCH_REGION_DETAILS:
        return None
    return agriculture_api.fetch_region_details

# =====================================
# PYDANTIC MODELS
# =====================================

class MapClickRequest(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    state: SelectionState = Field(default_factory=SelectionState)

class MapClickResponse(BaseModel):
    handled: bool
    country: Optional[str] = None
    sector: Optional[str] = None
    state: SelectionState

class RegionClickRequest(BaseModel):
    unique_id: str = Field(..., min_length=1)
    state: SelectionState = Field(default_factory=SelectionState)

class SelectionUpdateRequest(BaseModel):
    state: SelectionState = Field(default_factory=SelectionState)
    sector: Optional[str] = None
    mode: Optional[VisualizationMode] = None
    clear: bool = False

class StateRequest(BaseModel):
    state: SelectionState = Field(default_factory=SelectionState)

class StyledRegion(BaseModel):
    unique_id: str
    sector_key: str
    name: str
    country: Optional[str] = None
    polygon: List[LatLng]
    properties: Dict[str, Any]
    style: PolygonStyle

# =====================================
# CATALOG ENDPOINTS
# =====================================

@router.get("/sectors")
async def list_sectors(catalog_load: CatalogLoad = Depends(get_catalog_load)):
    """
    Sector configurations with their tile layer and loaded region counts
    """

    catalog = catalog_load.catalog
    sectors = []
    for key, config in SECTOR_CONFIGURATIONS.items():
        region_count = catalog.total_regions() if key == ALL_SECTORS else len(catalog.regions_for(key))
        sectors.append({
            **config.model_dump(),
            "tile_layer": get_tile_layer(key),
            "region_count": region_count
        })

    return {
        "sectors": sectors,
        "loaded_sectors": catalog.sector_keys,
        "degraded": catalog_load.degraded,
        "source": catalog_load.source
    }

@router.get("/regions")
async def list_regions(
    sector: str = Query(ALL_SECTORS),
    mode: VisualizationMode = Query(VisualizationMode.REGIONS),
    catalog_load: CatalogLoad = Depends(get_catalog_load)
):
    """
    Regions of the selected sector with their computed polygon style
    """

    try:
        styled = [
            StyledRegion(
                unique_id=annotated.unique_id,
                sector_key=annotated.sector_key,
                name=annotated.region.name,
                country=annotated.region.country,
                polygon=annotated.region.polygon,
                properties=annotated.region.properties,
                style=resolve_style(annotated.region, mode, annotated.sector_config)
            )
            for annotated in get_filtered_regions(sector, catalog_load.catalog)
        ]
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to build regions: {str(e)}")

    return {
        "sector": sector,
        "mode": mode.value,
        "count": len(styled),
        "degraded": catalog_load.degraded,
        "regions": styled
    }

@router.get("/locate")
async def locate(
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    sector: str = Query(ALL_SECTORS),
    catalog_load: CatalogLoad = Depends(get_catalog_load)
):
    """
    Country and sector for a coordinate, without touching selection state
    """
    return {
        "country": country_locator.locate(lat, lng),
        "sector": find_sector_at(lat, lng, catalog_load.catalog, sector)
    }

# =====================================
# CLICK / SELECTION ENDPOINTS
# =====================================

@router.post("/map-click", response_model=MapClickResponse)
def map_click(
    request: MapClickRequest,
    catalog_load: CatalogLoad = Depends(get_catalog_load),
    detail_fetcher: Optional[DetailFetcher] = Depends(get_detail_fetcher)
):
    """
    Bare map click. Ignored when it follows a region click too closely.
    """

    result = handle_map_click(
        request.state, request.lat, request.lng, catalog_load.catalog,
        detail_fetcher=detail_fetcher
    )
    return MapClickResponse(
        handled=result.handled,
        country=result.country,
        sector=result.sector_key,
        state=result.state
    )

@router.post("/region-click")
def region_click(
    request: RegionClickRequest,
    catalog_load: CatalogLoad = Depends(get_catalog_load),
    detail_fetcher: Optional[DetailFetcher] = Depends(get_detail_fetcher)
):
    """
    Click on a drawn region, identified by its unique id from /regions
    """

    annotated = find_annotated_region(request.unique_id, catalog_load.catalog)
    if annotated is None:
        raise HTTPException(status_code=404, detail="Region not found")

    state = handle_region_click(request.state, annotated, detail_fetcher=detail_fetcher)
    return {"state": state}

@router.post("/selection")
async def update_selection(request: SelectionUpdateRequest):
    """
    Switch sector and/or visualization mode. A mode switch or `clear` drops the selection;
    a sector switch keeps it.
    """

    state = request.state
    if request.sector is not None:
        state = change_sector(state, request.sector)
    if request.mode is not None:
        state = change_mode(state, request.mode)
    if request.clear:
        state = clear_selection(state)
    return {"state": state}

DRAWING_ACTIONS = {
    "start": start_drawing,
    "toggle": toggle_drawing,
    "finish": finish_drawing,
    "clear": clear_drawings,
}

@router.post("/drawing/{action}")
async def drawing_action(action: str, request: StateRequest):
    """
    Field drawing controls: start, toggle, finish, clear
    """

    transition = DRAWING_ACTIONS.get(action)
    if transition is None:
        raise HTTPException(status_code=404, detail=f"Unknown drawing action: {action}")

    state = transition(request.state)
    logging.info(f"🖊️ Drawing {action}: {len(state.drawn_regions)} custom fields")
    return {"state": state}
