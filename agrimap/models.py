"""
Data models for the Agriculture Sector Map
Region catalog, sector configuration and per-session selection state
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

ALL_SECTORS = "all"

# =====================================
# GEOGRAPHY
# =====================================

class LatLng(BaseModel):
    """Canonical coordinate record. Every polygon is stored as a ring of these."""
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float

class CountryBoundingBox(BaseModel):
    """Axis-aligned latitude/longitude rectangle used for coarse country lookup"""
    model_config = ConfigDict(frozen=True)

    country_name: str
    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    def contains(self, lat: float, lng: float) -> bool:
        return self.min_lat <= lat <= self.max_lat and self.min_lng <= lng <= self.max_lng

# =====================================
# REGION CATALOG
# =====================================

class Region(BaseModel):
    """One agricultural area inside a sector"""

    id: Optional[str] = None
    name: str = ""
    country: Optional[str] = None
    sector_key: str
    polygon: List[LatLng] = Field(default_factory=list)
    properties: Dict[str, Any] = Field(default_factory=dict)

class SectorConfig(BaseModel):
    """Static display configuration for a sector"""
    model_config = ConfigDict(frozen=True)

    key: str
    display_name: str
    icon: str = ""
    base_color: str
    color_ramp: List[str] = Field(default_factory=list)
    tile_layer_preference: str = "OpenStreetMap"
    description: str = ""

class SectorData(BaseModel):
    """A sector as delivered by the dataset source, after ingestion"""

    key: str
    name: str = ""
    icon: str = ""
    color: Optional[str] = None
    regions: List[Region] = Field(default_factory=list)

class AnnotatedRegion(BaseModel):
    """A region decorated for display with its resolving sector"""

    unique_id: str
    sector_key: str
    region: Region
    sector_config: SectorConfig

class VisualizationMode(str, Enum):
    REGIONS = "regions"
    HEATMAP = "heatmap"
    INTENSITY = "intensity"

class PolygonStyle(BaseModel):
    """Style tuple consumed by the rendering surface"""

    fill_color: str
    stroke_color: str
    fill_opacity: float
    weight: int = 2
    opacity: float = 1.0

# =====================================
# SELECTION STATE
# =====================================

class RegionDetails(BaseModel):
    """Country detail payload from the upstream source. Stored, not interpreted."""
    model_config = ConfigDict(extra="allow")

    success: bool = False
    data: List[Dict[str, Any]] = Field(default_factory=list)
    summary: Optional[Dict[str, Any]] = None

class SelectedRegion(BaseModel):
    name: str
    country: str
    sector_key: str
    coordinates: Optional[LatLng] = None
    region: Optional[Region] = None
    details: Optional[RegionDetails] = None

class DrawingInProgress(BaseModel):
    id: int
    name: str
    points: List[LatLng] = Field(default_factory=list)

class DrawnRegion(BaseModel):
    """A user-drawn custom field"""

    id: int
    name: str
    points: List[LatLng]
    area_km2: float

class SelectionState(BaseModel):
    """
    Ephemeral per-session state. Owned by the caller and passed into every
    selection operation, which returns an updated copy.
    """

    active_sector_key: str = ALL_SECTORS
    visualization_mode: VisualizationMode = VisualizationMode.REGIONS
    last_region_click_ms: Optional[float] = None
    selected_region: Optional[SelectedRegion] = None
    drawing_mode: bool = False
    current_drawing: Optional[DrawingInProgress] = None
    drawn_regions: List[DrawnRegion] = Field(default_factory=list)
