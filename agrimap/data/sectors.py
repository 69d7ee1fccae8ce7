"""
Sector display configuration and map tile layers
"""

from typing import Dict

from ..models import ALL_SECTORS, SectorConfig

DEFAULT_SECTOR_KEY = "crops_production"

SECTOR_CONFIGURATIONS: Dict[str, SectorConfig] = {
  ALL_SECTORS: SectorConfig(
    key=ALL_SECTORS,
    display_name="All Sectors",
    icon="🌍",
    base_color="#4CAF50",
    tile_layer_preference="Satellite",
    description="View all agricultural sectors combined",
  ),
  "crops_production": SectorConfig(
    key="crops_production",
    display_name="Crop Production",
    icon="🌾",
    base_color="#4CAF50",
    color_ramp=["#FFF3CD", "#FFE066", "#4CAF50", "#2E7D32"],
    tile_layer_preference="Terrain",
    description="Cereal crops, grains, and agricultural production zones",
  ),
  "forestry": SectorConfig(
    key="forestry",
    display_name="Forestry & Agroforestry",
    icon="🌲",
    base_color="#2E7D32",
    color_ramp=["#E8F5E8", "#66BB6A", "#2E7D32", "#1B5E20"],
    tile_layer_preference="Satellite",
    description="Forest coverage, timber production, and agroforestry systems",
  ),
  "fertilizers": SectorConfig(
    key="fertilizers",
    display_name="Fertilizer Production & Use",
    icon="🧪",
    base_color="#9C27B0",
    color_ramp=["#F3E5F5", "#CE93D8", "#9C27B0", "#6A1B9A"],
    tile_layer_preference="Terrain",
    description="Fertilizer application rates and nutrient management zones",
  ),
  "livestock": SectorConfig(
    key="livestock",
    display_name="Livestock Production",
    icon="🐄",
    base_color="#8D6E63",
    color_ramp=["#EFEBE9", "#BCAAA4", "#8D6E63", "#5D4037"],
    tile_layer_preference="Terrain",
    description="Cattle, dairy, poultry, and livestock density areas",
  ),
  "emissions": SectorConfig(
    key="emissions",
    display_name="Agricultural Emissions",
    icon="🌡️",
    base_color="#FF5722",
    color_ramp=["#FFEBEE", "#FFAB91", "#FF5722", "#D84315"],
    tile_layer_preference="Satellite",
    description="Greenhouse gas emissions and environmental impact zones",
  ),
  "trade": SectorConfig(
    key="trade",
    display_name="Agricultural Trade",
    icon="🚢",
    base_color="#2196F3",
    color_ramp=["#E3F2FD", "#90CAF9", "#2196F3", "#1565C0"],
    tile_layer_preference="Terrain",
    description="Export/import hubs and commodity trading centers",
  ),
  "land_use": SectorConfig(
    key="land_use",
    display_name="Agricultural Land Use",
    icon="🗺️",
    base_color="#8BC34A",
    color_ramp=["#F1F8E9", "#AED581", "#8BC34A", "#558B2F"],
    tile_layer_preference="Satellite",
    description="Land allocation and agricultural area classification",
  ),
}

DEFAULT_TILE_LAYER = "OpenStreetMap"

TILE_LAYERS: Dict[str, Dict[str, str]] = {
  "Satellite": {
    "url": "https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}",
    "attribution": '&copy; <a href="https://www.esri.com/">Esri</a>'
  },
  "Terrain": {
    "url": "https://server.arcgisonline.com/ArcGIS/rest/services/World_Terrain_Base/MapServer/tile/{z}/{y}/{x}",
    "attribution": '&copy; <a href="https://www.esri.com/">Esri</a>'
  },
  "OpenStreetMap": {
    "url": "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png",
    "attribution": '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a>'
  },
  "Forest": {
    "url": "https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}",
    "attribution": '&copy; <a href="https://www.esri.com/">Esri</a>'
  }
}

def get_sector_config(sector_key: str) -> SectorConfig:
    """Configured sector, or the 'all' entry for keys the table does not know"""
    return SECTOR_CONFIGURATIONS.get(sector_key, SECTOR_CONFIGURATIONS[ALL_SECTORS])

def get_tile_layer(sector_key: str) -> Dict[str, str]:
    """Tile layer preferred by a sector, OpenStreetMap when unknown"""
    config = SECTOR_CONFIGURATIONS.get(sector_key)
    layer_name = config.tile_layer_preference if config else DEFAULT_TILE_LAYER
    return TILE_LAYERS.get(layer_name, TILE_LAYERS[DEFAULT_TILE_LAYER])
