"""
Polygon style derivation per sector and visualization mode

Regions without usable intensity data get a random intensity. That jitter is
the intended production look; pass a fixed ``random_source`` in tests.
"""

import math
from numbers import Real
import random
from typing import Any, Callable, Mapping, Optional

from ..models import PolygonStyle, Region, SectorConfig, VisualizationMode

RandomSource = Callable[[], float]

REGIONS_FILL_OPACITY = 0.6
HEATMAP_FILL_OPACITY = 0.7
MIN_INTENSITY_OPACITY = 0.3
DEFAULT_RAMP_LENGTH = 4

# (property, divisor) used when no explicit intensity is present
HEATMAP_FALLBACK = ("production", 100000)
INTENSITY_FALLBACK = ("yield", 10)

def _number(value: Any) -> Optional[float]:
    """Finite number from a numeric property value or numeric string, else None"""

    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    elif isinstance(value, Real):
        value = float(value)
    else:
        return None
    return value if math.isfinite(value) else None

def clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))

def derive_intensity(properties: Optional[Mapping[str, Any]], fallback_key: str,
                     fallback_scale: float, random_source: RandomSource = random.random) -> float:
    """
    Ordered fallback chain: ``intensity``, then ``fallback_key / fallback_scale``,
    then ``random_source()``. The result is not clamped.
    """

    properties = properties or {}

    intensity = _number(properties.get("intensity"))
    if intensity is not None:
        return intensity

    raw = _number(properties.get(fallback_key))
    if raw is not None:
        return raw / fallback_scale

    return random_source()

def resolve_style(region: Region, visualization_mode: VisualizationMode, sector_config: SectorConfig,
                  random_source: RandomSource = random.random) -> PolygonStyle:
    """Fill color, stroke color and fill opacity for one region"""

    mode = VisualizationMode(visualization_mode)
    base_color = sector_config.base_color

    if mode == VisualizationMode.HEATMAP:
        key, scale = HEATMAP_FALLBACK
        intensity = clamp(derive_intensity(region.properties, key, scale, random_source), 0.0, 1.0)
        ramp = sector_config.color_ramp
        ramp_length = len(ramp) or DEFAULT_RAMP_LENGTH
        color_index = math.floor(intensity * (ramp_length - 1))
        fill_color = ramp[color_index] if color_index < len(ramp) else base_color
        return PolygonStyle(fill_color=fill_color, stroke_color=base_color, fill_opacity=HEATMAP_FILL_OPACITY)

    if mode == VisualizationMode.INTENSITY:
        key, scale = INTENSITY_FALLBACK
        intensity = clamp(derive_intensity(region.properties, key, scale, random_source), MIN_INTENSITY_OPACITY, 1.0)
        return PolygonStyle(fill_color=base_color, stroke_color=base_color, fill_opacity=intensity)

    return PolygonStyle(fill_color=base_color, stroke_color=base_color, fill_opacity=REGIONS_FILL_OPACITY)
