"""
Coordinate to country lookup over an ordered bounding-box table
"""

import logging
from typing import Optional, Sequence

from ..data.countries import COUNTRY_BOUNDING_BOXES, UNKNOWN_COUNTRY
from ..models import CountryBoundingBox

class CountryLocator:
    """First box in declaration order that contains the point wins"""

    def __init__(self, boxes: Optional[Sequence[CountryBoundingBox]] = None):
        self.boxes = list(COUNTRY_BOUNDING_BOXES if boxes is None else boxes)
        self.logger = logging.getLogger(__name__)

    def locate(self, lat: float, lng: float) -> str:
        lat, lng = float(lat), float(lng)
        for box in self.boxes:
            if box.contains(lat, lng):
                self.logger.debug(f"🎯 Detected country: {box.country_name} for coordinates ({lat}, {lng})")
                return box.country_name

        self.logger.debug(f"❓ Unknown country for coordinates ({lat}, {lng})")
        return UNKNOWN_COUNTRY

# Default locator over the bundled table
country_locator = CountryLocator()
