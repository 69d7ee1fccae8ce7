"""
Coarse country bounding boxes and region-name country hints

Boxes overlap (India/Pakistan, China/Russia, Ukraine/Poland, ...). Lookup is
first match in declaration order, so keep the order below as-is.
"""

from typing import Dict, List

from ..models import CountryBoundingBox

UNKNOWN_COUNTRY = "Unknown"

def _box(name: str, min_lat: float, max_lat: float, min_lng: float, max_lng: float) -> CountryBoundingBox:
    return CountryBoundingBox(
        country_name=name, min_lat=min_lat, max_lat=max_lat, min_lng=min_lng, max_lng=max_lng
    )

COUNTRY_BOUNDING_BOXES: List[CountryBoundingBox] = [
  _box("Afghanistan", 29.0, 38.0, 60.0, 75.0),
  _box("Algeria", 19.0, 37.0, -9.0, 12.0),
  _box("India", 6.0, 37.0, 68.0, 97.0),
  _box("Pakistan", 23.0, 37.0, 60.0, 78.0),
  _box("China", 18.0, 53.0, 73.0, 135.0),
  _box("United States", 25.0, 49.0, -125.0, -66.0),
  _box("Brazil", -34.0, 5.0, -74.0, -32.0),
  _box("Russia", 41.0, 82.0, 19.0, 169.0),
  _box("Canada", 41.0, 83.0, -141.0, -52.0),
  _box("Australia", -44.0, -10.0, 113.0, 154.0),
  _box("Argentina", -55.0, -22.0, -73.0, -53.0),
  _box("Ukraine", 44.0, 52.0, 22.0, 40.0),
  _box("France", 41.0, 51.0, -5.0, 10.0),
  _box("Germany", 47.0, 55.0, 5.0, 15.0),
  _box("Indonesia", -11.0, 6.0, 95.0, 141.0),
  _box("Turkey", 35.0, 42.0, 25.0, 45.0),
  _box("Mexico", 14.0, 33.0, -118.0, -86.0),
  _box("Nigeria", 4.0, 14.0, 2.0, 15.0),
  _box("Bangladesh", 20.0, 26.0, 88.0, 93.0),
  _box("Vietnam", 8.0, 24.0, 102.0, 110.0),
  _box("Thailand", 5.0, 21.0, 97.0, 106.0),
  _box("Ethiopia", 3.0, 15.0, 33.0, 48.0),
  _box("Egypt", 22.0, 32.0, 25.0, 35.0),
  _box("South Africa", -35.0, -22.0, 16.0, 33.0),
  _box("Kenya", -5.0, 5.0, 34.0, 42.0),
  _box("United Kingdom", 49.0, 61.0, -8.0, 2.0),
  _box("Italy", 36.0, 47.0, 6.0, 19.0),
  _box("Spain", 35.0, 44.0, -10.0, 5.0),
  _box("Poland", 49.0, 55.0, 14.0, 24.0),
  _box("Kazakhstan", 40.0, 56.0, 46.0, 87.0),
  _box("Iran", 25.0, 40.0, 44.0, 64.0),
  _box("Japan", 30.0, 46.0, 129.0, 146.0),
  _box("South Korea", 33.0, 39.0, 125.0, 130.0),
  _box("Chile", -56.0, -17.0, -76.0, -66.0),
  _box("Peru", -19.0, 0.0, -82.0, -68.0),
  _box("Colombia", -5.0, 13.0, -79.0, -66.0),
]

# Substrings of region names that identify a country, checked in this order
COUNTRY_NAME_HINTS: Dict[str, str] = {
  "US": "United States",
  "UK": "United Kingdom",
  "UAE": "United Arab Emirates",
  "DRC": "Democratic Republic of Congo",
  "Chinese": "China",
  "Indian": "India",
  "American": "United States",
  "Brazilian": "Brazil",
  "Argentine": "Argentina",
  "Ukrainian": "Ukraine",
  "Russian": "Russia",
  "German": "Germany",
  "French": "France",
  "Australian": "Australia",
  "Canadian": "Canada",
  "Mexican": "Mexico",
  "Japanese": "Japan",
  "Korean": "South Korea",
  "Thai": "Thailand",
  "Vietnamese": "Vietnam",
  "Egyptian": "Egypt",
  "Ethiopian": "Ethiopia",
  "Nigerian": "Nigeria",
  "Kenyan": "Kenya",
  "South African": "South Africa",
}
