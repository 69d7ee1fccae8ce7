"""Pytest configuration and shared fixtures."""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("FETCH_REGION_DETAILS", "false")

import pytest

from agrimap.data.fallback import FALLBACK_DATASET
from agrimap.models import SectorConfig
from agrimap.services.catalog import RegionCatalog


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock(now=10_000.0)


@pytest.fixture
def square_payload():
    """One sector, one 2x2 degree square at lat/lng 10..12."""
    return {
        "sectors": {
            "crops_production": {
                "name": "Crop Production",
                "icon": "🌾",
                "color": "#4CAF50",
                "regions": [
                    {
                        "id": "square",
                        "name": "Test Square",
                        "coordinates": [[[10, 10], [10, 12], [12, 12], [12, 10]]],
                        "properties": {"intensity": 0.8},
                    }
                ],
            }
        }
    }


@pytest.fixture
def square_catalog(square_payload):
    return RegionCatalog.from_payload(square_payload)


@pytest.fixture
def three_step_config():
    return SectorConfig(
        key="crops_production",
        display_name="Crop Production",
        base_color="#4CAF50",
        color_ramp=["#fff", "#aaa", "#000"],
    )


@pytest.fixture
def fallback_catalog():
    return RegionCatalog.from_payload(FALLBACK_DATASET)


@pytest.fixture
def overlapping_payload():
    """Two sectors whose regions overlap around (5, 5)."""
    return {
        "sectors": {
            "livestock": {
                "regions": [
                    {"id": "big", "name": "Big Pasture", "coordinates": [[[0, 0], [0, 10], [10, 10], [10, 0]]]},
                ]
            },
            "forestry": {
                "regions": [
                    {"id": "small", "name": "Small Wood", "coordinates": [[[4, 4], [4, 6], [6, 6], [6, 4]]]},
                    {"id": "far", "name": "Far Wood", "coordinates": [[[40, 40], [40, 41], [41, 41], [41, 40]]]},
                ]
            },
        }
    }
