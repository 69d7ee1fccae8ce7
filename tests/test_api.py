"""HTTP surface tests using FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

from agrimap.api.agriculture import get_detail_fetcher
from agrimap.errors import DetailFetchFailed
from agrimap.main import app
from agrimap.models import RegionDetails
from agrimap.services.agriculture_client import CatalogLoad, load_fallback_catalog
from agrimap.services.catalog import RegionCatalog

API = "/api/v1/agriculture"


@pytest.fixture
def client_with():
    """Build a TestClient serving the given CatalogLoad."""

    def build(catalog_load):
        app.state.catalog_load = catalog_load
        return TestClient(app)

    yield build
    app.state.catalog_load = None
    app.dependency_overrides.clear()


@pytest.fixture
def square_client(client_with, square_payload):
    load = CatalogLoad(catalog=RegionCatalog.from_payload(square_payload), degraded=False, source="upstream")
    return client_with(load)


@pytest.fixture
def fallback_client(client_with):
    return client_with(load_fallback_catalog())


class TestCatalogEndpoints:

    def test_sectors(self, fallback_client):
        body = fallback_client.get(f"{API}/sectors").json()
        assert body["degraded"] is True
        assert body["source"] == "fallback"
        sectors = {sector["key"]: sector for sector in body["sectors"]}
        assert sectors["all"]["region_count"] == 16
        assert sectors["livestock"]["region_count"] == 3
        assert sectors["emissions"]["region_count"] == 0
        assert sectors["forestry"]["tile_layer"]["url"]

    def test_regions_filtered_and_styled(self, fallback_client):
        body = fallback_client.get(f"{API}/regions", params={"sector": "livestock", "mode": "intensity"}).json()
        assert body["count"] == 3
        for region in body["regions"]:
            assert region["unique_id"].startswith("livestock-")
            assert 0.3 <= region["style"]["fill_opacity"] <= 1.0

    def test_regions_heatmap(self, square_client):
        body = square_client.get(f"{API}/regions", params={"mode": "heatmap"}).json()
        [region] = body["regions"]
        assert region["unique_id"] == "crops_production-square"
        assert region["style"]["fill_opacity"] == 0.7
        assert region["style"]["stroke_color"] == "#4CAF50"

    def test_regions_rejects_unknown_mode(self, square_client):
        assert square_client.get(f"{API}/regions", params={"mode": "3d"}).status_code == 422

    def test_locate(self, square_client):
        body = square_client.get(f"{API}/locate", params={"lat": 11, "lng": 11}).json()
        assert body == {"country": "Nigeria", "sector": "crops_production"}

    def test_locate_validates_range(self, square_client):
        assert square_client.get(f"{API}/locate", params={"lat": 91, "lng": 0}).status_code == 422


class TestClickEndpoints:

    def test_map_click(self, square_client):
        response = square_client.post(f"{API}/map-click", json={"lat": 0, "lng": 0, "state": {"active_sector_key": "forestry"}})
        assert response.status_code == 200
        body = response.json()
        assert body["handled"] is True
        assert body["country"] == "Unknown"
        assert body["sector"] == "forestry"
        assert body["state"]["selected_region"]["name"] == "Unknown Forestry"

    def test_region_click_then_map_click_is_ignored(self, square_client):
        response = square_client.post(f"{API}/region-click", json={"unique_id": "crops_production-square"})
        state = response.json()["state"]
        assert state["selected_region"]["name"] == "Test Square"
        assert state["last_region_click_ms"] is not None

        body = square_client.post(f"{API}/map-click", json={"lat": 11, "lng": 11, "state": state}).json()
        assert body["handled"] is False
        assert body["state"]["selected_region"]["name"] == "Test Square"

    def test_region_click_unknown_region(self, square_client):
        response = square_client.post(f"{API}/region-click", json={"unique_id": "crops_production-nowhere"})
        assert response.status_code == 404

    def test_map_click_with_details(self, square_client):
        app.dependency_overrides[get_detail_fetcher] = lambda: (
            lambda country, sector: RegionDetails(success=True, summary={"totalRecords": 2})
        )
        body = square_client.post(f"{API}/map-click", json={"lat": 11, "lng": 11}).json()
        assert body["state"]["selected_region"]["details"]["summary"] == {"totalRecords": 2}

    def test_detail_failure_is_recovered(self, square_client):
        def failing_fetcher(country, sector):
            raise DetailFetchFailed("HTTP error! status: 500")

        app.dependency_overrides[get_detail_fetcher] = lambda: failing_fetcher
        response = square_client.post(f"{API}/map-click", json={"lat": 11, "lng": 11})
        assert response.status_code == 200
        selected = response.json()["state"]["selected_region"]
        assert selected["name"] == "Nigeria Crops Production"
        assert selected["details"] is None

    def test_sector_switch_keeps_selection(self, square_client):
        state = square_client.post(f"{API}/map-click", json={"lat": 11, "lng": 11}).json()["state"]
        body = square_client.post(f"{API}/selection", json={"state": state, "sector": "livestock"}).json()
        assert body["state"]["active_sector_key"] == "livestock"
        assert body["state"]["selected_region"]["country"] == "Nigeria"

    def test_mode_switch_clears_selection(self, square_client):
        state = square_client.post(f"{API}/map-click", json={"lat": 11, "lng": 11}).json()["state"]
        body = square_client.post(f"{API}/selection", json={"state": state, "sector": "livestock", "mode": "heatmap"}).json()
        assert body["state"]["active_sector_key"] == "livestock"
        assert body["state"]["visualization_mode"] == "heatmap"
        assert body["state"]["selected_region"] is None

    def test_explicit_clear(self, square_client):
        state = square_client.post(f"{API}/map-click", json={"lat": 11, "lng": 11}).json()["state"]
        body = square_client.post(f"{API}/selection", json={"state": state, "clear": True}).json()
        assert body["state"]["selected_region"] is None


class TestDrawingEndpoints:

    def test_drawing_flow(self, square_client):
        state = square_client.post(f"{API}/drawing/start", json={}).json()["state"]
        assert state["drawing_mode"] is True

        for lat, lng in [(0, 0), (0, 1), (1, 1)]:
            body = square_client.post(f"{API}/map-click", json={"lat": lat, "lng": lng, "state": state}).json()
            state = body["state"]
        assert len(state["current_drawing"]["points"]) == 3

        state = square_client.post(f"{API}/drawing/finish", json={"state": state}).json()["state"]
        assert state["drawing_mode"] is False
        assert state["drawn_regions"][0]["name"] == "Custom Field 1"
        assert state["drawn_regions"][0]["area_km2"] > 0

    def test_unknown_drawing_action(self, square_client):
        assert square_client.post(f"{API}/drawing/undo", json={}).status_code == 404


class TestHealthEndpoints:

    def test_health_degraded_on_fallback(self, fallback_client):
        body = fallback_client.get("/api/health").json()
        assert body["status"] == "degraded"
        assert body["checks"]["catalog"]["regions"] == 16

    def test_health_healthy_on_upstream(self, square_client):
        assert square_client.get("/api/health").json()["status"] == "healthy"

    def test_health_unhealthy_when_empty(self, client_with):
        client = client_with(CatalogLoad(catalog=RegionCatalog(), degraded=False, source="upstream"))
        assert client.get("/api/health").json()["status"] == "unhealthy"

    def test_simple_and_version(self, square_client):
        assert square_client.get("/api/health/simple").json()["status"] == "ok"
        assert square_client.get("/api/version").json()["version"] == "1.0.0"


def test_root_reports_catalog_source(fallback_client):
    response = fallback_client.get("/")
    assert response.json()["catalog_source"] == "fallback"
    assert "X-Process-Time-Ms" in response.headers
