"""Tests for the planar geometry helpers."""

import pytest

from agrimap.geometry import point_in_polygon, polygon_area, polygon_centroid
from agrimap.models import LatLng


def ring(*pairs):
    return [LatLng(lat=lat, lng=lng) for lat, lng in pairs]


SQUARE = ring((10, 10), (10, 12), (12, 12), (12, 10))
# L-shaped, concave at the (1, 1) corner
L_SHAPE = ring((0, 0), (0, 2), (1, 2), (1, 1), (2, 1), (2, 0))


class TestPointInPolygon:

    def test_interior_point(self):
        assert point_in_polygon(LatLng(lat=11, lng=11), SQUARE) is True

    @pytest.mark.parametrize("lat,lng", [(0, 0), (11, 50), (-11, -11), (13, 11)])
    def test_exterior_points(self, lat, lng):
        assert point_in_polygon(LatLng(lat=lat, lng=lng), SQUARE) is False

    def test_concave_notch_is_outside(self):
        assert point_in_polygon(LatLng(lat=0.5, lng=0.5), L_SHAPE) is True
        assert point_in_polygon(LatLng(lat=1.5, lng=1.5), L_SHAPE) is False

    @pytest.mark.parametrize("shift", range(6))
    def test_invariant_under_ring_rotation(self, shift):
        rotated = L_SHAPE[shift:] + L_SHAPE[:shift]
        for lat, lng in [(0.5, 0.5), (1.5, 0.5), (0.5, 1.5), (1.5, 1.5), (3, 3)]:
            point = LatLng(lat=lat, lng=lng)
            assert point_in_polygon(point, rotated) == point_in_polygon(point, L_SHAPE)

    def test_explicitly_closed_ring_matches_open_ring(self):
        closed = SQUARE + [SQUARE[0]]
        assert point_in_polygon(LatLng(lat=11, lng=11), closed) is True
        assert point_in_polygon(LatLng(lat=20, lng=11), closed) is False

    @pytest.mark.parametrize("points", [[], [(1, 1)], [(1, 1), (2, 2)]])
    def test_degenerate_ring_is_never_inside(self, points):
        assert point_in_polygon(LatLng(lat=1, lng=1), ring(*points)) is False


class TestPolygonCentroid:

    def test_vertex_mean(self):
        centroid = polygon_centroid(SQUARE)
        assert centroid == LatLng(lat=11, lng=11)

    def test_is_not_area_weighted(self):
        # Extra vertex on one edge pulls the mean but not the true centroid
        centroid = polygon_centroid(ring((0, 0), (0, 2), (0, 4), (4, 4), (4, 0)))
        assert centroid.lat == pytest.approx(1.6)
        assert centroid.lng == pytest.approx(2.0)

    def test_degenerate_ring(self):
        assert polygon_centroid(ring((5, 5), (6, 6))) == LatLng(lat=0, lng=0)


class TestPolygonArea:

    def test_square_degree(self):
        assert polygon_area(ring((0, 0), (0, 1), (1, 1), (1, 0))) == pytest.approx(111 * 111)

    def test_orientation_does_not_matter(self):
        clockwise = ring((0, 0), (0, 1), (1, 1), (1, 0))
        assert polygon_area(clockwise) == pytest.approx(polygon_area(list(reversed(clockwise))))

    def test_two_by_two_square(self):
        assert polygon_area(SQUARE) == pytest.approx(4 * 111 * 111)

    def test_degenerate_ring(self):
        assert polygon_area(ring((0, 0), (1, 1))) == 0
