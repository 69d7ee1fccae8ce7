"""
Planar geometry helpers over [lat, lng] rings
Degree-space approximations only, no projection or geodesic math.
"""

from typing import Sequence

from .models import LatLng

# Kilometres per degree, applied to both axes
KM_PER_DEGREE = 111.0

def point_in_polygon(point: LatLng, ring: Sequence[LatLng]) -> bool:
    """
    Ray-casting membership test. The ring is implicitly closed.
    Points exactly on an edge have no guaranteed answer.
    """

    n = len(ring)
    if n < 3:
        return False

    lat, lng = point.lat, point.lng
    inside = False
    j = n - 1
    for i in range(n):
        yi, xi = ring[i].lat, ring[i].lng
        yj, xj = ring[j].lat, ring[j].lng
        if (yi > lat) != (yj > lat) and lng < (xj - xi) * (lat - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside

def polygon_centroid(ring: Sequence[LatLng]) -> LatLng:
    """Vertex mean, not the area-weighted centroid. May fall outside concave rings."""

    if len(ring) < 3:
        return LatLng(lat=0.0, lng=0.0)

    n = len(ring)
    return LatLng(
        lat=sum(p.lat for p in ring) / n,
        lng=sum(p.lng for p in ring) / n,
    )

def polygon_area(ring: Sequence[LatLng]) -> float:
    """Shoelace area in square degrees scaled to km² with a flat 111 km/degree"""

    n = len(ring)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += ring[i].lat * ring[j].lng
        area -= ring[j].lat * ring[i].lng
    return abs(area / 2) * KM_PER_DEGREE * KM_PER_DEGREE
