"""Geodesic circle polygon generation.

This module provides a function to generate the vertices of a regular
geodesic polygon: points at a fixed geodesic distance from a center, at
evenly spaced azimuths. Used to build test polygons and for visualization
of ranges around a point.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

from ..results.geodesic_result import Output
from ..solver.direct import GeodesicLine

if TYPE_CHECKING:
    from ..models.ellipsoid import Ellipsoid


def geodesic_circle_points(
    ellipsoid: "Ellipsoid",
    center_lat: float,
    center_lon: float,
    radius: float,
    num_vertices: int = 64,
    closed: bool = True,
) -> List[Tuple[float, float]]:
    """
    Generate polygon vertices approximating a geodesic circle.

    Vertex i lies at distance radius from the center along azimuth
    360 * i / num_vertices, so the ring runs clockwise (north, east, south,
    west).

    Args:
        ellipsoid: Ellipsoid to compute on
        center_lat: Latitude of the center (degrees)
        center_lon: Longitude of the center (degrees)
        radius: Geodesic distance from the center to each vertex (meters)
        num_vertices: Number of distinct vertices (at least 4)
        closed: If True, repeat the first vertex at the end to close the ring

    Returns:
        List of (lat, lon) tuples, longitudes in (-180, 180].
    """
    if num_vertices < 4:
        num_vertices = 4

    caps = Output.LATITUDE | Output.LONGITUDE
    points = []
    for i in range(num_vertices):
        azi = 360.0 * i / num_vertices
        pos = GeodesicLine(ellipsoid, center_lat, center_lon, azi, caps).position(radius, caps)
        points.append((pos.lat2, pos.lon2))

    # Close the polygon
    if closed:
        points.append(points[0])

    return points
