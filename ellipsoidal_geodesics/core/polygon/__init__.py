"""Geodesic polygon perimeter and area."""

from .polygon_area import PolygonArea

__all__ = ["PolygonArea"]
