"""Result classes and output flags."""

from .geodesic_result import Output, DirectResult, InverseResult, PolygonResult

__all__ = [
    "Output",
    "DirectResult",
    "InverseResult",
    "PolygonResult",
]
