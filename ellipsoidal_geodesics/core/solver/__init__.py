"""ellipsoidal_geodesics.core.solver

Direct and inverse geodesic solvers.
"""

from .direct import GeodesicLine, solve_direct
from .inverse import solve_inverse

__all__ = [
    "GeodesicLine",
    "solve_direct",
    "solve_inverse",
]
