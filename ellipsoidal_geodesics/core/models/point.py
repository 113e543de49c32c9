"""
Geographic point on the ellipsoid.

Conventions:
- Latitude: degrees in [-90, 90]; +/-90 is a pole
- Longitude: degrees, any finite value (solvers normalize to (-180, 180])
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..geometry.angles import ang_normalize


@dataclass(frozen=True)
class GeoPoint:
    """
    A point given by geographic latitude and longitude.

    Attributes:
        lat: Latitude in degrees
        lon: Longitude in degrees
    """

    lat: float
    lon: float

    def __post_init__(self):
        """Validate point data after initialization."""
        # Ensure coordinates are numeric
        object.__setattr__(self, 'lat', float(self.lat))
        object.__setattr__(self, 'lon', float(self.lon))

        if not math.isfinite(self.lat) or not math.isfinite(self.lon):
            raise ValueError(f"Coordinates must be finite, got ({self.lat}, {self.lon})")
        if abs(self.lat) > 90:
            raise ValueError(f"Latitude must be in [-90, 90], got {self.lat}")

    @property
    def is_pole(self) -> bool:
        """Check if the point is one of the poles."""
        return abs(self.lat) == 90

    @property
    def normalized_lon(self) -> float:
        """Longitude reduced to (-180, 180]."""
        return ang_normalize(self.lon)

    def as_tuple(self) -> Tuple[float, float]:
        """Return (lat, lon)."""
        return (self.lat, self.lon)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize point to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {"lat": self.lat, "lon": self.lon}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GeoPoint':
        """
        Create a GeoPoint from a dictionary.

        Args:
            data: Dictionary with "lat"/"latitude" and "lon"/"lng"/"longitude"

        Returns:
            New GeoPoint instance

        Raises:
            KeyError: If required fields are missing
            ValueError: If data is invalid
        """
        lat = data["lat"] if "lat" in data else data["latitude"]
        if "lon" in data:
            lon = data["lon"]
        elif "lng" in data:
            lon = data["lng"]
        else:
            lon = data["longitude"]
        return cls(lat=float(lat), lon=float(lon))

    def __repr__(self) -> str:
        """Return string representation of the point."""
        return f"GeoPoint(lat={self.lat:.9f}, lon={self.lon:.9f})"
