"""Binary regression fixtures for the geodesic solvers.

A fixture is a flat byte stream of records, each introduced by a one-byte
tag. All numbers are little-endian IEEE-754 doubles.

Record layout:
- 'I' + 7 doubles: lat1, lon1, lat2, lon2, s12, azi1, azi2 of an inverse
  solution (the direct problem lat1, lon1, azi1, s12 -> lat2, lon2, azi2
  is checked from the same record)
- 'P' + 1 byte k + 2k doubles (lat, lon of each vertex) + 8 doubles: the
  (area, perimeter) pairs of PolygonArea.compute for (reverse, sign) in
  COMPUTE_ORDER

The generator draws random inputs with numpy and solves them with the
current code, so a fixture pins down the behavior of one version for later
comparison.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple, Union

import numpy as np

from ..core.errors import FixtureFormatError
from ..core.logging_config import get_logger

if TYPE_CHECKING:
    from ..core.models.ellipsoid import Ellipsoid


logger = get_logger(__name__)

INVERSE_TAG = ord("I")
POLYGON_TAG = ord("P")

_DOUBLE = np.dtype("<f8")
_INVERSE_FIELDS = 7
_POLYGON_VALUES = 8
_MAX_VERTICES = 255

# (reverse, sign) combinations stored in a polygon record, in order
COMPUTE_ORDER: Tuple[Tuple[bool, bool], ...] = (
    (False, False),
    (True, False),
    (True, True),
    (False, True),
)


@dataclass(frozen=True)
class InverseRecord:
    """One solved inverse problem."""

    lat1: float
    lon1: float
    lat2: float
    lon2: float
    s12: float
    azi1: float
    azi2: float

    def values(self) -> Tuple[float, ...]:
        return (self.lat1, self.lon1, self.lat2, self.lon2, self.s12, self.azi1, self.azi2)


@dataclass(frozen=True)
class PolygonRecord:
    """
    Polygon vertices with the stored compute() results.

    Attributes:
        points: Vertices as (lat, lon) pairs
        results: (area, perimeter) for each (reverse, sign) in COMPUTE_ORDER
    """

    points: Tuple[Tuple[float, float], ...]
    results: Tuple[Tuple[float, float], ...]

    def __post_init__(self):
        if len(self.points) > _MAX_VERTICES:
            raise ValueError(f"A polygon record holds at most {_MAX_VERTICES} vertices, got {len(self.points)}")
        if len(self.results) != len(COMPUTE_ORDER):
            raise ValueError(f"Expected {len(COMPUTE_ORDER)} results, got {len(self.results)}")


FixtureRecord = Union[InverseRecord, PolygonRecord]


def _pack(values: Iterable[float]) -> bytes:
    return np.asarray(list(values), dtype=_DOUBLE).tobytes()


def _unpack(data: bytes, offset: int, count: int) -> List[float]:
    end = offset + count * _DOUBLE.itemsize
    if end > len(data):
        raise FixtureFormatError(
            f"Truncated record at byte {offset}: need {count} doubles, "
            f"{len(data) - offset} bytes left"
        )
    return np.frombuffer(data, dtype=_DOUBLE, count=count, offset=offset).tolist()


def encode_records(records: Iterable[FixtureRecord]) -> bytes:
    """Encode records into the fixture byte format."""
    chunks: List[bytes] = []
    for record in records:
        if isinstance(record, InverseRecord):
            chunks.append(bytes([INVERSE_TAG]))
            chunks.append(_pack(record.values()))
        elif isinstance(record, PolygonRecord):
            chunks.append(bytes([POLYGON_TAG, len(record.points)]))
            chunks.append(_pack(v for point in record.points for v in point))
            chunks.append(_pack(v for pair in record.results for v in pair))
        else:
            raise TypeError(f"Cannot encode {type(record).__name__} as a fixture record")
    return b"".join(chunks)


def decode_records(data: bytes) -> List[FixtureRecord]:
    """
    Decode a fixture byte stream.

    Raises:
        FixtureFormatError: On an unknown tag or a truncated record
    """
    records: List[FixtureRecord] = []
    i = 0
    while i < len(data):
        tag = data[i]
        if tag == INVERSE_TAG:
            values = _unpack(data, i + 1, _INVERSE_FIELDS)
            records.append(InverseRecord(*values))
            i += 1 + _INVERSE_FIELDS * _DOUBLE.itemsize
        elif tag == POLYGON_TAG:
            if i + 1 >= len(data):
                raise FixtureFormatError(f"Truncated polygon record at byte {i}")
            k = data[i + 1]
            i += 2
            coords = _unpack(data, i, 2 * k)
            i += 2 * k * _DOUBLE.itemsize
            values = _unpack(data, i, _POLYGON_VALUES)
            i += _POLYGON_VALUES * _DOUBLE.itemsize
            records.append(PolygonRecord(
                points=tuple(zip(coords[0::2], coords[1::2])),
                results=tuple(zip(values[0::2], values[1::2])),
            ))
        else:
            raise FixtureFormatError(f"Unknown record tag {tag!r} at byte {i}")
    return records


def read_fixture(path: str | Path) -> List[FixtureRecord]:
    """Read and decode a fixture file."""
    data = Path(path).read_bytes()
    records = decode_records(data)
    logger.debug("Read %d fixture records from %s", len(records), path)
    return records


def write_fixture(path: str | Path, records: Iterable[FixtureRecord]) -> None:
    """Encode records and write them to a fixture file."""
    data = encode_records(records)
    Path(path).write_bytes(data)
    logger.debug("Wrote %d fixture bytes to %s", len(data), path)


def polygon_results(ellipsoid: "Ellipsoid", points: Iterable[Tuple[float, float]]) -> Tuple[Tuple[float, float], ...]:
    """(area, perimeter) of a polygon for each (reverse, sign) in COMPUTE_ORDER."""
    poly = ellipsoid.polygon()
    poly.add_points(points)
    results = []
    for reverse, sign in COMPUTE_ORDER:
        res = poly.compute(reverse=reverse, sign=sign)
        results.append((res.area, res.perimeter))
    return tuple(results)


def generate_fixture(
    ellipsoid: "Ellipsoid",
    n_inverse: int = 5000,
    n_polygons: int = 100,
    seed: Optional[int] = None,
) -> List[FixtureRecord]:
    """
    Generate random fixture records solved on the given ellipsoid.

    Inverse records use uniformly random endpoints. Polygon records are
    regular geodesic polygons of 4 to 13 sides around a random center with
    a radius of 10 to 20010 km; vertices are placed at azimuths 0, 360/k,
    ... up to and including 360 when rounding lets the last step reach it.
    Older fixture files drew the radius as 10 to 20010 meters, so their
    polygons are much smaller than these.

    Args:
        ellipsoid: Ellipsoid to solve on
        n_inverse: Number of inverse records
        n_polygons: Number of polygon records
        seed: Seed for numpy's random generator (None for fresh entropy)

    Returns:
        List of records, inverse records first
    """
    rng = np.random.default_rng(seed)
    records: List[FixtureRecord] = []

    for _ in range(n_inverse):
        lat1, lon1, lat2, lon2 = (rng.random(4) * [180.0, 360.0, 180.0, 360.0]
                                  - [90.0, 180.0, 90.0, 180.0]).tolist()
        res = ellipsoid.inverse(lat1, lon1, lat2, lon2)
        records.append(InverseRecord(lat1, lon1, lat2, lon2, res.s12, res.azi1, res.azi2))

    for _ in range(n_polygons):
        lat1 = float(rng.random() * 180.0 - 90.0)
        lon1 = float(rng.random() * 360.0 - 180.0)
        steps = int(rng.integers(4, 14))
        dist = float(rng.random() * 20000e3 + 10e3)

        points = []
        azi = 0.0
        while azi <= 360.0:
            line = ellipsoid.line(lat1, lon1, azi)
            pos = line.position(dist)
            points.append((pos.lat2, pos.lon2))
            azi += 360.0 / steps

        records.append(PolygonRecord(points=tuple(points), results=polygon_results(ellipsoid, points)))

    logger.debug(
        "Generated %d inverse and %d polygon fixture records", n_inverse, n_polygons,
    )
    return records


def values_match(expected: float, actual: float, digits: int) -> bool:
    """True if |expected - actual| < 10**-digits; NaNs match each other."""
    if math.isnan(expected) and math.isnan(actual):
        return True
    return abs(expected - actual) < 10.0 ** -digits
