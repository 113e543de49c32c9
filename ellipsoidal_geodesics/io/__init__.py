"""Regression fixture reading and writing."""

from .fixtures import (
    COMPUTE_ORDER,
    InverseRecord,
    PolygonRecord,
    decode_records,
    encode_records,
    generate_fixture,
    read_fixture,
    write_fixture,
)

__all__ = [
    "COMPUTE_ORDER",
    "InverseRecord",
    "PolygonRecord",
    "decode_records",
    "encode_records",
    "generate_fixture",
    "read_fixture",
    "write_fixture",
]
