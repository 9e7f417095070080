"""Well-Known-Binary encoding of a 2-D point.

Layout (21 bytes, no padding)::

    offset  size  field
    0       1     byte order flag, 1 = little endian, 0 = big endian
    1       4     int32 geometry type, 1 for a point
    5       8     float64 x (longitude)
    13      8     float64 y (latitude)

The record is described by a packed NumPy structured dtype; the byte order
flag picks the little or big endian variant of that dtype so NumPy performs
any byte swapping while reading.
"""

from __future__ import annotations

import logging
import sys

import numpy as np

from ..config import WKB_POINT_SIZE, WKB_POINT_TYPE

logger = logging.getLogger(__name__)

LITTLE_ENDIAN = 1
BIG_ENDIAN = 0

_WKB_POINT_LE = np.dtype(
    [
        ("byte_order", "u1"),
        ("geometry_type", "<i4"),
        ("x", "<f8"),
        ("y", "<f8"),
    ]
)
_WKB_POINT_BE = _WKB_POINT_LE.newbyteorder(">")

if sys.byteorder == "little":
    NATIVE_BYTE_ORDER = LITTLE_ENDIAN
    _WKB_POINT_NATIVE = _WKB_POINT_LE
else:
    NATIVE_BYTE_ORDER = BIG_ENDIAN
    _WKB_POINT_NATIVE = _WKB_POINT_BE


def encode_point(latitude: float, longitude: float) -> bytes:
    """Encode a point in the host byte order.

    Non-finite components are written as they are; the result is always
    WKB_POINT_SIZE bytes long.
    """
    record = np.zeros(1, dtype=_WKB_POINT_NATIVE)
    record[0] = (NATIVE_BYTE_ORDER, WKB_POINT_TYPE, float(longitude), float(latitude))
    return record.tobytes()


def decode_point(data: bytes | bytearray | memoryview | None) -> tuple[float, float] | None:
    """Decode a WKB point.

    Args:
        data: Raw WKB buffer.

    Returns:
        ``(latitude, longitude)`` as stored, or None when the buffer is not a
        point: missing, of the wrong length or carrying another geometry
        type.
    """
    if data is None:
        return None

    raw = bytes(data)
    if len(raw) != WKB_POINT_SIZE:
        logger.debug("WKB point must be %d bytes, got %d", WKB_POINT_SIZE, len(raw))
        return None

    dtype = _WKB_POINT_LE if raw[0] == LITTLE_ENDIAN else _WKB_POINT_BE
    record = np.frombuffer(raw, dtype=dtype)[0]

    geometry_type = int(record["geometry_type"])
    if geometry_type != WKB_POINT_TYPE:
        logger.debug("WKB geometry type %d is not a point", geometry_type)
        return None

    return float(record["y"]), float(record["x"])
