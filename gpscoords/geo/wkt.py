"""Well-Known-Text encoding of a 2-D point.

Only the two point forms are understood::

    POINT (<longitude> <latitude>)
    POINT EMPTY

Matching is case-insensitive and tolerant of any whitespace around the
keyword, the parentheses and between the two numbers. Numbers are read with
``float`` after a strict pattern match, so the result never depends on the
process locale and forms ``float`` would otherwise accept (``nan``,
``1_000``, non-ASCII digits) are rejected.
"""

from __future__ import annotations

import logging
import math
import re

from ..config import WKT_EMPTY

logger = logging.getLogger(__name__)

_NUMBER = r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?"

_POINT_RE = re.compile(
    rf"^\s*POINT\s*\(\s*(?P<lon>{_NUMBER})\s+(?P<lat>{_NUMBER})\s*\)\s*$",
    re.IGNORECASE | re.ASCII,
)
_EMPTY_RE = re.compile(r"^\s*POINT\s+EMPTY\s*$", re.IGNORECASE | re.ASCII)


def format_point(latitude: float, longitude: float) -> str:
    """Format a point as WKT, longitude first.

    Any non-finite component produces ``POINT EMPTY``.
    """
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        return WKT_EMPTY
    return f"POINT ({longitude:.6f} {latitude:.6f})"


def read_point(text: str | None) -> tuple[float, float] | None:
    """Read a WKT point.

    Args:
        text: Candidate WKT text.

    Returns:
        ``(latitude, longitude)`` for ``POINT (lon lat)``, ``(nan, nan)`` for
        ``POINT EMPTY`` and None when the text is not a WKT point. Values are
        returned as read; range checks belong to the caller.
    """
    if text is None or not text.strip():
        return None

    if _EMPTY_RE.match(text):
        return math.nan, math.nan

    match = _POINT_RE.match(text)
    if match is None:
        logger.debug("Not a WKT point: %r", text)
        return None

    return float(match.group("lat")), float(match.group("lon"))
