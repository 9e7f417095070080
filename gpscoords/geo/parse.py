"""Text parsing entry point for coordinates.

``try_parse`` runs a fixed chain of decoders over a string and returns the
first result. Empty text is a successful parse of "no coordinate"; text no
decoder recognises is a failure. Both outcomes carry the invalid coordinate,
so only the success flag tells them apart.

Decoder chain, first match wins:
    1. empty or blank text
    2. Well-Known-Text point
    3. Well-Known-Binary carried as text (reserved, never matches)
    4. raw value (reserved, never matches)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from . import wkt

if TYPE_CHECKING:
    from .coordinate import Coordinate

logger = logging.getLogger(__name__)

C = TypeVar("C", bound="Coordinate")


class CoordinateFormatError(ValueError):
    """Raised when text matches none of the known coordinate formats."""


def _decode_wkt(cls: type[C], text: str) -> C | None:
    point = wkt.read_point(text)
    if point is None:
        return None
    return cls(*point)


def _decode_wkb_text(cls: type[C], text: str) -> C | None:
    """Reserved for hex or base64 WKB payloads."""
    return None


def _decode_raw(cls: type[C], text: str) -> C | None:
    """Reserved for bare numeric pairs."""
    return None


_DECODERS: tuple[Callable[[type, str], object], ...] = (
    _decode_wkt,
    _decode_wkb_text,
    _decode_raw,
)


def try_parse(cls: type[C], text: str | None) -> tuple[bool, C]:
    """Parse text into a coordinate of the given class without raising.

    Args:
        cls: Coordinate class to build.
        text: Text to parse.

    Returns:
        ``(True, coordinate)`` on success, ``(False, cls.NONE)`` when no
        decoder recognised the text. Empty text succeeds with ``cls.NONE``.
    """
    if text is None or not text.strip():
        return True, cls.NONE

    for decoder in _DECODERS:
        result = decoder(cls, text)
        if result is not None:
            return True, result

    logger.debug("No decoder recognised %r", text)
    return False, cls.NONE


def parse(cls: type[C], text: str | None) -> C:
    """Parse text into a coordinate of the given class.

    Raises:
        CoordinateFormatError: If no decoder recognised the text.
    """
    ok, result = try_parse(cls, text)
    if not ok:
        msg = f"unrecognised coordinate format: {text!r}"
        raise CoordinateFormatError(msg)
    return result
