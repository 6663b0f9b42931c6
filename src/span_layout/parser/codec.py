"""Compact configuration tokens for shareable links.

A token is a list of underscore-separated fields prefixed with a format
version, e.g. ``v3_1_0_12000_0_145_0_400_5_300_0_0``. Only v3 is
written; v2 (identical except the diameter is stored in millimetres
rather than as a preset index) is still read.

Field order::

    0  version tag         6  distribution mode (0 by-gap, 1 by-count)
    1  diameter            7  target gap
    2  distance mode       8  element count
    3  distance value      9  max end gap
    4  element type       10  max end gap locked ("1" = locked)
    5  board width        11  ruler mark mode (0 edge, 1 center)
"""

from __future__ import annotations

import logging
import math
from urllib.parse import unquote

from span_layout.layout.constants import STANDARD_DIAMETERS
from span_layout.parser.model import (
    DEFAULT_CONFIG,
    Configuration,
    DistanceMode,
    DistributionMode,
    ElementType,
    RulerMarkMode,
)

logger = logging.getLogger(__name__)

FORMAT_VERSION = "v3"
READABLE_VERSIONS = ("v3", "v2")
FIELD_COUNT = 12
SEPARATOR = "_"

# Per-field fallbacks used when a value does not parse
DEFAULT_DIAMETER_INDEX = 1
DEFAULT_DIAMETER = 1500
DEFAULT_DISTANCE_VALUE = 12000
DEFAULT_BOARD_WIDTH = 145
DEFAULT_TARGET_GAP = 400
DEFAULT_ELEMENT_COUNT = 5
DEFAULT_MAX_END_GAP = 300

_DISTANCE_MODES = (DistanceMode.CENTER_TO_CENTER, DistanceMode.EDGE_TO_EDGE)
_ELEMENT_TYPES = (ElementType.POINT, ElementType.BOARD, ElementType.CALCULATED)
_DISTRIBUTION_MODES = (DistributionMode.BY_GAP, DistributionMode.BY_COUNT)
_RULER_MARK_MODES = (RulerMarkMode.EDGE, RulerMarkMode.CENTER)


def encode_config(config: Configuration) -> str:
    """Encode a configuration as a v3 token.

    Diameters that are not one of the standard presets cannot be
    represented and encode as the default preset.
    """
    if config.diameter in STANDARD_DIAMETERS:
        diameter = STANDARD_DIAMETERS.index(config.diameter)
    else:
        logger.warning(
            "Diameter %s is not a preset; token will carry %d",
            config.diameter, DEFAULT_DIAMETER,
        )
        diameter = DEFAULT_DIAMETER_INDEX

    fields = [
        FORMAT_VERSION,
        str(diameter),
        str(_DISTANCE_MODES.index(config.distance_mode)),
        _format_number(config.distance_value),
        str(_ELEMENT_TYPES.index(config.element_type)),
        _format_number(config.board_width),
        str(_DISTRIBUTION_MODES.index(config.distribution_mode)),
        _format_number(config.target_gap),
        str(config.element_count),
        _format_number(config.max_end_gap),
        "1" if config.is_max_end_gap_locked else "0",
        str(_RULER_MARK_MODES.index(config.ruler_mark_mode)),
    ]
    return SEPARATOR.join(fields)


def decode_fields(token: str) -> dict | None:
    """Decode a token into configuration field values.

    Returns None when the token carries no usable data (unknown version
    or too few fields). Individual fields that fail to parse fall back to
    their defaults instead.
    """
    if not token:
        return None

    parts = token.split(SEPARATOR)
    version = parts[0]
    if version not in READABLE_VERSIONS:
        logger.debug("Ignoring token with unknown version %r", version)
        return None
    if len(parts) < FIELD_COUNT:
        logger.debug("Ignoring %s token with %d fields", version, len(parts))
        return None

    if version == "v2":
        diameter = _parse_number(parts[1], DEFAULT_DIAMETER)
    else:
        index = _parse_number(parts[1], DEFAULT_DIAMETER_INDEX)
        if index in range(len(STANDARD_DIAMETERS)):
            diameter = STANDARD_DIAMETERS[int(index)]
        else:
            diameter = DEFAULT_DIAMETER

    return {
        "diameter": diameter,
        "distance_mode": (
            DistanceMode.CENTER_TO_CENTER if parts[2] == "0"
            else DistanceMode.EDGE_TO_EDGE
        ),
        "distance_value": _parse_number(parts[3], DEFAULT_DISTANCE_VALUE),
        "element_type": (
            ElementType.POINT if parts[4] == "0"
            else ElementType.BOARD if parts[4] == "1"
            else ElementType.CALCULATED
        ),
        "board_width": _parse_number(parts[5], DEFAULT_BOARD_WIDTH),
        "distribution_mode": (
            DistributionMode.BY_GAP if parts[6] == "0"
            else DistributionMode.BY_COUNT
        ),
        "target_gap": _parse_number(parts[7], DEFAULT_TARGET_GAP),
        "element_count": _parse_int(parts[8], DEFAULT_ELEMENT_COUNT),
        "max_end_gap": _parse_number(parts[9], DEFAULT_MAX_END_GAP),
        "is_max_end_gap_locked": parts[10] == "1",
        "ruler_mark_mode": (
            RulerMarkMode.EDGE if parts[11] == "0" else RulerMarkMode.CENTER
        ),
    }


def decode_config(
    token: str,
    base: Configuration = DEFAULT_CONFIG,
) -> Configuration | None:
    """Decode a token and merge it over ``base``, or None if unusable."""
    fields = decode_fields(token)
    if fields is None:
        return None
    return base.replace(**fields)


def token_from_fragment(fragment: str) -> str:
    """Extract a token from a URL fragment such as ``#v3_1_0_...``."""
    return unquote(fragment.strip().lstrip("#"))


def _format_number(value: float) -> str:
    """Render a number without a trailing ``.0`` when it is integral."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _parse_number(text: str, fallback: float) -> float:
    """Parse a finite int or float, returning ``fallback`` otherwise."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        logger.debug("Unparseable number %r, using %s", text, fallback)
        return fallback
    if not math.isfinite(value):
        return fallback
    return value


def _parse_int(text: str, fallback: int) -> int:
    value = _parse_number(text, fallback)
    if isinstance(value, float):
        if not value.is_integer():
            logger.debug("Non-integral count %r, using %s", text, fallback)
            return fallback
        return int(value)
    return value
