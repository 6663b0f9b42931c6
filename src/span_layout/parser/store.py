"""Persisted configuration record.

The record is a flat JSON object with one camelCase key per
configuration field, stored under ``STORAGE_KEY`` in a JSON state file.
At startup the defaults are overridden by the stored record, which is in
turn overridden by a shareable token when one decodes.
"""

from __future__ import annotations

import json
import logging
import math
from enum import Enum
from pathlib import Path

from span_layout.layout.measure import with_derived_width
from span_layout.parser.codec import decode_config, token_from_fragment
from span_layout.parser.model import (
    DEFAULT_CONFIG,
    Configuration,
    DistanceMode,
    DistributionMode,
    ElementType,
    RulerMarkMode,
)

logger = logging.getLogger(__name__)

STORAGE_KEY = "construction_layout_config"

# Record key -> Configuration attribute
RECORD_KEYS: dict[str, str] = {
    "diameter": "diameter",
    "distanceMode": "distance_mode",
    "distanceValue": "distance_value",
    "elementType": "element_type",
    "boardWidth": "board_width",
    "distributionMode": "distribution_mode",
    "targetGap": "target_gap",
    "elementCount": "element_count",
    "maxEndGap": "max_end_gap",
    "isMaxEndGapLocked": "is_max_end_gap_locked",
    "rulerMarkMode": "ruler_mark_mode",
    "showDimensions": "show_dimensions",
}

_ENUM_TYPES: dict[str, type[Enum]] = {
    "distance_mode": DistanceMode,
    "element_type": ElementType,
    "distribution_mode": DistributionMode,
    "ruler_mark_mode": RulerMarkMode,
}
_BOOL_FIELDS = {"is_max_end_gap_locked", "show_dimensions"}
_INT_FIELDS = {"element_count"}


def config_to_record(config: Configuration) -> dict:
    """Flatten a configuration into a JSON-compatible record."""
    record = {}
    for key, attr in RECORD_KEYS.items():
        value = getattr(config, attr)
        if isinstance(value, Enum):
            value = value.value
        record[key] = value
    return record


def config_from_record(
    record: dict,
    base: Configuration = DEFAULT_CONFIG,
) -> Configuration:
    """Merge a stored record over ``base``.

    Unknown keys are ignored. Values of the wrong type are skipped so a
    damaged record never prevents startup.
    """
    changes = {}
    for key, value in record.items():
        attr = RECORD_KEYS.get(key)
        if attr is None:
            continue
        coerced = _coerce(attr, value)
        if coerced is None:
            logger.warning("Ignoring stored %s=%r", key, value)
            continue
        changes[attr] = coerced
    return base.replace(**changes)


def load_record(path: Path) -> dict:
    """Load the stored record from a JSON state file.

    Returns an empty record when the file is missing or unreadable.
    """
    state = _read_state(path)
    record = state.get(STORAGE_KEY, {})
    if not isinstance(record, dict):
        logger.warning("Stored configuration in %s is not an object", path)
        return {}
    return record


def save_record(path: Path, config: Configuration) -> None:
    """Write the configuration record, keeping any other keys in the file."""
    state = _read_state(path)
    state[STORAGE_KEY] = config_to_record(config)
    path.write_text(json.dumps(state, indent=2) + "\n")
    logger.debug("Saved configuration to %s", path)


def resolve_startup_config(record: dict | None = None, fragment: str = "") -> Configuration:
    """Build the initial configuration: defaults, stored record, then token.

    A calculated width is re-derived from the merged values, so a stale
    stored width never reaches the solver.
    """
    config = DEFAULT_CONFIG
    if record:
        config = config_from_record(record, config)
    if fragment:
        decoded = decode_config(token_from_fragment(fragment), base=config)
        if decoded is not None:
            config = decoded
        else:
            logger.info("Link token %r carries no usable data", fragment)
    return with_derived_width(config)


def _read_state(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        state = json.loads(path.read_text())
    except (OSError, ValueError) as e:
        logger.warning("Could not read state file %s: %s", path, e)
        return {}
    if not isinstance(state, dict):
        logger.warning("State file %s does not hold an object", path)
        return {}
    return state


def _coerce(attr: str, value):
    """Convert a stored value to the attribute's type, or None if impossible."""
    if attr in _ENUM_TYPES:
        try:
            return _ENUM_TYPES[attr](value)
        except ValueError:
            return None
    if attr in _BOOL_FIELDS:
        return value if isinstance(value, bool) else None
    # bool is an int subclass but never a valid length
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if attr in _INT_FIELDS:
        if isinstance(value, float):
            return int(value) if value.is_integer() else None
        return value
    return value
