"""Layout constants used across layout modules.

Centralizes tolerances, warning texts and the standard platform sizes.
"""

# ---------------------------------------------------------------------------
# Floating point slack
# ---------------------------------------------------------------------------
CAP_TOLERANCE: float = 0.1
"""Slack (mm) when deciding whether the uniform gap respects the max end gap.

Absorbs rounding error from the gap division, not a domain tolerance.
Tuning it also shifts which branch of gap resolution is taken.
"""

CAP_WARNING_TOLERANCE: float = 0.5
"""Slack (mm) before an end offset above the cap is reported.

Larger than CAP_TOLERANCE so the clamped branch, which sets the end
offset to exactly the cap, can never trigger the warning.
"""

# ---------------------------------------------------------------------------
# Platforms
# ---------------------------------------------------------------------------
STANDARD_DIAMETERS: tuple[int, ...] = (1200, 1500, 1800)
"""Platform diameters offered as presets (and encodable in v3 tokens)."""

# ---------------------------------------------------------------------------
# Warnings
# ---------------------------------------------------------------------------
WARNING_DISTANCE_TOO_SMALL: str = "distance too small"
"""The measured distance leaves a negative working span."""

WARNING_ELEMENTS_DO_NOT_FIT: str = "elements do not fit"
"""Resolved gaps are negative: elements overlap or spill past the span."""

WARNING_END_GAP_EXCEEDED: str = (
    "first offset ({offset} mm) exceeds max end gap ({cap} mm)"
)
"""The end offset is above the configured cap. Formatted with str.format."""
