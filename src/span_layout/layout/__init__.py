"""Layout solver and configuration reducer."""

from span_layout.layout.edits import apply_edit, apply_edits
from span_layout.layout.engine import compute_layout

__all__ = ["apply_edit", "apply_edits", "compute_layout"]
