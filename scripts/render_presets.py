#!/usr/bin/env python3
"""Render each preset layout to SVG and report its warnings.

Outputs go to /tmp/span_layout_renders/ unless --output-dir is given.

Usage:
    python scripts/render_presets.py [--theme dark] [--lang ru]
"""

from __future__ import annotations

import argparse
from pathlib import Path

from span_layout.layout.engine import compute_layout
from span_layout.parser.codec import decode_config
from span_layout.render.svg import render_svg
from span_layout.themes import THEMES

# Name -> shareable token
PRESETS = {
    "points_default": "v3_1_0_12000_0_145_0_400_5_300_0_0",
    "points_locked": "v3_1_0_12000_0_145_0_400_5_300_1_0",
    "boards_by_gap": "v3_1_0_12000_1_145_0_400_5_300_0_1",
    "boards_by_count": "v3_2_1_9000_1_145_1_400_7_300_0_0",
    "calculated": "v3_1_1_10000_2_688_1_500_8_300_0_1",
    "single_element": "v3_1_0_12000_0_145_1_400_1_300_0_0",
    "overfull": "v3_1_0_12000_1_145_1_400_100_300_0_0",
    "too_short": "v3_1_0_1000_0_145_0_400_5_300_0_0",
}


def main():
    parser = argparse.ArgumentParser(description="Render the preset layouts")
    parser.add_argument("--theme", choices=sorted(THEMES), default="light")
    parser.add_argument("--lang", choices=["en", "ru"], default="en")
    parser.add_argument("--output-dir", type=Path, default=Path("/tmp/span_layout_renders"))
    args = parser.parse_args()

    args.output_dir.mkdir(parents=True, exist_ok=True)
    width = max(len(name) for name in PRESETS)

    for name, token in PRESETS.items():
        config = decode_config(token)
        result = compute_layout(config)
        svg = render_svg(config, result, THEMES[args.theme], lang=args.lang)
        (args.output_dir / f"{name}.svg").write_text(svg)

        print(f"{name:<{width}}  {result.element_count:>3} elements  "
              f"{'; '.join(result.warnings) or 'ok'}")

    print(f"\nOutputs in: {args.output_dir}/")


if __name__ == "__main__":
    main()
