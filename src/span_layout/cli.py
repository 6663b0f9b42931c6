"""CLI for span-layout."""

from __future__ import annotations

import dataclasses
import json
import logging
import math
from enum import Enum
from pathlib import Path

import click

from span_layout import __version__
from span_layout.layout import edits
from span_layout.layout.engine import marking_sequence
from span_layout.layout.measure import format_mm
from span_layout.layout.session import LayoutSession
from span_layout.parser.codec import decode_fields, encode_config, token_from_fragment
from span_layout.parser.model import (
    DistanceMode,
    DistributionMode,
    ElementType,
    RulerMarkMode,
)
from span_layout.parser.store import (
    config_to_record,
    load_record,
    resolve_startup_config,
    save_record,
)
from span_layout.render import render_svg
from span_layout.render.constants import LABELS
from span_layout.themes import THEMES


def _choice(enum_type) -> click.Choice:
    return click.Choice([member.value for member in enum_type])


class FiniteFloat(click.ParamType):
    """A float that rejects inf and nan."""

    name = "float"

    def convert(self, value, param, ctx):
        if isinstance(value, float):
            number = value
        else:
            try:
                number = float(value)
            except ValueError:
                self.fail(f"{value!r} is not a valid number", param, ctx)
        if not math.isfinite(number):
            self.fail(f"{value!r} is not a finite number", param, ctx)
        return number


MILLIMETRES = FiniteFloat()


_CONFIG_OPTIONS = [
    click.option("--state", type=click.Path(dir_okay=False, path_type=Path), default=None,
                 help="JSON state file holding the saved configuration"),
    click.option("--save", is_flag=True, default=False,
                 help="Write the resulting configuration back to --state"),
    click.option("--token", default=None,
                 help="Shareable link token (v3_... or v2_...), applied over the state"),
    click.option("--diameter", type=MILLIMETRES, default=None, help="Platform diameter (mm)"),
    click.option("--distance-mode", type=_choice(DistanceMode), default=None,
                 help="How --distance was measured"),
    click.option("--distance", type=MILLIMETRES, default=None, help="Measured distance (mm)"),
    click.option("--element-type", type=_choice(ElementType), default=None,
                 help="point, board, or calculated (width derived from gap and count)"),
    click.option("--board-width", type=MILLIMETRES, default=None, help="Board width (mm)"),
    click.option("--distribution", type=_choice(DistributionMode), default=None,
                 help="Derive the count from the gap, or fix the count"),
    click.option("--target-gap", type=MILLIMETRES, default=None, help="Desired gap (mm)"),
    click.option("--count", type=int, default=None,
                 help="Element count (implies --distribution by-count)"),
    click.option("--max-end-gap", type=MILLIMETRES, default=None,
                 help="Maximum first/last offset (mm); unlocks the cap"),
    click.option("--lock/--no-lock", "locked", default=None,
                 help="Ignore the max end gap and space the ends like the rest"),
    click.option("--ruler-marks", type=_choice(RulerMarkMode), default=None,
                 help="Mark element edges or centres on the ruler"),
    click.option("--dimensions/--no-dimensions", "show_dimensions", default=None,
                 help="Draw dimension lines on the diagram"),
]


def config_options(func):
    """Attach the shared configuration options to a command."""
    for option in reversed(_CONFIG_OPTIONS):
        func = option(func)
    return func


def _build_session(options: dict) -> LayoutSession:
    """Resolve the configuration from state, token and option overrides."""
    state: Path | None = options["state"]
    token: str | None = options["token"]

    record = load_record(state) if state else None
    if token and decode_fields(token_from_fragment(token)) is None:
        click.echo(f"Token '{token}' carries no usable data; ignoring it", err=True)
    session = LayoutSession(resolve_startup_config(record, token or ""))

    if options["save"]:
        if state is None:
            raise click.UsageError("--save requires --state")
        session.add_effect(lambda config, result: save_record(state, config))

    pending: list[edits.Edit] = []
    if options["diameter"] is not None:
        pending.append(edits.SetDiameter(options["diameter"]))
    if options["distance_mode"] is not None:
        pending.append(edits.SetDistanceMode(DistanceMode(options["distance_mode"])))
    if options["distance"] is not None:
        pending.append(edits.SetDistanceValue(options["distance"]))
    if options["element_type"] is not None:
        pending.append(edits.SetElementType(ElementType(options["element_type"])))
    if options["board_width"] is not None:
        pending.append(edits.SetBoardWidth(options["board_width"]))
    if options["distribution"] is not None:
        pending.append(edits.SetDistributionMode(DistributionMode(options["distribution"])))
    if options["target_gap"] is not None:
        pending.append(edits.SetTargetGap(options["target_gap"]))
    if options["count"] is not None:
        pending.append(edits.SetElementCount(options["count"]))
    if options["max_end_gap"] is not None:
        pending.append(edits.SetMaxEndGap(options["max_end_gap"]))
    if options["locked"] is not None:
        pending.append(edits.SetMaxEndGapLocked(options["locked"]))
    if options["ruler_marks"] is not None:
        pending.append(edits.SetRulerMarkMode(RulerMarkMode(options["ruler_marks"])))
    if options["show_dimensions"] is not None:
        pending.append(edits.SetShowDimensions(options["show_dimensions"]))

    if pending:
        session.submit_all(pending)
    elif options["save"]:
        save_record(state, session.config)
    return session


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-v, -vv)")
def cli(verbose: int) -> None:
    """span-layout: Place markers or boards evenly between two platforms."""
    level = logging.WARNING - 10 * min(verbose, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@config_options
@click.option("--json", "as_json", is_flag=True, default=False,
              help="Print the configuration and result as JSON")
@click.option("--lang", type=click.Choice(sorted(LABELS)), default="en",
              help="Language of the marking sequence (default: en)")
def solve(as_json: bool, lang: str, **options) -> None:
    """Compute the layout and print positions and warnings."""
    session = _build_session(options)
    config, result = session.config, session.result

    if as_json:
        payload = {
            "token": encode_config(config),
            "config": config_to_record(config),
            "result": dataclasses.asdict(result),
        }
        click.echo(json.dumps(payload, indent=2))
        return

    labels = LABELS[lang]
    click.echo(f"Working span: {format_mm(result.edge_to_edge)} mm "
               f"(centre to centre {format_mm(result.center_to_center)} mm)")
    click.echo(f"Elements: {result.element_count}")
    click.echo(f"Between elements: {format_mm(result.actual_gap)} mm")
    click.echo(f"1st offset: {format_mm(result.first_element_offset)} mm")
    if result.element_width:
        click.echo(f"Element width: {format_mm(result.element_width)} mm")
    sequence = marking_sequence(config, result, labels["platform_edge"])
    click.echo("Marking sequence: " + " ".join(f"[{item}]" for item in sequence))
    click.echo(f"Token: {encode_config(config)}")
    if result.warnings:
        click.echo("Warnings:", err=True)
        for warning in result.warnings:
            click.echo(f"  - {warning}", err=True)


@cli.command()
@config_options
@click.option("-o", "--output", type=click.Path(path_type=Path), default=Path("layout.svg"),
              help="Output SVG file path (default: layout.svg)")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="light",
              help="Visual theme (default: light)")
@click.option("--lang", type=click.Choice(sorted(LABELS)), default="en",
              help="Label language (default: en)")
@click.option("--width", type=int, default=None, help="SVG width in pixels")
def render(output: Path, theme: str, lang: str, width: int | None, **options) -> None:
    """Render the layout diagram and construction ruler to SVG."""
    session = _build_session(options)
    svg = render_svg(session.config, session.result, THEMES[theme], lang=lang, width=width)
    output.write_text(svg)
    click.echo(f"Rendered {session.result.element_count} elements, "
               f"{len(session.result.warnings)} warnings -> {output}")


@cli.command()
@config_options
def encode(**options) -> None:
    """Print the shareable token for the configuration."""
    session = _build_session(options)
    click.echo(encode_config(session.config))


@cli.command()
@click.argument("token")
def decode(token: str) -> None:
    """Show the configuration carried by a shareable token."""
    fields = decode_fields(token_from_fragment(token))
    if fields is None:
        click.echo(f"Token '{token}' carries no usable data", err=True)
        raise SystemExit(1)
    for name, value in fields.items():
        if isinstance(value, Enum):
            value = value.value
        click.echo(f"{name}: {value}")
