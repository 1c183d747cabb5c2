"""CLI for shapepath - shape records and path concatenation.

Usage:
    shapepath polygon
    shapepath polygon --name tri --scale 2 --point 0,0 --point 5,10 --point 10,0 --svg
    shapepath concat a.json b.json --seam line --close
"""

import json
import logging
from enum import Enum
from pathlib import Path as FilePath
from typing import Any

import typer
from pydantic import TypeAdapter, ValidationError
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shapepath import samplers
from shapepath.builder import SEAM_POLICIES, concat_paths
from shapepath.config import default_canvas, settings
from shapepath.errors import CommandFileError
from shapepath.logging_config import configure_logging
from shapepath.shapes import make_shape
from shapepath.svg import path_to_d, path_to_svg, polygon_to_svg, svg_document
from shapepath.types import AttrValue, PathCmd, PathData, const_of

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="shapepath",
    help="Build shape records and SVG paths",
    add_completion=False,
)
console = Console()

_path_adapter = TypeAdapter(list[PathCmd])
# Attribute values accepted in override files
_overrides_adapter = TypeAdapter(dict[str, AttrValue])


class SeamPolicy(str, Enum):
    """How a path's leading command is treated when it is joined on."""

    KEEP = "keep"
    DROP = "drop"
    LINE = "line"


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Log level"),
    json_logs: bool = typer.Option(settings.log_json, "--json-logs", help="Log as JSON lines"),
) -> None:
    """Build shape records and SVG paths."""
    configure_logging(json_format=json_logs, log_level=log_level)
    if settings.random_seed is not None:
        samplers.seed(settings.random_seed)


# =============================================================================
# Helpers
# =============================================================================


def _parse_point(text: str) -> tuple[float, float]:
    """Parse "x,y" into a point."""
    try:
        x, y = (float(part) for part in text.split(","))
    except ValueError as e:
        raise typer.BadParameter(f"Expected X,Y but got {text!r}") from e
    return (x, y)


def _describe(attr: Any) -> str:
    """Short human-readable form of a tagged attribute value."""
    if not hasattr(attr, "tag"):
        return str(attr)
    if attr.tag == "ColorV":
        color = attr.contents
        if color.tag == "NONE":
            return "none"
        return "rgba(" + ", ".join(f"{float(c):.2f}" for c in color.contents) + ")"
    if attr.tag == "PtListV":
        return " ".join(f"({x:g}, {y:g})" for x, y in attr.contents)
    return repr(attr.contents)


def load_commands(path: FilePath) -> PathData:
    """Load a JSON list of path commands from a file.

    Raises:
        CommandFileError: If the file can't be read or isn't a valid command list
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CommandFileError(f"Cannot read {path}: {e}") from e
    try:
        commands = _path_adapter.validate_json(raw)
    except ValidationError as e:
        raise CommandFileError(
            f"Invalid path commands in {path}: {e.error_count()} error(s)"
        ) from e
    logger.info(
        f"Loaded {len(commands)} commands from {path}",
        extra={"file": str(path), "commands": len(commands)},
    )
    return commands


def load_overrides(path: FilePath) -> dict[str, Any]:
    """Load a JSON object of tagged attribute values from a file.

    Raises:
        CommandFileError: If the file can't be read or holds invalid values
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CommandFileError(f"Cannot read {path}: {e}") from e
    try:
        return _overrides_adapter.validate_json(raw)
    except ValidationError as e:
        raise CommandFileError(
            f"Invalid attribute values in {path}: {e.error_count()} error(s)"
        ) from e


# =============================================================================
# Commands
# =============================================================================


@app.command("polygon")
def polygon(
    name: str | None = typer.Option(None, "--name", help="Shape name"),
    scale: float | None = typer.Option(None, "--scale", help="Scale factor"),
    points: list[str] | None = typer.Option(None, "--point", "-p", help="Outline point X,Y"),
    svg: bool = typer.Option(False, "--svg", help="Print an SVG document instead of a table"),
    seed: int | None = typer.Option(None, "--seed", help="Seed for sampled defaults"),
    overrides_file: FilePath | None = typer.Option(
        None, "--overrides", help="JSON file of attribute overrides"
    ),
) -> None:
    """Make a polygon from defaults and the given overrides.

    Examples:
        shapepath polygon
        shapepath polygon --scale 2 -p 0,0 -p 0,20 -p 20,0 --svg
    """
    if seed is not None:
        samplers.seed(seed)

    overrides: dict[str, Any] = {}
    if overrides_file is not None:
        try:
            overrides.update(load_overrides(overrides_file))
        except CommandFileError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            raise typer.Exit(1) from e
    if name is not None:
        overrides["name"] = samplers.str_v(name)
    if scale is not None:
        overrides["scale"] = samplers.float_v(const_of(scale))
    if points:
        parsed = [_parse_point(p) for p in points]
        if len(parsed) < 3:
            console.print("[red]A polygon needs at least 3 points[/red]")
            raise typer.Exit(1)
        overrides["points"] = samplers.pt_list_v(parsed)

    canvas = default_canvas()
    shape = make_shape("Polygon", canvas, overrides)

    if svg:
        typer.echo(svg_document([polygon_to_svg(shape)], canvas))
        return

    table = Table(title=f"{shape['shapeType']}", box=box.ROUNDED)
    table.add_column("Attribute", style="cyan")
    table.add_column("Value", style="green")
    for key, attr in shape.items():
        table.add_row(key, _describe(attr))
    console.print(table)


@app.command("concat")
def concat(
    files: list[FilePath] = typer.Argument(..., help="JSON files, each a list of path commands"),
    seam: SeamPolicy = typer.Option(SeamPolicy.KEEP, "--seam", help="Seam policy"),
    close: bool = typer.Option(False, "--close", help="Connect the end back to the start"),
    svg: bool = typer.Option(False, "--svg", help="Print an SVG document instead of a d-string"),
) -> None:
    """Concatenate path command files into one path.

    Examples:
        shapepath concat a.json b.json
        shapepath concat a.json b.json c.json --seam line --close
    """
    try:
        sequences = [load_commands(f) for f in files]
    except CommandFileError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    path = concat_paths(sequences, SEAM_POLICIES[seam.value], connect_last=close)

    if svg:
        typer.echo(svg_document([path_to_svg(path)], default_canvas()))
    else:
        typer.echo(path_to_d(path))


@app.command("dump")
def dump(
    file: FilePath = typer.Argument(..., help="JSON file with a list of path commands"),
) -> None:
    """Validate a path command file and print it back as normalized JSON."""
    try:
        commands = load_commands(file)
    except CommandFileError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e
    typer.echo(json.dumps(_path_adapter.dump_python(commands, mode="json"), indent=2))


# Entry point
if __name__ == "__main__":
    app()
