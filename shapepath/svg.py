"""SVG output for path commands and shape records.

Pure functions - no state access.
"""

import logging
from collections.abc import Iterable, Mapping
from html import escape
from numbers import Real
from typing import Any

from shapepath.config import settings
from shapepath.types import RGBA, Canvas, ColorV, PathCmd, PathData

logger = logging.getLogger(__name__)


def format_number(num: Any, precision: int | None = None) -> str:
    """Render a numeric value for an SVG attribute.

    Real numbers are rounded to `precision` decimals with trailing zeros
    trimmed. Other values are converted with float() when they support it
    and str() otherwise.
    """
    if precision is None:
        precision = settings.svg_precision
    if isinstance(num, bool):
        return "1" if num else "0"
    if not isinstance(num, Real):
        try:
            num = float(num)
        except (TypeError, ValueError):
            return str(num)
    text = f"{float(num):.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def command_to_d(cmd: PathCmd, precision: int | None = None) -> str:
    """Convert one command to its d-string fragment, e.g. "L 10 20"."""
    parts = [cmd.cmd.value]
    for sub in cmd.contents:
        parts.extend(format_number(v, precision) for v in sub.contents)
    return " ".join(parts)


def path_to_d(path: Iterable[PathCmd], precision: int | None = None) -> str:
    """Convert a command list to an SVG path 'd' attribute."""
    return " ".join(command_to_d(cmd, precision) for cmd in path)


def _channel(c: Any, precision: int | None) -> str:
    """Scale a [0, 1] color channel to 0-255; symbolic channels render as-is."""
    try:
        return str(round(float(c) * 255))
    except (TypeError, ValueError):
        return format_number(c, precision)


def _paint(color: ColorV | None, precision: int | None) -> tuple[str, str | None]:
    """Return (paint, opacity) attribute values for a color."""
    if color is None or not isinstance(color.contents, RGBA):
        return "none", None
    r, g, b, a = color.contents.contents
    channels = ",".join(_channel(c, precision) for c in (r, g, b))
    return f"rgb({channels})", format_number(a, precision)


def polygon_to_svg(shape: Mapping[str, Any], precision: int | None = None) -> str:
    """Render a polygon shape record as an SVG <polygon> element."""
    points = " ".join(
        f"{format_number(x, precision)},{format_number(y, precision)}"
        for x, y in shape["points"].contents
    )
    fill, fill_opacity = _paint(shape.get("fillColor"), precision)
    stroke, stroke_opacity = _paint(shape.get("strokeColor"), precision)

    attrs: dict[str, str] = {"points": points, "fill": fill}
    if fill_opacity is not None:
        attrs["fill-opacity"] = fill_opacity
    attrs["stroke"] = stroke
    if stroke_opacity is not None:
        attrs["stroke-opacity"] = stroke_opacity
    if "strokeWidth" in shape:
        attrs["stroke-width"] = format_number(shape["strokeWidth"].contents, precision)
    dash = shape.get("strokeDashArray")
    if dash is not None and dash.contents:
        attrs["stroke-dasharray"] = dash.contents
    scale = shape.get("scale")
    if scale is not None and format_number(scale.contents, precision) != "1":
        attrs["transform"] = f"scale({format_number(scale.contents, precision)})"

    rendered = " ".join(f'{key}="{escape(val)}"' for key, val in attrs.items())
    return f"<polygon {rendered}/>"


def path_to_svg(
    path: PathData,
    stroke: str = "#000000",
    stroke_width: float = 1.0,
    fill: str = "none",
    precision: int | None = None,
) -> str:
    """Render a command list as an SVG <path> element."""
    d = path_to_d(path, precision)
    return (
        f'<path d="{escape(d)}" fill="{escape(fill)}" stroke="{escape(stroke)}" '
        f'stroke-width="{format_number(stroke_width, precision)}"/>'
    )


def svg_document(elements: Iterable[str], canvas: Canvas) -> str:
    """Wrap elements in an <svg> root covering the canvas.

    The viewBox is centered on the origin to match the canvas coordinates.
    """
    x0, _ = canvas.x_range
    y0, _ = canvas.y_range
    body = "\n".join(f"  {element}" for element in elements)
    logger.debug(f"svg_document: {canvas.width}x{canvas.height}")
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{canvas.width}" '
        f'height="{canvas.height}" viewBox="{format_number(x0)} {format_number(y0)} '
        f'{canvas.width} {canvas.height}">\n{body}\n</svg>'
    )
