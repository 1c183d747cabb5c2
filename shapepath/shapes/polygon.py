"""Polygon shape factory."""

import random
from collections.abc import Mapping
from typing import Any

from shapepath.samplers import (
    bool_v,
    float_v,
    pt_list_v,
    sample_color,
    sample_no_paint,
    sample_zero,
    str_v,
)
from shapepath.types import Canvas, Lift, const_of

SHAPE_TYPE = "Polygon"

# Outline used when the caller does not supply points
DEFAULT_POINTS = [[0, 0], [0, 10], [10, 0]]

POLYGON_KEYS = (
    "name",
    "style",
    "strokeWidth",
    "strokeStyle",
    "strokeColor",
    "strokeDashArray",
    "fillColor",
    "scale",
    "points",
    "ensureOnCanvas",
)


def sample_polygon(
    canvas: Canvas,
    rng: random.Random | None = None,
    lift: Lift = const_of,
) -> dict[str, Any]:
    """Build a polygon attribute record with default values.

    Args:
        canvas: Drawing area the defaults are sampled against (read-only)
        rng: Random source for stochastic defaults (module RNG if None)
        lift: Turns numeric literals into the caller's numeric type

    Returns:
        Fresh attribute record with every polygon key present
    """
    return {
        "name": str_v("defaultPolygon"),
        "style": str_v(""),
        "strokeWidth": sample_zero(lift),
        "strokeStyle": str_v("solid"),
        "strokeColor": sample_no_paint(),
        "strokeDashArray": str_v(""),
        "fillColor": sample_color(rng, lift),
        "scale": float_v(lift(1)),
        "points": pt_list_v([[lift(x), lift(y)] for x, y in DEFAULT_POINTS]),
        "ensureOnCanvas": bool_v(True),
    }


def make_polygon(
    canvas: Canvas,
    overrides: Mapping[str, Any] | None = None,
    rng: random.Random | None = None,
    lift: Lift = const_of,
) -> dict[str, Any]:
    """Build a polygon from defaults with caller overrides merged on top.

    Overrides win per key; keys the polygon does not know are copied through
    unchanged. `shapeType` is always "Polygon".
    """
    return {
        **sample_polygon(canvas, rng=rng, lift=lift),
        **(overrides or {}),
        "shapeType": SHAPE_TYPE,
    }
