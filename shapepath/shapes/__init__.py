"""Shape factories and the shape registry."""

import logging
import random
from collections.abc import Callable, Mapping
from typing import Any

from shapepath.errors import UnknownShapeError
from shapepath.shapes.polygon import POLYGON_KEYS, make_polygon, sample_polygon
from shapepath.types import Canvas

logger = logging.getLogger(__name__)

Sampler = Callable[..., dict[str, Any]]
Maker = Callable[..., dict[str, Any]]

# Registry of shape factories: shape type -> (sampler, maker)
SHAPE_FACTORIES: dict[str, tuple[Sampler, Maker]] = {
    "Polygon": (sample_polygon, make_polygon),
}


def _lookup(shape_type: str) -> tuple[Sampler, Maker]:
    try:
        return SHAPE_FACTORIES[shape_type]
    except KeyError:
        raise UnknownShapeError(shape_type) from None


def sample_shape(
    shape_type: str, canvas: Canvas, rng: random.Random | None = None
) -> dict[str, Any]:
    """Sample the default attribute record for a registered shape type."""
    sampler, _ = _lookup(shape_type)
    return sampler(canvas, rng=rng)


def make_shape(
    shape_type: str,
    canvas: Canvas,
    overrides: Mapping[str, Any] | None = None,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    """Make a shape of a registered type with overrides applied."""
    _, maker = _lookup(shape_type)
    shape = maker(canvas, overrides, rng=rng)
    logger.debug(f"Made {shape_type} with {len(overrides or {})} overrides")
    return shape


__all__ = [
    "POLYGON_KEYS",
    "SHAPE_FACTORIES",
    "make_polygon",
    "make_shape",
    "sample_polygon",
    "sample_shape",
]
