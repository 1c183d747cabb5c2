"""Attribute-sampling helpers for shape defaults."""

import logging
import random
from typing import Any

from shapepath.types import (
    RGBA,
    BoolV,
    ColorV,
    FloatV,
    Lift,
    NoPaint,
    PtListV,
    StrV,
    const_of,
)

logger = logging.getLogger(__name__)

# Channel range for sampled colors (avoids near-black and near-white)
COLOR_CHANNEL_MIN = 0.1
COLOR_CHANNEL_MAX = 0.9
SAMPLED_ALPHA = 0.5

# Module RNG shared by samplers when no explicit RNG is given
_rng = random.Random()


def seed(value: int | None) -> None:
    """Re-seed the module RNG (for deterministic sampling)."""
    logger.debug(f"Seeding sampler RNG with {value!r}")
    _rng.seed(value)


def sample_color(rng: random.Random | None = None, lift: Lift = const_of) -> ColorV:
    """Sample a translucent RGBA color."""
    rng = rng or _rng
    r, g, b = (rng.uniform(COLOR_CHANNEL_MIN, COLOR_CHANNEL_MAX) for _ in range(3))
    return ColorV(contents=RGBA(contents=(lift(r), lift(g), lift(b), lift(SAMPLED_ALPHA))))


def sample_no_paint() -> ColorV:
    return ColorV(contents=NoPaint())


def sample_zero(lift: Lift = const_of) -> FloatV:
    return FloatV(contents=lift(0))


def str_v(text: str) -> StrV:
    return StrV(contents=text)


def float_v(number: Any) -> FloatV:
    return FloatV(contents=number)


def bool_v(flag: bool) -> BoolV:
    return BoolV(contents=flag)


def pt_list_v(points: list[list[Any]] | list[tuple[Any, Any]]) -> PtListV:
    return PtListV(contents=tuple((x, y) for x, y in points))
