"""Type definitions for shapepath.

This package contains all type definitions organized into focused modules:
- numeric: Numeric boundary (Num, Lift, const_of)
- commands: Path command records (PathCmd, CoordV, ValueV)
- values: Tagged attribute values for shape records
- canvas: Canvas context for shape sampling
"""

from shapepath.types.canvas import Canvas
from shapepath.types.commands import (
    CommandCode,
    CoordV,
    PathCmd,
    PathData,
    SubPath,
    ValueV,
    coord,
    value,
)
from shapepath.types.numeric import Lift, Num, Point, const_of
from shapepath.types.values import (
    RGBA,
    AttrValue,
    BoolV,
    Color,
    ColorV,
    FloatV,
    NoPaint,
    PtListV,
    StrV,
)

__all__ = [
    # Numeric
    "Lift",
    "Num",
    "Point",
    "const_of",
    # Commands
    "CommandCode",
    "CoordV",
    "PathCmd",
    "PathData",
    "SubPath",
    "ValueV",
    "coord",
    "value",
    # Values
    "AttrValue",
    "BoolV",
    "Color",
    "ColorV",
    "FloatV",
    "NoPaint",
    "PtListV",
    "RGBA",
    "StrV",
    # Canvas
    "Canvas",
]
