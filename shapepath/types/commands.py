"""Path command records.

A path is an ordered list of `PathCmd`. Each command carries a code from the
SVG path alphabet and a list of operands (`CoordV` pairs or a `ValueV` tuple).
"""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class CommandCode(str, Enum):
    """SVG path command codes (absolute form)."""

    MOVE = "M"
    LINE = "L"
    QUADRATIC = "Q"
    CUBIC = "C"
    QUADRATIC_JOIN = "T"  # Control point reflected from the previous Q/T
    CUBIC_JOIN = "S"  # First control point reflected from the previous C/S
    ARC = "A"
    CLOSE = "Z"


class CoordV(BaseModel):
    """A coordinate operand (x, y)."""

    model_config = ConfigDict(frozen=True)

    tag: Literal["CoordV"] = "CoordV"
    contents: tuple[Any, Any]


class ValueV(BaseModel):
    """A raw value-tuple operand, used for arc parameters."""

    model_config = ConfigDict(frozen=True)

    tag: Literal["ValueV"] = "ValueV"
    contents: tuple[Any, ...]


SubPath = Annotated[CoordV | ValueV, Field(discriminator="tag")]


class PathCmd(BaseModel):
    """One drawing instruction."""

    model_config = ConfigDict(frozen=True)

    cmd: CommandCode
    contents: list[SubPath] = []


PathData = list[PathCmd]


def coord(x: Any, y: Any) -> CoordV:
    """Build a coordinate operand."""
    return CoordV(contents=(x, y))


def value(values: list[Any] | tuple[Any, ...]) -> ValueV:
    """Build a value-tuple operand."""
    return ValueV(contents=tuple(values))
