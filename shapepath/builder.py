"""Path builder and path concatenation.

`PathBuilder` accumulates SVG-style path commands through chained calls:

    path = (
        PathBuilder()
        .move_to((0, 0))
        .line_to((10, 0))
        .quadratic_curve_to((15, 5), (10, 10))
        .close_path()
        .get_path()
    )

`concat_paths` splices finished command lists into one, letting the caller
decide what happens at each seam.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from typing import Any, Generic

from shapepath.types import (
    CommandCode,
    Lift,
    Num,
    PathCmd,
    PathData,
    Point,
    const_of,
    coord,
    value,
)

logger = logging.getLogger(__name__)


# Seam policy: given a sequence's start command, return its replacement or
# None to drop it
Connect = Callable[[PathCmd], PathCmd | None]


def concat_paths(
    sequences: Sequence[Sequence[PathCmd]],
    connect: Connect | None = None,
    connect_last: bool = False,
) -> PathData:
    """Concatenate command lists according to a seam policy.

    Args:
        sequences: Paths to join, each a list of commands
        connect: Applied to the start command of every sequence after the
            first. A returned command replaces the start; None drops it.
            Without `connect` the sequences are joined back to back.
        connect_last: Also apply `connect` to the first command of the
            result and append what it returns, closing the composite path

    Returns:
        New command list; the input lists are not modified
    """
    if not sequences:
        return []

    result: PathData = []
    joined = 0
    skipped = 0
    dropped = 0
    for sequence in sequences:
        # shallow copy
        commands = list(sequence)
        if not commands:
            skipped += 1
            continue
        if connect is not None and joined > 0:
            new_start = connect(commands[0])
            if new_start is not None:
                commands[0] = new_start
            else:
                commands.pop(0)
                dropped += 1
        result.extend(commands)
        joined += 1

    if connect is not None and connect_last and result:
        new_end = connect(result[0])
        if new_end is not None:
            result.append(new_end)

    logger.debug(
        f"concat_paths: {len(sequences)} sequences ({skipped} empty, {dropped} seams dropped)"
        f" -> {len(result)} commands",
        extra={"sequences": len(sequences), "dropped": dropped, "commands": len(result)},
    )
    return result


def drop_moves(cmd: PathCmd) -> PathCmd | None:
    """Seam policy: drop a leading move so the path continues from the last point."""
    if cmd.cmd == CommandCode.MOVE:
        return None
    return cmd


def moves_to_lines(cmd: PathCmd) -> PathCmd | None:
    """Seam policy: turn a leading move into a line to the same point."""
    if cmd.cmd == CommandCode.MOVE:
        return PathCmd(cmd=CommandCode.LINE, contents=list(cmd.contents))
    return cmd


# Stock seam policies by name
SEAM_POLICIES: dict[str, Connect | None] = {
    "keep": None,
    "drop": drop_moves,
    "line": moves_to_lines,
}


class PathBuilder(Generic[Num]):
    """Builds an SVG path one command at a time.

    Every drawing method appends exactly one command and returns the builder
    so calls can be chained. Coordinates are stored as given; no arithmetic is
    done on them, so symbolic values work as well as floats.
    """

    def __init__(self, lift: Lift = const_of) -> None:
        """
        Args:
            lift: Turns literal defaults (arc rotation and flags) into the
                numeric type used by this builder
        """
        self._lift = lift
        self._path: PathData = []

    def __len__(self) -> int:
        return len(self._path)

    def __iter__(self) -> Iterator[PathCmd]:
        return iter(self._path)

    def get_path(self) -> PathData:
        """Return the command list.

        This is the builder's own list, not a copy: commands appended later
        show up in it.
        """
        return self._path

    def _push(self, cmd: CommandCode, *contents: Any) -> PathBuilder[Num]:
        self._path.append(PathCmd(cmd=cmd, contents=list(contents)))
        return self

    def move_to(self, point: Point) -> PathBuilder[Num]:
        """Move the cursor to `point` without drawing."""
        x, y = point
        return self._push(CommandCode.MOVE, coord(x, y))

    def line_to(self, point: Point) -> PathBuilder[Num]:
        """Draw a straight line to `point`."""
        x, y = point
        return self._push(CommandCode.LINE, coord(x, y))

    def close_path(self) -> PathBuilder[Num]:
        """Draw a line back to the start of the current subpath."""
        return self._push(CommandCode.CLOSE)

    def quadratic_curve_to(self, control: Point, end: Point) -> PathBuilder[Num]:
        """Draw a quadratic Bezier curve to `end` with one control point."""
        (cpx, cpy), (x, y) = control, end
        return self._push(CommandCode.QUADRATIC, coord(cpx, cpy), coord(x, y))

    def bezier_curve_to(self, control1: Point, control2: Point, end: Point) -> PathBuilder[Num]:
        """Draw a cubic Bezier curve to `end` with two control points."""
        (cpx1, cpy1), (cpx2, cpy2), (x, y) = control1, control2, end
        return self._push(
            CommandCode.CUBIC,
            coord(cpx1, cpy1),
            coord(cpx2, cpy2),
            coord(x, y),
        )

    def quadratic_curve_join(self, end: Point) -> PathBuilder[Num]:
        """Continue a quadratic curve to `end`.

        The control point is the reflection of the previous curve's control
        point; it is left for the renderer to infer.
        """
        x, y = end
        return self._push(CommandCode.QUADRATIC_JOIN, coord(x, y))

    def cubic_curve_join(self, control: Point, end: Point) -> PathBuilder[Num]:
        """Continue a cubic curve to `end`.

        `control` is the second control point; the first one is the
        reflection of the previous curve's second control point.
        """
        (cpx, cpy), (x, y) = control, end
        return self._push(CommandCode.CUBIC_JOIN, coord(cpx, cpy), coord(x, y))

    def arc_to(
        self,
        radii: Point,
        end: Point,
        arc_params: Sequence[Any] | None = None,
    ) -> PathBuilder[Num]:
        """Draw an elliptical arc with radii (rx, ry) ending at `end`.

        Args:
            radii: Ellipse radii (rx, ry)
            end: Arc endpoint (x, y)
            arc_params: (rotation, large_arc, sweep). rotation is the ellipse
                rotation in degrees; large_arc is 0 for the shorter arc and 1
                for the longer; sweep is 0 for counter-clockwise and 1 for
                clockwise. Missing values default to 0.
        """
        rx, ry = radii
        x, y = end
        params = [] if arc_params is None else list(arc_params)
        params += [self._lift(0)] * (3 - len(params))
        rotation, large_arc, sweep = params[:3]
        return self._push(
            CommandCode.ARC,
            value([rx, ry, rotation, large_arc, sweep]),
            coord(x, y),
        )

    concat_paths = staticmethod(concat_paths)
