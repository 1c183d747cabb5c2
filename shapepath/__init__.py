"""shapepath - shape records and SVG path building.

Re-exports the public API:
- PathBuilder, concat_paths and the stock seam policies
- Shape factories (sample_polygon, make_polygon, make_shape)
- Path command and attribute value types
"""

from shapepath.builder import (
    SEAM_POLICIES,
    Connect,
    PathBuilder,
    concat_paths,
    drop_moves,
    moves_to_lines,
)
from shapepath.errors import CommandFileError, ShapePathError, UnknownShapeError
from shapepath.shapes import (
    SHAPE_FACTORIES,
    make_polygon,
    make_shape,
    sample_polygon,
    sample_shape,
)
from shapepath.svg import path_to_d
from shapepath.types import (
    Canvas,
    CommandCode,
    CoordV,
    PathCmd,
    PathData,
    ValueV,
    const_of,
)

__all__ = [
    # Builder
    "Connect",
    "PathBuilder",
    "SEAM_POLICIES",
    "concat_paths",
    "drop_moves",
    "moves_to_lines",
    # Shapes
    "SHAPE_FACTORIES",
    "make_polygon",
    "make_shape",
    "sample_polygon",
    "sample_shape",
    # SVG
    "path_to_d",
    # Types
    "Canvas",
    "CommandCode",
    "CoordV",
    "PathCmd",
    "PathData",
    "ValueV",
    "const_of",
    # Errors
    "CommandFileError",
    "ShapePathError",
    "UnknownShapeError",
]
