"""Exceptions raised by shapepath."""


class ShapePathError(Exception):
    """Base class for shapepath errors."""

    pass


class UnknownShapeError(ShapePathError, KeyError):
    """Raised when a shape type has no registered factory."""

    def __init__(self, shape_type: str) -> None:
        super().__init__(f"Unknown shape type: {shape_type!r}")
        self.shape_type = shape_type


class CommandFileError(ShapePathError):
    """Raised when a path command file cannot be read or validated."""

    pass
