"""Tagged attribute values used in shape records."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class RGBA(BaseModel):
    """Color with red, green, blue and alpha channels in [0, 1]."""

    model_config = ConfigDict(frozen=True)

    tag: Literal["RGBA"] = "RGBA"
    contents: tuple[Any, Any, Any, Any]


class NoPaint(BaseModel):
    """Absence of paint (SVG `none`)."""

    model_config = ConfigDict(frozen=True)

    tag: Literal["NONE"] = "NONE"


Color = Annotated[RGBA | NoPaint, Field(discriminator="tag")]


class StrV(BaseModel):
    model_config = ConfigDict(frozen=True)

    tag: Literal["StrV"] = "StrV"
    contents: str


class FloatV(BaseModel):
    model_config = ConfigDict(frozen=True)

    tag: Literal["FloatV"] = "FloatV"
    contents: Any


class BoolV(BaseModel):
    model_config = ConfigDict(frozen=True)

    tag: Literal["BoolV"] = "BoolV"
    contents: bool


class ColorV(BaseModel):
    model_config = ConfigDict(frozen=True)

    tag: Literal["ColorV"] = "ColorV"
    contents: Color


class PtListV(BaseModel):
    """A list of (x, y) points."""

    model_config = ConfigDict(frozen=True)

    tag: Literal["PtListV"] = "PtListV"
    contents: tuple[tuple[Any, Any], ...]


AttrValue = Annotated[
    StrV | FloatV | BoolV | ColorV | PtListV,
    Field(discriminator="tag"),
]
