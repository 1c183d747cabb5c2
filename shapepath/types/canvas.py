"""Canvas context passed to shape samplers."""

from pydantic import BaseModel, ConfigDict, computed_field


class Canvas(BaseModel):
    """Drawing area that shape defaults may be sampled against.

    The canvas is centered on the origin: x spans [-width/2, width/2] and
    y spans [-height/2, height/2].
    """

    model_config = ConfigDict(frozen=True)

    width: int = 800
    height: int = 700

    @computed_field  # type: ignore[prop-decorator]
    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def x_range(self) -> tuple[float, float]:
        return (-self.width / 2, self.width / 2)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def y_range(self) -> tuple[float, float]:
        return (-self.height / 2, self.height / 2)
