"""Library configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from shapepath.types import Canvas


class Settings(BaseSettings):
    """Settings loaded from environment variables (SHAPEPATH_*) and .env.

    Priority: environment variables > .env > defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="SHAPEPATH_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Canvas
    canvas_width: int = 800
    canvas_height: int = 700

    # SVG output
    svg_precision: int = 3  # digits after the decimal point in d-strings

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # JSON lines instead of human-readable output

    # Sampling
    random_seed: int | None = None  # seed for the sampler RNG (None = unseeded)


settings = Settings()


def default_canvas() -> Canvas:
    """Build a canvas sized from the current settings."""
    return Canvas(width=settings.canvas_width, height=settings.canvas_height)
