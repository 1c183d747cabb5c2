"""Shared pytest fixtures."""

import logging
import random
from collections.abc import Iterator

import pytest

from shapepath.types import Canvas


@pytest.fixture
def canvas() -> Canvas:
    """A default-sized canvas."""
    return Canvas(width=800, height=700)


@pytest.fixture
def rng() -> random.Random:
    """Deterministic RNG for sampled defaults."""
    return random.Random(1234)


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Remove handlers installed by configure_logging() during a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
