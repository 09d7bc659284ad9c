from __future__ import annotations

import os

# pygame must not open a window or an audio device under test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from core.celestial_math import GnomonicProjection
from core.configuration import Configuration


def fixed_width_resolver(name: str):
    """Measures names at 7 px per character and 12 px tall; handle is the name."""
    if not name:
        return None
    return name, (7.0 * len(name), 12.0)


@pytest.fixture
def resolver():
    return fixed_width_resolver


@pytest.fixture
def configuration() -> Configuration:
    return Configuration()


@pytest.fixture
def orion_projector() -> GnomonicProjection:
    return GnomonicProjection(84.0, 0.0, 40.0, 800, 600)
