"""Shared chamber fixtures for the geometry kernel tests."""
import pytest
from shared.types import Coord
from dungeon.chamber import Chamber
from shapes import SQUARE, U_SHAPE, TRIANGLE


def build_chamber(verts, **kwargs) -> Chamber:
    """Chamber with *verts* appended in order."""
    chamber = Chamber(**kwargs)
    for v in verts:
        chamber.append(Coord(*v))
    return chamber


@pytest.fixture
def make_chamber():
    """Factory fixture: make_chamber(verts, **chamber_kwargs)."""
    return build_chamber


@pytest.fixture
def empty_chamber():
    return Chamber()


@pytest.fixture
def square():
    """10x10 square, walls 1..4 starting at the origin."""
    return build_chamber(SQUARE)


@pytest.fixture
def u_shape():
    """Concave U shape with a notch between two prongs."""
    return build_chamber(U_SHAPE)


@pytest.fixture
def triangle():
    return build_chamber(TRIANGLE)
