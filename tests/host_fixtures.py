"""Shared builders for the in-memory model used across the test suite."""
from mezzanine.host.base import FloorType, Level, WallKind, WallType
from mezzanine.host.memory import InMemoryDocument
from mezzanine.model.geometry_primitives import Point
from mezzanine.utils import mm_to_feet

GROUND = Level(id=1, name="Level 1", elevation=0.0)
UPPER = Level(id=2, name="Level 2", elevation=mm_to_feet(3000.0))

FOUNDATION = FloorType(id=10, name="Foundation", is_foundation_slab=True)
GENERIC_FLOOR = FloorType(id=11, name="Generic Floor")
CURTAIN = WallType(id=20, name="Curtain", kind=WallKind.CURTAIN)
BASIC_WALL = WallType(id=21, name="Basic Wall", kind=WallKind.BASIC)


def make_document(levels=(GROUND, UPPER), current_view_level=None,
                  floor_types=(FOUNDATION, GENERIC_FLOOR), wall_types=(CURTAIN, BASIC_WALL)):
    return InMemoryDocument(
        levels=levels,
        floor_types=floor_types,
        wall_types=wall_types,
        current_view_level=current_view_level,
    )


def unit_square(z=0.0):
    return [Point(0.0, 0.0, z), Point(1.0, 0.0, z), Point(1.0, 1.0, z), Point(0.0, 1.0, z)]
