"""
Host Modeling Contract
======================
The small surface of the building-modeling host that the mezzanine command
relies on.

Why is this file needed?
------------------------
1. Decoupling: The command never touches a concrete host API. Anything that
   satisfies these protocols (a live host adapter, the in-memory document
   used in tests) can be passed in explicitly.
2. Transactions: ``transaction()`` gives every mutation the same
   commit-or-rollback shape.

Classes:
    Level, FloorType, WallType: Read-only descriptions of host elements.
    HostDocument: The persistent model with transactional mutation.
    InteractiveView: Point picking and redraw.
    Notifier: Operator-facing notices.
"""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Flag, StrEnum, auto
import logging
from typing import TYPE_CHECKING, Any, Iterator, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from mezzanine.model.geometry_primitives import CurveLoop, Line, Point

logger = logging.getLogger(__name__)

# Host element ids are plain integers.
ElementId = int


class SnapMode(Flag):
    """Object snaps active while picking points."""
    NONE = 0
    ENDPOINTS = auto()
    MIDPOINTS = auto()
    INTERSECTIONS = auto()
    NEAREST = auto()
    CENTERS = auto()


class Unit(StrEnum):
    MILLIMETERS = "mm"
    METERS = "m"
    FEET = "ft"


class ParameterKey(StrEnum):
    """Element parameters written by the generator."""
    FLOOR_HEIGHT_ABOVE_LEVEL = "floor_height_above_level"
    WALL_BASE_CONSTRAINT = "wall_base_constraint"
    WALL_BASE_OFFSET = "wall_base_offset"
    WALL_HEIGHT_TYPE = "wall_height_type"  # top constraint (level id or None)
    WALL_TOP_OFFSET = "wall_top_offset"
    WALL_UNCONNECTED_HEIGHT = "wall_unconnected_height"


class WallKind(StrEnum):
    BASIC = "basic"
    CURTAIN = "curtain"
    STACKED = "stacked"


@dataclass(frozen=True)
class Level:
    id: ElementId
    name: str
    elevation: float


@dataclass(frozen=True)
class FloorType:
    id: ElementId
    name: str
    is_foundation_slab: bool = False


@dataclass(frozen=True)
class WallType:
    id: ElementId
    name: str
    kind: WallKind = WallKind.BASIC


class InteractiveView(Protocol):
    def pick_point(self, snap_modes: SnapMode, prompt: str) -> Optional[Point]:
        """Block until the operator picks a point; None when they cancel."""
        ...

    def refresh_view(self) -> None: ...


class HostDocument(Protocol):
    def get_current_view_level(self) -> Optional[Level]: ...
    def list_levels(self) -> list[Level]: ...
    def list_floor_types(self) -> list[FloorType]: ...
    def list_wall_types(self) -> list[WallType]: ...

    def begin_transaction(self, name: str) -> None: ...
    def commit(self) -> None: ...
    def rollback(self) -> None: ...

    def create_preview_segment(self, line: Line) -> ElementId: ...
    def create_platform(self, loop: CurveLoop, floor_type_id: ElementId, base_level_id: ElementId) -> ElementId: ...
    def create_wall(
        self,
        edge: Line,
        wall_type_id: ElementId,
        base_level_id: ElementId,
        unconnected_height: float,
        base_offset: float,
        flip: bool,
        structural: bool,
    ) -> ElementId: ...
    def set_parameter(self, handle: ElementId, key: ParameterKey, value: Any) -> None: ...
    def get_parameter(self, handle: ElementId, key: ParameterKey) -> Any: ...
    def delete_entities(self, handles: Sequence[ElementId]) -> None: ...

    def convert_to_internal_units(self, value: float, unit: Unit) -> float: ...
    def convert_from_internal_units(self, value: float, unit: Unit) -> float: ...


class Notifier(Protocol):
    def show(self, title: str, message: str) -> None: ...


@contextmanager
def transaction(document: HostDocument, name: str) -> Iterator[None]:
    """Run the block inside a host transaction: commit on success, roll back on any exception."""
    document.begin_transaction(name)
    try:
        yield
        document.commit()
    except BaseException:
        logger.warning(f"Rolling back transaction '{name}'.")
        try:
            document.rollback()
        except Exception as e:
            # Keep the original failure; the rollback error only goes to the log.
            logger.error(f"Could not roll back transaction '{name}': {e}")
        raise
