"""
In-Memory Host
==============
A self-contained implementation of the host contract.

It keeps levels, construction types and created elements in plain Python
containers and emulates transactions with snapshots, so the whole command
can run (and be tested) without a modeling application.

Classes:
    InMemoryDocument: HostDocument with snapshot transactions.
    ScriptedView: InteractiveView that replays a queue of picks.
    RecordingNotifier: Notifier that remembers every notice.
"""
from __future__ import annotations

from collections import deque
import copy
from dataclasses import dataclass, field
from enum import StrEnum
import logging
from typing import Any, Iterable, Optional, Sequence

from mezzanine.errors import HostError
from mezzanine.host.base import ElementId, FloorType, Level, ParameterKey, SnapMode, Unit, WallType
from mezzanine.model.geometry_primitives import CurveLoop, Line, Point
from mezzanine.utils import feet_to_mm, mm_to_feet

logger = logging.getLogger(__name__)


class ElementKind(StrEnum):
    PREVIEW = "preview"
    FLOOR = "floor"
    WALL = "wall"


_ALLOWED_PARAMETERS: dict[ElementKind, set[ParameterKey]] = {
    ElementKind.PREVIEW: set(),
    ElementKind.FLOOR: {ParameterKey.FLOOR_HEIGHT_ABOVE_LEVEL},
    ElementKind.WALL: {
        ParameterKey.WALL_BASE_CONSTRAINT,
        ParameterKey.WALL_BASE_OFFSET,
        ParameterKey.WALL_HEIGHT_TYPE,
        ParameterKey.WALL_TOP_OFFSET,
        ParameterKey.WALL_UNCONNECTED_HEIGHT,
    },
}

_LEVEL_PARAMETERS = {ParameterKey.WALL_BASE_CONSTRAINT, ParameterKey.WALL_HEIGHT_TYPE}


@dataclass
class Element:
    id: ElementId
    kind: ElementKind
    geometry: Any
    type_id: Optional[ElementId] = None
    level_id: Optional[ElementId] = None
    parameters: dict[ParameterKey, Any] = field(default_factory=dict)


class InMemoryDocument:
    """Building model held in memory. Internal length unit is the foot."""

    def __init__(
        self,
        levels: Iterable[Level] = (),
        floor_types: Iterable[FloorType] = (),
        wall_types: Iterable[WallType] = (),
        current_view_level: Optional[Level] = None,
    ) -> None:
        self.levels: list[Level] = list(levels)
        self.floor_types: list[FloorType] = list(floor_types)
        self.wall_types: list[WallType] = list(wall_types)
        self.current_view_level = current_view_level

        self.elements: dict[ElementId, Element] = {}
        self.committed_transactions: list[str] = []

        self._transaction: Optional[str] = None
        self._snapshot: Optional[tuple[dict[ElementId, Element], int]] = None

        known_ids = [o.id for o in (*self.levels, *self.floor_types, *self.wall_types)]
        if len(known_ids) != len(set(known_ids)):
            raise ValueError("Levels and types must have unique ids.")
        self._next_id: int = max(known_ids, default=0) + 1

    # ---- queries ----

    def get_current_view_level(self) -> Optional[Level]:
        return self.current_view_level

    def list_levels(self) -> list[Level]:
        return sorted(self.levels, key=lambda lvl: lvl.elevation)

    def list_floor_types(self) -> list[FloorType]:
        return list(self.floor_types)

    def list_wall_types(self) -> list[WallType]:
        return list(self.wall_types)

    def elements_of_kind(self, kind: ElementKind) -> list[Element]:
        return [e for e in self.elements.values() if e.kind == kind]

    @property
    def in_transaction(self) -> bool:
        return self._transaction is not None

    # ---- transactions ----

    def begin_transaction(self, name: str) -> None:
        if self._transaction is not None:
            raise HostError(f"Cannot start '{name}': transaction '{self._transaction}' is still open.")
        self._transaction = name
        self._snapshot = (copy.deepcopy(self.elements), self._next_id)
        logger.debug(f"Transaction started: {name}")

    def commit(self) -> None:
        name = self._require_transaction("commit")
        self.committed_transactions.append(name)
        self._transaction = None
        self._snapshot = None
        logger.debug(f"Transaction committed: {name}")

    def rollback(self) -> None:
        name = self._require_transaction("roll back")
        self.elements, self._next_id = self._snapshot
        self._transaction = None
        self._snapshot = None
        logger.debug(f"Transaction rolled back: {name}")

    # ---- mutation ----

    def create_preview_segment(self, line: Line) -> ElementId:
        self._require_transaction("create a preview line")
        return self._add(Element(id=self._take_id(), kind=ElementKind.PREVIEW, geometry=line))

    def create_platform(self, loop: CurveLoop, floor_type_id: ElementId, base_level_id: ElementId) -> ElementId:
        self._require_transaction("create a floor")
        if floor_type_id not in {t.id for t in self.floor_types}:
            raise HostError(f"Unknown floor type id {floor_type_id}.")
        self._level(base_level_id)
        if loop.is_open():
            raise HostError("Floor boundary must be a closed loop.")
        element = Element(
            id=self._take_id(),
            kind=ElementKind.FLOOR,
            geometry=loop,
            type_id=floor_type_id,
            level_id=base_level_id,
            parameters={ParameterKey.FLOOR_HEIGHT_ABOVE_LEVEL: 0.0},
        )
        return self._add(element)

    def create_wall(
        self,
        edge: Line,
        wall_type_id: ElementId,
        base_level_id: ElementId,
        unconnected_height: float,
        base_offset: float,
        flip: bool,
        structural: bool,
    ) -> ElementId:
        self._require_transaction("create a wall")
        if wall_type_id not in {t.id for t in self.wall_types}:
            raise HostError(f"Unknown wall type id {wall_type_id}.")
        self._level(base_level_id)
        if unconnected_height <= 0.0:
            raise HostError("Wall height must be positive.")
        element = Element(
            id=self._take_id(),
            kind=ElementKind.WALL,
            geometry=edge.reverse() if flip else edge,
            type_id=wall_type_id,
            level_id=base_level_id,
            parameters={
                ParameterKey.WALL_BASE_CONSTRAINT: base_level_id,
                ParameterKey.WALL_BASE_OFFSET: float(base_offset),
                ParameterKey.WALL_HEIGHT_TYPE: None,
                ParameterKey.WALL_TOP_OFFSET: 0.0,
                ParameterKey.WALL_UNCONNECTED_HEIGHT: float(unconnected_height),
            },
        )
        return self._add(element)

    def set_parameter(self, handle: ElementId, key: ParameterKey, value: Any) -> None:
        self._require_transaction(f"set '{key}'")
        element = self._element(handle)
        if key not in _ALLOWED_PARAMETERS[element.kind]:
            raise HostError(f"Element {handle} ({element.kind}) has no parameter '{key}'.")
        if key in _LEVEL_PARAMETERS:
            if value is not None:
                self._level(value)
        elif isinstance(value, bool) or not isinstance(value, (int, float)):
            raise HostError(f"Parameter '{key}' expects a number, got {value!r}.")
        else:
            value = float(value)
        element.parameters[key] = value

    def get_parameter(self, handle: ElementId, key: ParameterKey) -> Any:
        element = self._element(handle)
        if key not in element.parameters:
            raise HostError(f"Element {handle} ({element.kind}) has no parameter '{key}'.")
        return element.parameters[key]

    def delete_entities(self, handles: Sequence[ElementId]) -> None:
        self._require_transaction("delete elements")
        for handle in handles:
            self._element(handle)
        for handle in handles:
            del self.elements[handle]

    # ---- units ----

    def convert_to_internal_units(self, value: float, unit: Unit) -> float:
        match unit:
            case Unit.MILLIMETERS:
                return mm_to_feet(value)
            case Unit.METERS:
                return mm_to_feet(value * 1000.0)
            case Unit.FEET:
                return value
        raise ValueError(f"Unsupported unit: {unit}")

    def convert_from_internal_units(self, value: float, unit: Unit) -> float:
        match unit:
            case Unit.MILLIMETERS:
                return feet_to_mm(value)
            case Unit.METERS:
                return feet_to_mm(value) / 1000.0
            case Unit.FEET:
                return value
        raise ValueError(f"Unsupported unit: {unit}")

    # ---- helpers ----

    def _require_transaction(self, action: str) -> str:
        if self._transaction is None:
            raise HostError(f"Cannot {action}: no open transaction.")
        return self._transaction

    def _take_id(self) -> ElementId:
        element_id = self._next_id
        self._next_id += 1
        return element_id

    def _add(self, element: Element) -> ElementId:
        self.elements[element.id] = element
        return element.id

    def _element(self, handle: ElementId) -> Element:
        if handle not in self.elements:
            raise HostError(f"Element {handle} does not exist.")
        return self.elements[handle]

    def _level(self, level_id: ElementId) -> Level:
        for lvl in self.levels:
            if lvl.id == level_id:
                return lvl
        raise HostError(f"Unknown level id {level_id}.")


class ScriptedView:
    """Replays queued picks. ``None`` in the queue, or an empty queue, means the operator pressed ESC."""

    def __init__(self, picks: Iterable[Optional[Point]] = ()) -> None:
        self._picks: deque[Optional[Point]] = deque(picks)
        self.prompts: list[str] = []
        self.snap_modes: list[SnapMode] = []
        self.refresh_count = 0

    def pick_point(self, snap_modes: SnapMode, prompt: str) -> Optional[Point]:
        self.prompts.append(prompt)
        self.snap_modes.append(snap_modes)
        if not self._picks:
            return None
        return self._picks.popleft()

    def refresh_view(self) -> None:
        self.refresh_count += 1


class RecordingNotifier:
    def __init__(self) -> None:
        self.notices: list[tuple[str, str]] = []

    def show(self, title: str, message: str) -> None:
        logger.info(f"[{title}] {message}")
        self.notices.append((title, message))
