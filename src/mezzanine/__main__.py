"""
Development demo.

Runs the mezzanine command against an in-memory model with two levels and a
scripted square sketch; the height is asked with the real dialog.

Run with: python -m mezzanine
"""
from __future__ import annotations

import logging
import sys

from mezzanine.app.application import create_app
from mezzanine.controller.command import MezzanineCommand, Result
from mezzanine.host.base import FloorType, Level, WallKind, WallType
from mezzanine.host.memory import ElementKind, InMemoryDocument, ScriptedView
from mezzanine.logging_config import setup_logging
from mezzanine.model.geometry_primitives import Point
from mezzanine.utils import mm_to_feet
from mezzanine.view.dialogs.height_dialog import QtHeightPrompt
from mezzanine.view.notices import MessageBoxNotifier

logger = logging.getLogger("mezzanine")


def build_demo_document() -> InMemoryDocument:
    ground = Level(id=1, name="Level 1", elevation=0.0)
    first = Level(id=2, name="Level 2", elevation=mm_to_feet(4500.0))
    return InMemoryDocument(
        levels=[ground, first],
        floor_types=[
            FloorType(id=10, name="Foundation Slab 300", is_foundation_slab=True),
            FloorType(id=11, name="Generic 150mm"),
        ],
        wall_types=[
            WallType(id=20, name="Curtain Wall", kind=WallKind.CURTAIN),
            WallType(id=21, name="Generic 200mm", kind=WallKind.BASIC),
        ],
        current_view_level=ground,
    )


def main() -> int:
    setup_logging(logging.DEBUG)
    create_app()

    side = mm_to_feet(6000.0)
    view = ScriptedView([
        Point(0.0, 0.0, 0.0),
        Point(side, 0.0, 0.0),
        Point(side, side, 0.0),
        Point(0.0, side, 0.0),
    ])
    document = build_demo_document()

    command = MezzanineCommand(
        document=document,
        view=view,
        height_prompt=QtHeightPrompt(),
        notifier=MessageBoxNotifier(),
    )
    result = command.execute()

    logger.info(
        f"Result: {result.status}; floors={len(document.elements_of_kind(ElementKind.FLOOR))}, "
        f"walls={len(document.elements_of_kind(ElementKind.WALL))}"
    )
    return 0 if result.status != Result.FAILED else 1


if __name__ == "__main__":
    sys.exit(main())
