"""
Mezzanine Command
=================
The whole interactive session, start to finish.

Steps:
    1. Sketch the outline (ESC to finish).
    2. Validate it into a closed profile.
    3. Ask for the height above the level (mm).
    4. Resolve the base level and the level above it.
    5. Create the floor and walls in one transaction.

Fewer than three points or a cancelled height prompt end the session quietly.
Every other failure is reported to the operator. Preview lines are removed on
every path.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
from typing import Optional, TYPE_CHECKING

from mezzanine import config
from mezzanine.controller.accumulator import GeometryAccumulator
from mezzanine.controller.generator import GeneratedStructure, StructureGenerator, select_construction_types
from mezzanine.controller.transient import TransientGraphicsManager
from mezzanine.errors import MezzanineError
from mezzanine.model import levels
from mezzanine.model.profiles import MIN_PROFILE_POINTS, build_profile

if TYPE_CHECKING:
    from mezzanine.controller.height import HeightPrompt
    from mezzanine.host.base import HostDocument, InteractiveView, Notifier

logger = logging.getLogger(__name__)


class Result(StrEnum):
    SUCCEEDED = "succeeded"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass
class CommandResult:
    status: Result
    message: str = ""
    structure: Optional[GeneratedStructure] = None

    @classmethod
    def cancelled(cls) -> CommandResult:
        return cls(status=Result.CANCELLED)

    @classmethod
    def failed(cls, message: str) -> CommandResult:
        return cls(status=Result.FAILED, message=message)


class MezzanineCommand:
    def __init__(
        self,
        document: HostDocument,
        view: InteractiveView,
        height_prompt: HeightPrompt,
        notifier: Notifier,
        generator: Optional[StructureGenerator] = None,
    ) -> None:
        self.document = document
        self.view = view
        self.height_prompt = height_prompt
        self.notifier = notifier
        self.generator = generator or StructureGenerator(document)

    def execute(self) -> CommandResult:
        try:
            with TransientGraphicsManager(self.document) as previews:
                result = self._run(previews)
        except MezzanineError as e:
            result = CommandResult.failed(str(e))
        except Exception as e:
            logger.exception("Unexpected error while creating the mezzanine.")
            result = CommandResult.failed(str(e))

        if result.status == Result.FAILED:
            logger.error(f"Mezzanine command failed: {result.message}")
            self.notifier.show(config.FAILURE_TITLE, result.message)
        return result

    def _run(self, previews: TransientGraphicsManager) -> CommandResult:
        self.notifier.show(config.INSTRUCTIONS_TITLE, config.INSTRUCTIONS_TEXT)

        accumulator = GeometryAccumulator(self.view, previews)
        points = accumulator.capture()
        if len(points) < MIN_PROFILE_POINTS:
            logger.info("Not enough points for an outline; cancelled.")
            return CommandResult.cancelled()

        profile = build_profile(points, tolerance=config.POINT_TOLERANCE)

        height_mm = self.height_prompt.ask(config.HEIGHT_PROMPT_TEXT, config.DEFAULT_HEIGHT_TEXT)
        if height_mm < 0.0:
            logger.info("Height prompt cancelled; cancelled.")
            return CommandResult.cancelled()

        context = levels.resolve(self.document)
        floor_type, wall_type = select_construction_types(self.document)

        structure = self.generator.generate(
            loop=profile,
            height_offset_mm=height_mm,
            context=context,
            floor_type=floor_type,
            wall_type=wall_type,
            previews=previews,
        )

        self.notifier.show(
            config.SUCCESS_TITLE,
            f"Mezzanine created!\n"
            f"Height: {height_mm:g} mm\n"
            f"Base level: {context.base.name}\n"
            f"Walls: {len(structure.walls)}",
        )
        return CommandResult(status=Result.SUCCEEDED, structure=structure)
