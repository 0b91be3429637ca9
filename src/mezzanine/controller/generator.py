"""
Structure Generation
====================
Creates the mezzanine floor and its enclosing walls in one host transaction.

Height chaining:
    * The floor sits on the base level, raised by the height offset.
    * Each wall starts on the base level with the same base offset, so its
      bottom rests on the floor.
    * With a level above, each wall is constrained to that level with a zero
      top offset. Without one it keeps the unconnected fallback height.

Classes:
    GeneratedStructure: Handles of what was created.
    StructureGenerator: Performs the creation.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING

from mezzanine import config
from mezzanine.errors import GenerationError, MissingConstructionTypesError
from mezzanine.host.base import ParameterKey, Unit, WallKind, transaction

if TYPE_CHECKING:
    from mezzanine.controller.transient import TransientGraphicsManager
    from mezzanine.host.base import ElementId, FloorType, HostDocument, WallType
    from mezzanine.model.geometry_primitives import CurveLoop
    from mezzanine.model.levels import ElevationContext

logger = logging.getLogger(__name__)


@dataclass
class GeneratedStructure:
    platform: ElementId
    context: ElevationContext
    height_offset: float  # internal units
    walls: list[ElementId] = field(default_factory=list)


def select_construction_types(document: HostDocument) -> tuple[FloorType, WallType]:
    """First non-foundation floor type and first basic wall type in the model."""
    floor_type = next((t for t in document.list_floor_types() if not t.is_foundation_slab), None)
    wall_type = next((t for t in document.list_wall_types() if t.kind == WallKind.BASIC), None)
    if floor_type is None or wall_type is None:
        raise MissingConstructionTypesError()
    return floor_type, wall_type


class StructureGenerator:
    def __init__(
        self,
        document: HostDocument,
        unconnected_height_mm: float = config.DEFAULT_UNCONNECTED_HEIGHT_MM,
    ) -> None:
        if unconnected_height_mm <= 0.0:
            raise ValueError("Unconnected wall height must be positive.")
        self.document = document
        self.unconnected_height_mm = unconnected_height_mm

    def generate(
        self,
        loop: CurveLoop,
        height_offset_mm: float,
        context: ElevationContext,
        floor_type: FloorType,
        wall_type: WallType,
        previews: TransientGraphicsManager,
    ) -> GeneratedStructure:
        """
        Create the floor and one wall per loop edge, removing the previews in the same transaction.

        Raises:
            ValueError: If the offset is negative or the loop is open.
            GenerationError: If the host rejects any step; nothing is left in the model.
        """
        if height_offset_mm < 0.0:
            raise ValueError(f"Height offset must not be negative, got {height_offset_mm}.")
        if loop.is_open():
            raise ValueError("Cannot generate a structure from an open loop.")

        doc = self.document
        try:
            height_offset = doc.convert_to_internal_units(height_offset_mm, Unit.MILLIMETERS)
            unconnected_height = doc.convert_to_internal_units(self.unconnected_height_mm, Unit.MILLIMETERS)

            with transaction(doc, config.GENERATE_TRANSACTION):
                previews.discard_in_transaction()

                platform = doc.create_platform(loop, floor_type.id, context.base.id)
                doc.set_parameter(platform, ParameterKey.FLOOR_HEIGHT_ABOVE_LEVEL, height_offset)
                structure = GeneratedStructure(platform=platform, context=context, height_offset=height_offset)

                for edge in loop:
                    wall = doc.create_wall(
                        edge,
                        wall_type.id,
                        context.base.id,
                        unconnected_height,
                        height_offset,
                        False,
                        False,
                    )
                    doc.set_parameter(wall, ParameterKey.WALL_BASE_OFFSET, height_offset)
                    if context.top is not None:
                        doc.set_parameter(wall, ParameterKey.WALL_HEIGHT_TYPE, context.top.id)
                        doc.set_parameter(wall, ParameterKey.WALL_TOP_OFFSET, 0.0)
                    structure.walls.append(wall)
        except Exception as e:
            logger.error(f"Structure generation failed: {e}")
            raise GenerationError(str(e)) from e

        previews.mark_released()
        logger.info(
            f"Created floor {structure.platform} and {len(structure.walls)} walls "
            f"on '{context.base.name}' at +{height_offset_mm:g} mm."
        )
        return structure
