"""
Level Resolution
================
Chooses the level the mezzanine is hosted on and the level above it that
caps the enclosing walls.

Base level policy, in order:
    1. The level of the active plan view.
    2. The lowest level in the model (e.g. when sketching in a 3D view).
Top level: the lowest level strictly above the base, if any.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional, TYPE_CHECKING

from mezzanine.errors import UnresolvedLevelError

if TYPE_CHECKING:
    from mezzanine.host.base import HostDocument, Level

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElevationContext:
    base: Level
    top: Optional[Level] = None

    @property
    def base_elevation(self) -> float:
        return self.base.elevation

    @property
    def top_elevation(self) -> Optional[float]:
        return self.top.elevation if self.top is not None else None


def resolve_base(document: HostDocument) -> Optional[Level]:
    level = document.get_current_view_level()
    if level is not None:
        logger.info(f"Base level from active view: {level.name}")
        return level

    levels = document.list_levels()
    if not levels:
        return None
    level = min(levels, key=lambda lvl: lvl.elevation)
    logger.info(f"No view level; using lowest level: {level.name}")
    return level


def resolve_top(document: HostDocument, base: Level) -> Optional[Level]:
    above = [lvl for lvl in document.list_levels() if lvl.elevation > base.elevation]
    if not above:
        return None
    return min(above, key=lambda lvl: lvl.elevation)


def resolve(document: HostDocument) -> ElevationContext:
    """Resolve both levels at once. Raises UnresolvedLevelError when no base level exists."""
    base = resolve_base(document)
    if base is None:
        raise UnresolvedLevelError()
    top = resolve_top(document, base)
    if top is None:
        logger.info(f"No level above '{base.name}'; walls will use the unconnected height.")
    return ElevationContext(base=base, top=top)
