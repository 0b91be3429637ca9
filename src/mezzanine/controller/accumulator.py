"""
Point Capture
=============
Collects the outline vertices one pick at a time.

The sketch plane is locked to the first point: every later pick takes the
elevation of the point before it. Each accepted point is joined to the
previous one with a preview line. Capture ends when the operator cancels
(ESC), which is the normal way to finish and never an error.
"""
from __future__ import annotations

from enum import StrEnum
import logging
from typing import Optional, TYPE_CHECKING

from mezzanine import config
from mezzanine.model.profiles import MIN_PROFILE_POINTS

if TYPE_CHECKING:
    from mezzanine.controller.transient import TransientGraphicsManager
    from mezzanine.host.base import InteractiveView, SnapMode
    from mezzanine.model.geometry_primitives import Point

logger = logging.getLogger(__name__)


class CaptureState(StrEnum):
    AWAITING_POINT = "awaiting point"
    ACCUMULATING = "accumulating"
    CLOSED = "closed"
    ABANDONED = "abandoned"


class GeometryAccumulator:
    def __init__(
        self,
        view: InteractiveView,
        previews: TransientGraphicsManager,
        snap_modes: SnapMode = config.DEFAULT_SNAP_MODES,
        tolerance: float = config.POINT_TOLERANCE,
    ) -> None:
        self.view = view
        self.previews = previews
        self.snap_modes = snap_modes
        self.tolerance = tolerance
        self.points: list[Point] = []
        self.state = CaptureState.AWAITING_POINT

    def capture_point(self) -> Optional[Point]:
        """
        Wait for one pick and record it.

        Returns:
            The accepted point (after elevation alignment), the previous point
            again if the pick landed on it, or None when the operator cancelled.
        """
        prompt = config.FIRST_POINT_PROMPT if not self.points else config.NEXT_POINT_PROMPT
        picked = self.view.pick_point(self.snap_modes, prompt)
        if picked is None:
            return None

        if not self.points:
            self.points.append(picked)
            self.state = CaptureState.ACCUMULATING
            logger.debug(f"Start point: {picked}")
            return picked

        previous = self.points[-1]
        aligned = picked.with_z(previous.z)
        if aligned.is_almost_equal_to(previous, self.tolerance):
            logger.debug("Ignoring pick on top of the previous point.")
            return previous

        self.points.append(aligned)
        self.previews.add_preview_segment(previous, aligned)
        self.view.refresh_view()
        return aligned

    def capture(self) -> list[Point]:
        """Capture points until cancelled and return the sketch."""
        while self.capture_point() is not None:
            pass

        self.state = CaptureState.CLOSED if len(self.points) >= MIN_PROFILE_POINTS else CaptureState.ABANDONED
        logger.info(f"Capture finished with {len(self.points)} points ({self.state}).")
        return list(self.points)
