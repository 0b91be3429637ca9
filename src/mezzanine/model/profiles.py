"""Conversion of a sketched point sequence into a closed planar profile."""
from __future__ import annotations

import logging
from typing import Sequence

from mezzanine.errors import ProfileNotClosedError
from mezzanine.model.geometry_primitives import CurveLoop, Line, Point

logger = logging.getLogger(__name__)

MIN_PROFILE_POINTS = 3
MIN_PROFILE_EDGES = 3


def flatten(points: Sequence[Point], elevation: float) -> list[Point]:
    """Project every point onto the horizontal plane at ``elevation``."""
    return [p.with_z(elevation) for p in points]


def build_profile(points: Sequence[Point], tolerance: float = 1e-9) -> CurveLoop:
    """
    Build a closed loop through ``points`` at the elevation of the first point.

    Each point is joined to its successor and the last point back to the
    first. Pairs that coincide after flattening are skipped, which absorbs a
    final click placed on top of the start point.

    Args:
        points: The sketch, in click order (defines winding).
        tolerance: Coincidence tolerance in host units.

    Returns:
        A closed CurveLoop with no zero-length lines.

    Raises:
        ValueError: If ``points`` is empty.
        ProfileNotClosedError: If the lines do not form a closed loop of at least 3 edges.
    """
    if not points:
        raise ValueError("Cannot build a profile from an empty sketch.")

    z_base = points[0].z
    flat = flatten(points, z_base)

    profile = CurveLoop()
    for p1, p2 in zip(flat, flat[1:] + flat[:1]):
        if p1.is_almost_equal_to(p2, tolerance):
            logger.debug(f"Skipping coincident pair at ({p1.x:.4f}, {p1.y:.4f}).")
            continue
        profile.append(Line(start=p1, end=p2))

    if len(profile) < MIN_PROFILE_EDGES or profile.is_open(tolerance):
        raise ProfileNotClosedError()

    logger.info(f"Built closed profile with {len(profile)} edges at z={z_base:.4f}.")
    return profile
