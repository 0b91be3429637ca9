"""
Configuration & Defaults
========================
This module serves as the central registry for constants used by the
mezzanine command.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (default heights, tolerances) and
   operator-facing texts from being scattered throughout the code.
2. Tuning: The fallback wall height has no documented rationale, so it lives
   here where it can be changed without touching the generator.

Exports:
    DEFAULT_HEIGHT_TEXT (str): Pre-filled value of the height prompt (mm).
    DEFAULT_UNCONNECTED_HEIGHT_MM (float): Wall height used when no upper level exists.
    POINT_TOLERANCE (float): Coincidence tolerance in host internal units.
"""
from mezzanine.host.base import SnapMode

# Height prompt
DEFAULT_HEIGHT_TEXT: str = "2800"
HEIGHT_PROMPT_TEXT: str = "Enter mezzanine height above level (mm):"

# Wall height used when no level exists above the base level.
# TODO: confirm the 3000 mm fallback with the product owner.
DEFAULT_UNCONNECTED_HEIGHT_MM: float = 3000.0

# Matches the host's default "almost equal" comparison for points.
POINT_TOLERANCE: float = 1e-9

DEFAULT_SNAP_MODES: SnapMode = SnapMode.ENDPOINTS | SnapMode.INTERSECTIONS | SnapMode.NEAREST

# Point picking
FIRST_POINT_PROMPT: str = "Click start point"
NEXT_POINT_PROMPT: str = "Click next point (ESC to finish)"

# Notices
INSTRUCTIONS_TITLE: str = "Step 1/2"
INSTRUCTIONS_TEXT: str = (
    "Sketch the mezzanine outline:\n"
    "1. Click to add vertices.\n"
    "2. Press ESC to finish and enter the height."
)
SUCCESS_TITLE: str = "Done"
FAILURE_TITLE: str = "Mezzanine failed"

# Transaction names
GENERATE_TRANSACTION: str = "Create Mezzanine and Walls"
PREVIEW_TRANSACTION: str = "Preview Line"
CLEANUP_TRANSACTION: str = "Cleanup"
