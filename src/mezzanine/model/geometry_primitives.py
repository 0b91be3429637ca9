"""
Geometric Primitives for sketching and host entity creation.
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Iterator, List, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """A point in 3D space, in host internal length units."""
    x: float
    y: float
    z: float = 0.0

    def with_z(self, z: float) -> Point:
        """Same plan position at another elevation."""
        return replace(self, z=z)

    def is_almost_equal_to(self, other: Point, tolerance: float = 1e-9) -> bool:
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=0.0, atol=tolerance))

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])


@dataclass(frozen=True)
class Line:
    """A bounded straight line between two distinct points."""
    start: Point
    end: Point

    def __post_init__(self) -> None:
        if self.start == self.end:
            raise ValueError(f"Cannot create a zero-length line at {self.start}.")

    def reverse(self) -> Line:
        return Line(start=self.end, end=self.start)


@dataclass
class CurveLoop:
    """
    An ordered chain of lines. Closed when every line ends where the next one
    starts and the last line ends at the start of the first.
    """
    lines: List[Line] = field(default_factory=list)

    def append(self, line: Line) -> None:
        self.lines.append(line)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def is_open(self, tolerance: float = 1e-9) -> bool:
        if not self.lines:
            return True
        for current, following in zip(self.lines, self.lines[1:] + self.lines[:1]):
            if not current.end.is_almost_equal_to(following.start, tolerance):
                return True
        return False

    @property
    def elevation(self) -> float:
        """Elevation of the first vertex (loops built here are planar)."""
        if not self.lines:
            raise ValueError("Empty loop has no elevation.")
        return self.lines[0].start.z
