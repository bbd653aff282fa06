"""
Shared geometry helpers for the record gesture.

Pointer samples are carried around as Point objects in absolute screen
coordinates; displacement is always measured from the gesture origin.
"""

import time
from typing import Optional, Tuple


class Point:
    """Represents a 2D point with optional timestamp."""

    def __init__(self, x: float, y: float, timestamp: Optional[float] = None):
        self.x = float(x)
        self.y = float(y)
        self.t = time.time() if timestamp is None else float(timestamp)

    def __repr__(self):
        return f"Point({self.x:.1f}, {self.y:.1f})"

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False
        return abs(self.x - other.x) < 1e-10 and abs(self.y - other.y) < 1e-10


class GeometryUtils:
    """Utility class for geometric calculations."""

    @staticmethod
    def displacement(origin: Point, current: Point) -> Tuple[float, float]:
        """
        Signed distance travelled from origin, per axis.

        Positive x means the pointer moved left of the origin, positive y
        means it moved up.
        """
        return origin.x - current.x, origin.y - current.y
