"""
Utilities package for the record gesture.

This package provides the point type, geometry helpers, dp conversion
and the console/debug-file logger.
"""

from .gesture_utils import (
    Point,
    GeometryUtils
)
from .dimension import DimensionConverter
from .logger import RecorderLogger

__all__ = [
    'Point',
    'GeometryUtils',
    'DimensionConverter',
    'RecorderLogger'
]
