"""
Density-independent pixel conversion.
"""

import math

from ..config.settings import RecorderConfig


class DimensionConverter:
    """Converts between dp and physical pixels for one screen density."""

    def __init__(self, density: float = RecorderConfig.DEFAULT_DENSITY):
        if density <= 0:
            raise ValueError(f"Screen density must be positive, got {density}")
        self.density = float(density)

    @classmethod
    def from_screen(cls, width_px: int, width_mm: float) -> 'DimensionConverter':
        """Derive the density from a panel's pixel width and physical width (160 dpi == 1.0)."""
        if width_mm <= 0:
            raise ValueError(f"Physical width must be positive, got {width_mm}")
        dpi = width_px / (width_mm / 25.4)
        return cls(dpi / 160.0)

    def dp_to_px(self, dp: float) -> int:
        # half-up rounding
        return int(math.floor(dp * self.density + 0.5))
