"""
Configuration settings for the hold-to-record gesture.
"""

class RecorderConfig:
    """Configuration constants for the record button drag gesture."""

    # Distance configurations (in density-independent pixels)
    MINIMUM_MOVE_DP = 16
    DISTANCE_TO_LOCK_DP = 48
    DISTANCE_TO_CANCEL_DP = 120

    # 1 for left-to-right layouts (slide left to cancel), -1 for mirrored ones
    RTL_X_MULTIPLIER = 1

    # Screen density used when the device does not report one
    DEFAULT_DENSITY = 1.0

    # Touch tracking
    TRACKED_SLOT = 0
