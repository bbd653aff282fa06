"""
Device management for touchscreen discovery and initialization.
"""

import evdev
from evdev import ecodes
import logging
from typing import Optional

logger = logging.getLogger(__name__)

class DeviceManager:
    """Manages touchscreen device discovery and initialization."""

    def __init__(self):
        self.device = None
        self.screen_width = 1920  # Default
        self.screen_height = 1080   # Default
        self.width_mm = None

    def find_device(self) -> Optional[evdev.InputDevice]:
        """Find and configure the touchscreen device."""
        try:
            devices = [evdev.InputDevice(path) for path in evdev.list_devices()]
        except OSError as e:
            logger.error(f"Could not open input devices: {e}")
            return None

        for device in devices:
            caps = device.capabilities()
            if ecodes.EV_ABS not in caps:
                continue

            abs_info = dict(caps.get(ecodes.EV_ABS, []))

            # Look for multitouch slots
            if ecodes.ABS_MT_SLOT not in abs_info:
                continue

            if ecodes.ABS_MT_POSITION_X in abs_info:
                x_info = abs_info[ecodes.ABS_MT_POSITION_X]
                self.screen_width = x_info.max + 1
                # resolution is in units per mm when the driver reports it
                if x_info.resolution:
                    self.width_mm = self.screen_width / x_info.resolution
            if ecodes.ABS_MT_POSITION_Y in abs_info:
                self.screen_height = abs_info[ecodes.ABS_MT_POSITION_Y].max + 1

            self.device = device
            logger.info(f"Found touchscreen: {device.name}")
            logger.info(f"Screen resolution: {self.screen_width}x{self.screen_height}")
            return device

        logger.error("No touchscreen device found")
        return None

    def get_device_info(self):
        """Get device and screen information."""
        return {
            'device': self.device,
            'screen_width': self.screen_width,
            'screen_height': self.screen_height,
            'width_mm': self.width_mm,
            'center_x': self.screen_width // 2,
            'center_y': self.screen_height // 2
        }
