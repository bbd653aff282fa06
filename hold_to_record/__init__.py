"""
Hold-to-Record Package
Drag gesture classification for a press-and-hold voice message button.

The touchscreen side (TouchListener, DeviceManager) needs evdev and lives in
hold_to_record.core.listener and hold_to_record.device.device_manager.
"""

from .core.tracker import RecordGestureTracker
from .gestures.draggable_state_processor import DraggableStateProcessor
from .gestures.states import RecordingUiState, Cancelling, Locking
from .utils.gesture_utils import Point

__version__ = "1.0.0"
__all__ = [
    "RecordGestureTracker",
    "DraggableStateProcessor",
    "RecordingUiState",
    "Cancelling",
    "Locking",
    "Point"
]
