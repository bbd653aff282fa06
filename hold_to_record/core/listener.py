"""
Touchscreen listener that drives the record gesture from evdev events.
"""

import time
import threading
import logging
from typing import Callable, Dict, Optional
from evdev import ecodes

from ..config.settings import RecorderConfig
from ..device.device_manager import DeviceManager
from ..gestures.draggable_state_processor import DraggableStateProcessor
from ..gestures.states import RecordingState
from ..utils.dimension import DimensionConverter
from ..utils.gesture_utils import Point
from ..utils.logger import RecorderLogger
from .tracker import RecordGestureTracker

logger = logging.getLogger(__name__)


class TouchListener:
    """
    Reads the touchscreen and feeds the first finger's motion to the
    record gesture tracker.

    Only one slot is tracked; other fingers are ignored. Coordinates are
    applied once per SYN_REPORT so x and y of a sample always belong
    together.
    """

    def __init__(self, processor: Optional[DraggableStateProcessor] = None,
                 on_state: Optional[Callable[[RecordingState], None]] = None,
                 density: Optional[float] = None,
                 debug_file: Optional[str] = None):
        self.device_manager = DeviceManager()
        self.processor = processor
        self.on_state = on_state
        self.density = density
        self.logger = RecorderLogger(debug_file)
        self.tracker = None

        # State management
        self.running = False
        self.tracked_slot = RecorderConfig.TRACKED_SLOT
        self.current_slot = 0
        self.slot_data: Dict[str, float] = {}
        self.finger_down = False
        self.pending_press = False
        self.pending_release = False
        self.position_changed = False

        # Thread management
        self.thread = None
        self.state_lock = threading.Lock()

    def start(self) -> bool:
        """Start the touchscreen listener."""
        device = self.device_manager.find_device()
        if not device:
            print("❌ No touchscreen found")
            return False

        device_info = self.device_manager.get_device_info()
        self.attach(self._build_processor(device_info))

        self.running = True
        self._print_startup_info(device_info)

        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()
        return True

    def attach(self, processor: DraggableStateProcessor):
        """Create the tracker around a processor; start() does this after discovery."""
        self.processor = processor
        self.tracker = RecordGestureTracker(processor, self._dispatch_state, self.logger)

    def stop(self):
        """Stop the touchscreen listener."""
        self.running = False
        if self.thread:
            self.thread.join(timeout=1)
        self.logger.close()

    @property
    def state(self) -> Optional[RecordingState]:
        return self.tracker.state if self.tracker else None

    def _build_processor(self, device_info: Dict) -> DraggableStateProcessor:
        if self.processor:
            return self.processor

        if self.density:
            converter = DimensionConverter(self.density)
        elif device_info.get('width_mm'):
            converter = DimensionConverter.from_screen(device_info['screen_width'], device_info['width_mm'])
        else:
            converter = DimensionConverter()
        return DraggableStateProcessor.from_config(converter)

    def _print_startup_info(self, device_info: Dict):
        """Print startup information."""
        print(f"✅ Found: {self.device_manager.device.name}")
        print(f"📺 Screen: {device_info['screen_width']}x{device_info['screen_height']}")
        print(f"📏 Minimum move: {self.processor.minimum_move}px")
        print(f"📏 Distance to lock: {self.processor.distance_to_lock:.0f}px")
        print(f"📏 Distance to cancel: {self.processor.distance_to_cancel:.0f}px")
        print("🎯 Ready! Hold to record, slide up to lock, slide sideways to cancel.")

    def _dispatch_state(self, state: RecordingState):
        if self.on_state:
            self.on_state(state)

    def _event_loop(self):
        """Main event processing loop."""
        try:
            event_batch = []
            for event in self.device_manager.device.read_loop():
                if not self.running:
                    break

                event_batch.append(event)

                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    with self.state_lock:
                        self._process_event_batch(event_batch)
                    event_batch = []

        except OSError as e:
            logger.error(f"Touchscreen read failed: {e}")
        except Exception as e:
            logger.error(f"Error in event loop: {e}")
        finally:
            self.running = False

    def _process_event_batch(self, event_batch):
        """Process a batch of events."""
        timestamp = time.time()
        for ev in event_batch:
            if ev.type == ecodes.EV_ABS:
                self._handle_abs_event(ev)
            if hasattr(ev, 'timestamp'):
                timestamp = ev.timestamp()

        self._apply_sample(timestamp)

    def _handle_abs_event(self, ev):
        """Handle absolute coordinate events."""
        if ev.code == ecodes.ABS_MT_SLOT:
            self.current_slot = ev.value
            return

        if self.current_slot != self.tracked_slot:
            return

        if ev.code == ecodes.ABS_MT_TRACKING_ID:
            self._handle_tracking_id(ev.value)
        elif ev.code == ecodes.ABS_MT_POSITION_X:
            self.slot_data['x'] = ev.value
            self.position_changed = True
        elif ev.code == ecodes.ABS_MT_POSITION_Y:
            self.slot_data['y'] = ev.value
            self.position_changed = True

    def _handle_tracking_id(self, value: int):
        """Handle finger tracking ID changes."""
        if value == -1:
            # Finger lifted
            self.pending_release = True
        else:
            # Finger placed
            self.pending_press = True

    def _apply_sample(self, timestamp: float):
        """Forward the batch's press, move or release to the tracker."""
        point = None
        if 'x' in self.slot_data and 'y' in self.slot_data:
            point = Point(self.slot_data['x'], self.slot_data['y'], timestamp)

        if self.pending_press and point is not None:
            self.pending_press = False
            self.position_changed = False
            self.finger_down = True
            self.tracker.press(point)
        elif self.position_changed and self.finger_down and point is not None:
            self.position_changed = False
            self.tracker.move(point)

        if self.pending_release:
            self.pending_release = False
            self.position_changed = False
            if self.finger_down:
                self.finger_down = False
                self.tracker.release(point)
