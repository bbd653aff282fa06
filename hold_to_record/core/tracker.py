"""
Caller-side state holder for the hold-to-record button.
"""

import logging
import time
from typing import Callable, Optional

from ..gestures.draggable_state_processor import DraggableStateProcessor
from ..gestures.states import RecordingUiState, RecordingState, is_dragging
from ..utils.gesture_utils import Point
from ..utils.logger import RecorderLogger

logger = logging.getLogger(__name__)

StateCallback = Callable[[RecordingState], None]

# States a new press may start a recording from
_PRESSABLE_STATES = (RecordingUiState.IDLE, RecordingUiState.STOPPED, RecordingUiState.CANCELLED)


class RecordGestureTracker:
    """
    Holds the recording state across press, move and release events.

    The processor only classifies moves; this class decides what a press or
    a release means for the recording and reports every state change to
    on_state.
    """

    def __init__(self, processor: DraggableStateProcessor,
                 on_state: Optional[StateCallback] = None,
                 logger: Optional[RecorderLogger] = None):
        self.processor = processor
        self.on_state = on_state
        self.recorder_logger = logger

        self._state: RecordingState = RecordingUiState.IDLE
        self._active = False
        self._press_time = 0.0

    @property
    def state(self) -> RecordingState:
        return self._state

    @property
    def is_active(self) -> bool:
        """True while a finger is down on the record button."""
        return self._active

    def press(self, point: Point) -> RecordingState:
        if not self._active and self._state is RecordingUiState.LOCKED:
            # Tapping a locked recording finishes it
            return self.stop()
        if self._active or self._state not in _PRESSABLE_STATES:
            logger.debug(f"Ignoring press in state {self._state}")
            return self._state

        self.processor.reset(point)
        self._active = True
        self._press_time = time.time()
        if self.recorder_logger:
            self.recorder_logger.log_press(point)
        self._set_state(RecordingUiState.STARTED, point)
        return self._state

    def move(self, point: Point) -> RecordingState:
        if not self._active:
            return self._state
        self._set_state(self.processor.process(point, self._state), point)
        return self._state

    def release(self, point: Optional[Point] = None) -> RecordingState:
        if not self._active:
            return self._state

        self._active = False
        if self.recorder_logger:
            self.recorder_logger.log_release(point, self._press_time)

        if self._state is RecordingUiState.STARTED or is_dragging(self._state):
            self._set_state(RecordingUiState.STOPPED, point)
        elif self._state is RecordingUiState.CANCELLED:
            self._set_state(RecordingUiState.IDLE, point)
        # LOCKED keeps recording after the finger is lifted
        return self._state

    def stop(self) -> RecordingState:
        """Finish a locked recording."""
        if self._state is RecordingUiState.LOCKED:
            self._set_state(RecordingUiState.STOPPED)
        return self._state

    def cancel(self) -> RecordingState:
        """Discard the current recording, whether held or locked."""
        if (self._state in (RecordingUiState.STARTED, RecordingUiState.LOCKED)
                or is_dragging(self._state)):
            self._set_state(RecordingUiState.CANCELLED)
        return self._state

    def _set_state(self, state: RecordingState, point: Optional[Point] = None):
        if state == self._state:
            return
        self._state = state
        if self.recorder_logger:
            self.recorder_logger.log_state(state, point)
        if self.on_state:
            self.on_state(state)
