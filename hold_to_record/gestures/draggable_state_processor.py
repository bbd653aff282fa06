"""
Drag classification for the hold-to-record button.

While the record button is held, every pointer move is classified as
sliding towards cancel, sliding up towards lock, or neither. Crossing the
cancel or lock distance commits the gesture.
"""

import logging
from typing import Optional

from ..config.settings import RecorderConfig
from ..utils.dimension import DimensionConverter
from ..utils.gesture_utils import Point, GeometryUtils
from .states import RecordingUiState, RecordingState, Cancelling, Locking

logger = logging.getLogger(__name__)


class DraggableStateProcessor:
    """
    Turns pointer moves of one press-and-hold gesture into recording states.

    Call reset() with the press position, then process() with each move and
    the state the caller currently holds. CANCELLED and LOCKED, like any
    state the processor does not know, are returned unchanged.
    """

    def __init__(self, minimum_move: float, distance_to_lock: float,
                 distance_to_cancel: float, rtl_x_multiplier: int = RecorderConfig.RTL_X_MULTIPLIER):
        if rtl_x_multiplier not in (1, -1):
            raise ValueError(f"rtl_x_multiplier must be 1 or -1, got {rtl_x_multiplier}")
        for name, value in (('minimum_move', minimum_move),
                            ('distance_to_lock', distance_to_lock),
                            ('distance_to_cancel', distance_to_cancel)):
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")

        self.minimum_move = minimum_move
        self.distance_to_lock = float(distance_to_lock)
        self.distance_to_cancel = float(distance_to_cancel)
        self.rtl_x_multiplier = rtl_x_multiplier

        self.first_x = 0.0
        self.first_y = 0.0
        self.last_x = 0.0
        self.last_y = 0.0
        self.last_distance_x = 0.0
        self.last_distance_y = 0.0

    @classmethod
    def from_config(cls, converter: Optional[DimensionConverter] = None,
                    rtl_x_multiplier: Optional[int] = None) -> 'DraggableStateProcessor':
        """Build a processor with the default dp thresholds converted for the screen."""
        converter = converter or DimensionConverter()
        if rtl_x_multiplier is None:
            rtl_x_multiplier = RecorderConfig.RTL_X_MULTIPLIER
        return cls(
            minimum_move=converter.dp_to_px(RecorderConfig.MINIMUM_MOVE_DP),
            distance_to_lock=float(converter.dp_to_px(RecorderConfig.DISTANCE_TO_LOCK_DP)),
            distance_to_cancel=float(converter.dp_to_px(RecorderConfig.DISTANCE_TO_CANCEL_DP)),
            rtl_x_multiplier=rtl_x_multiplier
        )

    @property
    def origin(self) -> Point:
        return Point(self.first_x, self.first_y, 0)

    def reset(self, point: Point):
        """Start a new gesture at the press position."""
        self.first_x = point.x
        self.first_y = point.y
        self.last_x = self.first_x
        self.last_y = self.first_y
        self.last_distance_x = 0.0
        self.last_distance_y = 0.0
        logger.debug(f"Gesture origin at ({self.first_x:.0f}, {self.first_y:.0f})")

    def process(self, point: Point, recording_state: RecordingState) -> RecordingState:
        """Classify one pointer move and return the next recording state."""
        current_x = point.x
        current_y = point.y
        distance_x, distance_y = GeometryUtils.displacement(self.origin, point)

        next_state = self._next_recording_state(recording_state, current_x, current_y, distance_x, distance_y)

        self.last_x = current_x
        self.last_y = current_y
        self.last_distance_x = distance_x
        self.last_distance_y = distance_y

        if next_state != recording_state:
            logger.debug(f"{recording_state} -> {next_state} (dx={distance_x:.1f}, dy={distance_y:.1f})")
        return next_state

    def _next_recording_state(self, recording_state: RecordingState, current_x: float, current_y: float,
                              distance_x: float, distance_y: float) -> RecordingState:
        if recording_state is RecordingUiState.STARTED:
            # First move decides between cancelling and locking
            if (self._is_sliding_to_cancel(current_x) and distance_x > distance_y
                    and distance_x > self.last_distance_x):
                return Cancelling(distance_x)
            if (self._is_sliding_to_lock(current_y) and distance_y > distance_x
                    and distance_y > self.last_distance_y):
                return Locking(distance_y)
            return recording_state

        if isinstance(recording_state, Cancelling):
            if distance_x < self.minimum_move and distance_x < self.last_distance_x:
                return RecordingUiState.STARTED
            if self._should_cancel_recording(distance_x):
                return RecordingUiState.CANCELLED
            return Cancelling(distance_x)

        if isinstance(recording_state, Locking):
            if distance_y < self.minimum_move and distance_y < self.last_distance_y:
                return RecordingUiState.STARTED
            if self._should_lock_recording(distance_y):
                return RecordingUiState.LOCKED
            return Locking(distance_y)

        return recording_state

    def _is_sliding_to_lock(self, current_y: float) -> bool:
        return current_y < self.first_y

    def _is_sliding_to_cancel(self, current_x: float) -> bool:
        return ((current_x < self.first_x and self.rtl_x_multiplier == 1) or
                (current_x > self.first_x and self.rtl_x_multiplier == -1))

    def _should_cancel_recording(self, distance_x: float) -> bool:
        return distance_x >= self.distance_to_cancel

    def _should_lock_recording(self, distance_y: float) -> bool:
        return distance_y >= self.distance_to_lock
