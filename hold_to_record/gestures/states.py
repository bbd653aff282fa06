"""
Recording states of the hold-to-record button.

A recording state is either one of the payload-free RecordingUiState
members or one of the dragging states, which carry the displacement that
produced them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class RecordingUiState(Enum):
    IDLE = 'idle'
    STARTED = 'started'
    CANCELLED = 'cancelled'
    LOCKED = 'locked'
    # Finger lifted (or locked recording stopped) without cancelling
    STOPPED = 'stopped'

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Cancelling:
    """Finger is sliding towards the cancel side."""
    distance_x: float

    def __str__(self):
        return f"CANCELLING({self.distance_x:.0f}px)"


@dataclass(frozen=True)
class Locking:
    """Finger is sliding up towards the lock."""
    distance_y: float

    def __str__(self):
        return f"LOCKING({self.distance_y:.0f}px)"


RecordingState = Union[RecordingUiState, Cancelling, Locking]


def is_dragging(state: RecordingState) -> bool:
    return isinstance(state, (Cancelling, Locking))
