"""
Record button gesture classification.

This module turns the pointer moves of a press-and-hold gesture into
recording states: sliding to cancel, sliding up to lock, or neither.
"""

from .states import (
    RecordingUiState,
    Cancelling,
    Locking,
    RecordingState,
    is_dragging
)
from .draggable_state_processor import DraggableStateProcessor

__all__ = [
    'RecordingUiState',
    'Cancelling',
    'Locking',
    'RecordingState',
    'is_dragging',
    'DraggableStateProcessor'
]
