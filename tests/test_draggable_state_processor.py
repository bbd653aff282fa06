"""
Tests for the record button drag classification.
"""

import pytest

from hold_to_record.gestures.draggable_state_processor import DraggableStateProcessor
from hold_to_record.gestures.states import RecordingUiState, Cancelling, Locking
from hold_to_record.utils.dimension import DimensionConverter
from hold_to_record.utils.gesture_utils import Point

STARTED = RecordingUiState.STARTED


def make_processor(rtl_x_multiplier=1):
    return DraggableStateProcessor(
        minimum_move=16,
        distance_to_lock=48,
        distance_to_cancel=120,
        rtl_x_multiplier=rtl_x_multiplier
    )


def run(processor, points, state=STARTED):
    """Feed points through the processor and collect every state."""
    states = [state]
    for x, y in points:
        state = processor.process(Point(x, y, 0), state)
        states.append(state)
    return states


@pytest.fixture
def processor():
    p = make_processor()
    p.reset(Point(100, 100, 0))
    return p


def test_slide_left_commits_to_cancel(processor):
    states = run(processor, [(90, 100), (70, 100), (40, 100), (-20, 100)])

    assert states == [
        STARTED,
        Cancelling(10),
        Cancelling(30),
        Cancelling(60),
        RecordingUiState.CANCELLED
    ]


def test_slide_up_commits_to_lock(processor):
    states = run(processor, [(100, 85), (100, 60), (100, 40)])

    assert states == [STARTED, Locking(15), Locking(40), RecordingUiState.LOCKED]


def test_cancel_threshold_is_inclusive(processor):
    states = run(processor, [(90, 100), (-20, 100)])
    assert states[-1] is RecordingUiState.CANCELLED


def test_lock_threshold_is_inclusive(processor):
    states = run(processor, [(100, 90), (100, 52)])
    assert states[-1] is RecordingUiState.LOCKED


@pytest.mark.parametrize("terminal", [RecordingUiState.CANCELLED, RecordingUiState.LOCKED])
def test_terminal_states_pass_through(processor, terminal):
    for x, y in [(100, 100), (500, 500), (-300, 100), (100, -300)]:
        assert processor.process(Point(x, y, 0), terminal) is terminal


@pytest.mark.parametrize("state", [RecordingUiState.IDLE, RecordingUiState.STOPPED])
def test_other_states_pass_through(processor, state):
    assert processor.process(Point(0, 0, 0), state) is state


def test_reset_then_same_point_stays_started():
    processor = make_processor()
    origin = Point(250, 400, 0)
    processor.reset(origin)

    assert processor.process(origin, STARTED) is STARTED


def test_reset_clears_previous_gesture(processor):
    run(processor, [(90, 100), (40, 100)])
    assert processor.last_distance_x == 60

    processor.reset(Point(300, 300, 0))

    assert processor.last_distance_x == 0
    assert processor.last_distance_y == 0
    assert processor.process(Point(290, 300, 0), STARTED) == Cancelling(10)


def test_sliding_back_rescues_cancel(processor):
    run(processor, [(90, 100), (70, 100), (40, 100)])
    assert processor.last_distance_x == 60

    assert processor.process(Point(90, 100, 0), Cancelling(60)) is STARTED


def test_sliding_back_rescues_lock(processor):
    run(processor, [(100, 85), (100, 60)])

    assert processor.process(Point(100, 95, 0), Locking(40)) is STARTED


def test_small_cancel_distance_without_reversal_keeps_cancelling(processor):
    # Below minimum move but still growing
    states = run(processor, [(95, 100), (90, 100)])
    assert states[-1] == Cancelling(10)


def test_partial_reversal_above_minimum_keeps_cancelling(processor):
    run(processor, [(90, 100), (40, 100)])
    assert processor.process(Point(60, 100, 0), Cancelling(60)) == Cancelling(40)


def test_horizontal_move_never_starts_locking(processor):
    # Up and left, but more left than up
    state = processor.process(Point(70, 90, 0), STARTED)
    assert state == Cancelling(30)
    assert not isinstance(state, Locking)


def test_vertical_move_never_starts_cancelling(processor):
    state = processor.process(Point(90, 70, 0), STARTED)
    assert state == Locking(30)


def test_equal_displacement_stays_started(processor):
    assert processor.process(Point(80, 80, 0), STARTED) is STARTED


def test_first_move_must_grow_from_last_sample(processor):
    # Left of the origin, but closer to it than the previous sample
    processor.last_distance_x = 20
    assert processor.process(Point(90, 100, 0), STARTED) is STARTED


def test_slide_right_is_ignored_in_left_to_right_layout(processor):
    assert not processor._is_sliding_to_cancel(150)
    assert processor.process(Point(150, 100, 0), STARTED) is STARTED


def test_slide_down_is_ignored(processor):
    assert not processor._is_sliding_to_lock(150)
    assert processor.process(Point(100, 150, 0), STARTED) is STARTED


def test_mirrored_layout_cancels_to_the_right():
    processor = make_processor(rtl_x_multiplier=-1)
    processor.reset(Point(100, 100, 0))

    assert processor._is_sliding_to_cancel(150)
    assert not processor._is_sliding_to_cancel(50)


def test_mirrored_layout_rightward_slide_keeps_negative_distance():
    processor = make_processor(rtl_x_multiplier=-1)
    processor.reset(Point(100, 100, 0))

    # distance_x is still origin.x - x, so it never exceeds distance_y here
    states = run(processor, [(110, 100), (150, 100), (300, 100)])

    assert states == [STARTED, STARTED, STARTED, STARTED]
    assert processor.last_distance_x == -200


def test_mirrored_layout_ignores_leftward_slide():
    processor = make_processor(rtl_x_multiplier=-1)
    processor.reset(Point(100, 100, 0))

    assert processor.process(Point(50, 100, 0), STARTED) is STARTED


def test_displacement_is_measured_from_origin_not_accumulated(processor):
    for x in (99, 98, 97, 96, 95):
        processor.process(Point(x, 100, 0), STARTED)
    assert processor.last_distance_x == 5
    assert processor.last_x == 95


@pytest.mark.parametrize("multiplier", [0, 2, -2])
def test_invalid_rtl_multiplier(multiplier):
    with pytest.raises(ValueError):
        make_processor(rtl_x_multiplier=multiplier)


def test_negative_threshold_rejected():
    with pytest.raises(ValueError):
        DraggableStateProcessor(minimum_move=-1, distance_to_lock=48, distance_to_cancel=120)


def test_from_config_scales_dp_thresholds():
    processor = DraggableStateProcessor.from_config(DimensionConverter(2.0))

    assert processor.minimum_move == 32
    assert processor.distance_to_lock == 96.0
    assert processor.distance_to_cancel == 240.0
    assert processor.rtl_x_multiplier == 1


def test_from_config_defaults_to_baseline_density():
    processor = DraggableStateProcessor.from_config(rtl_x_multiplier=-1)

    assert processor.minimum_move == 16
    assert processor.distance_to_lock == 48.0
    assert processor.distance_to_cancel == 120.0
    assert processor.rtl_x_multiplier == -1
