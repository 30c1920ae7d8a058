import pytest

from moo_who.game_system import FeedbackMessage, PendingUnlock, PopAnimation
from moo_who.game_system.feedback import CORRECT_TEXT, WRONG_TEXT, RED, YELLOW

# dt of the frame on which a timer is started; it elapsed before the click
CLICK_FRAME_DT = 1.9


# --- Pop animation ---

def test_pop_scale_profile():
    pop = PopAnimation(duration_s=0.5, peak_scale=1.3)
    pop.trigger()
    pop.advance(CLICK_FRAME_DT)
    assert pop.scale == 1.0
    assert pop.is_popping

    pop.advance(0.25)
    assert pop.scale == pytest.approx(1.3)
    assert pop.is_popping

    pop.advance(0.25)
    assert pop.scale == 1.0
    assert not pop.is_popping


def test_pop_ramps_linearly():
    pop = PopAnimation(duration_s=0.5, peak_scale=1.3)
    assert pop.scale_at(0.0) == 1.0
    assert pop.scale_at(0.125) == pytest.approx(1.15)
    assert pop.scale_at(0.25) == pytest.approx(1.3)
    assert pop.scale_at(0.375) == pytest.approx(1.15)
    assert pop.scale_at(0.5) == 1.0


def test_pop_overshoot_forces_exact_rest_scale():
    pop = PopAnimation(duration_s=0.5, peak_scale=1.3)
    pop.trigger()
    for _ in range(8):
        pop.advance(0.1)
    assert pop.scale == 1.0
    assert not pop.is_popping


def test_pop_retrigger_restarts_timer():
    pop = PopAnimation(duration_s=0.5, peak_scale=1.3)
    pop.trigger()
    pop.advance(0.0)
    pop.advance(0.4)
    pop.trigger()
    assert pop.timer == 0.0
    pop.advance(0.1)
    pop.advance(0.25)
    assert pop.is_popping
    assert pop.scale == pytest.approx(1.3)


def test_idle_pop_does_not_move():
    pop = PopAnimation()
    pop.advance(1.0)
    assert pop.timer == 0.0
    assert pop.scale == 1.0


# --- Feedback message ---

def test_feedback_clears_exactly_at_zero():
    feedback = FeedbackMessage()
    feedback.set_message(CORRECT_TEXT, YELLOW, 2.0)
    feedback.update(CLICK_FRAME_DT)
    assert feedback.remaining_s == 2.0

    feedback.update(1.5)
    assert feedback.text == CORRECT_TEXT
    assert feedback.is_visible

    feedback.update(0.5)
    assert feedback.text == ""
    assert not feedback.is_visible
    # Stale color is kept
    assert feedback.color == YELLOW


def test_feedback_is_overwritten():
    feedback = FeedbackMessage()
    feedback.set_message(CORRECT_TEXT, YELLOW, 2.0)
    feedback.update(0.0)
    feedback.update(1.9)
    feedback.set_message(WRONG_TEXT, RED, 2.0)
    feedback.update(0.0)
    feedback.update(1.0)
    assert feedback.snapshot() == (WRONG_TEXT, RED)


@pytest.mark.parametrize("duration", [0.0, -1.0])
def test_feedback_without_duration_clears_on_first_update(duration):
    feedback = FeedbackMessage()
    feedback.set_message(WRONG_TEXT, RED, duration)
    feedback.update(0.016)
    assert feedback.text == ""
    assert not feedback.is_visible


# --- Pending unlock ---

def test_pending_unlock_lifecycle(logger):
    pending = PendingUnlock(logger)
    assert pending.update(1.0) is None

    assert pending.schedule(3, 2.0) is None
    assert pending.is_pending
    assert pending.update(CLICK_FRAME_DT) is None
    assert pending.remaining_s == 2.0

    assert pending.update(1.999) is None
    assert pending.is_pending
    assert pending.update(0.002) == 3
    assert not pending.is_pending
    assert pending.target_index is None


def test_pending_unlock_zero_delay_resolves_next_frame(logger):
    pending = PendingUnlock(logger)
    pending.schedule(1, 0.0)
    assert pending.update(0.5) is None
    assert pending.update(0.0) == 1


def test_rescheduling_hands_back_previous_target(logger):
    pending = PendingUnlock(logger)
    pending.schedule(1, 2.0)
    pending.update(0.0)
    pending.update(0.5)
    assert pending.schedule(2, 2.0) == 1
    assert pending.target_index == 2
    assert pending.remaining_s == 2.0
    assert pending.update(0.5) is None
    assert pending.remaining_s == 2.0
