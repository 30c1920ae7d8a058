import pytest

from moo_who.game_system import ClickOutcome
from moo_who.game_system.feedback import CORRECT_TEXT, RED, WRONG_TEXT, YELLOW

ANIMAL_ORDER = ["cat", "bird", "lion", "elephant", "dog", "cow"]

EPSILON = 1e-3
DELAY = 2.0
FRAME = 0.1


def _flags(session):
    return [(rec.unlocked, rec.sound_unlocked, rec.found) for rec in session.roster.records]


def _tick(session, progression, dt):
    """Time-driven part of a frame, in game loop order"""
    progression.update(dt)
    session.advance_timers(dt)


def _click(session, progression, ref, dt=FRAME):
    """A frame on which the animal is clicked; dt is the time before the click"""
    outcome = progression.on_animal_clicked(ref)
    _tick(session, progression, dt)
    return outcome


def test_only_first_animal_starts_unlocked(session):
    assert session.roster.keys == ANIMAL_ORDER
    assert [rec.unlocked for rec in session.roster.records] == [True, False, False, False, False, False]
    assert session.roster.expected_key() == "cat"


def test_click_on_locked_animal_is_noop(session, progression, sound_controller):
    before = _flags(session)

    outcome = _click(session, progression, "lion")

    assert outcome is ClickOutcome.IGNORED
    assert _flags(session) == before
    assert sound_controller.played == []
    assert session.feedback.text == ""
    assert not session.roster.record("lion").pop.is_popping
    assert not session.pending_unlock.is_pending


def test_correct_click_marks_found_and_schedules_successor(session, progression, sound_controller):
    outcome = _click(session, progression, "cat")

    assert outcome is ClickOutcome.CORRECT
    assert session.roster.record("cat").found
    assert session.feedback.text == CORRECT_TEXT
    assert session.feedback.color == YELLOW
    assert session.roster.record("cat").pop.is_popping
    # Successor is not unlocked immediately
    assert not session.roster.record("bird").unlocked
    assert session.pending_unlock.is_pending
    assert session.pending_unlock.target_index == 1
    assert sound_controller.played_names == ["cat", "correct"]
    assert len(session.tracker) == 2


def test_pending_unlock_resolves_after_exactly_the_delay(session, progression):
    _click(session, progression, "cat")

    _tick(session, progression, DELAY - EPSILON)
    assert not session.roster.record("bird").unlocked
    assert not session.panel[1].unlocked

    _tick(session, progression, 2 * EPSILON)
    assert session.roster.record("bird").unlocked
    assert session.roster.record("bird").sound_unlocked
    assert session.panel[1].unlocked
    assert not session.pending_unlock.is_pending
    assert session.roster.expected_key() == "bird"


def test_slow_click_frame_does_not_shorten_timers(session, progression):
    # The click lands at the end of a long frame; none of that time counts
    _click(session, progression, "cat", dt=1.9)
    _tick(session, progression, 0.15)

    assert not session.roster.record("bird").unlocked
    assert session.feedback.text == CORRECT_TEXT
    assert session.roster.record("cat").pop.is_popping
    assert session.pending_unlock.remaining_s == pytest.approx(DELAY - 0.15)


def test_wrong_click_changes_no_flags(session, progression, sound_controller):
    _click(session, progression, "cat")
    _tick(session, progression, DELAY + EPSILON)
    # Normal play never leaves a second unfound animal unlocked; open lion by hand
    session.roster.unlock(2)
    before = _flags(session)
    sound_controller.played.clear()

    outcome = _click(session, progression, "lion")

    assert outcome is ClickOutcome.WRONG
    assert _flags(session) == before
    assert session.feedback.text == WRONG_TEXT
    assert session.feedback.color == RED
    assert sound_controller.played_names == ["lion", "incorrect"]
    assert session.roster.expected_key() == "bird"


def test_already_found_click_only_pops_and_replays_sound(session, progression, sound_controller):
    _click(session, progression, "cat")
    _tick(session, progression, 10.0)
    assert session.feedback.text == ""
    assert not session.roster.record("cat").pop.is_popping
    sound_controller.played.clear()

    outcome = _click(session, progression, "cat")

    assert outcome is ClickOutcome.ALREADY_FOUND
    assert session.roster.record("cat").pop.is_popping
    assert session.feedback.text == ""
    assert sound_controller.played_names == ["cat"]


def test_exactly_one_expected_animal_until_all_found(session, progression):
    for key in ANIMAL_ORDER:
        expected = [
            i for i, rec in enumerate(session.roster.records)
            if rec.unlocked and rec.sound_unlocked and not rec.found
        ]
        assert len(expected) == 1
        assert session.roster.expected_key() == key

        assert _click(session, progression, key) is ClickOutcome.CORRECT
        _tick(session, progression, DELAY + EPSILON)

    assert session.roster.expected_key() is None
    assert session.roster.expected_index() is None
    assert progression.is_complete


def test_last_animal_schedules_nothing(session, progression):
    for key in ANIMAL_ORDER[:-1]:
        _click(session, progression, key)
        _tick(session, progression, DELAY + EPSILON)

    _click(session, progression, "cow")

    assert not session.pending_unlock.is_pending
    assert session.feedback.text == CORRECT_TEXT
    assert session.roster.all_found


def test_second_schedule_resolves_the_first(session, progression):
    _click(session, progression, "cat")
    # Force bird to be clickable before its unlock resolves
    session.roster.unlock(1)

    assert progression.on_animal_clicked("bird") is ClickOutcome.CORRECT

    # The in-flight bird unlock was applied, lion is now the pending target
    assert session.panel[1].unlocked
    assert session.pending_unlock.target_index == 2
    assert not session.roster.record("lion").unlocked


def test_click_by_index_or_key(progression):
    assert progression.on_animal_clicked(0) is ClickOutcome.CORRECT


def test_unknown_key_raises(progression):
    with pytest.raises(KeyError):
        progression.on_animal_clicked("unicorn")


def test_end_to_end_scenario(session, progression, sound_controller):
    assert _click(session, progression, "cat") is ClickOutcome.CORRECT
    assert session.roster.record("cat").found
    assert session.pending_unlock.target_index == session.roster.index_of("bird")

    _tick(session, progression, DELAY + EPSILON)
    assert session.roster.record("bird").unlocked
    assert session.roster.record("bird").sound_unlocked
    assert session.panel[session.roster.index_of("bird")].unlocked

    played_before = len(sound_controller.played)
    assert _click(session, progression, "lion") is ClickOutcome.IGNORED
    assert len(sound_controller.played) == played_before
    assert not session.roster.record("lion").unlocked

    assert _click(session, progression, "bird") is ClickOutcome.CORRECT
    assert session.roster.record("bird").found
    assert session.pending_unlock.target_index == session.roster.index_of("lion")
