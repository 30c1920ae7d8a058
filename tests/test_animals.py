import pytest

from moo_who.errors import ConfigError
from moo_who.game_system import AnimalRoster, AnimalSpec, UnlockState


def _specs(*keys):
    return [AnimalSpec(key, key.upper(), f"{key}.png", f"{key}.wav", x=i * 0.3, y=0.0) for i, key in enumerate(keys)]


def test_roster_keeps_order_and_unlocks_first():
    roster = AnimalRoster(_specs("cat", "bird", "lion"))
    assert roster.keys == ["cat", "bird", "lion"]
    assert roster.records[0].state is UnlockState.UNLOCKED
    assert all(rec.state is UnlockState.LOCKED for rec in roster.records[1:])
    assert len(roster) == 3


def test_unlocked_and_sound_unlocked_move_together():
    roster = AnimalRoster(_specs("cat", "bird"))
    bird = roster.record("bird")
    assert (bird.unlocked, bird.sound_unlocked) == (False, False)
    assert roster.unlock(1) is True
    assert (bird.unlocked, bird.sound_unlocked) == (True, True)
    assert roster.unlock(1) is False


def test_expected_is_empty_once_everything_is_found():
    roster = AnimalRoster(_specs("cat", "bird"))
    roster.mark_found(0)
    assert roster.expected_index() is None
    roster.unlock(1)
    assert roster.expected_key() == "bird"
    roster.mark_found(1)
    assert roster.expected_key() is None
    assert roster.all_found


def test_successor():
    roster = AnimalRoster(_specs("cat", "bird"))
    assert roster.successor_index(0) == 1
    assert roster.successor_index(1) is None


def test_index_lookup():
    roster = AnimalRoster(_specs("cat", "bird"))
    assert roster.index_of("bird") == 1
    assert roster.index_of(0) == 0
    with pytest.raises(KeyError):
        roster.index_of("dog")
    with pytest.raises(IndexError):
        roster.index_of(5)


def test_hit_test_uses_sprite_box():
    roster = AnimalRoster(_specs("cat", "bird"))
    assert roster.hit_test(0.1, 0.1) == 0
    assert roster.hit_test(0.2, 0.2) == 0      # edges inclusive
    assert roster.hit_test(0.4, 0.05) == 1
    assert roster.hit_test(-0.5, -0.5) is None


def test_roster_rejects_bad_input():
    with pytest.raises(ConfigError):
        AnimalRoster([])
    with pytest.raises(ConfigError):
        AnimalRoster(_specs("cat", "cat"))


def test_advance_animations_ticks_every_pop():
    roster = AnimalRoster(_specs("cat", "bird"), pop_duration_s=0.5, pop_scale=1.3)
    roster.records[0].pop.trigger()
    roster.advance_animations(0.1)
    assert roster.records[0].pop.scale == 1.0
    roster.advance_animations(0.25)
    assert roster.records[0].pop.scale == pytest.approx(1.3)
    assert roster.records[1].pop.scale == 1.0
