import pytest

from moo_who.game_system import PanelLayout
from moo_who.game_system.sound_panel import layout_buttons


def test_layout_fills_container_with_equal_rows():
    layout = PanelLayout()
    rows = layout_buttons(6, layout)

    heights = {round(h, 9) for _x, _y, _w, h in rows}
    assert len(heights) == 1
    top_row = rows[0]
    bottom_row = rows[-1]
    assert top_row[1] + top_row[3] == pytest.approx(layout.top)
    assert bottom_row[1] == pytest.approx(layout.bottom)
    for upper, lower in zip(rows, rows[1:]):
        assert upper[1] - (lower[1] + lower[3]) == pytest.approx(layout.gap)
    assert all(w == pytest.approx(layout.right - layout.left) for _x, _y, w, _h in rows)


def test_panel_mirrors_roster(session):
    assert len(session.panel) == len(session.roster)
    assert [b.label for b in session.panel.buttons] == ["CAT", "BIRD", "LION", "ELEPHANT", "DOG", "COW"]
    assert [b.unlocked for b in session.panel.buttons] == [True, False, False, False, False, False]


def test_toggle_twice_restores_flag(session, sound_controller):
    panel = session.panel
    original = panel[0].is_playing

    assert panel.on_play_toggle_clicked(0) is True
    assert sound_controller.last_played == "cat"
    assert panel.on_play_toggle_clicked(0) is False
    assert panel[0].is_playing == original


def test_toggle_after_natural_end_restarts(session, sound_controller):
    panel = session.panel
    panel.on_play_toggle_clicked(0)
    sound_controller.finish(panel[0].playback)

    assert panel.on_play_toggle_clicked(0) is True
    assert len(sound_controller.played) == 2


def test_locked_button_ignores_toggle(session, sound_controller):
    assert session.panel.on_play_toggle_clicked(2) is False
    assert sound_controller.played == []


def test_reconcile_resets_finished_previews(session, sound_controller):
    panel = session.panel
    panel.on_play_toggle_clicked(0)
    panel.reconcile_playback()
    assert panel[0].is_playing

    sound_controller.finish_all()
    panel.reconcile_playback()
    assert not panel[0].is_playing


def test_sync_unlocks_follows_roster(session):
    session.roster.unlock(3)
    session.panel.sync_unlocks(session.roster)
    assert session.panel[3].unlocked


def test_hit_test_only_matches_unlocked_play_controls(session):
    panel = session.panel
    cat = panel[0]
    lion = panel[2]
    inside = (cat.play_x + cat.play_size / 2, cat.play_y + cat.play_size / 2)
    assert panel.hit_test(*inside) == 0
    assert panel.hit_test(lion.play_x + 0.01, lion.play_y + 0.01) is None
    assert panel.hit_test(0.5, 0.5) is None


def test_stop_all_releases_previews(session, sound_controller):
    session.panel.on_play_toggle_clicked(0)
    session.panel.stop_all()
    assert not session.panel[0].is_playing
    assert session.panel[0].playback is None
    assert len(sound_controller.released) == 1
