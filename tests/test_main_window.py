"""Tests for the player window wiring (offscreen Qt)."""

import pytest

from core.models import RepeatMode
from core.playback_controller import PlaybackController
from core.state import AppState, Notify
from ui.dialogs.track_list_dialog import TrackListDialog
from ui.main_window import MainWindow


@pytest.fixture
def app_state(tracks, player, assets):
    state = AppState()
    state.tracks = tracks
    state.assets = assets
    state.player = player
    state.controller = PlaybackController(tracks, player, assets)
    state.controller.load_track(0)
    return state


@pytest.fixture
def window(app_state):
    w = MainWindow(app_state)
    yield w
    w.close()
    w.deleteLater()


class TestMainWindow:
    def test_shows_first_track(self, window):
        assert window.lbl_title.text() == "A"
        assert window.player_bar.lbl_dur.text() == "03:00"
        assert window.volume_slider.value() == 50

    def test_next_button_updates_title(self, window, app_state):
        window.player_bar.btn_next.click()
        assert app_state.controller.state.current_index == 1
        assert window.lbl_title.text() == "B"
        assert window.player_bar.btn_play.toolTip() == "Pause"

    def test_play_button_toggles(self, window, player):
        player.calls.clear()
        window.player_bar.btn_play.click()
        assert player.calls == ["play"]
        assert window.player_bar.btn_play.toolTip() == "Pause"

    def test_volume_slider_forwards_to_player(self, window, app_state, player):
        window.volume_slider.setValue(30)
        assert app_state.controller.state.volume == 0.3
        assert player.volumes[-1] == 0.3

    def test_mode_buttons(self, window, app_state):
        window.btn_shuffle.click()
        window.btn_repeat.click()
        state = app_state.controller.state
        assert state.is_shuffle is True
        assert state.repeat_mode is RepeatMode.ALL
        assert window.btn_shuffle.toolTip() == "Shuffle: on"
        assert window.btn_repeat.toolTip() == RepeatMode.ALL.label

    def test_position_tick_moves_seek_slider(self, window, app_state):
        app_state.controller.on_position_tick(61.0)
        assert window.player_bar.slider.value() == 61000
        assert window.player_bar.lbl_time.text() == "01:01"

    def test_seek_gesture(self, window, app_state, player):
        bar = window.player_bar
        bar._on_slider_pressed()
        app_state.controller.on_position_tick(5.0)
        assert app_state.controller.state.position_seconds == 0.0

        bar.slider.setValue(42000)
        bar._on_slider_released()
        assert player.calls[-1] == ("seek", 42.0)
        assert app_state.controller.state.position_seconds == 42.0
        assert app_state.controller.state.is_seeking is False

    def test_slider_value_change_without_drag_seeks(self, window, app_state, player):
        # groove click or arrow key
        window.player_bar.slider.setValue(30000)
        assert player.calls[-1] == ("seek", 30.0)
        assert app_state.controller.state.position_seconds == 30.0
        assert window.player_bar.lbl_time.text() == "00:30"

    def test_position_tick_does_not_seek(self, window, app_state, player):
        player.calls.clear()
        app_state.controller.on_position_tick(12.0)
        app_state.controller.on_duration_reported(200.0)
        assert player.calls == []
        assert window.player_bar.slider.value() == 12000

    def test_queued_notifications_are_drained(self, app_state):
        app_state.queued_notifications.append(Notify("Failed to initialize audio player", "error"))
        w = MainWindow(app_state)
        assert app_state.queued_notifications == []
        w.close()


class TestTrackListDialog:
    def test_lists_tracks_and_marks_current(self, tracks):
        dlg = TrackListDialog(tracks, current_index=1)
        assert dlg.list_widget.count() == 3
        assert dlg.list_widget.item(0).text() == "A"
        assert dlg.list_widget.item(1).text().startswith("B")
        assert dlg.list_widget.item(1).text() != "B"
        assert dlg.list_widget.currentRow() == 1

    def test_click_emits_selection(self, tracks, app_state):
        dlg = TrackListDialog(tracks, current_index=0)
        dlg.trackSelected.connect(app_state.controller.select_track)
        dlg._on_item_clicked(dlg.list_widget.item(2))
        assert app_state.controller.state.current_index == 2
        assert app_state.controller.state.is_playing is True
