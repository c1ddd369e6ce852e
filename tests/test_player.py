"""Tests for the Qt Multimedia player wrapper (offscreen, no event loop)."""

import pytest
from PySide6.QtMultimedia import QMediaPlayer

from core.models import Asset
from player.player import Player, SilentPlayer


class StubMedia:
    """Reports a fixed playback state and position in place of QMediaPlayer."""

    def __init__(self, state, position_ms):
        self.state = state
        self.position_ms = position_ms

    def playbackState(self):
        return self.state

    def position(self):
        return self.position_ms


@pytest.fixture
def qt_player():
    p = Player(tick_interval_ms=1000, volume=0.5)
    yield p
    p.deleteLater()


def collect(signal):
    received = []
    signal.connect(lambda *args: received.append(args))
    return received


class TestLoad:
    def test_load_returns_known_duration(self, qt_player, tmp_path):
        asset = Asset(path=str(tmp_path / "Song.mp3"), duration_seconds=212.0)
        assert qt_player.load(asset) == 212.0
        assert qt_player.asset is asset

    def test_load_starts_tick_timer(self, qt_player, tmp_path):
        assert not qt_player._tick_timer.isActive()
        qt_player.load(Asset(path=str(tmp_path / "A.mp3"), duration_seconds=10.0))
        assert qt_player._tick_timer.isActive()
        assert qt_player._tick_timer.interval() == 1000

    def test_load_restarts_tick_timer_after_end(self, qt_player, tmp_path):
        qt_player.load(Asset(path=str(tmp_path / "A.mp3"), duration_seconds=10.0))
        qt_player._on_qt_media_status(QMediaPlayer.MediaStatus.EndOfMedia)
        assert not qt_player._tick_timer.isActive()

        qt_player.load(Asset(path=str(tmp_path / "B.mp3"), duration_seconds=20.0))
        assert qt_player._tick_timer.isActive()


class TestSignals:
    def test_tick_reports_seconds_while_playing(self, qt_player):
        ticks = collect(qt_player.positionTick)
        qt_player.media = StubMedia(QMediaPlayer.PlaybackState.PlayingState, 61500)

        qt_player._tick()

        assert ticks == [(61.5,)]

    @pytest.mark.parametrize("state", [
        QMediaPlayer.PlaybackState.PausedState,
        QMediaPlayer.PlaybackState.StoppedState,
    ])
    def test_no_tick_unless_playing(self, qt_player, state):
        ticks = collect(qt_player.positionTick)
        qt_player.media = StubMedia(state, 5000)

        qt_player._tick()

        assert ticks == []

    def test_duration_converted_to_seconds(self, qt_player):
        durations = collect(qt_player.durationReported)
        qt_player._on_qt_duration(215300)
        qt_player._on_qt_duration(0)
        assert durations == [(215.3,)]

    def test_end_of_media_emits_ended_and_stops_ticks(self, qt_player, tmp_path):
        ended = collect(qt_player.ended)
        qt_player.load(Asset(path=str(tmp_path / "A.mp3"), duration_seconds=10.0))

        qt_player._on_qt_media_status(QMediaPlayer.MediaStatus.EndOfMedia)

        assert ended == [()]
        assert not qt_player._tick_timer.isActive()

    def test_other_statuses_do_not_end(self, qt_player):
        ended = collect(qt_player.ended)
        qt_player._on_qt_media_status(QMediaPlayer.MediaStatus.LoadedMedia)
        assert ended == []

    def test_play_restarts_stopped_timer(self, qt_player, tmp_path):
        qt_player.load(Asset(path=str(tmp_path / "A.mp3"), duration_seconds=10.0))
        qt_player._on_qt_media_status(QMediaPlayer.MediaStatus.EndOfMedia)

        qt_player.play()

        assert qt_player._tick_timer.isActive()


class TestVolume:
    def test_volume_is_clamped(self, qt_player):
        qt_player.set_volume(1.5)
        assert qt_player.audio.volume() == pytest.approx(1.0)
        qt_player.set_volume(0.25)
        assert qt_player.audio.volume() == pytest.approx(0.25)


def test_silent_player_reports_asset_duration():
    assert SilentPlayer().load(Asset(path="/nowhere.mp3", duration_seconds=33.0)) == 33.0
