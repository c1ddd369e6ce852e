# src/player/player.py
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal, QTimer, QUrl
from PySide6.QtMultimedia import QMediaPlayer, QAudioOutput

from core.models import Asset
from core.utils import clamp

logger = logging.getLogger(__name__)

class Player(QObject):
    positionTick = Signal(float)        # seconds, every tick while playing
    durationReported = Signal(float)    # seconds, once the backend knows
    ended = Signal()

    def __init__(self, tick_interval_ms: int = 1000, volume: float = 0.5):
        super().__init__()

        self.asset: Optional[Asset] = None

        self.audio = QAudioOutput()
        self.media = QMediaPlayer()
        self.media.setAudioOutput(self.audio)
        self.audio.setVolume(clamp(volume, 0.0, 1.0))

        self.media.durationChanged.connect(self._on_qt_duration)
        self.media.mediaStatusChanged.connect(self._on_qt_media_status)

        # Periodic position reports, restarted on every load
        self._tick_timer = QTimer(self)
        self._tick_timer.setInterval(int(tick_interval_ms))
        self._tick_timer.timeout.connect(self._tick)

    # ----------------------------
    # Qt backend handlers
    # ----------------------------

    def _on_qt_media_status(self, status: QMediaPlayer.MediaStatus) -> None:
        if status == QMediaPlayer.MediaStatus.EndOfMedia:
            self._tick_timer.stop()
            self.ended.emit()
        elif status == QMediaPlayer.MediaStatus.InvalidMedia:
            logger.warning("Backend cannot play %s: %s",
                           self.asset.path if self.asset else "?", self.media.errorString())

    def _on_qt_duration(self, ms: int) -> None:
        if ms > 0:
            self.durationReported.emit(ms / 1000.0)

    def _tick(self) -> None:
        if self.media.playbackState() != QMediaPlayer.PlaybackState.PlayingState:
            return
        self.positionTick.emit(self.media.position() / 1000.0)

    # ----------------------------
    # Public API
    # ----------------------------

    def load(self, asset: Asset) -> float:
        """
        Replaces the current media item. Returns the asset's known duration
        in seconds; the backend may refine it later via durationReported.
        """
        self.asset = asset
        self.media.setSource(QUrl.fromLocalFile(asset.path))
        self._tick_timer.start()
        return asset.duration_seconds

    def play(self) -> None:
        # a looped Single track restarts after EndOfMedia stopped the timer
        if not self._tick_timer.isActive():
            self._tick_timer.start()
        self.media.play()

    def pause(self) -> None:
        self.media.pause()

    def seek(self, seconds: float) -> None:
        self.media.setPosition(int(max(0.0, float(seconds)) * 1000))

    def set_volume(self, volume_0_to_1: float) -> None:
        self.audio.setVolume(clamp(volume_0_to_1, 0.0, 1.0))


class SilentPlayer:
    """Stand-in used when the Qt multimedia backend can't be created."""

    def load(self, asset: Asset) -> float:
        return asset.duration_seconds

    def play(self) -> None:
        pass

    def pause(self) -> None:
        pass

    def seek(self, seconds: float) -> None:
        pass

    def set_volume(self, volume_0_to_1: float) -> None:
        pass
