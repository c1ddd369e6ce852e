# core/playback_controller.py
from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Optional, Sequence

from PySide6.QtCore import QObject, Signal

from core.models import PlaybackState, RepeatMode, Track
from core.utils import clamp, safe_duration

logger = logging.getLogger(__name__)

# Auto-advance fires once the position is within this many seconds of the end.
END_OF_TRACK_MARGIN_S = 1.0

class PlaybackController(QObject):
    """
    Owns the PlaybackState for a fixed playlist and drives the media player.

    The player and asset store are duck-typed:
      player.load(asset) -> float, play(), pause(), seek(seconds), set_volume(v)
      assets.resolve(title) -> Asset | None

    Every mutation emits stateChanged with the new (immutable) snapshot.
    """

    stateChanged = Signal(object)   # PlaybackState

    def __init__(
        self,
        tracks: Sequence[Track],
        player,
        assets,
        *,
        initial_volume: float = 0.5,
        shuffle_avoid_repeat: bool = False,
        single_repeat_loops: bool = False,
        rng: Optional[random.Random] = None,
        parent=None,
    ):
        super().__init__(parent)
        if not tracks:
            raise ValueError("PlaybackController needs at least one track")

        self.tracks: tuple[Track, ...] = tuple(tracks)
        self.player = player
        self.assets = assets

        self._shuffle_avoid_repeat = shuffle_avoid_repeat
        self._single_repeat_loops = single_repeat_loops
        self._rng = rng or random.Random()

        self._state = PlaybackState(volume=clamp(initial_volume, 0.0, 1.0))

    # ----------------------------
    # State
    # ----------------------------

    @property
    def state(self) -> PlaybackState:
        return self._state

    def _update(self, **changes) -> None:
        self._state = replace(self._state, **changes)
        self.stateChanged.emit(self._state)

    # ----------------------------
    # Track loading
    # ----------------------------

    def load_track(self, index: int) -> bool:
        """
        Loads tracks[index] into the player without starting it.
        Returns False (and leaves the state untouched) when the asset
        cannot be resolved.
        """
        return self._load(index)

    def _load(self, index: int, play: bool = False) -> bool:
        if not 0 <= index < len(self.tracks):
            raise IndexError(f"Track index {index} out of range 0..{len(self.tracks) - 1}")

        track = self.tracks[index]
        asset = self.assets.resolve(track.title)
        if asset is None:
            logger.warning("Asset not found for track %r, keeping current track", track.title)
            return False

        duration = safe_duration(self.player.load(asset))
        self.player.set_volume(self._state.volume)
        if play:
            self.player.play()

        logger.info("Loaded track %d: %s (%.1fs)", index, track.title, duration)
        changes = dict(current_index=index, position_seconds=0.0, duration_seconds=duration)
        if play:
            changes["is_playing"] = True
        self._update(**changes)
        return True

    def _play_from(self, target: int, step: int) -> None:
        """
        Plays target, or walks from it in `step` direction past tracks
        whose asset is missing. Each index is tried at most once.
        """
        n = len(self.tracks)
        for k in range(n):
            if self._load((target + k * step) % n, play=True):
                return
        logger.warning("No playable track in the playlist")

    # ----------------------------
    # Transport
    # ----------------------------

    def toggle_play_pause(self) -> None:
        if self._state.is_playing:
            self.player.pause()
        else:
            self.player.play()
        self._update(is_playing=not self._state.is_playing)

    def next(self) -> None:
        n = len(self.tracks)
        cur = self._state.current_index

        if self._state.is_shuffle:
            if self._shuffle_avoid_repeat and n > 1:
                target = self._rng.choice([i for i in range(n) if i != cur])
            else:
                target = self._rng.randrange(n)
        else:
            target = (cur + 1) % n

        self._play_from(target, 1)

    def previous(self) -> None:
        # shuffle is ignored going backwards
        target = (self._state.current_index - 1) % len(self.tracks)
        self._play_from(target, -1)

    def select_track(self, index: int) -> None:
        self._load(index, play=True)

    # ----------------------------
    # Modes
    # ----------------------------

    def toggle_shuffle(self) -> None:
        self._update(is_shuffle=not self._state.is_shuffle)

    def cycle_repeat_mode(self) -> None:
        self._update(repeat_mode=self._state.repeat_mode.next())

    # ----------------------------
    # Player callbacks
    # ----------------------------

    def on_position_tick(self, current_seconds: float) -> None:
        current_seconds = max(0.0, float(current_seconds))

        if not self._state.is_seeking:
            self._update(position_seconds=current_seconds)

        duration = self._state.duration_seconds
        if duration <= 0:
            return
        if current_seconds < duration - END_OF_TRACK_MARGIN_S:
            return

        if self._state.repeat_mode != RepeatMode.SINGLE:
            logger.debug("End of track reached at %.1fs, advancing", current_seconds)
            self.next()
        elif self._single_repeat_loops:
            self.player.seek(0.0)
            self._update(position_seconds=0.0)

    def on_duration_reported(self, seconds: float) -> None:
        duration = safe_duration(seconds)
        if duration > 0 and duration != self._state.duration_seconds:
            self._update(duration_seconds=duration)

    def on_media_ended(self) -> None:
        """
        The backend hit end of media without a tick landing in the
        end-of-track window, so advance (or loop) from here instead.
        """
        if self._state.repeat_mode != RepeatMode.SINGLE:
            logger.debug("Media ended before auto-advance, advancing")
            self.next()
        elif self._single_repeat_loops:
            self.player.seek(0.0)
            self.player.play()
            self._update(position_seconds=0.0, is_playing=True)
        elif self._state.is_playing:
            self._update(is_playing=False)

    # ----------------------------
    # Seek / volume
    # ----------------------------

    def begin_seek(self) -> None:
        if not self._state.is_seeking:
            self._update(is_seeking=True)

    def seek(self, to_seconds: float) -> None:
        target = clamp(to_seconds, 0.0, self._state.duration_seconds)
        self.player.seek(target)
        self._update(position_seconds=target, is_seeking=False)

    def set_volume(self, volume: float) -> None:
        v = clamp(volume, 0.0, 1.0)
        self.player.set_volume(v)
        self._update(volume=v)
