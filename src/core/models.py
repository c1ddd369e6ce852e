# core/models.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

@dataclass(frozen=True)
class Track:
    title: str
    artwork_id: str

@dataclass(frozen=True)
class Asset:
    path: str                 # full path to the audio file
    duration_seconds: float   # 0.0 when unknown

class RepeatMode(Enum):
    OFF = "off"
    ALL = "all"
    SINGLE = "single"

    @property
    def icon_name(self) -> str:
        return _REPEAT_ICONS[self]

    @property
    def label(self) -> str:
        return _REPEAT_LABELS[self]

    def next(self) -> RepeatMode:
        return _REPEAT_CYCLE[self]

_REPEAT_CYCLE = {
    RepeatMode.OFF: RepeatMode.ALL,
    RepeatMode.ALL: RepeatMode.SINGLE,
    RepeatMode.SINGLE: RepeatMode.OFF,
}

_REPEAT_ICONS = {
    RepeatMode.OFF: "repeat",
    RepeatMode.ALL: "repeat-all",
    RepeatMode.SINGLE: "repeat-one",
}

_REPEAT_LABELS = {
    RepeatMode.OFF: "Repeat: off",
    RepeatMode.ALL: "Repeat: all",
    RepeatMode.SINGLE: "Repeat: one",
}

@dataclass(frozen=True)
class PlaybackState:
    current_index: int = 0
    is_playing: bool = False
    is_shuffle: bool = False
    repeat_mode: RepeatMode = RepeatMode.OFF
    volume: float = 0.5
    position_seconds: float = 0.0
    duration_seconds: float = 0.0
    is_seeking: bool = False
