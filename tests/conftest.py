import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from core.models import Asset, Track


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


class FakePlayer:
    """Records every command the controller issues."""

    def __init__(self):
        self.calls = []
        self.loaded = []
        self.volumes = []

    def load(self, asset):
        self.calls.append("load")
        self.loaded.append(asset)
        return asset.duration_seconds

    def play(self):
        self.calls.append("play")

    def pause(self):
        self.calls.append("pause")

    def seek(self, seconds):
        self.calls.append(("seek", seconds))

    def set_volume(self, v):
        self.calls.append(("volume", v))
        self.volumes.append(v)


class MemoryAssets:
    """title -> Asset lookup; titles not in the dict are 'not found'."""

    def __init__(self, durations):
        self.durations = dict(durations)

    def resolve(self, title):
        if title not in self.durations:
            return None
        return Asset(path=f"/assets/{title}.mp3", duration_seconds=self.durations[title])

    def artwork_path(self, artwork_id):
        return None


@pytest.fixture
def tracks():
    return (Track("A", "a"), Track("B", "b"), Track("C", "c"))


@pytest.fixture
def player():
    return FakePlayer()


@pytest.fixture
def assets(tracks):
    return MemoryAssets({t.title: 180.0 for t in tracks})


@pytest.fixture
def make_assets():
    return MemoryAssets
