# src/library/assets.py
from __future__ import annotations

import logging
import os
from typing import Optional

from mutagen import File as MutagenFile

from core.models import Asset
from core.utils import safe_duration

logger = logging.getLogger(__name__)

AUDIO_EXTS = (".mp3", ".m4a", ".flac", ".ogg", ".opus", ".wav")
ARTWORK_EXTS = (".png", ".jpg", ".jpeg", ".webp")


def read_duration(path: str) -> float:
    """
    Duration in seconds from the file's stream info, or 0.0 when mutagen
    can't parse it.
    """
    try:
        audio = MutagenFile(path)
    except Exception as e:
        logger.debug("Cannot read audio info from %s: %s", path, e)
        return 0.0

    if audio is None or audio.info is None:
        return 0.0
    return safe_duration(getattr(audio.info, "length", None))


class AssetStore:
    """
    Resolves playlist entries to files in a single assets directory:
      <title>.<audio ext>        playable audio
      <artwork_id>.<image ext>   cover art
    """

    def __init__(self, assets_dir: str):
        self.assets_dir = assets_dir
        self._cache: dict[str, Asset] = {}

    def _find(self, stem: str, exts: tuple[str, ...]) -> Optional[str]:
        if not stem or not os.path.isdir(self.assets_dir):
            return None
        for ext in exts:
            path = os.path.join(self.assets_dir, stem + ext)
            if os.path.isfile(path):
                return path
        return None

    def resolve(self, title: str) -> Optional[Asset]:
        if title in self._cache:
            return self._cache[title]

        path = self._find(title, AUDIO_EXTS)
        if path is None:
            logger.debug("No audio file for %r in %s", title, self.assets_dir)
            return None

        asset = Asset(path=path, duration_seconds=read_duration(path))
        self._cache[title] = asset
        return asset

    def artwork_path(self, artwork_id: str) -> Optional[str]:
        return self._find(artwork_id, ARTWORK_EXTS)
