# core/playlist.py
from __future__ import annotations

import json
import logging
import os

from core.models import Track

logger = logging.getLogger(__name__)

PLAYLIST_FILE = "playlist.json"

# Audio is looked up as <title>.mp3 and artwork as <artwork_id>.png/.jpg in the assets dir.
DEFAULT_TRACKS: tuple[Track, ...] = (
    Track("呼吸のように", "photo1"),
    Track("裸の勇者", "photo2"),
    Track("踊り子", "photo3"),
    Track("不可幸力", "photo4"),
    Track("東京フラッシュ", "photo5"),
    Track("CHAINSAW BLOOD", "photo6"),
)

def build_playlist(entries) -> tuple[Track, ...]:
    """
    Accepts Track objects, (title, artwork_id) pairs, or
    {"title": ..., "artwork": ...} mappings. The result is never empty.
    """
    tracks: list[Track] = []
    for e in entries:
        if isinstance(e, Track):
            tracks.append(e)
        elif isinstance(e, dict):
            title = str(e.get("title") or "").strip()
            if not title:
                raise ValueError(f"Playlist entry without a title: {e!r}")
            tracks.append(Track(title=title, artwork_id=str(e.get("artwork") or "")))
        else:
            title, artwork_id = e
            tracks.append(Track(title=str(title), artwork_id=str(artwork_id)))

    if not tracks:
        raise ValueError("Playlist must contain at least one track")
    return tuple(tracks)

def load_playlist(assets_dir: str) -> tuple[Track, ...]:
    path = os.path.join(assets_dir, PLAYLIST_FILE)
    if not os.path.isfile(path):
        return DEFAULT_TRACKS

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return build_playlist(data)
    except (OSError, ValueError, TypeError) as e:
        logger.error("Cannot use %s, falling back to built-in playlist: %s", path, e)
        return DEFAULT_TRACKS
