"""Tests for playlist loading."""

import json

import pytest

from core.models import Track
from core.playlist import DEFAULT_TRACKS, build_playlist, load_playlist


class TestBuildPlaylist:
    def test_accepts_pairs_dicts_and_tracks(self):
        tracks = build_playlist([
            ("One", "photo1"),
            {"title": "Two", "artwork": "photo2"},
            Track("Three", "photo3"),
        ])
        assert [t.title for t in tracks] == ["One", "Two", "Three"]
        assert tracks[1].artwork_id == "photo2"

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            build_playlist([])

    def test_entry_without_title_rejected(self):
        with pytest.raises(ValueError):
            build_playlist([{"artwork": "x"}])


class TestLoadPlaylist:
    def test_default_when_no_file(self, tmp_path):
        assert load_playlist(str(tmp_path)) == DEFAULT_TRACKS
        assert len(DEFAULT_TRACKS) == 6

    def test_reads_playlist_json(self, tmp_path):
        (tmp_path / "playlist.json").write_text(
            json.dumps([{"title": "Intro", "artwork": "cover"}]), encoding="utf-8"
        )
        assert load_playlist(str(tmp_path)) == (Track("Intro", "cover"),)

    def test_broken_file_falls_back(self, tmp_path, caplog):
        (tmp_path / "playlist.json").write_text("[]", encoding="utf-8")
        assert load_playlist(str(tmp_path)) == DEFAULT_TRACKS
        assert "falling back" in caplog.text

    def test_invalid_json_falls_back(self, tmp_path):
        (tmp_path / "playlist.json").write_text("{not json", encoding="utf-8")
        assert load_playlist(str(tmp_path)) == DEFAULT_TRACKS
