"""
Tests for music_catalog.config.
"""

from pathlib import Path

import pytest

from music_catalog.config import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    DemoSong,
    get_config,
    load_config,
    reload_config,
)


class TestLoadConfig:
    """Tests for TOML config loading."""

    def test_default_config(self) -> None:
        """The bundled config should carry the demo seed data."""
        config = load_config()

        assert config.log_level == "INFO"
        assert config.demo.playlists == ["rock", "pop", "hardcore", "techno"]
        assert [s.title for s in config.demo.songs] == ["test aac", "test abc", "test dfg"]
        assert config.demo.songs[1] == DemoSong(
            title="test abc", artist="test aaa", genre="test 2", duration=200, favorite=True
        )
        assert config.demo.sorts[0] == ("rock", "duration")
        assert config.users.known_users == {1: "John Doe"}
        assert config.users.delay_seconds == 2.0

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        """Missing sections should fall back to defaults."""
        path = tmp_path / "empty.toml"
        path.write_text("")

        config = load_config(path)

        assert config == AppConfig()

    def test_custom_file(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.toml"
        path.write_text(
            'log_level = "debug"\n'
            "[demo]\n"
            'playlists = ["jazz"]\n'
            'sorts = [["jazz", "title"]]\n'
            "[[demo.songs]]\n"
            'title = "So What"\n'
            'artist = "Miles Davis"\n'
            'genre = "jazz"\n'
            "duration = 545\n"
            "[users]\n"
            "delay_seconds = 0\n"
            "[users.known]\n"
            '7 = "Ada"\n'
            'x = "Ignored"\n'
        )

        config = load_config(path)

        assert config.log_level == "DEBUG"
        assert config.demo.playlists == ["jazz"]
        assert config.demo.songs[0].favorite is False
        assert config.demo.sorts == [("jazz", "title")]
        assert config.users.delay_seconds == 0.0
        assert config.users.known_users == {7: "Ada"}

    def test_malformed_sort_steps_skipped(self, tmp_path: Path) -> None:
        """Sort steps that aren't [playlist, criterion] pairs should be ignored."""
        path = tmp_path / "sorts.toml"
        path.write_text(
            "[demo]\n"
            'playlists = ["rock"]\n'
            'sorts = [["rock"], ["rock", "title", "extra"], "rock", ["rock", "duration"]]\n'
        )

        config = load_config(path)

        assert config.demo.sorts == [("rock", "duration")]

    def test_unknown_log_level(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text('log_level = "loud"\n')
        assert load_config(path).log_level == "INFO"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")


class TestGlobalConfig:
    """Tests for the lazy singleton."""

    def test_get_config_cached(self) -> None:
        assert get_config() is get_config()

    def test_reload_replaces(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.toml"
        path.write_text("")
        try:
            reloaded = reload_config(path)
            assert get_config() is reloaded
            assert reloaded.demo.playlists == []
        finally:
            reload_config(DEFAULT_CONFIG_PATH)
