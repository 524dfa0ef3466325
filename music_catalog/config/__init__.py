"""
Configuration management for the music catalog.

This module loads the demo seed data, the user lookup settings and the log
level from TOML files.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Path to the config directory
CONFIG_DIR = Path(__file__).parent

DEFAULT_CONFIG_PATH = CONFIG_DIR / "catalog.toml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class DemoSong:
    """A song used to seed the demo catalog."""

    title: str
    artist: str
    genre: str
    duration: float
    favorite: bool = False


@dataclass
class DemoConfig:
    """Seed data and sort steps for the demo driver."""

    playlists: list[str] = field(default_factory=list)
    songs: list[DemoSong] = field(default_factory=list)
    sorts: list[tuple[str, str]] = field(default_factory=list)


@dataclass
class UserLookupConfig:
    """Settings for the deferred user lookup."""

    delay_seconds: float = 2.0
    known_users: dict[int, str] = field(default_factory=dict)


@dataclass
class AppConfig:
    """Loaded application configuration."""

    demo: DemoConfig = field(default_factory=DemoConfig)
    users: UserLookupConfig = field(default_factory=UserLookupConfig)
    log_level: str = "INFO"


def _parse_demo(data: dict[str, Any]) -> DemoConfig:
    """Parse the [demo] section from the TOML data."""
    songs = [
        DemoSong(
            title=str(raw.get("title", "")),
            artist=str(raw.get("artist", "")),
            genre=str(raw.get("genre", "")),
            duration=raw.get("duration", 0),
            favorite=bool(raw.get("favorite", False)),
        )
        for raw in data.get("songs", [])
    ]
    sorts: list[tuple[str, str]] = []
    for step in data.get("sorts", []):
        if not isinstance(step, list) or len(step) != 2:
            logger.warning("Ignoring sort step %r, expected [playlist, criterion]", step)
            continue
        sorts.append((str(step[0]), str(step[1])))

    return DemoConfig(
        playlists=[str(name) for name in data.get("playlists", [])],
        songs=songs,
        sorts=sorts,
    )


def _parse_users(data: dict[str, Any]) -> UserLookupConfig:
    """Parse the [users] section from the TOML data."""
    known: dict[int, str] = {}
    for key, name in data.get("known", {}).items():
        try:
            known[int(key)] = str(name)
        except ValueError:
            logger.warning("Ignoring user with non-numeric id %r", key)

    return UserLookupConfig(
        delay_seconds=float(data.get("delay_seconds", 2.0)),
        known_users=known,
    )


def load_config(config_path: Path | None = None) -> AppConfig:
    """
    Load catalog configuration from TOML file.

    Args:
        config_path: Path to a TOML file. If None, uses default location.

    Returns:
        Loaded AppConfig instance.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    logger.debug("Loading catalog config from %s", config_path)

    with config_path.open("rb") as f:
        data = tomllib.load(f)

    log_level = str(data.get("log_level", "INFO")).upper()
    if log_level not in _LOG_LEVELS:
        logger.warning("Unknown log_level %r, using INFO", log_level)
        log_level = "INFO"

    return AppConfig(
        demo=_parse_demo(data.get("demo", {})),
        users=_parse_users(data.get("users", {})),
        log_level=log_level,
    )


# Global singleton instance (lazy loaded)
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """
    Get the global configuration (lazy loaded singleton).

    Returns:
        The AppConfig instance.
    """
    global _config

    if _config is None:
        _config = load_config()

    return _config


def reload_config(config_path: Path | None = None) -> AppConfig:
    """
    Force reload of configuration.

    Returns:
        The newly loaded AppConfig instance.
    """
    global _config
    _config = load_config(config_path)
    return _config
