"""
Console demo for the music catalog.

Seeds a catalog from the [demo] config section, prints it, applies the
configured sort steps and prints the result again.
"""

from __future__ import annotations

import logging
from typing import Callable

from music_catalog.config import AppConfig, DemoConfig, get_config
from music_catalog.core.catalog import MusicCatalog, Playlist, create_catalog

logger = logging.getLogger(__name__)


def _create_playlists(catalog: MusicCatalog, demo: DemoConfig) -> None:
    """Create every demo playlist, empty."""
    for name in demo.playlists:
        catalog.create_playlist(name)


def _add_songs(catalog: MusicCatalog, demo: DemoConfig) -> None:
    """Add every demo song to every demo playlist, song by song."""
    for song in demo.songs:
        for name in demo.playlists:
            catalog.add_song_to_playlist(name, song)

    logger.info(
        "Seeded %d playlists with %d songs each",
        len(demo.playlists),
        len(demo.songs),
    )


def seed_catalog(catalog: MusicCatalog, demo: DemoConfig) -> None:
    """
    Create every demo playlist, then add every demo song to each of them.

    This is the setup run_demo() performs, without printing or sorting.
    """
    _create_playlists(catalog, demo)
    _add_songs(catalog, demo)


def format_playlist(playlist: Playlist) -> list[str]:
    """Render a playlist as lines of text."""
    lines = [f"{playlist.name} ({len(playlist)} songs)"]
    for song in playlist.songs:
        star = "*" if song.favorite else " "
        lines.append(f"  {star} {song.title} - {song.artist} [{song.genre}] {song.duration}s")
    return lines


def _print_playlists(playlists: list[Playlist], out: Callable[[str], None]) -> None:
    for playlist in playlists:
        for line in format_playlist(playlist):
            out(line)


def run_demo(
    catalog: MusicCatalog | None = None,
    config: AppConfig | None = None,
    out: Callable[[str], None] = print,
) -> list[Playlist]:
    """
    Run the demo against `catalog` (a fresh one by default).

    Args:
        catalog: Catalog to populate. Should be empty.
        config: Configuration to seed from. Defaults to get_config().
        out: Line printer.

    Returns:
        The final snapshot of all playlists.
    """
    if catalog is None:
        catalog = create_catalog()
    if config is None:
        config = get_config()

    demo = config.demo
    _create_playlists(catalog, demo)

    out("Get all playlists. All playlists should be empty.")
    _print_playlists(catalog.get_all_playlists(), out)

    _add_songs(catalog, demo)

    for playlist_name, criterion in demo.sorts:
        logger.info("Sorting %s by %s", playlist_name, criterion)
        catalog.sort_songs(playlist_name, criterion)

    playlists = catalog.get_all_playlists()
    out("")
    out("All playlists")
    _print_playlists(playlists, out)
    return playlists
