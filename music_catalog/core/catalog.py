"""
In-memory playlist catalog.

This module provides the catalog of named playlists and the songs they hold.
A catalog instance is the single integration point for drivers and any
presentation layer built on top of it.

Design decisions:
- Each call to create_catalog() yields an independent catalog (no module state)
- Playlists are identified by name for lookup, first match wins
- Duplicate playlist names are accepted; removal drops all of them
- Songs are immutable records; favorite toggling replaces the stored record
- Reads return immutable snapshots, so callers can never reach internal state
- Every operation validates before it mutates, so failures leave state intact
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from music_catalog.core import NotFoundError
from music_catalog.core.ordering import SortCriterion, song_sort_key, validate_criterion

logger = logging.getLogger(__name__)

SONG_FIELDS: tuple[str, ...] = ("title", "artist", "genre", "duration", "favorite")


@dataclass(frozen=True, slots=True)
class Song:
    """A song stored in a playlist. `title` identifies it within the playlist."""

    title: str
    artist: str
    genre: str
    duration: float
    favorite: bool = False

    @classmethod
    def from_input(cls, song: Mapping[str, Any] | Any) -> Song:
        """
        Build a fresh song record from caller input.

        Accepts a mapping or any object with song attributes. Only the five
        song fields are copied; anything else on the input is ignored. A
        missing or falsy `favorite` becomes False.
        """
        if isinstance(song, Mapping):
            get = song.get
        else:
            def get(name: str, default: Any = None) -> Any:
                return getattr(song, name, default)

        return cls(
            title=get("title"),
            artist=get("artist"),
            genre=get("genre"),
            duration=get("duration"),
            favorite=bool(get("favorite", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the song as a plain dict."""
        return {name: getattr(self, name) for name in SONG_FIELDS}


@dataclass(frozen=True, slots=True)
class Playlist:
    """Read-only snapshot of a playlist, as returned by the catalog."""

    name: str
    songs: tuple[Song, ...] = ()

    def __len__(self) -> int:
        """Return number of songs in the playlist."""
        return len(self.songs)

    def to_dict(self) -> dict[str, Any]:
        """Return the playlist as plain dicts and lists."""
        return {"name": self.name, "songs": [song.to_dict() for song in self.songs]}


@dataclass
class _PlaylistState:
    """Mutable playlist record owned by a catalog."""

    name: str
    songs: list[Song] = field(default_factory=list)

    def snapshot(self) -> Playlist:
        return Playlist(name=self.name, songs=tuple(self.songs))

    def find_song_index(self, title: str) -> int | None:
        for i, song in enumerate(self.songs):
            if song.title == title:
                return i
        return None


class MusicCatalog:
    """
    Catalog of playlists.

    Exposes exactly seven operations:
    - create_playlist / remove_playlist
    - get_all_playlists
    - add_song_to_playlist / remove_song_from_playlist
    - favorite_song
    - sort_songs

    All operations are synchronous and the catalog assumes a single caller at
    a time. Wrap the whole object in a lock if it is shared between threads.
    """

    def __init__(self) -> None:
        """Initialize an empty catalog."""
        self._playlists: list[_PlaylistState] = []

    def _find_playlist(self, name: str) -> _PlaylistState | None:
        for playlist in self._playlists:
            if playlist.name == name:
                return playlist
        return None

    def _require_playlist(self, name: str, message: str | None = None) -> _PlaylistState:
        playlist = self._find_playlist(name)
        if playlist is None:
            raise NotFoundError("playlist", name, message)
        return playlist

    def create_playlist(self, name: str) -> None:
        """
        Append a new, empty playlist.

        Duplicate names are accepted. Lookups by name use the first one.
        """
        self._playlists.append(_PlaylistState(name=name))
        logger.debug("catalog.create_playlist: name=%s, playlists=%d", name, len(self._playlists))

    def get_all_playlists(self) -> list[Playlist]:
        """
        Get a snapshot of every playlist, in creation order.

        Returns:
            A new list of immutable Playlist snapshots. Changing the list has
            no effect on the catalog.
        """
        return [playlist.snapshot() for playlist in self._playlists]

    def remove_playlist(self, name: str) -> None:
        """
        Remove every playlist called `name`.

        Removing a name that doesn't exist is a no-op.
        """
        before = len(self._playlists)
        self._playlists = [p for p in self._playlists if p.name != name]
        logger.debug(
            "catalog.remove_playlist: name=%s, removed=%d",
            name,
            before - len(self._playlists),
        )

    def add_song_to_playlist(self, playlist_name: str, song: Mapping[str, Any] | Any) -> None:
        """
        Append a copy of `song` to a playlist.

        Args:
            playlist_name: Name of the target playlist.
            song: Mapping or object with title, artist, genre, duration and
                optionally favorite.

        Raises:
            NotFoundError: If the playlist doesn't exist.
        """
        playlist = self._require_playlist(playlist_name)
        new_song = Song.from_input(song)
        playlist.songs.append(new_song)
        logger.debug(
            "catalog.add_song: playlist=%s, title=%s, len=%d",
            playlist_name,
            new_song.title,
            len(playlist.songs),
        )

    def remove_song_from_playlist(self, playlist_name: str, title: str) -> None:
        """
        Remove all songs titled `title` from a playlist.

        Raises:
            NotFoundError: If the playlist or the song doesn't exist.
        """
        playlist = self._require_playlist(playlist_name)
        if playlist.find_song_index(title) is None:
            raise NotFoundError("song", title, f'Song "{title}" not found in {playlist_name}')

        before = len(playlist.songs)
        playlist.songs = [s for s in playlist.songs if s.title != title]
        logger.debug(
            "catalog.remove_song: playlist=%s, title=%s, removed=%d",
            playlist_name,
            title,
            before - len(playlist.songs),
        )

    def favorite_song(self, playlist_name: str, title: str) -> None:
        """
        Toggle the favorite flag of the first song titled `title`.

        Raises:
            NotFoundError: If the playlist or the song doesn't exist.
        """
        playlist = self._require_playlist(playlist_name)
        index = playlist.find_song_index(title)
        if index is None:
            raise NotFoundError("song", title, f'Song "{title}" not found in {playlist_name}')

        song = playlist.songs[index]
        playlist.songs[index] = replace(song, favorite=not song.favorite)
        logger.debug(
            "catalog.favorite_song: playlist=%s, title=%s, favorite: %s -> %s",
            playlist_name,
            title,
            song.favorite,
            not song.favorite,
        )

    def sort_songs(self, playlist_name: str, criterion: SortCriterion) -> None:
        """
        Sort a playlist's songs in ascending order.

        `duration` sorts numerically; `title` and `artist` use locale-style
        string collation. Songs with equal keys keep their relative order.

        Raises:
            ValidationError: If `criterion` is not title, artist or duration.
            NotFoundError: If the playlist doesn't exist.
        """
        criterion = validate_criterion(criterion)
        playlist = self._require_playlist(playlist_name, "List not found!")

        playlist.songs = sorted(playlist.songs, key=song_sort_key(criterion))
        logger.debug("catalog.sort_songs: playlist=%s, criterion=%s", playlist_name, criterion)


def create_catalog() -> MusicCatalog:
    """Return a fresh, empty catalog."""
    return MusicCatalog()
