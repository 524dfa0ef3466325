"""
Music Catalog - an in-memory catalog of playlists and songs.

A catalog holds named playlists; each playlist holds an ordered list of
songs that can be added, removed, favorited and sorted.
"""

__version__ = "0.1.0"
__author__ = "Music Catalog Contributors"
__license__ = "GPL-2.0"

from music_catalog.core import CoreError, NotFoundError, ValidationError
from music_catalog.core.catalog import MusicCatalog, Playlist, Song, create_catalog

__all__ = [
    "CoreError",
    "MusicCatalog",
    "NotFoundError",
    "Playlist",
    "Song",
    "ValidationError",
    "create_catalog",
    "__version__",
]
