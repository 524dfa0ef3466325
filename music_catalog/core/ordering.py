"""
Sort key helpers for playlist song ordering.

These helpers centralize the translation from a sort criterion into a key
function so the catalog doesn't need to know how each field compares.

Important:
- Criteria are a small whitelist (see SortCriterion). Anything else is
  rejected with ValidationError before a playlist is touched.
- String fields compare with a locale-style collation: letters first, then
  accents, then case (lowercase before uppercase). Plain code-point ordering
  would put "Zebra" before "apple".
"""

from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING, Any, Callable, Literal

from music_catalog.core import ValidationError

if TYPE_CHECKING:
    from music_catalog.core.catalog import Song

SortCriterion = Literal[
    "title",
    "artist",
    "duration",
]

SORT_CRITERIA: tuple[str, ...] = ("title", "artist", "duration")


def _strip_marks(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def collation_key(text: str) -> tuple[str, str, str]:
    """
    Return a key that orders strings the way a human-facing locale would.

    The key has three levels:
    1. base letters, case-folded, accents removed ("Émile" ~ "emile")
    2. accents ("emile" < "émile")
    3. case, lowercase first ("abc" < "Abc")
    """
    folded = text.casefold()
    return (
        _strip_marks(folded),
        unicodedata.normalize("NFKD", folded),
        text.swapcase(),
    )


def validate_criterion(criterion: Any) -> SortCriterion:
    """
    Check that `criterion` is one of SORT_CRITERIA.

    Raises:
        ValidationError: If the criterion is not allowed.
    """
    if criterion not in SORT_CRITERIA:
        raise ValidationError(criterion, SORT_CRITERIA)
    return criterion


def song_sort_key(criterion: SortCriterion) -> Callable[[Song], Any]:
    """Return the key function used to sort songs by `criterion`."""
    criterion = validate_criterion(criterion)

    if criterion == "duration":
        return lambda song: song.duration
    if criterion == "artist":
        return lambda song: collation_key(song.artist)
    return lambda song: collation_key(song.title)
