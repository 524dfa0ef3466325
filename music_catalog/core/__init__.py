"""
Core domain package.

This package contains the catalog business logic, which is independent of any
driver or presentation layer (demo, CLI, etc.). The goal is to keep this layer
small, testable, and free of I/O.

We intentionally keep exports minimal; consumers should usually import from the
specific module they need (e.g. `music_catalog.core.catalog`).
"""

from __future__ import annotations

from typing import Any

__all__: list[str] = [
    "CoreError",
    "NotFoundError",
    "ValidationError",
]


class CoreError(Exception):
    """Base class for core-layer exceptions."""


class NotFoundError(CoreError):
    """
    Raised when an entity (playlist/song/user) cannot be found.

    Attributes:
        kind: What was looked up ("playlist", "song", "user").
        key: The identifying key that did not match (name, title or id).
    """

    def __init__(self, kind: str, key: Any, message: str | None = None) -> None:
        self.kind = kind
        self.key = key
        super().__init__(message or f'{kind.capitalize()} "{key}" not found')


class ValidationError(CoreError):
    """
    Raised when an argument is outside its allowed set of values.

    Attributes:
        value: The rejected value.
        allowed: The values that would have been accepted.
    """

    def __init__(self, value: Any, allowed: tuple[str, ...]) -> None:
        self.value = value
        self.allowed = allowed
        super().__init__(f"Invalid criterion: {value}. Must be one of: {', '.join(allowed)}")
