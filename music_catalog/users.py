"""
Deferred user lookup.

Simulates a slow remote lookup. The result is only available once the
lookup has completed: callers either await fetch_user() or pass a callback
to fetch_user_with_callback(). Nothing is returned before completion.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable

from music_catalog.config import UserLookupConfig, get_config
from music_catalog.core import NotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UserRecord:
    id: int
    name: str


async def fetch_user(user_id: int, *, config: UserLookupConfig | None = None) -> UserRecord:
    """
    Look up a user after the configured delay.

    Raises:
        NotFoundError: If no user has this id.
    """
    if config is None:
        config = get_config().users

    logger.debug("fetch_user: id=%s, delay=%.2fs", user_id, config.delay_seconds)
    await asyncio.sleep(config.delay_seconds)

    name = config.known_users.get(user_id)
    if name is None:
        raise NotFoundError("user", user_id)
    return UserRecord(id=user_id, name=name)


def fetch_user_with_callback(
    user_id: int,
    callback: Callable[[UserRecord | None], None],
    *,
    config: UserLookupConfig | None = None,
) -> asyncio.Task[None]:
    """
    Schedule a user lookup on the running loop.

    `callback` receives the user, or None if there is no such user, once the
    lookup finishes. Must be called from inside a running event loop.

    Returns:
        The task running the lookup. Await it to wait for the callback.
    """

    async def _run() -> None:
        try:
            user: UserRecord | None = await fetch_user(user_id, config=config)
        except NotFoundError:
            user = None
        callback(user)

    return asyncio.get_running_loop().create_task(_run())
