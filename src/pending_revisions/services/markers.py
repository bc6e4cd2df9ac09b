"""Consume-once markers recording that an actor just filed a pending save."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pending_revisions.stores import EphemeralStore

DEFAULT_TTL_SECONDS = 15 * 60


def marker_key(content_id: str, actor_id: str) -> str:
    return f"saved_pending_{content_id}_{actor_id}"


class PendingMarkers:
    """Per ``(content, actor)`` flags with a bounded lifetime.

    A crashed request leaves at most a marker that expires after the TTL.
    """

    def __init__(self, store: EphemeralStore, ttl_seconds: int = DEFAULT_TTL_SECONDS) -> None:
        if ttl_seconds <= 0:
            raise ValueError(f"Marker TTL must be positive, got {ttl_seconds}")
        self._store = store
        self._ttl_seconds = ttl_seconds

    async def mark(self, content_id: str, actor_id: str) -> None:
        await self._store.set(marker_key(content_id, actor_id), True, self._ttl_seconds)

    async def is_marked(self, content_id: str, actor_id: str) -> bool:
        return bool(await self._store.get(marker_key(content_id, actor_id)))

    async def clear(self, content_id: str, actor_id: str) -> None:
        await self._store.delete(marker_key(content_id, actor_id))

    async def consume(self, content_id: str, actor_id: str) -> bool:
        """Return whether the marker was set, clearing it if so.

        Of two concurrent consumers only the one whose delete removes the
        entry sees True.
        """
        key = marker_key(content_id, actor_id)
        if not await self._store.get(key):
            return False
        return await self._store.delete(key)
