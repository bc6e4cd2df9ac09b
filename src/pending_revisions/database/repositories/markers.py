"""Repository for the ephemeral container (partitioned by /id, TTL enabled)."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from azure.cosmos.exceptions import CosmosResourceNotFoundError
from pydantic import Field

from pending_revisions.database.repositories.base import BaseRepository
from pending_revisions.models.base import DocumentBase


class EphemeralEntry(DocumentBase):
    """A short-lived value. ``ttl`` is honoured by Cosmos per item."""

    value: Any = None
    ttl: int = Field(gt=0)
    expires_at: datetime

    def is_active(self, now: datetime) -> bool:
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=UTC)
        return now < expires_at


class MarkerRepository(BaseRepository[EphemeralEntry]):
    """Key/value entries that expire after a fixed TTL.

    Expiry is enforced twice: Cosmos removes the document once ``ttl`` elapses,
    and reads ignore entries past ``expires_at`` in case removal lags.
    """

    container_name = "ephemeral"
    model_class = EphemeralEntry

    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        now = datetime.now(UTC)
        entry = EphemeralEntry(
            id=key,
            value=value,
            ttl=ttl_seconds,
            expires_at=now + timedelta(seconds=ttl_seconds),
        )
        await self.upsert(entry)

    async def get(self, key: str) -> Any | None:  # type: ignore[override]
        entry = await super().get(key, key)
        if entry is None or not entry.is_active(datetime.now(UTC)):
            return None
        return entry.value

    async def delete(self, key: str) -> bool:
        """Remove an entry. False when it was already gone."""
        try:
            await self._container.delete_item(item=key, partition_key=key)
        except CosmosResourceNotFoundError:
            return False
        return True
