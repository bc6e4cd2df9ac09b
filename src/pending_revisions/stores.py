"""Store interfaces the decision services depend on.

The Cosmos DB repositories in ``pending_revisions.database`` implement these;
tests and embedding hosts may supply their own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import datetime

    from pending_revisions.models.content import ContentItem
    from pending_revisions.models.revision import Revision


@runtime_checkable
class ContentStore(Protocol):
    """Read access to content items and their revision history."""

    async def get_item(self, content_id: str) -> ContentItem | None: ...

    async def get_content_type(self, content_id: str) -> str | None: ...

    async def list_revisions(
        self,
        content_id: str,
        *,
        author_id: str | None = None,
        after: datetime | None = None,
        exclude_transient: bool = True,
        limit: int | None = None,
    ) -> list[Revision]:
        """Return revisions of an item, newest first."""
        ...

    async def get_revision(self, revision_id: str, content_id: str) -> Revision | None: ...

    async def create_revision(self, revision: Revision) -> Revision: ...


@runtime_checkable
class PolicyStore(Protocol):
    """Raw editing-mode settings per content type and per item."""

    async def get_type_default_mode(self, content_type: str) -> str: ...

    async def get_item_override_mode(self, content_id: str) -> str: ...

    async def set_item_override_mode(self, content_id: str, mode: str) -> None: ...

    async def set_type_default_mode(self, content_type: str, mode: str) -> None: ...


@runtime_checkable
class PointerStore(Protocol):
    """Accepted revision pointer per content item."""

    async def get(self, content_id: str) -> str | None: ...

    async def compare_and_set(
        self, content_id: str, expected: str | None, revision_id: str
    ) -> bool:
        """Set the pointer only if it still holds ``expected``."""
        ...


@runtime_checkable
class EphemeralStore(Protocol):
    """Short-lived key/value entries that expire on their own."""

    async def set(self, key: str, value: Any, ttl_seconds: int) -> None: ...

    async def get(self, key: str) -> Any | None: ...

    async def delete(self, key: str) -> bool: ...


@runtime_checkable
class AuthorizationProvider(Protocol):
    """Answers whether an actor may approve changes to a specific item."""

    async def can_approve(self, actor_id: str, content_id: str) -> bool: ...
