"""Single authorization contract for approving changes to a content item."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pending_revisions.models.actor import Actor
    from pending_revisions.models.content import ContentItem
    from pending_revisions.stores import AuthorizationProvider


class AccessGate:
    def __init__(self, provider: AuthorizationProvider) -> None:
        self._provider = provider

    async def can_approve(self, actor: Actor, item: ContentItem) -> bool:
        """Whether ``actor`` may directly accept changes to ``item``."""
        return bool(await self._provider.can_approve(actor.id, item.id))
