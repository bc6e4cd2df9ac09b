"""Capability grant document — resource-scoped approval rights."""

from __future__ import annotations

from pending_revisions.models.base import DocumentBase

ACCEPT_REVISIONS = "accept_revisions"


class Grant(DocumentBase):
    """Grants ``capability`` to an actor, for one item or (``content_id`` None) for all."""

    actor_id: str
    capability: str = ACCEPT_REVISIONS
    content_id: str | None = None
