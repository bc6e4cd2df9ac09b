"""Accepted revision pointer document."""

from __future__ import annotations

from pending_revisions.models.base import DocumentBase


class AcceptedPointer(DocumentBase):
    """Points a content item (``id``) at its accepted revision."""

    revision_id: str
