"""Content item document model — the managed object whose edits are governed."""

from __future__ import annotations

from enum import StrEnum

from pending_revisions.models.base import DocumentBase


class ContentStatus(StrEnum):
    DRAFT = "draft"
    PENDING = "pending"
    PUBLISHED = "published"
    PRIVATE = "private"


class ContentItem(DocumentBase):
    """A content item owned by the host store."""

    content_type: str
    status: ContentStatus = ContentStatus.DRAFT
    title: str = ""
