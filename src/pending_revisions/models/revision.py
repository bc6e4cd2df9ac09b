"""Revision document model — immutable content snapshots for content items."""

from __future__ import annotations

from pydantic import Field

from pending_revisions.models.base import DocumentBase


class Revision(DocumentBase):
    """An immutable snapshot of a content item at a point in time.

    Transient revisions are autosave-style snapshots: they are never pending
    and never accepted.
    """

    content_id: str
    author_id: str
    transient: bool = False
    content: dict = Field(default_factory=dict)
    summary: str = ""

    @property
    def sort_key(self) -> tuple:
        return (self.created_at, self.id)


def newest_first(revisions: list[Revision]) -> list[Revision]:
    """Order revisions by creation time, newest first, ties broken by id."""
    return sorted(revisions, key=lambda r: r.sort_key, reverse=True)
