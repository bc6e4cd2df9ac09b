"""Shared fixtures: in-memory stores and wired services."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from pending_revisions.models.content import ContentItem, ContentStatus
from pending_revisions.models.revision import Revision, newest_first
from pending_revisions.services import Services, build_services

BASE_TIME = datetime(2026, 1, 1, 9, 0, tzinfo=UTC)


def at(minutes: int) -> datetime:
    return BASE_TIME + timedelta(minutes=minutes)


class FakeContentStore:
    def __init__(self) -> None:
        self.items: dict[str, ContentItem] = {}
        self.revisions: dict[str, Revision] = {}
        self.created: list[Revision] = []

    def add_item(self, item: ContentItem) -> ContentItem:
        self.items[item.id] = item
        return item

    def add_revision(self, revision: Revision) -> Revision:
        self.revisions[revision.id] = revision
        return revision

    async def get_item(self, content_id: str) -> ContentItem | None:
        return self.items.get(content_id)

    async def get_content_type(self, content_id: str) -> str | None:
        item = self.items.get(content_id)
        return item.content_type if item else None

    async def list_revisions(
        self,
        content_id: str,
        *,
        author_id: str | None = None,
        after: datetime | None = None,
        exclude_transient: bool = True,
        limit: int | None = None,
    ) -> list[Revision]:
        revisions = [r for r in self.revisions.values() if r.content_id == content_id]
        if author_id is not None:
            revisions = [r for r in revisions if r.author_id == author_id]
        if after is not None:
            revisions = [r for r in revisions if r.created_at > after]
        if exclude_transient:
            revisions = [r for r in revisions if not r.transient]
        revisions = newest_first(revisions)
        return revisions[:limit] if limit is not None else revisions

    async def get_revision(self, revision_id: str, content_id: str) -> Revision | None:
        revision = self.revisions.get(revision_id)
        if revision is None or revision.content_id != content_id:
            return None
        return revision

    async def create_revision(self, revision: Revision) -> Revision:
        self.revisions[revision.id] = revision
        self.created.append(revision)
        return revision


class FakePolicyStore:
    def __init__(self) -> None:
        self.type_defaults: dict[str, str] = {}
        self.overrides: dict[str, str] = {}

    async def get_type_default_mode(self, content_type: str) -> str:
        return self.type_defaults.get(content_type, "")

    async def get_item_override_mode(self, content_id: str) -> str:
        return self.overrides.get(content_id, "")

    async def set_item_override_mode(self, content_id: str, mode: str) -> None:
        self.overrides[content_id] = mode

    async def set_type_default_mode(self, content_type: str, mode: str) -> None:
        self.type_defaults[content_type] = mode


class FakePointerStore:
    def __init__(self) -> None:
        self.pointers: dict[str, str] = {}
        self.writes: list[tuple[str, str]] = []
        self.lose_next_race = False

    async def get(self, content_id: str) -> str | None:
        return self.pointers.get(content_id)

    async def compare_and_set(
        self, content_id: str, expected: str | None, revision_id: str
    ) -> bool:
        if self.lose_next_race:
            self.lose_next_race = False
            return False
        if self.pointers.get(content_id) != expected:
            return False
        if expected != revision_id:
            self.pointers[content_id] = revision_id
            self.writes.append((content_id, revision_id))
        return True


class FakeEphemeralStore:
    def __init__(self) -> None:
        self.entries: dict[str, Any] = {}
        self.ttls: dict[str, int] = {}

    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        self.entries[key] = value
        self.ttls[key] = ttl_seconds

    async def get(self, key: str) -> Any | None:
        return self.entries.get(key)

    async def delete(self, key: str) -> bool:
        return self.entries.pop(key, None) is not None


class FakeAuthorization:
    """Approvers per item, plus actors approved everywhere."""

    def __init__(self) -> None:
        self.global_approvers: set[str] = set()
        self.item_approvers: set[tuple[str, str]] = set()
        self.calls = 0

    async def can_approve(self, actor_id: str, content_id: str) -> bool:
        self.calls += 1
        return actor_id in self.global_approvers or (actor_id, content_id) in self.item_approvers


@pytest.fixture
def contents() -> FakeContentStore:
    return FakeContentStore()


@pytest.fixture
def policies() -> FakePolicyStore:
    return FakePolicyStore()


@pytest.fixture
def pointers() -> FakePointerStore:
    return FakePointerStore()


@pytest.fixture
def ephemeral() -> FakeEphemeralStore:
    return FakeEphemeralStore()


@pytest.fixture
def authz() -> FakeAuthorization:
    return FakeAuthorization()


@pytest.fixture
def services(
    contents: FakeContentStore,
    policies: FakePolicyStore,
    pointers: FakePointerStore,
    ephemeral: FakeEphemeralStore,
    authz: FakeAuthorization,
) -> Services:
    return build_services(
        contents=contents,
        policies=policies,
        pointers=pointers,
        ephemeral=ephemeral,
        authorization=authz,
    )


@pytest.fixture
def item(contents: FakeContentStore) -> ContentItem:
    """A published article created at BASE_TIME."""
    return contents.add_item(
        ContentItem(
            id="post-1",
            content_type="article",
            status=ContentStatus.PUBLISHED,
            created_at=BASE_TIME,
            updated_at=BASE_TIME,
        )
    )


@pytest.fixture
def add_revision(contents: FakeContentStore):
    """Factory adding a revision of post-1 at ``minutes`` after BASE_TIME."""

    def _add(
        revision_id: str,
        minutes: int,
        *,
        author_id: str = "alice",
        transient: bool = False,
        content_id: str = "post-1",
    ) -> Revision:
        return contents.add_revision(
            Revision(
                id=revision_id,
                content_id=content_id,
                author_id=author_id,
                transient=transient,
                created_at=at(minutes),
                updated_at=at(minutes),
            )
        )

    return _add
