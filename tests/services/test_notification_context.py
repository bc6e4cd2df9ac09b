"""Tests for NotificationContextBuilder notice selection."""

from pending_revisions.models.actor import Actor
from pending_revisions.models.notice import NoticeKind

ALICE = Actor(id="alice")


async def test_none_for_open_item_without_pending(services, policies, item) -> None:
    policies.type_defaults["article"] = "open"

    notice = await services.notices.context_for(item, ALICE)

    assert notice.kind == NoticeKind.NONE


async def test_marker_wins_and_is_consumed_once(services, policies, item) -> None:
    policies.type_defaults["article"] = "locked"
    await services.markers.mark(item.id, ALICE.id)

    first = await services.notices.context_for(item, ALICE)
    second = await services.notices.context_for(item, ALICE)

    assert first.kind == NoticeKind.JUST_FILED_AS_PENDING
    assert first.target_revision_id == item.id
    assert second.kind == NoticeKind.LOCKED


async def test_marker_is_per_actor(services, policies, item) -> None:
    policies.type_defaults["article"] = "open"
    await services.markers.mark(item.id, "bob")

    notice = await services.notices.context_for(item, ALICE)

    assert notice.kind == NoticeKind.NONE
    assert await services.markers.is_marked(item.id, "bob") is True


async def test_requires_approval_for_incapable_actor(services, policies, item) -> None:
    policies.type_defaults["article"] = "approval-required"

    notice = await services.notices.context_for(item, ALICE)

    assert notice.kind == NoticeKind.REQUIRES_APPROVAL


async def test_locked_for_incapable_actor(services, policies, item) -> None:
    policies.type_defaults["article"] = "open"
    policies.overrides[item.id] = "locked"

    notice = await services.notices.context_for(item, ALICE)

    assert notice.kind == NoticeKind.LOCKED


async def test_capable_actor_gets_no_mode_notice(services, policies, authz, item) -> None:
    policies.type_defaults["article"] = "locked"
    authz.global_approvers.add("alice")

    notice = await services.notices.context_for(item, ALICE)

    assert notice.kind == NoticeKind.NONE
    assert notice.viewer_can_approve is True


async def test_diverged_from_accepted(services, policies, pointers, authz, item, add_revision) -> None:
    policies.type_defaults["article"] = "approval-required"
    authz.global_approvers.add("alice")
    add_revision("r1", 5)
    add_revision("r2", 10, author_id="bob")
    add_revision("auto", 11, transient=True)
    pointers.pointers[item.id] = "r1"

    notice = await services.notices.context_for(item, ALICE)

    assert notice.kind == NoticeKind.DIVERGED_FROM_ACCEPTED
    assert notice.diff_from == "r1"
    assert notice.diff_to == "r2"
    assert notice.viewer_can_approve is True


async def test_diverged_for_viewer_without_capability_in_open_mode(
    services, policies, pointers, item, add_revision
) -> None:
    policies.type_defaults["article"] = "open"
    add_revision("r1", 5)
    add_revision("r2", 10)
    pointers.pointers[item.id] = "r1"

    notice = await services.notices.context_for(item, ALICE)

    assert notice.kind == NoticeKind.DIVERGED_FROM_ACCEPTED
    assert notice.viewer_can_approve is False


async def test_mode_notice_takes_precedence_over_divergence(
    services, policies, pointers, item, add_revision
) -> None:
    policies.type_defaults["article"] = "approval-required"
    add_revision("r1", 5)
    add_revision("r2", 10)
    pointers.pointers[item.id] = "r1"

    notice = await services.notices.context_for(item, ALICE)

    assert notice.kind == NoticeKind.REQUIRES_APPROVAL
