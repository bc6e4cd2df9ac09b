"""Content routes — editing mode, save submission, pending state, notices."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from pending_revisions.auth.middleware import current_actor
from pending_revisions.errors import NotFoundError
from pending_revisions.models.actor import Actor
from pending_revisions.models.controls import EditorControls
from pending_revisions.models.decision import SaveDecision, SaveOutcome
from pending_revisions.models.editing_mode import EditingMode
from pending_revisions.models.notice import Notice
from pending_revisions.models.pending import PendingSummary, RevisionState
from pending_revisions.models.revision import Revision

if TYPE_CHECKING:
    from pending_revisions.models.content import ContentItem
    from pending_revisions.services import Services

router = APIRouter(prefix="/content", tags=["content"])
logger = logging.getLogger(__name__)

ActorDep = Annotated[Actor, Depends(current_actor)]


class EditingModeView(BaseModel):
    content_id: str
    editing_mode: EditingMode


class EditingModeUpdate(BaseModel):
    mode: str


class EditingModeSaved(BaseModel):
    content_id: str
    saved: bool
    editing_mode: EditingMode


class RevisionSubmission(BaseModel):
    content: dict = Field(default_factory=dict)
    summary: str = ""
    save_as_pending: bool = False


class PendingView(BaseModel):
    summary: PendingSummary
    revisions: list[Revision]


def _services(request: Request) -> Services:
    return request.app.state.services


async def _load_item(services: Services, content_id: str) -> ContentItem:
    item = await services.contents.get_item(content_id)
    if item is None:
        raise NotFoundError("content", content_id)
    return item


@router.get("/{content_id}/editing-mode")
async def get_editing_mode(request: Request, content_id: str, actor: ActorDep) -> EditingModeView:  # noqa: ARG001
    """Return the effective editing mode of an item."""
    services = _services(request)
    item = await _load_item(services, content_id)
    return EditingModeView(content_id=item.id, editing_mode=await services.resolver.resolve(item))


@router.put("/{content_id}/editing-mode")
async def save_editing_mode(
    request: Request,
    content_id: str,
    body: EditingModeUpdate,
    actor: ActorDep,
) -> EditingModeSaved:
    """Switch an item's editing mode. Unrecognized modes are ignored."""
    services = _services(request)
    item = await _load_item(services, content_id)
    if not await services.gate.can_approve(actor, item):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not allowed to change the editing mode",
        )
    saved = await services.resolver.save_item_mode(item, body.mode)
    return EditingModeSaved(
        content_id=item.id,
        saved=saved,
        editing_mode=await services.resolver.resolve(item),
    )


@router.post("/{content_id}/revisions", response_model=SaveDecision)
async def submit_revision(
    request: Request,
    content_id: str,
    body: RevisionSubmission,
    actor: ActorDep,
) -> SaveDecision | JSONResponse:
    """Save a new revision; it is accepted, filed as pending, or rejected."""
    services = _services(request)
    item = await _load_item(services, content_id)
    revision = Revision(
        content_id=item.id,
        author_id=actor.id,
        content=body.content,
        summary=body.summary,
    )
    decision = await services.engine.submit(
        item, actor, revision, save_as_pending=body.save_as_pending
    )
    if decision.outcome == SaveOutcome.REJECTED:
        logger.info("Revision rejected — content=%s actor=%s", item.id, actor.id)
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content=decision.model_dump(mode="json"),
        )
    return decision


@router.get("/{content_id}/pending")
async def get_pending(request: Request, content_id: str, actor: ActorDep) -> PendingView:  # noqa: ARG001
    """Return pending revisions and the accepted-to-latest diff target."""
    services = _services(request)
    item = await _load_item(services, content_id)
    return PendingView(
        summary=await services.detector.summary(item),
        revisions=await services.detector.pending_revisions(item),
    )


@router.get("/{content_id}/revisions/states")
async def get_revision_states(
    request: Request,
    content_id: str,
    actor: ActorDep,  # noqa: ARG001
) -> list[RevisionState]:
    """Flag each non-transient revision as current (accepted) or pending."""
    services = _services(request)
    item = await _load_item(services, content_id)
    revisions = await services.contents.list_revisions(item.id, exclude_transient=True)
    return await services.detector.annotate(item, revisions)


@router.get("/{content_id}/notice")
async def get_notice(request: Request, content_id: str, actor: ActorDep) -> Notice:
    """Return the notice to show this actor; consumes a just-saved marker."""
    services = _services(request)
    item = await _load_item(services, content_id)
    return await services.notices.context_for(item, actor)


@router.get("/{content_id}/controls")
async def get_controls(request: Request, content_id: str, actor: ActorDep) -> EditorControls:
    services = _services(request)
    item = await _load_item(services, content_id)
    return await services.controls.controls_for(item, actor)
