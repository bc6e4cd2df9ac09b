"""Editing affordances that apply to a viewer of a content item."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from pending_revisions.models.editing_mode import EditingMode


class SubmitAction(StrEnum):
    UPDATE = "update"
    SUGGEST_EDIT = "suggest_edit"
    HIDDEN = "hidden"


class EditorControls(BaseModel):
    content_id: str
    editing_mode: EditingMode
    can_approve: bool = False
    submit_action: SubmitAction = SubmitAction.UPDATE
    show_save_as_pending: bool = False
    can_change_mode: bool = False
    mode_choices: list[EditingMode] = Field(default_factory=list)
