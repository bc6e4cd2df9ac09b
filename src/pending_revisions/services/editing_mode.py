"""Effective editing-mode resolution and the editing-mode settings entry points."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pending_revisions.models.editing_mode import ITEM_SELECTABLE_MODES, EditingMode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pending_revisions.models.content import ContentItem
    from pending_revisions.stores import PolicyStore

logger = logging.getLogger(__name__)


class EditingModeResolver:
    """Combine the content type default and the item override into one mode.

    Unrecognized stored values never raise: a bad type default behaves like
    ``off`` (everything open) and a bad item override falls back to the type
    default.
    """

    def __init__(self, policies: PolicyStore) -> None:
        self._policies = policies

    async def type_default(self, content_type: str) -> EditingMode | None:
        """Return the type default when it enables editing control, else None."""
        raw = await self._policies.get_type_default_mode(content_type)
        mode = EditingMode.parse(raw)
        if mode is None or mode == EditingMode.OFF:
            return None
        return mode

    async def is_enabled(self, content_type: str) -> bool:
        return await self.type_default(content_type) is not None

    async def enabled_content_types(self, content_types: Iterable[str]) -> list[str]:
        return [t for t in content_types if await self.is_enabled(t)]

    async def resolve(self, item: ContentItem) -> EditingMode:
        default = await self.type_default(item.content_type)
        if default is None:
            return EditingMode.OPEN

        raw_override = await self._policies.get_item_override_mode(item.id)
        override = EditingMode.parse(raw_override)
        if override is None:
            if raw_override:
                logger.debug(
                    "Ignoring unrecognized item editing mode — content=%s mode=%r",
                    item.id,
                    raw_override,
                )
            return default
        return override

    async def save_item_mode(self, item: ContentItem, raw_mode: object) -> bool:
        """Store an item override. Unrecognized or unselectable modes are ignored."""
        mode = EditingMode.parse(raw_mode)
        if mode not in ITEM_SELECTABLE_MODES:
            logger.info("Editing mode not saved — content=%s mode=%r", item.id, raw_mode)
            return False
        if not await self.is_enabled(item.content_type):
            logger.info(
                "Editing mode not saved, content type disabled — content=%s type=%s",
                item.id,
                item.content_type,
            )
            return False
        await self._policies.set_item_override_mode(item.id, mode.value)
        logger.info("Editing mode saved — content=%s mode=%s", item.id, mode)
        return True

    async def save_type_default(self, content_type: str, raw_mode: object) -> bool:
        """Store a content type default. Unrecognized modes are ignored."""
        mode = EditingMode.parse(raw_mode)
        if mode is None:
            logger.info("Default editing mode not saved — type=%s mode=%r", content_type, raw_mode)
            return False
        await self._policies.set_type_default_mode(content_type, mode.value)
        logger.info("Default editing mode saved — type=%s mode=%s", content_type, mode)
        return True
