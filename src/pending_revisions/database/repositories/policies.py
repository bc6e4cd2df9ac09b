"""Repository for the policies container (partitioned by /id)."""

from __future__ import annotations

from pending_revisions.database.repositories.base import BaseRepository
from pending_revisions.models.policy import EditingPolicy, PolicyScope, policy_id


class PolicyRepository(BaseRepository[EditingPolicy]):
    """Stores raw editing-mode strings per content type and per item."""

    container_name = "policies"
    model_class = EditingPolicy

    async def _get_mode(self, scope: PolicyScope, target: str) -> str:
        pid = policy_id(scope, target)
        policy = await self.get(pid, pid)
        return policy.mode if policy else ""

    async def _set_mode(self, scope: PolicyScope, target: str, mode: str) -> None:
        pid = policy_id(scope, target)
        policy = await self.get(pid, pid) or EditingPolicy(id=pid, scope=scope, target=target)
        policy.mode = mode
        await self.upsert(policy)

    async def get_type_default_mode(self, content_type: str) -> str:
        return await self._get_mode(PolicyScope.CONTENT_TYPE, content_type)

    async def get_item_override_mode(self, content_id: str) -> str:
        return await self._get_mode(PolicyScope.ITEM, content_id)

    async def set_type_default_mode(self, content_type: str, mode: str) -> None:
        await self._set_mode(PolicyScope.CONTENT_TYPE, content_type, mode)

    async def set_item_override_mode(self, content_id: str, mode: str) -> None:
        await self._set_mode(PolicyScope.ITEM, content_id, mode)
