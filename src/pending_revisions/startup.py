"""Startup helpers — database and service wiring for the web process."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from azure.cosmos import PartitionKey
from azure.cosmos.exceptions import CosmosHttpResponseError

from pending_revisions.database.client import CosmosClient
from pending_revisions.database.content_store import CosmosContentStore
from pending_revisions.database.repositories import (
    GrantRepository,
    MarkerRepository,
    PointerRepository,
    PolicyRepository,
)
from pending_revisions.services import Services, build_services

if TYPE_CHECKING:
    from azure.cosmos.aio import DatabaseProxy

    from pending_revisions.config import Settings

logger = logging.getLogger(__name__)

# container name -> (partition key path, default ttl; -1 enables per-item ttl)
CONTAINERS: dict[str, tuple[str, int | None]] = {
    "content_items": ("/id", None),
    "revisions": ("/content_id", None),
    "policies": ("/id", None),
    "accepted_pointers": ("/id", None),
    "ephemeral": ("/id", -1),
    "grants": ("/actor_id", None),
}


async def ensure_containers(database: DatabaseProxy) -> None:
    """Create any missing containers with their partition keys."""
    for name, (path, default_ttl) in CONTAINERS.items():
        kwargs = {"default_ttl": default_ttl} if default_ttl is not None else {}
        await database.create_container_if_not_exists(
            id=name, partition_key=PartitionKey(path=path), **kwargs
        )
        logger.debug("Container ready — name=%s partition_key=%s", name, path)


async def init_database(settings: Settings) -> CosmosClient:
    """Connect to Cosmos DB and make sure the containers exist.

    Raises ``ConnectionError`` when the account cannot be reached.
    """
    cosmos = CosmosClient(settings.cosmos)
    await cosmos.initialize()
    try:
        await ensure_containers(cosmos.database)
    except CosmosHttpResponseError as exc:
        await cosmos.close()
        msg = f"Cosmos DB unavailable at {settings.cosmos.endpoint}: {exc.message}"
        raise ConnectionError(msg) from exc
    logger.info("Cosmos DB ready — database=%s", settings.cosmos.database)
    return cosmos


def init_services(settings: Settings, database: DatabaseProxy) -> Services:
    """Wire the decision services onto the Cosmos repositories."""
    return build_services(
        contents=CosmosContentStore(database),
        policies=PolicyRepository(database),
        pointers=PointerRepository(database),
        ephemeral=MarkerRepository(database),
        authorization=GrantRepository(database),
        marker_ttl_seconds=settings.editing.marker_ttl_seconds,
    )
