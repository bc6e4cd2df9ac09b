"""Cosmos DB access layer."""

from pending_revisions.database.client import CosmosClient
from pending_revisions.database.content_store import CosmosContentStore

__all__ = ["CosmosClient", "CosmosContentStore"]
