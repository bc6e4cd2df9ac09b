"""Generic repository over a single Cosmos DB container."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, cast

from azure.cosmos.exceptions import CosmosResourceNotFoundError

from pending_revisions.models.base import DocumentBase

if TYPE_CHECKING:
    from azure.cosmos.aio import DatabaseProxy

T = TypeVar("T", bound=DocumentBase)


def _scope(partition_key: str | None) -> dict[str, Any]:
    return {} if partition_key is None else {"partition_key": partition_key}


class BaseRepository(Generic[T]):
    """CRUD helpers shared by every container repository."""

    container_name: ClassVar[str]
    model_class: type[T]

    def __init__(self, database: DatabaseProxy) -> None:
        self._container = database.get_container_client(self.container_name)

    def _to_body(self, item: T) -> dict[str, Any]:
        return item.model_dump(mode="json", exclude_none=True)

    async def create(self, item: T) -> T:
        """Insert a new document."""
        await self._container.create_item(body=self._to_body(item))
        return item

    async def get(self, item_id: str, partition_key: str) -> T | None:
        """Read a document by id, returning None when missing or soft-deleted."""
        try:
            data = cast(
                "dict[str, Any]",
                await self._container.read_item(item=item_id, partition_key=partition_key),
            )
        except CosmosResourceNotFoundError:
            return None
        if data.get("deleted_at") is not None:
            return None
        return self.model_class.model_validate(data)

    async def upsert(self, item: T) -> T:
        item.updated_at = datetime.now(UTC)
        await self._container.upsert_item(body=self._to_body(item))
        return item

    async def query(
        self,
        query: str,
        parameters: list[dict[str, Any]] | None = None,
        *,
        partition_key: str | None = None,
    ) -> list[T]:
        """Run a SQL query and validate each result into the model class."""
        items: list[T] = []
        async for data in self._container.query_items(
            query=query, parameters=parameters or [], **_scope(partition_key)
        ):
            items.append(self.model_class.model_validate(data))
        return items
