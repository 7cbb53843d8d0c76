"""
CRUD Service Helper

Shared get/list/delete logic for entity services with uniform fault
translation. Entity services compose one instance and keep their own
create/update rules.
"""
import logging
from typing import Any, Awaitable, Callable, Generic, List, Optional, Type, TypeVar

from userservice.core.entity import SoftDeletable
from userservice.core.errors import EntityErrors
from userservice.core.repository import Repository
from userservice.core.result import Result

TEntity = TypeVar("TEntity")
T = TypeVar("T")


class CrudService(Generic[TEntity]):
    """Generic read/delete operations over a repository."""

    def __init__(
        self,
        entity_type: Type[TEntity],
        repository: Repository[TEntity],
        logger: Optional[logging.Logger] = None
    ):
        self.entity_name = entity_type.__name__
        self.repository = repository
        self.logger = logger or logging.getLogger("userservice.crud")

    async def guard(
        self,
        operation: str,
        action: Callable[[], Awaitable[Result[T]]],
        entity_id: Any = None
    ) -> Result[T]:
        """
        Run an operation, converting any fault into an Unexpected failure.

        The fault is logged with the entity type and id; the returned error
        never carries the exception text.
        """
        try:
            return await action()
        except Exception as e:
            self.logger.error(
                f"[{operation}] Unexpected error for {self.entity_name} id={entity_id}: {e}",
                exc_info=True
            )
            return Result.failure(EntityErrors.unexpected(self.entity_name))

    async def get_by_id(self, entity_id: Any) -> Result[TEntity]:
        """Get an entity by id, or NotFound."""
        async def fetch() -> Result[TEntity]:
            entity = await self.repository.get_by_id(entity_id)
            if entity is None:
                return Result.failure(EntityErrors.not_found(self.entity_name, entity_id))
            return Result.success(entity)

        return await self.guard("CrudService.get_by_id", fetch, entity_id)

    async def get_all(self) -> Result[List[TEntity]]:
        """List every entity. An empty store is a success with an empty list."""
        async def fetch() -> Result[List[TEntity]]:
            entities = await self.repository.get_all()
            return Result.success(list(entities))

        return await self.guard("CrudService.get_all", fetch)

    async def delete(self, entity_id: Any) -> Result[None]:
        """Delete an entity by id. Soft-deletable entities are deactivated."""
        async def remove() -> Result[None]:
            entity = await self.repository.get_by_id(entity_id)
            if entity is None:
                return Result.failure(EntityErrors.not_found(self.entity_name, entity_id))

            if isinstance(entity, SoftDeletable):
                entity.is_active = False

            await self.repository.delete(entity)
            self.logger.info(f"[CrudService.delete] Deleted {self.entity_name} id={entity_id}")
            return Result.success()

        return await self.guard("CrudService.delete", remove, entity_id)
