"""
Repository Port

Data access capability consumed by the service layer.
Implementation: userservice/modules/users/repositories/
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, List, Optional, TypeVar

TEntity = TypeVar("TEntity")


class Repository(ABC, Generic[TEntity]):
    @abstractmethod
    async def get_by_id(self, entity_id: Any) -> Optional[TEntity]: ...

    @abstractmethod
    async def get_all(self) -> List[TEntity]: ...

    @abstractmethod
    async def find(self, predicate: Callable[[TEntity], bool]) -> List[TEntity]: ...

    @abstractmethod
    async def add(self, entity: TEntity) -> None: ...

    @abstractmethod
    async def update(self, entity: TEntity) -> None: ...

    @abstractmethod
    async def delete(self, entity: TEntity) -> None: ...
