"""
SQL Repository

Table-backed implementation of the repository port on top of the shared
``databases`` connection. Subclasses describe the table and the row mapping.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

from databases import Database

from userservice.core.repository import Repository
from userservice.modules.database import database

TEntity = TypeVar("TEntity")

logger = logging.getLogger("userservice.repository")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SqlRepository(Repository[TEntity]):
    """Generic repository for one table keyed by a text ``id`` column."""

    table: str = ""
    # Columns written on update, in addition to updated_at.
    mutable_columns: Sequence[str] = ()
    columns: Sequence[str] = ()

    def __init__(self, db: Optional[Database] = None):
        self.db = db or database

    def to_entity(self, row: Dict[str, Any]) -> TEntity:
        raise NotImplementedError

    def to_values(self, entity: TEntity) -> Dict[str, Any]:
        raise NotImplementedError

    @property
    def _select(self) -> str:
        return f"SELECT {', '.join(self.columns)} FROM {self.table}"

    async def fetch_one(self, where: str, values: Dict[str, Any]) -> Optional[TEntity]:
        row = await self.db.fetch_one(f"{self._select} WHERE {where}", values)
        if not row:
            return None
        return self.to_entity(dict(row._mapping))

    async def get_by_id(self, entity_id: Any) -> Optional[TEntity]:
        """Get entity by ID."""
        return await self.fetch_one("id = :id", {"id": str(entity_id)})

    async def get_all(self) -> List[TEntity]:
        """List all rows, oldest first."""
        rows = await self.db.fetch_all(f"{self._select} ORDER BY created_at")
        return [self.to_entity(dict(row._mapping)) for row in rows]

    async def find(self, predicate: Callable[[TEntity], bool]) -> List[TEntity]:
        """Filter mapped entities with a Python predicate."""
        return [entity for entity in await self.get_all() if predicate(entity)]

    async def add(self, entity: TEntity) -> None:
        """Insert a new row, stamping created_at and updated_at."""
        now = utc_now()
        entity.created_at = now
        entity.updated_at = now

        values = self.to_values(entity)
        names = list(values.keys())
        query = f"""
            INSERT INTO {self.table} ({', '.join(names)})
            VALUES ({', '.join(':' + name for name in names)})
        """
        async with self.db.transaction():
            await self.db.execute(query, values)
        logger.debug(f"[SqlRepository.add] {self.table} id={values.get('id')}")

    async def update(self, entity: TEntity) -> None:
        """Write mutable columns and refresh updated_at. created_at is never written."""
        entity.updated_at = utc_now()

        values = self.to_values(entity)
        set_clauses = [f"{column} = :{column}" for column in self.mutable_columns]
        set_clauses.append("updated_at = :updated_at")
        params = {column: values[column] for column in self.mutable_columns}
        params["updated_at"] = values["updated_at"]
        params["id"] = values["id"]

        query = f"UPDATE {self.table} SET {', '.join(set_clauses)} WHERE id = :id"
        async with self.db.transaction():
            await self.db.execute(query, params)
        logger.debug(f"[SqlRepository.update] {self.table} id={values['id']}")

    async def delete(self, entity: TEntity) -> None:
        """Soft delete (set is_active = false)."""
        entity.is_active = False
        entity.updated_at = utc_now()

        query = f"""
            UPDATE {self.table}
            SET is_active = :is_active, updated_at = :updated_at
            WHERE id = :id
        """
        async with self.db.transaction():
            await self.db.execute(query, {
                "is_active": False,
                "updated_at": entity.updated_at,
                "id": str(entity.id)
            })
        logger.debug(f"[SqlRepository.delete] {self.table} id={entity.id}")
