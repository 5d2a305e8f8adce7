import logging
from typing import Any, Dict, List, Mapping, Optional
from uuid import UUID

import asyncpg

from ..models.db_models import Administrator
from .pool import PostgresPool
from .tables import EntityTable, build_set_clause, record_to_dict

logger = logging.getLogger(__name__)


class DuplicateKeyError(Exception):
    """An UPDATE tried to give a row a natural key that another row already has."""
    pass


class AsyncPostgresClient:
    """
    PostgreSQL client that runs every database operation of the application.
    """
    def __init__(self, pool: PostgresPool):
        self._pool = pool

    # --- Administrators ---

    async def count_administrators(self) -> int:
        query = "SELECT COUNT(*)::int AS count FROM administrators;"
        async with self._pool.acquire() as connection:
            return await connection.fetchval(query)

    async def get_administrator(self, admin_id: UUID) -> Optional[Administrator]:
        query = "SELECT id, username, password_hash, created_at FROM administrators WHERE id = $1;"
        async with self._pool.acquire() as connection:
            record = await connection.fetchrow(query, admin_id)
            return Administrator(**record) if record else None

    async def get_administrator_by_username(self, username: str) -> Optional[Administrator]:
        query = "SELECT id, username, password_hash, created_at FROM administrators WHERE username = $1;"
        async with self._pool.acquire() as connection:
            record = await connection.fetchrow(query, username)
            return Administrator(**record) if record else None

    async def add_administrator(self, username: str, password_hash: str) -> Optional[Administrator]:
        """Inserts an administrator. Returns None if the username is already taken."""
        query = """
            INSERT INTO administrators (username, password_hash)
            VALUES ($1, $2)
            ON CONFLICT (username) DO NOTHING
            RETURNING id, username, password_hash, created_at;
        """
        async with self._pool.acquire() as connection:
            record = await connection.fetchrow(query, username, password_hash)
            return Administrator(**record) if record else None

    # --- Students / Courses / Teachers ---

    async def list_records(self, table: EntityTable) -> List[Dict[str, Any]]:
        query = f"SELECT {table.returning} FROM {table.name} ORDER BY created_at DESC;"
        async with self._pool.acquire() as connection:
            records = await connection.fetch(query)
            return [record_to_dict(record) for record in records]

    async def get_record(self, table: EntityTable, record_id: UUID) -> Optional[Dict[str, Any]]:
        query = f"SELECT {table.returning} FROM {table.name} WHERE id = $1;"
        async with self._pool.acquire() as connection:
            record = await connection.fetchrow(query, record_id)
            return record_to_dict(record) if record else None

    async def add_record(self, table: EntityTable, values: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Inserts a row in a single statement. The unique constraint on the
        natural key decides conflicts, so two concurrent creates with the same
        key cannot both succeed. Returns None when the key is already taken.
        """
        columns = list(table.columns)
        placeholders = ", ".join(f"${i}" for i in range(1, len(columns) + 1))
        query = f"""
            INSERT INTO {table.name} ({", ".join(columns)})
            VALUES ({placeholders})
            ON CONFLICT ({table.natural_key}) DO NOTHING
            RETURNING {table.returning};
        """
        params = [values.get(column) for column in columns]
        async with self._pool.acquire() as connection:
            record = await connection.fetchrow(query, *params)
            return record_to_dict(record) if record else None

    async def update_record(self, table: EntityTable, record_id: UUID, patch: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """Applies a sparse patch. Returns None if no row has the given id."""
        set_clause, values = build_set_clause(table, patch)
        query = f"""
            UPDATE {table.name}
            SET {set_clause}
            WHERE id = ${len(values) + 1}
            RETURNING {table.returning};
        """
        async with self._pool.acquire() as connection:
            try:
                record = await connection.fetchrow(query, *values, record_id)
            except asyncpg.UniqueViolationError as e:
                logger.info(f"Update on {table.name} ({record_id}) collided with an existing {table.natural_key}.")
                raise DuplicateKeyError(str(e)) from e
            return record_to_dict(record) if record else None

    async def delete_record(self, table: EntityTable, record_id: UUID) -> bool:
        query = f"DELETE FROM {table.name} WHERE id = $1;"
        async with self._pool.acquire() as connection:
            status = await connection.execute(query, record_id)
        # asyncpg returns the command tag, e.g. "DELETE 1"
        return status.split()[-1] != "0"
