# app/backend/services/entity_service.py
import logging
from typing import Any, Dict, Generic, List, Mapping, Optional, Tuple, Type, TypeVar
from uuid import UUID

from pydantic import BaseModel

from ..db.db_client import AsyncPostgresClient, DuplicateKeyError
from ..db.tables import EntityTable
from .errors import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

NO_FIELDS_MESSAGE = "No valid fields provided for update."


class EntityService(Generic[ModelT]):
    """
    CRUD over one of the managed tables.

    Subclasses bind the table, the row model, the label used in messages and
    the columns the list search looks at.
    """
    table: EntityTable
    model: Type[ModelT]
    label: str = "Record"
    conflict_message: str = "Record already exists."
    search_columns: Tuple[str, ...] = ()

    def __init__(self, db_client: AsyncPostgresClient):
        self.db_client = db_client

    @property
    def not_found_message(self) -> str:
        return f"{self.label} not found."

    def _to_model(self, record: Mapping[str, Any]) -> ModelT:
        return self.model(**record)

    def matches(self, item: ModelT, term: str) -> bool:
        """Case-insensitive substring match over the search columns."""
        for column in self.search_columns:
            value = getattr(item, column) or ""
            if term in value.lower():
                return True
        return False

    async def list(self, search: Optional[str] = None) -> List[ModelT]:
        records = await self.db_client.list_records(self.table)
        items = [self._to_model(record) for record in records]
        term = (search or "").strip().lower()
        if not term:
            return items
        return [item for item in items if self.matches(item, term)]

    async def get(self, record_id: UUID) -> ModelT:
        record = await self.db_client.get_record(self.table, record_id)
        if record is None:
            raise NotFoundError(self.not_found_message)
        return self._to_model(record)

    async def create(self, values: Dict[str, Any]) -> ModelT:
        record = await self.db_client.add_record(self.table, values)
        if record is None:
            logger.info(f"Duplicate {self.table.natural_key} '{values.get(self.table.natural_key)}' rejected.")
            raise ConflictError(self.conflict_message)
        logger.info(f"{self.label} {record['id']} created.")
        return self._to_model(record)

    async def update(self, record_id: UUID, patch: Dict[str, Any]) -> ModelT:
        patch = {column: value for column, value in patch.items() if column in self.table.columns}
        if not patch:
            raise ValidationError(NO_FIELDS_MESSAGE)
        try:
            record = await self.db_client.update_record(self.table, record_id, patch)
        except DuplicateKeyError:
            raise ConflictError(self.conflict_message)
        if record is None:
            raise NotFoundError(self.not_found_message)
        logger.info(f"{self.label} {record_id} updated ({', '.join(patch)}).")
        return self._to_model(record)

    async def delete(self, record_id: UUID) -> None:
        deleted = await self.db_client.delete_record(self.table, record_id)
        if not deleted:
            raise NotFoundError(self.not_found_message)
        logger.info(f"{self.label} {record_id} deleted.")
