"""
Base repository over a single Supabase table

Wraps the query builder calls used by the catalog (insert one, select by id,
select with filter and order, delete by id) and turns PostgREST errors into
StoreError so callers never see client-specific exceptions.

Rows are returned exactly as the store sent them. Each row is checked against
the table's domain model; a mismatch is logged, never raised, because the
store has already committed the write by the time the row comes back.

Author: TM3
Date: 2025-11-02
"""
import logging
from typing import Any, Dict, List, Optional, Type

from postgrest.exceptions import APIError
from pydantic import BaseModel
from pydantic import ValidationError as ModelValidationError
from supabase import Client

from app.core.errors import NotFoundError, StoreError

logger = logging.getLogger(__name__)


def _store_error(e: APIError) -> StoreError:
    return StoreError(getattr(e, "message", None) or None, getattr(e, "code", None))


class SupabaseRepository:
    """
    Row access for one table

    Subclasses set `table` and `model`.
    The client is passed in, never looked up globally.
    """

    table: str = ""
    model: Optional[Type[BaseModel]] = None

    def __init__(self, client: Client, table: Optional[str] = None):
        self.client = client
        if table:
            self.table = table

    def _check_row(self, row: Dict[str, Any]) -> Dict[str, Any]:
        """Log rows that don't match the domain model; return the row untouched"""
        if self.model is not None:
            try:
                self.model.model_validate(row)
            except ModelValidationError as e:
                logger.warning(
                    f"Row {row.get('id')} in {self.table} does not match "
                    f"{self.model.__name__}: {e.error_count()} error(s)"
                )
        return row

    def _query(self):
        return self.client.table(self.table)

    def insert_one(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a record and return the stored row

        Raises:
            StoreError: The store rejected the insert or returned no row
        """
        try:
            response = self._query().insert(record).execute()
        except APIError as e:
            raise _store_error(e) from e

        rows = response.data or []
        if not rows:
            raise StoreError(None)

        return self._check_row(rows[0])

    def find_by_id(self, record_id: str) -> Optional[Dict[str, Any]]:
        """Row with this id or None"""
        try:
            response = self._query().select("*").eq("id", record_id).limit(1).execute()
        except APIError as e:
            raise _store_error(e) from e

        rows = response.data or []
        if not rows:
            return None
        return self._check_row(rows[0])

    def find_all(
        self,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = True,
    ) -> List[Dict[str, Any]]:
        """
        Rows matching equality filters

        Args:
            filters: column -> value, combined with AND
            order_by: Column to sort on (optional)
            descending: Sort direction for order_by
        """
        query = self._query().select("*")
        for column, value in (filters or {}).items():
            query = query.eq(column, value)
        if order_by:
            query = query.order(order_by, desc=descending)

        try:
            response = query.execute()
        except APIError as e:
            raise _store_error(e) from e

        return [self._check_row(row) for row in response.data or []]

    def delete_by_id(self, record_id: str) -> Dict[str, Any]:
        """
        Delete one row by id and return it

        Raises:
            NotFoundError: No row had this id
            StoreError: The store rejected the delete
        """
        try:
            response = self._query().delete().eq("id", record_id).execute()
        except APIError as e:
            raise _store_error(e) from e

        rows = response.data or []
        if not rows:
            raise NotFoundError(self.table, record_id)

        return self._check_row(rows[0])
