"""
Error taxonomy for the catalog backend

- ValidationError: caller data breaks a field rule (recoverable, not logged as error)
- StoreError: the Supabase call itself failed
- NotFoundError: a get/delete by id matched no row

The gateway (CatalogService) turns these into envelopes; app/main.py catches
the few raised before the gateway runs (e.g. store not configured).

Author: TM3
Date: 2025-11-02
"""
from typing import Optional


class CatalogError(Exception):
    """Base class for all catalog errors"""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    """
    Raised by the shaping layer when input violates a field constraint

    Attributes:
        field: Name of the offending field (e.g. "rating")
        message: Human readable rule description (e.g. "invalid rating")
    """

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field

    def __repr__(self) -> str:
        return f"ValidationError(field={self.field!r}, message={self.message!r})"


class StoreError(CatalogError):
    """Raised when the record store reports a failure"""

    def __init__(self, message: Optional[str] = None, code: Optional[str] = None):
        super().__init__(message)
        self.code = code


class NotFoundError(CatalogError):
    """Raised when an id-keyed store call matched no row"""

    def __init__(self, table: str, record_id: str):
        super().__init__(f"{record_id} not found in {table}")
        self.table = table
        self.record_id = record_id
