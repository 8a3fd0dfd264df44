"""
Service result envelope

Every gateway call returns `{success, data, error}`. `kind` tells the HTTP
layer which failure it was and is never serialized.

Author: TM3
Date: 2025-11-02
"""
from typing import Any, Optional

from pydantic import BaseModel, Field

KIND_VALIDATION = "validation"
KIND_NOT_FOUND = "not_found"
KIND_STORE = "store"
KIND_UNEXPECTED = "unexpected"


class ServiceResult(BaseModel):
    """Uniform result of a CatalogService operation"""

    success: bool
    data: Any = None
    error: Optional[str] = None
    kind: Optional[str] = Field(None, exclude=True)

    @classmethod
    def ok(cls, data: Any) -> "ServiceResult":
        return cls(success=True, data=data, error=None)

    @classmethod
    def fail(cls, error: str, kind: str) -> "ServiceResult":
        return cls(success=False, data=None, error=error, kind=kind)
