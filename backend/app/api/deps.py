"""
Shared FastAPI dependencies and response helpers for the API routers
"""
from fastapi import Depends
from fastapi.responses import JSONResponse
from supabase import Client

from app.core.config import Settings, get_settings
from app.core.database import get_supabase
from app.domain.result import (
    KIND_NOT_FOUND,
    KIND_STORE,
    KIND_UNEXPECTED,
    KIND_VALIDATION,
    ServiceResult,
)
from app.services.catalog_service import CatalogService

_FAILURE_STATUS = {
    KIND_VALIDATION: 400,
    KIND_NOT_FOUND: 404,
    KIND_STORE: 500,
    KIND_UNEXPECTED: 500,
}


def get_catalog_service(
    client: Client = Depends(get_supabase),
    settings: Settings = Depends(get_settings),
) -> CatalogService:
    """FastAPI dependency building the catalog gateway over the shared client"""
    return CatalogService(
        client,
        shops_table=settings.SHOPS_TABLE,
        orders_table=settings.ORDERS_TABLE,
    )


def envelope_response(result: ServiceResult, success_status: int = 200) -> JSONResponse:
    """Serialize the envelope; the failure kind picks the status code"""
    if result.success:
        status_code = success_status
    else:
        status_code = _FAILURE_STATUS.get(result.kind, 500)
    return JSONResponse(status_code=status_code, content=result.model_dump())
