"""
Coffee Shops API Endpoints
List, create, show and delete coffee shops

Every response body is the {success, data, error} envelope.

Author: TM3
Date: 2025-11-02
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from app.api.deps import envelope_response, get_catalog_service
from app.services.catalog_service import CatalogService

router = APIRouter()


@router.get("/")
def list_shops(service: CatalogService = Depends(get_catalog_service)):
    """All coffee shops, newest first"""
    return envelope_response(service.list_shops())


@router.post("/")
def create_shop(
    payload: Dict[str, Any] = Body(..., examples=[{
        "name": "Brew & Bean",
        "address": "123 Main St",
        "seating_level": "lots",
        "vibe": "cozy, quiet, modern",
        "good_for_work": True,
    }]),
    service: CatalogService = Depends(get_catalog_service),
):
    """
    Create a coffee shop

    vibe may be a comma separated string or a list of tags.
    """
    return envelope_response(service.create_shop(payload), success_status=201)


@router.get("/{shop_id}")
def get_shop(shop_id: str, service: CatalogService = Depends(get_catalog_service)):
    return envelope_response(service.get_shop(shop_id))


@router.delete("/{shop_id}")
def delete_shop(shop_id: str, service: CatalogService = Depends(get_catalog_service)):
    """Delete a shop and, through the store's cascade, all its coffee orders"""
    return envelope_response(service.delete_shop(shop_id))


@router.get("/{shop_id}/orders")
def list_shop_orders(shop_id: str, service: CatalogService = Depends(get_catalog_service)):
    """Coffee orders tried at this shop, most recent first"""
    return envelope_response(service.list_orders(shop_id))
