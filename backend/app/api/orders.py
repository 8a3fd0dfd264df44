"""
Coffee Orders API Endpoints
Create and delete coffee orders (tasting entries)

Listing orders lives under /shops/{shop_id}/orders.

Author: TM3
Date: 2025-11-02
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from app.api.deps import envelope_response, get_catalog_service
from app.services.catalog_service import CatalogService

router = APIRouter()


@router.post("/")
def create_order(
    payload: Dict[str, Any] = Body(..., examples=[{
        "shop_id": "123e4567-e89b-12d3-a456-426614174000",
        "coffee_name": "Vanilla Latte",
        "strength_level": "medium",
        "price": 5.50,
        "rating": 4,
        "tasting_notes": "Smooth and creamy",
        "date_tried": "2025-11-02",
    }]),
    service: CatalogService = Depends(get_catalog_service),
):
    """Create a coffee order; blank optional fields are not stored"""
    return envelope_response(service.create_order(payload), success_status=201)


@router.delete("/{order_id}")
def delete_order(order_id: str, service: CatalogService = Depends(get_catalog_service)):
    return envelope_response(service.delete_order(order_id))
