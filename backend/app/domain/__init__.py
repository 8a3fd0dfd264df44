"""
Domain Layer - Business Entities

This layer contains Pydantic models representing catalog entities
and the result envelope returned by the service layer.

Author: TM3
Date: 2025-11-02
"""
from app.domain.shop import CoffeeShop, SeatingLevel, SEATING_LEVELS
from app.domain.coffee_order import CoffeeOrder, StrengthLevel, STRENGTH_LEVELS
from app.domain.result import ServiceResult

__all__ = [
    'CoffeeShop',
    'SeatingLevel',
    'SEATING_LEVELS',
    'CoffeeOrder',
    'StrengthLevel',
    'STRENGTH_LEVELS',
    'ServiceResult',
]
