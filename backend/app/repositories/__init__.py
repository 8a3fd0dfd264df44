"""
Repository Layer - Data Access

This layer handles all record store queries and returns domain models.
Repositories abstract away Supabase query details from business logic.

Author: TM3
Date: 2025-11-02
"""
from app.repositories.base import SupabaseRepository
from app.repositories.shop_repository import ShopRepository
from app.repositories.order_repository import OrderRepository

__all__ = [
    'SupabaseRepository',
    'ShopRepository',
    'OrderRepository',
]
