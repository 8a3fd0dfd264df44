"""
Shop Repository - Data Access Layer for Coffee Shops

Author: TM3
Date: 2025-11-02
"""
from typing import Any, Dict, List

from app.domain.shop import CoffeeShop
from app.repositories.base import SupabaseRepository


class ShopRepository(SupabaseRepository):
    """Repository for the coffee_shops table"""

    table = "coffee_shops"
    model = CoffeeShop

    def find_recent(self) -> List[Dict[str, Any]]:
        """All shops, newest first"""
        return self.find_all(order_by="created_at", descending=True)
