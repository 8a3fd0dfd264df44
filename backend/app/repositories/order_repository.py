"""
Order Repository - Data Access Layer for Coffee Orders

Coffee orders live in the coffee_entries table.

Author: TM3
Date: 2025-11-02
"""
from typing import Any, Dict, List

from app.domain.coffee_order import CoffeeOrder
from app.repositories.base import SupabaseRepository


class OrderRepository(SupabaseRepository):
    """Repository for the coffee_entries table"""

    table = "coffee_entries"
    model = CoffeeOrder

    def find_by_shop(self, shop_id: str) -> List[Dict[str, Any]]:
        """
        Orders tried at a shop, most recent date_tried first

        Args:
            shop_id: Owning shop ID

        Returns:
            List of rows (empty if the shop has none)
        """
        return self.find_all(
            filters={"shop_id": shop_id},
            order_by="date_tried",
            descending=True,
        )
