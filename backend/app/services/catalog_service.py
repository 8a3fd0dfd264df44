"""
Catalog Service
Gateway between the API and the record store for shops and coffee orders

Every public method returns a ServiceResult envelope and never raises:
- validation failures carry the shaping message (logged at debug only)
- store failures carry the store message, or a fixed fallback per operation
- anything unexpected is logged with traceback and reported with the fallback

On success `data` is the row (or rows) exactly as the store returned it.

Author: TM3
Date: 2025-11-02
"""
import logging
from typing import Any, Callable, Optional

from supabase import Client

from app.core.errors import NotFoundError, StoreError, ValidationError
from app.domain.result import (
    KIND_NOT_FOUND,
    KIND_STORE,
    KIND_UNEXPECTED,
    KIND_VALIDATION,
    ServiceResult,
)
from app.repositories.order_repository import OrderRepository
from app.repositories.shop_repository import ShopRepository
from app.services.shaping import clean_text, shape_order, shape_shop

logger = logging.getLogger(__name__)

SHOP_NOT_FOUND = "coffee shop not found"
ORDER_NOT_FOUND = "coffee order not found"


class CatalogService:
    """
    Create, read and delete coffee shops and coffee orders

    The store client is injected so tests can hand in an in-memory fake.
    The service holds no state beyond its repositories.
    """

    def __init__(
        self,
        client: Client,
        shops_table: Optional[str] = None,
        orders_table: Optional[str] = None,
    ):
        self.shops = ShopRepository(client, shops_table)
        self.orders = OrderRepository(client, orders_table)

    def _run(
        self,
        operation: str,
        fallback: str,
        action: Callable[[], Any],
        not_found: Optional[str] = None,
    ) -> ServiceResult:
        try:
            return ServiceResult.ok(action())

        except ValidationError as e:
            logger.debug(f"{operation} rejected: {e.field}: {e.message}")
            return ServiceResult.fail(e.message, KIND_VALIDATION)

        except NotFoundError as e:
            logger.warning(f"{operation}: {e.message}")
            return ServiceResult.fail(not_found or fallback, KIND_NOT_FOUND)

        except StoreError as e:
            logger.error(f"Supabase error in {operation}: {e.message} (code={e.code})")
            return ServiceResult.fail(e.message or fallback, KIND_STORE)

        except Exception:
            logger.exception(f"Unexpected error in {operation}")
            return ServiceResult.fail(fallback, KIND_UNEXPECTED)

    @staticmethod
    def _require_id(record_id: Any, field: str) -> str:
        value = clean_text(record_id)
        if not value:
            raise ValidationError(field, f"{field} required")
        return value

    # ------------------------------------------------------------------
    # Shops
    # ------------------------------------------------------------------

    def create_shop(self, raw: Optional[dict]) -> ServiceResult:
        """
        Validate, shape and insert a coffee shop

        Example:
            service.create_shop({"name": "Brew & Bean", "vibe": "cozy, quiet"})
            # -> success=True, data={"name": "Brew & Bean", "vibe": ["cozy", "quiet"], ...}
        """
        def action():
            record = shape_shop(raw)
            return self.shops.insert_one(record)

        return self._run("create_shop", "failed to create coffee shop", action)

    def delete_shop(self, shop_id: Any) -> ServiceResult:
        """Delete a shop by id; its orders go with it via the store's cascade rule"""
        def action():
            return self.shops.delete_by_id(self._require_id(shop_id, "shop id"))

        return self._run("delete_shop", "failed to delete coffee shop", action, SHOP_NOT_FOUND)

    def list_shops(self) -> ServiceResult:
        """All shops, newest first"""
        def action():
            return self.shops.find_recent()

        return self._run("list_shops", "failed to load coffee shops", action)

    def get_shop(self, shop_id: Any) -> ServiceResult:
        def action():
            shop = self.shops.find_by_id(self._require_id(shop_id, "shop id"))
            if shop is None:
                raise NotFoundError(self.shops.table, str(shop_id))
            return shop

        return self._run("get_shop", "failed to load coffee shop", action, SHOP_NOT_FOUND)

    # ------------------------------------------------------------------
    # Coffee orders
    # ------------------------------------------------------------------

    def create_order(self, raw: Optional[dict]) -> ServiceResult:
        """
        Validate, shape and insert a coffee order

        Only the required fields and the optional fields that were filled in
        are sent to the store.
        """
        def action():
            record = shape_order(raw)
            return self.orders.insert_one(record)

        return self._run("create_order", "failed to create coffee order", action)

    def delete_order(self, order_id: Any) -> ServiceResult:
        def action():
            return self.orders.delete_by_id(self._require_id(order_id, "order id"))

        return self._run("delete_order", "failed to delete coffee order", action, ORDER_NOT_FOUND)

    def list_orders(self, shop_id: Any) -> ServiceResult:
        """Orders of one shop, most recent date_tried first"""
        def action():
            return self.orders.find_by_shop(self._require_id(shop_id, "shop id"))

        return self._run("list_orders", "failed to load coffee orders", action)
