# storefront/services/order_service.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from storefront.repos.order_repo import OrderRepo


class OrderService:
    """
    Historia zamówień usera (Query).
    Tworzenie zamówień jest w CheckoutService.
    """

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)

    def list_orders(self, user_id: int) -> List[Dict[str, Any]]:
        orders = self.repo.list_orders(user_id)

        return [
            {
                "id": order.id,
                "order_date": order.created_at,
                "status": order.status,
                "subtotal": order.subtotal,
                "total_price": order.total,
                "coupon_code": order.coupon.code if order.coupon else None,
                "percentage_off": order.coupon.percentage_off if order.coupon else None,
                "products": [item.name for item in order.items],
                "items": order.items,
            }
            for order in orders
        ]
