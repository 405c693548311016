# storefront/services/analytics_service.py
from typing import Any, Dict

from sqlalchemy.orm import Session

from storefront.domain.pricing import ZERO, to_money
from storefront.repos.order_repo import OrderRepo


class AnalyticsService:
    """Statystyki sprzedazy dla panelu admina."""

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)

    def get_analytics(self) -> Dict[str, Any]:
        discount_codes = [
            {
                "code": coupon.code,
                "percentage_off": coupon.percentage_off,
                "orders_count": orders_count,
                "total_discount_amount": to_money(discount or ZERO),
            }
            for coupon, orders_count, discount in self.repo.discount_stats()
        ]

        return {
            "items_purchased_count": int(self.repo.sum_items_purchased()),
            "total_purchase_amount": to_money(self.repo.sum_order_totals() or ZERO),
            "discount_codes": discount_codes,
            "total_discount_amount": to_money(
                sum((d["total_discount_amount"] for d in discount_codes), ZERO)
            ),
        }
