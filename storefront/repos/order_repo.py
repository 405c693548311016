# storefront/repos/order_repo.py
from decimal import Decimal
from typing import List

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from storefront.data.models.coupon import CouponModel
from storefront.data.models.order import OrderModel
from storefront.data.models.order_item import OrderItemModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def add_order(self, order: OrderModel) -> OrderModel:
        # bez commita, checkout commituje cala transakcje
        self.db.add(order)
        self.db.flush()
        return order

    def count_orders(self, user_id: int) -> int:
        return self.db.execute(
            select(func.count(OrderModel.id)).where(OrderModel.user_id == user_id)
        ).scalar_one()

    def list_orders(self, user_id: int) -> List[OrderModel]:
        stmt = (
            select(OrderModel)
            .options(selectinload(OrderModel.items), selectinload(OrderModel.coupon))
            .where(OrderModel.user_id == user_id)
            .order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    # --- agregaty dla panelu admina ---

    def sum_items_purchased(self) -> int:
        return self.db.execute(
            select(func.coalesce(func.sum(OrderItemModel.quantity), 0))
        ).scalar_one()

    def sum_order_totals(self) -> Decimal | None:
        return self.db.execute(select(func.sum(OrderModel.total))).scalar_one()

    def discount_stats(self):
        """(coupon, liczba zamowien, suma subtotal - total) dla kazdego kuponu."""
        discount = func.sum(OrderModel.subtotal - OrderModel.total)
        stmt = (
            select(CouponModel, func.count(OrderModel.id), discount)
            .outerjoin(OrderModel, OrderModel.coupon_id == CouponModel.id)
            .group_by(CouponModel.id)
            .order_by(CouponModel.id)
        )
        return self.db.execute(stmt).all()
