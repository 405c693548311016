# storefront/services/coupon_service.py
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.coupon import CouponModel
from storefront.domain.errors import CouponAlreadyExists, InvalidCoupon
from storefront.domain.pricing import ineligible_message, orders_until_coupon
from storefront.repos.coupon_repo import CouponRepo
from storefront.repos.order_repo import OrderRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class CouponEligibility:
    coupon: CouponModel
    orders_remaining: int

    @property
    def eligible(self) -> bool:
        return self.orders_remaining == 0

    @property
    def message(self) -> str | None:
        if self.eligible:
            return None
        return ineligible_message(self.orders_remaining)


class CouponService:
    def __init__(self, db: Session):
        self.repo = CouponRepo(db)
        self.orders = OrderRepo(db)

    def evaluate(self, user_id: int, code: str) -> CouponEligibility:
        """
        Lookup kuponu + okno "co trzecie zamowienie".
        Nic nie zapisuje, checkout wola to wewnatrz swojej transakcji.
        """
        coupon = self.repo.get_by_code(code)
        if not coupon:
            raise InvalidCoupon(code)

        order_count = self.orders.count_orders(user_id)
        return CouponEligibility(coupon=coupon, orders_remaining=orders_until_coupon(order_count))

    def check_eligibility(self, user_id: int, code: str) -> dict:
        result = self.evaluate(user_id, code)

        if result.eligible:
            return {"valid": True, "percentage_off": result.coupon.percentage_off}

        logger.info(f"Coupon {code} not yet eligible for user {user_id}, {result.orders_remaining} order(s) to go")
        return {"valid": False, "message": result.message}

    def create_coupon(self, code: str, percentage_off: int) -> CouponModel:
        if self.repo.get_by_code(code):
            raise CouponAlreadyExists(code)

        try:
            created = self.repo.create_coupon(CouponModel(code=code, percentage_off=percentage_off))
        except IntegrityError:
            self.repo.rollback()
            raise CouponAlreadyExists(code)

        logger.info(f"Coupon {created.code} created ({created.percentage_off}% off)")
        return created
