# storefront/services/checkout_service.py
import uuid
from dataclasses import dataclass

from redis.exceptions import RedisError
from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel
from storefront.data.models.order_item import OrderItemModel
from storefront.domain.errors import CheckoutConflict, CheckoutInProgress, EmptyCart
from storefront.domain.pricing import apply_discount, cart_total, to_money
from storefront.repos.cart_repo import CartRepo
from storefront.repos.order_repo import OrderRepo
from storefront.repos.user_repo import UserRepo
from storefront.services.coupon_service import CouponService
from storefront.services.lock_service import LockService
from storefront.services.notification_service import NotificationService
from storefront.utils.settings import CHECKOUT_LOCK_TTL_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

ORDER_CREATED_MESSAGE = "Order Created Successfully!"


@dataclass
class CheckoutResult:
    valid: bool
    message: str
    order: OrderModel | None = None
    discount_applied: bool | None = None


class CheckoutService:
    """
    Zamiana koszyka w zamowienie.

    Wszystko w jednej transakcji: lock wiersza usera, ponowne sprawdzenie kuponu,
    insert order + order_items, usuniecie dokladnie przeczytanych pozycji koszyka.
    Albo wszystko albo nic.
    """

    def __init__(self, db: Session, lock_service: LockService):
        self.db = db
        self.carts = CartRepo(db)
        self.orders = OrderRepo(db)
        self.users = UserRepo(db)
        self.coupons = CouponService(db)
        self.lock_service = lock_service
        self.notification_service = NotificationService()

    def checkout(self, user_id: int, coupon_code: str | None = None) -> CheckoutResult:
        coupon_code = (coupon_code or "").strip() or None

        # jeden checkout naraz dla usera
        token = uuid.uuid4().hex
        if not self.lock_service.acquire_checkout_lock(user_id, token, CHECKOUT_LOCK_TTL_SECONDS):
            logger.warning(f"Checkout already in progress for user {user_id}")
            raise CheckoutInProgress()

        try:
            result = self._checkout(user_id, coupon_code)
        finally:
            self._release_lock(user_id, token)

        if result.order is not None:
            self.notification_service.send_order_notification(user_id, result.order.id)
        return result

    def _release_lock(self, user_id: int, token: str) -> None:
        # lock ma TTL, blad Redisa przy zwalnianiu nie moze zamaskowac commita
        try:
            self.lock_service.release_checkout_lock(user_id, token)
        except RedisError as e:
            logger.warning(f"Failed to release checkout lock for user {user_id}: {e}")

    def _checkout(self, user_id: int, coupon_code: str | None) -> CheckoutResult:
        try:
            self.users.lock_user(user_id)

            items = self.carts.get_cart_items(user_id, for_update=True)
            if not items:
                raise EmptyCart()

            subtotal = cart_total((i.product.price, i.quantity) for i in items)
            total = subtotal
            coupon = None

            if coupon_code:
                eligibility = self.coupons.evaluate(user_id, coupon_code)
                if not eligibility.eligible:
                    self.db.rollback()
                    logger.info(
                        f"Checkout for user {user_id} rejected, coupon {coupon_code} "
                        f"needs {eligibility.orders_remaining} more order(s)"
                    )
                    return CheckoutResult(valid=False, message=eligibility.message)

                coupon = eligibility.coupon
                total = apply_discount(subtotal, coupon.percentage_off)

            # snapshot cen w chwili checkoutu
            order = OrderModel(
                user_id=user_id,
                status="PENDING",
                subtotal=subtotal,
                total=total,
                coupon_id=coupon.id if coupon else None,
                items=[
                    OrderItemModel(
                        product_id=i.product_id,
                        name=i.product.name,
                        quantity=i.quantity,
                        price=to_money(i.product.price),
                    )
                    for i in items
                ],
            )
            self.orders.add_order(order)

            deleted = self.carts.delete_items(user_id, items)
            if deleted != len(items):
                logger.warning(f"Cart of user {user_id} changed during checkout ({deleted}/{len(items)} rows)")
                raise CheckoutConflict()

            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(
            f"Order {order.id} created for user {user_id}: subtotal={subtotal} total={total} "
            f"coupon={coupon.code if coupon else None}"
        )
        return CheckoutResult(
            valid=True,
            message=ORDER_CREATED_MESSAGE,
            order=order,
            discount_applied=coupon is not None,
        )
