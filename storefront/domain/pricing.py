# storefront/domain/pricing.py
"""
Arytmetyka kwot i okno kuponow.

Kwoty zawsze jako Decimal, zaokraglenie do groszy ROUND_HALF_UP.
Ta sama funkcja liczy rabat przy sprawdzaniu kuponu, checkoucie i w statystykach.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Tuple

from storefront.utils.settings import COUPON_ORDER_INTERVAL

CENT = Decimal("0.01")
ZERO = Decimal("0.00")
HUNDRED = Decimal(100)


def to_money(value) -> Decimal:
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def cart_total(lines: Iterable[Tuple[Decimal, int]]) -> Decimal:
    """Suma price * quantity dla (price, quantity)."""
    return to_money(sum((to_money(price) * quantity for price, quantity in lines), ZERO))


def apply_discount(amount: Decimal, percentage_off: int) -> Decimal:
    if not 0 <= percentage_off <= 100:
        raise ValueError("percentage_off must be between 0 and 100")
    return to_money(amount * (HUNDRED - Decimal(percentage_off)) / HUNDRED)


def orders_until_coupon(order_count: int, interval: int = COUPON_ORDER_INTERVAL) -> int:
    """
    Ile zamowien brakuje, zeby kupon byl wazny.

    Kupon dziala tylko na co `interval` zamowienie (3., 6., 9. ...),
    liczone sa wszystkie wczesniejsze zamowienia usera. 0 = mozna uzyc teraz.
    """
    remainder = (order_count + 1) % interval
    if remainder == 0:
        return 0
    return interval - remainder


def ineligible_message(orders_remaining: int) -> str:
    return f"You can apply this coupon after {orders_remaining} more order(s)."
