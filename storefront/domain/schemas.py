# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from decimal import Decimal
from datetime import datetime


class ProductOut(BaseModel):
    """Schema dla produktu z katalogu (response)."""

    id: int
    name: str
    price: Decimal
    image_url: str | None = None
    description: str | None = None

    model_config = ConfigDict(from_attributes=True)


class CartItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: int = Field(..., gt=0, description="ID produktu (musi być > 0)")


class CartItemOut(BaseModel):
    """Schema dla pozycji w koszyku (response)."""

    id: int
    product_id: int
    quantity: int
    product: ProductOut

    model_config = ConfigDict(from_attributes=True)


class CartOut(BaseModel):
    items: List[CartItemOut]
    total: Decimal


class MessageOut(BaseModel):
    message: str


class CouponCheckIn(BaseModel):
    code: str = Field(..., min_length=1, description="Kod kuponu")


class CouponCheckOut(BaseModel):
    """{valid, percentage_off} albo {valid: false, message}."""

    valid: bool
    percentage_off: int | None = None
    message: str | None = None


class CheckoutIn(BaseModel):
    coupon_code: str | None = None


class OrderItemOut(BaseModel):
    product_id: int
    name: str
    quantity: int
    price: Decimal

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    """Schema dla zamówienia (response)."""

    id: int
    user_id: int
    status: str
    subtotal: Decimal
    total: Decimal
    coupon_id: int | None = None
    created_at: datetime
    items: List[OrderItemOut]

    model_config = ConfigDict(from_attributes=True)


class CheckoutOut(BaseModel):
    valid: bool
    message: str
    order: OrderOut | None = None
    discount_applied: bool | None = None


class OrderSummaryOut(BaseModel):
    """Zamowienie w historii usera."""

    id: int
    order_date: datetime
    status: str
    subtotal: Decimal
    total_price: Decimal
    coupon_code: str | None = None
    percentage_off: int | None = None
    products: List[str]
    items: List[OrderItemOut]


class CouponCreate(BaseModel):
    """Schema dla tworzenia kuponu (admin)."""

    code: str = Field(..., min_length=1, max_length=64, description="Unikalny kod kuponu")
    percentage_off: int = Field(..., gt=0, le=100, description="Rabat w procentach (1-100)")


class CouponOut(BaseModel):
    id: int
    code: str
    percentage_off: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DiscountCodeStats(BaseModel):
    code: str
    percentage_off: int
    orders_count: int
    total_discount_amount: Decimal


class AnalyticsOut(BaseModel):
    items_purchased_count: int
    total_purchase_amount: Decimal
    discount_codes: List[DiscountCodeStats]
    total_discount_amount: Decimal


class UserRead(BaseModel):
    """Schema dla użytkownika (response)."""

    id: int
    email: str
    name: str | None = None
    is_admin: bool

    model_config = ConfigDict(from_attributes=True)
