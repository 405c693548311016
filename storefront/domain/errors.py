# storefront/domain/errors.py


class StorefrontError(Exception):
    """Bazowy wyjatek domeny sklepu."""


class NotFoundError(StorefrontError):
    pass


class ProductNotFound(NotFoundError):
    def __init__(self, product_id: int):
        super().__init__("Product not found")
        self.product_id = product_id


class CartItemNotFound(NotFoundError):
    def __init__(self, product_id: int):
        super().__init__("Cart item not found")
        self.product_id = product_id


class EmptyCart(NotFoundError):
    def __init__(self):
        super().__init__("Cart is empty")


class InvalidCoupon(NotFoundError):
    def __init__(self, code: str):
        super().__init__("Invalid coupon code")
        self.code = code


class ConflictError(StorefrontError):
    pass


class CouponAlreadyExists(ConflictError):
    def __init__(self, code: str):
        super().__init__(f"Coupon {code} already exists")
        self.code = code


class CheckoutInProgress(ConflictError):
    def __init__(self):
        super().__init__("Checkout already in progress")


class CheckoutConflict(ConflictError):
    """Koszyk zmienil sie miedzy odczytem a usunieciem w transakcji checkoutu."""

    def __init__(self):
        super().__init__("Cart was modified during checkout, please try again")
