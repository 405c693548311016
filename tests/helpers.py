from storefront.data.models import CartItemModel, OrderModel

USER_EMAIL = "jan@example.com"
ADMIN_EMAIL = "admin@example.com"


def auth_headers(email: str = USER_EMAIL, name: str | None = None) -> dict:
    headers = {"X-Forwarded-Email": email}
    if name:
        headers["X-Forwarded-User"] = name
    return headers


def count_orders(db) -> int:
    db.expire_all()
    return db.query(OrderModel).count()


def count_cart_items(db) -> int:
    db.expire_all()
    return db.query(CartItemModel).count()
