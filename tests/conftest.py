"""Pytest fixtures: in-memory SQLite, eager Celery and an in-memory checkout lock."""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "1"
os.environ["ADMIN_EMAILS"] = "admin@example.com"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.api.deps import get_lock_service
from storefront.data.database import Base, SessionLocal, engine
from storefront.data.models import CouponModel, OrderModel, ProductModel
from storefront.main import app
from storefront.services.user_service import UserService
from tests.helpers import USER_EMAIL


class InMemoryLockService:
    """Zamiennik LockService bez Redisa, ta sama semantyka SET NX + compare-and-del."""

    def __init__(self):
        self.locks = {}

    def acquire_checkout_lock(self, user_id: int, token: str, ttl: int) -> bool:
        if user_id in self.locks:
            return False
        self.locks[user_id] = token
        return True

    def release_checkout_lock(self, user_id: int, token: str) -> bool:
        if self.locks.get(user_id) != token:
            return False
        del self.locks[user_id]
        return True


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def lock_service() -> InMemoryLockService:
    return InMemoryLockService()


@pytest.fixture
def test_client(lock_service):
    app.dependency_overrides[get_lock_service] = lambda: lock_service
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def products(db) -> dict:
    rows = [
        ProductModel(name="Keyboard", price=Decimal("199.99"), image_url="/images/keyboard.png"),
        ProductModel(name="Mouse", price=Decimal("49.50"), image_url="/images/mouse.png"),
        ProductModel(name="Headphones", price=Decimal("100.00"), image_url="/images/headphones.png"),
        ProductModel(name="Cable", price=Decimal("33.33"), description="USB-C, 1m"),
    ]
    db.add_all(rows)
    db.commit()
    return {p.name: p.id for p in rows}


@pytest.fixture
def coupon50(db) -> CouponModel:
    coupon = CouponModel(code="offer50", percentage_off=50)
    db.add(coupon)
    db.commit()
    return coupon


@pytest.fixture
def user(db):
    return UserService(db).resolve_user(USER_EMAIL, "Jan")


@pytest.fixture
def place_prior_orders(db, user):
    """Wstawia `n` wczesniejszych zamowien usera bezposrednio do bazy."""

    def _place(n: int):
        for _ in range(n):
            db.add(OrderModel(user_id=user.id, subtotal=Decimal("10.00"), total=Decimal("10.00")))
        db.commit()

    return _place
