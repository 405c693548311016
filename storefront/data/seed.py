# storefront/data/seed.py
from decimal import Decimal

from storefront.data.database import Base, SessionLocal, engine
from storefront.data.models import ProductModel, CouponModel
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCTS = [
    {
        "name": "Keyboard",
        "price": Decimal("199.99"),
        "image_url": "/images/keyboard.png",
        "description": "Mechanical keyboard with brown switches.",
    },
    {
        "name": "Mouse",
        "price": Decimal("49.50"),
        "image_url": "/images/mouse.png",
        "description": "Wireless mouse, 2.4 GHz receiver.",
    },
    {
        "name": "Monitor",
        "price": Decimal("899.00"),
        "image_url": "/images/monitor.png",
        "description": "27 inch IPS monitor.",
    },
]

COUPONS = [
    {"code": "offer50", "percentage_off": 50},
]


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        # not forcing: only seed if empty
        if db.query(ProductModel).first():
            logger.info("Catalog already seeded, skipping")
            return
        db.add_all(ProductModel(**p) for p in PRODUCTS)
        db.add_all(CouponModel(**c) for c in COUPONS)
        db.commit()
        logger.info(f"Seeded {len(PRODUCTS)} products and {len(COUPONS)} coupons")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
