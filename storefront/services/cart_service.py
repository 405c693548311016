from typing import Dict, Any
from sqlalchemy.orm import Session
from storefront.data.models.cart_item import CartItemModel
from storefront.domain.errors import CartItemNotFound, ProductNotFound
from storefront.domain.pricing import cart_total
from storefront.repos.cart_repo import CartRepo
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Prosta implementacja cqrs dla koszyka usera
    commands (add, remove) modyfikuja stan
    query (get) tylko odczyt
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)

    #query - odczyt
    def get_cart(self, user_id: int) -> Dict[str, Any]:
        items = self.repo.get_cart_items(user_id)
        total = cart_total((i.product.price, i.quantity) for i in items)

        return {
            "items": items,
            "total": total,
        }

    #commands
    def add_item(self, user_id: int, product_id: int) -> CartItemModel:
        if not self.products.get_product(product_id):
            raise ProductNotFound(product_id)

        try:
            # RETURNING z upserta, bez ponownego odczytu po commicie
            item = self.repo.increment_item(user_id, product_id)
            self.repo.commit()
        except Exception as e:
            logger.error(f"Error adding product {product_id} to cart of user {user_id}: {e}")
            self.repo.rollback()
            raise

        logger.info(f"Product {product_id} in cart of user {user_id}, quantity: {item.quantity}")
        return item

    def remove_item(self, user_id: int, product_id: int) -> None:
        deleted = self.repo.delete_cart_item(user_id, product_id)

        if deleted == 0:
            self.repo.rollback()
            raise CartItemNotFound(product_id)

        self.repo.commit()
        logger.info(f"Product {product_id} removed from cart of user {user_id}")
