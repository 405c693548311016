# storefront/repos/cart_repo.py
from typing import List, Sequence

from sqlalchemy import and_, delete, or_, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session, joinedload

from storefront.data.models.cart_item import CartItemModel

_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def increment_statement(dialect: str, user_id: int, product_id: int):
    """
    INSERT quantity=1 ON CONFLICT (user_id, product_id) DO UPDATE quantity = quantity + 1.
    Jedno zapytanie, wiec dwa rownolegle add nie gubia inkrementacji.
    """
    insert = _INSERTS.get(dialect)
    if insert is None:
        raise RuntimeError(f"Upsert not supported for dialect {dialect}")

    stmt = insert(CartItemModel).values(user_id=user_id, product_id=product_id, quantity=1)
    return stmt.on_conflict_do_update(
        index_elements=[CartItemModel.user_id, CartItemModel.product_id],
        set_={"quantity": CartItemModel.quantity + 1},
    )


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart_items(self, user_id: int, for_update: bool = False) -> List[CartItemModel]:
        stmt = (
            select(CartItemModel)
            .options(joinedload(CartItemModel.product))
            .where(CartItemModel.user_id == user_id)
            .order_by(CartItemModel.id)
        )
        if for_update:
            # blokujemy tylko wiersze koszyka, nie produkty z joina
            stmt = stmt.with_for_update(of=CartItemModel)
        return list(self.db.execute(stmt).scalars().all())

    def increment_item(self, user_id: int, product_id: int) -> CartItemModel:
        dialect = self.db.get_bind().dialect.name
        stmt = increment_statement(dialect, user_id, product_id).returning(CartItemModel)
        return self.db.scalars(stmt, execution_options={"populate_existing": True}).one()

    def delete_cart_item(self, user_id: int, product_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel)
            .where(
                CartItemModel.user_id == user_id,
                CartItemModel.product_id == product_id,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def delete_items(self, user_id: int, items: Sequence[CartItemModel]) -> int:
        """
        Usuwa dokladnie to co checkout przeczytal: para (id, quantity).
        Jesli ktos zmienil ilosc w miedzyczasie, wiersz nie pasuje i rowcount jest mniejszy.
        """
        snapshot = or_(*(
            and_(CartItemModel.id == i.id, CartItemModel.quantity == i.quantity)
            for i in items
        ))
        result = self.db.execute(
            delete(CartItemModel)
            .where(CartItemModel.user_id == user_id, snapshot)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
