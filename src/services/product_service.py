"""Product persistence service."""

import logging

from sqlalchemy import Row, delete, update
from sqlalchemy.orm import Session

from src.models.product import Product

logger = logging.getLogger(__name__)


class ProductService:
    """Service for product CRUD against the products table.

    Lookups by id return None when no row matches. Database errors are left
    to the caller after the session has been rolled back.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[Product]:
        return self.db.query(Product).all()

    def get_by_id(self, product_id: int) -> Product | None:
        return self.db.query(Product).filter(Product.id == product_id).first()

    def create(self, name: str, price: float) -> Product:
        product = Product(name=name, price=price)
        self.db.add(product)
        self._commit()
        self.db.refresh(product)
        logger.info(f"Created product {product.id}")
        return product

    def update(self, product_id: int, name: str, price: float) -> Product | None:
        """Replace name and price in a single UPDATE ... RETURNING."""
        stmt = (
            update(Product)
            .where(Product.id == product_id)
            .values(name=name, price=price)
            .returning(Product.id, Product.name, Product.price)
        )
        row = self._write(stmt)
        if row is None:
            return None
        logger.info(f"Updated product {product_id}")
        return Product(**row._mapping)

    def delete(self, product_id: int) -> Product | None:
        """Delete a product and return the row as it was before removal."""
        stmt = (
            delete(Product)
            .where(Product.id == product_id)
            .returning(Product.id, Product.name, Product.price)
        )
        row = self._write(stmt)
        if row is None:
            return None
        logger.info(f"Deleted product {product_id}")
        return Product(**row._mapping)

    def _write(self, stmt) -> Row | None:
        try:
            row = self.db.execute(stmt).first()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return row

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
