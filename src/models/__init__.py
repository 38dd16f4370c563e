"""SQLAlchemy models."""

from src.models.product import Product
from src.models.user import User

__all__ = [
    "Product",
    "User",
]
