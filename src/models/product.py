"""Product model."""

from sqlalchemy import Column, Float, Integer, String

from src.database import Base


class Product(Base):
    """A sellable product with a name and a non-negative price."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Float, nullable=False)
