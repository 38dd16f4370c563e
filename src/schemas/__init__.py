"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import Token, UserLogin, UserRegister, UserResponse
from src.schemas.product import ProductCreate, ProductDeleteResponse, ProductResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "Token",
    "UserResponse",
    "ProductCreate",
    "ProductResponse",
    "ProductDeleteResponse",
]
