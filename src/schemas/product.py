"""Product schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class ProductCreate(BaseModel):
    """Product fields accepted on create and full-replace update."""

    name: StrictStr = Field(..., min_length=1, max_length=255)
    price: float = Field(..., ge=0, allow_inf_nan=False)

    @field_validator("price", mode="before")
    @classmethod
    def reject_boolean_price(cls, value: Any) -> Any:
        """Booleans are not prices, even though lax float parsing accepts them."""
        if isinstance(value, bool):
            raise ValueError("price must be a number")
        return value


class ProductResponse(BaseModel):
    """Product response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: float


class ProductDeleteResponse(BaseModel):
    """Result of deleting a product."""

    success: bool = True
    deleted: ProductResponse
