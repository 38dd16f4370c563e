"""Product API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from src.api.dependencies import get_current_user_id, get_product_reader, get_product_service
from src.models.product import Product
from src.schemas.product import ProductCreate, ProductDeleteResponse, ProductResponse
from src.services.product_service import ProductService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])

NOT_FOUND = "Product not found"


def _server_error(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)


@router.get("", response_model=list[ProductResponse])
def list_products(
    _reader: Annotated[int | None, Depends(get_product_reader)],
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """List all products."""
    try:
        return service.list_all()
    except SQLAlchemyError:
        logger.exception("Failed to list products")
        raise _server_error("Database query failed") from None


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    _reader: Annotated[int | None, Depends(get_product_reader)],
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """Get a single product by id."""
    try:
        product = service.get_by_id(product_id)
    except SQLAlchemyError:
        logger.exception(f"Failed to fetch product {product_id}")
        raise _server_error("Database query failed") from None
    if product is None:
        raise _not_found()
    return product


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    product_data: ProductCreate,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """Create a product."""
    try:
        return service.create(product_data.name, product_data.price)
    except SQLAlchemyError:
        logger.exception(f"Failed to create product for user {user_id}")
        raise _server_error("Database insert failed") from None


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_data: ProductCreate,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """Replace a product's name and price."""
    try:
        product = service.update(product_id, product_data.name, product_data.price)
    except SQLAlchemyError:
        logger.exception(f"Failed to update product {product_id} for user {user_id}")
        raise _server_error("Database update failed") from None
    if product is None:
        raise _not_found()
    return product


@router.delete("/{product_id}", response_model=ProductDeleteResponse)
def delete_product(
    product_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """Delete a product and return the removed row."""
    try:
        product: Product | None = service.delete(product_id)
    except SQLAlchemyError:
        logger.exception(f"Failed to delete product {product_id} for user {user_id}")
        raise _server_error("Database delete failed") from None
    if product is None:
        raise _not_found()
    return ProductDeleteResponse(deleted=ProductResponse.model_validate(product))
