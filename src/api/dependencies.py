"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.config import Settings, get_settings
from src.database import get_db
from src.services.auth import decode_access_token
from src.services.product_service import ProductService

security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user_id(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> int:
    """Verify the bearer token and attach the user id to the request state."""
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Unauthorized")

    payload = decode_access_token(credentials.credentials, settings)
    if payload is None:
        raise _unauthorized("Invalid token")

    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise _unauthorized("Invalid token") from None

    request.state.user_id = user_id
    return user_id


def get_product_reader(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> int | None:
    """Gate product reads unless public reads are enabled.

    With public reads on, a request without credentials passes through as
    anonymous, while a presented token is still verified.
    """
    if settings.public_product_reads and credentials is None:
        return None
    return get_current_user_id(request, credentials, settings)


def get_product_service(
    db: Annotated[Session, Depends(get_db)],
) -> ProductService:
    """Get product service bound to the request's session."""
    return ProductService(db)
