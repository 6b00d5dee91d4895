"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import get_db
from src.exceptions import UnauthorizedError
from src.services.auth import TokenService
from src.services.todo_service import TodoService


def get_token_service() -> TokenService:
    """Get token service configured from settings."""
    return TokenService.from_settings(get_settings())


def get_current_user_id(
    request: Request,
    token_service: Annotated[TokenService, Depends(get_token_service)],
    authorization: Annotated[str | None, Header()] = None,
) -> int:
    """Get the authenticated user id from the authorization header.

    The header carries the raw token; a ``Bearer`` prefix is tolerated.
    The id is also attached to ``request.state.user_id``.
    """
    if not authorization:
        raise UnauthorizedError()

    token = authorization
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        token = credentials.strip()

    user_id = token_service.verify(token)
    request.state.user_id = user_id
    return user_id


def get_todo_service(
    db: Annotated[Session, Depends(get_db)],
) -> TodoService:
    """Get todo service with dependencies."""
    return TodoService(db)
