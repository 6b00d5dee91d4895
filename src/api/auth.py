"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.api.dependencies import get_token_service
from src.api.errors import internal_error_guard
from src.database import get_db
from src.exceptions import AuthenticationFailedError
from src.schemas.auth import Token, UserLogin, UserRegister, UserResponse
from src.services.auth import TokenService, authenticate_user, create_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=UserResponse)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    with internal_error_guard(db, "Error registering user"):
        user = create_user(db, user_data.username, user_data.email, user_data.password)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=Token)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
):
    """Login with email and password."""
    with internal_error_guard(db, "Error logging in"):
        user = authenticate_user(db, credentials.email, credentials.password)
        if not user:
            logger.info("Failed login attempt")
            raise AuthenticationFailedError()
        token = token_service.issue(user.id)

    return Token(token=token)
