"""Application error taxonomy.

Every error carries the HTTP status and the message rendered as
``{"error": message}`` by the handler registered in ``src.api.errors``.
"""

from fastapi import status


class APIError(Exception):
    """Base class for errors returned to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DuplicateEmailError(APIError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Email already exists"


class AuthenticationFailedError(APIError):
    """Raised for unknown email and wrong password alike."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication failed"


class UnauthorizedError(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class InvalidTokenError(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid token"


class TodoNotFoundError(APIError):
    """No todo with the given id is owned by the caller."""

    status_code = status.HTTP_404_NOT_FOUND
    message = "Todo not found"


class InternalServerError(APIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
