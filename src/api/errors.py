"""Mapping of application errors to JSON responses."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from src.exceptions import APIError, InternalServerError

logger = logging.getLogger(__name__)


@contextmanager
def internal_error_guard(db: Session, message: str) -> Iterator[None]:
    """Convert unexpected failures inside the block into InternalServerError.

    APIError subclasses pass through untouched. Anything else rolls back the
    session and surfaces as a 500 carrying ``message``.
    """
    try:
        yield
    except APIError:
        raise
    except Exception as e:
        db.rollback()
        logger.exception(message)
        raise InternalServerError(message) from e


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Render an APIError as ``{"error": message}``."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report missing or ill-typed body fields."""
    fields = [".".join(str(part) for part in err["loc"] if part != "body") for err in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request", "fields": fields},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on ``app``."""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
