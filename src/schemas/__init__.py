"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import Token, UserLogin, UserRegister, UserResponse
from src.schemas.todo import MessageResponse, TodoCreate, TodoResponse, TodoUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "Token",
    "UserResponse",
    "TodoCreate",
    "TodoUpdate",
    "TodoResponse",
    "MessageResponse",
]
