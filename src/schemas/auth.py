"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict


class UserRegister(BaseModel):
    """User registration request."""

    username: str
    email: str
    password: str


class UserLogin(BaseModel):
    """User login request."""

    email: str
    password: str


class Token(BaseModel):
    """Signed token returned after a successful login."""

    token: str


class UserResponse(BaseModel):
    """User information response. The password hash is never serialized."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
