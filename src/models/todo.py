"""Todo model."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String

from src.database import Base
from src.models.mixins import TimestampMixin


class Todo(Base, TimestampMixin):
    """A task owned by a single user."""

    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(500), nullable=False)
    description = Column(String, nullable=True)
    due_date = Column(DateTime(timezone=True), nullable=True)
    completed = Column(Boolean, default=False, nullable=False)
    # Ownership is enforced by filtering on this column, not through a relationship
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
