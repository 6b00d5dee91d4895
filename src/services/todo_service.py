"""Todo service with ownership-scoped access."""

import logging

from sqlalchemy.orm import Session

from src.exceptions import TodoNotFoundError
from src.models.todo import Todo
from src.schemas.todo import TodoCreate, TodoUpdate

logger = logging.getLogger(__name__)

# Columns that reject NULL; an explicit null in an update leaves them unchanged
NON_NULLABLE_FIELDS = {"title", "completed"}


class TodoService:
    """Service for todo CRUD scoped to the owning user.

    Every lookup filters on ``user_id``, so a todo owned by someone else is
    indistinguishable from one that does not exist.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_todos(self, user_id: int) -> list[Todo]:
        """Get all todos owned by the user in insertion order."""
        return self.db.query(Todo).filter(Todo.user_id == user_id).order_by(Todo.id).all()

    def get_todo(self, user_id: int, todo_id: int | str) -> Todo:
        """Get a todo owned by the user or raise TodoNotFoundError.

        Ids that are not integers cannot exist, so they are reported as not found.
        """
        try:
            todo_id = int(todo_id)
        except (TypeError, ValueError) as e:
            raise TodoNotFoundError() from e
        todo = self.db.query(Todo).filter(Todo.id == todo_id, Todo.user_id == user_id).first()
        if todo is None:
            raise TodoNotFoundError()
        return todo

    def create_todo(self, user_id: int, data: TodoCreate) -> Todo:
        """Create a todo owned by the user."""
        todo = Todo(
            title=data.title,
            description=data.description,
            due_date=data.due_date,
            completed=bool(data.completed),
            user_id=user_id,
        )
        self.db.add(todo)
        self.db.commit()
        self.db.refresh(todo)
        logger.info(f"User {user_id} created todo {todo.id}")
        return todo

    def update_todo(self, user_id: int, todo_id: int | str, data: TodoUpdate) -> Todo:
        """Apply the fields present in ``data`` to an owned todo."""
        todo = self.get_todo(user_id, todo_id)

        update_data = data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            if value is None and field in NON_NULLABLE_FIELDS:
                continue
            setattr(todo, field, value)

        self.db.commit()
        self.db.refresh(todo)
        return todo

    def delete_todo(self, user_id: int, todo_id: int | str) -> None:
        """Permanently delete an owned todo."""
        todo = self.get_todo(user_id, todo_id)
        self.db.delete(todo)
        self.db.commit()
        logger.info(f"User {user_id} deleted todo {todo_id}")
