"""Todo API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_current_user_id, get_todo_service
from src.api.errors import internal_error_guard
from src.schemas.todo import MessageResponse, TodoCreate, TodoResponse, TodoUpdate
from src.services.todo_service import TodoService

router = APIRouter(prefix="/todos", tags=["todos"])


@router.get("", response_model=list[TodoResponse])
def get_todos(
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Get all todos owned by the current user."""
    with internal_error_guard(service.db, "Error fetching todos"):
        todos = service.list_todos(user_id)
    return [TodoResponse.model_validate(todo) for todo in todos]


@router.post("", response_model=TodoResponse)
def create_todo(
    todo_data: TodoCreate,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Create a todo for the current user."""
    with internal_error_guard(service.db, "Error creating todo"):
        todo = service.create_todo(user_id, todo_data)
    return TodoResponse.model_validate(todo)


@router.get("/{todo_id}", response_model=TodoResponse)
def get_todo(
    todo_id: str,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Get a single todo owned by the current user."""
    with internal_error_guard(service.db, "Error fetching todo"):
        todo = service.get_todo(user_id, todo_id)
    return TodoResponse.model_validate(todo)


@router.put("/{todo_id}", response_model=TodoResponse)
def update_todo(
    todo_id: str,
    todo_data: TodoUpdate,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Update the fields present in the request body."""
    with internal_error_guard(service.db, "Error updating todo"):
        todo = service.update_todo(user_id, todo_id, todo_data)
    return TodoResponse.model_validate(todo)


@router.delete("/{todo_id}", response_model=MessageResponse)
def delete_todo(
    todo_id: str,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Permanently delete a todo owned by the current user."""
    with internal_error_guard(service.db, "Error deleting todo"):
        service.delete_todo(user_id, todo_id)
    return MessageResponse(message="Todo deleted successfully")
