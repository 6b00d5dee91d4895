"""Todo service tests."""

import pytest

from src.exceptions import TodoNotFoundError
from src.schemas.todo import TodoCreate, TodoUpdate
from src.services.auth import create_user
from src.services.todo_service import TodoService


@pytest.fixture
def users(db):
    """Two users, returned as their ids."""
    alice = create_user(db, "alice", "alice@example.com", "pw")
    bob = create_user(db, "bob", "bob@example.com", "pw")
    return alice.id, bob.id


def test_create_and_list(db, users):
    """Test that created todos are listed for their owner only."""
    alice, bob = users
    service = TodoService(db)
    todo = service.create_todo(alice, TodoCreate(todoTitle="buy milk"))

    assert todo.user_id == alice
    assert todo.completed is False
    assert [t.id for t in service.list_todos(alice)] == [todo.id]
    assert service.list_todos(bob) == []


def test_get_todo_scoped_to_owner(db, users):
    """Test that another user's todo is not found."""
    alice, bob = users
    service = TodoService(db)
    todo = service.create_todo(alice, TodoCreate(todoTitle="private"))

    assert service.get_todo(alice, todo.id).title == "private"
    with pytest.raises(TodoNotFoundError):
        service.get_todo(bob, todo.id)


def test_update_applies_present_fields_only(db, users):
    """Test explicit-presence update semantics."""
    alice, _ = users
    service = TodoService(db)
    todo = service.create_todo(
        alice, TodoCreate(todoTitle="title", description="desc", completed=True)
    )

    updated = service.update_todo(alice, todo.id, TodoUpdate(completed=False))
    assert updated.completed is False
    assert updated.title == "title"
    assert updated.description == "desc"

    updated = service.update_todo(alice, todo.id, TodoUpdate(title=""))
    assert updated.title == ""


def test_update_ignores_null_title(db, users):
    """Test that an explicit null title leaves the stored title alone."""
    alice, _ = users
    service = TodoService(db)
    todo = service.create_todo(alice, TodoCreate(todoTitle="keep"))

    updated = service.update_todo(alice, todo.id, TodoUpdate(todoTitle=None, description=None))
    assert updated.title == "keep"
    assert updated.description is None


def test_update_and_delete_by_other_user(db, users):
    """Test that non-owners cannot update or delete."""
    alice, bob = users
    service = TodoService(db)
    todo = service.create_todo(alice, TodoCreate(todoTitle="mine"))

    with pytest.raises(TodoNotFoundError):
        service.update_todo(bob, todo.id, TodoUpdate(title="theirs"))
    with pytest.raises(TodoNotFoundError):
        service.delete_todo(bob, todo.id)

    assert service.get_todo(alice, todo.id).title == "mine"


def test_delete_todo(db, users):
    """Test that deletion is permanent."""
    alice, _ = users
    service = TodoService(db)
    todo = service.create_todo(alice, TodoCreate(todoTitle="gone"))

    service.delete_todo(alice, todo.id)
    assert service.list_todos(alice) == []
    with pytest.raises(TodoNotFoundError):
        service.delete_todo(alice, todo.id)


def test_get_todo_non_integer_id(db, users):
    """Test that a non-numeric id is treated as not found."""
    alice, _ = users
    with pytest.raises(TodoNotFoundError):
        TodoService(db).get_todo(alice, "abc")


def test_create_with_null_completed(db, users):
    """Test that a null completed flag is stored as false."""
    alice, _ = users
    todo = TodoService(db).create_todo(alice, TodoCreate(todoTitle="t", completed=None))
    assert todo.completed is False
