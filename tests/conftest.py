import pytest
from fastapi.testclient import TestClient

from todo_app.store import Store
from todo_app.todo import TodoItem, TodoListState, create_todo_store


@pytest.fixture
def seeded_state() -> TodoListState:
    return TodoListState(todos=(TodoItem(id=1, text="Hello everyone."),))


@pytest.fixture
def three_todos() -> TodoListState:
    return TodoListState(
        todos=(
            TodoItem(id=1, text="one"),
            TodoItem(id="b", text="two"),
            TodoItem(id="c", text="three"),
        )
    )


@pytest.fixture
def store() -> Store:
    return create_todo_store()


@pytest.fixture
def client():
    # lifespan 每次都新建 Store，用例之间互不影响
    from todo_app.main import app

    with TestClient(app) as test_client:
        yield test_client
