"""
Todo 模块：内存中的待办列表

提供 TodoItem / Action schema、三个纯 reducer，以及注册到 Store 的 todo Slice。
"""

from todo_app.todo.reducers import add_todo, remove_todo, todo_reducer, update_todo
from todo_app.todo.schemas import (
    AddTodo,
    RemoveTodo,
    TodoAction,
    TodoItem,
    TodoListState,
    UpdateTodo,
)
from todo_app.todo.slice import TodoSlice, create_todo_store, todo_slice

__all__ = [
    "AddTodo",
    "RemoveTodo",
    "TodoAction",
    "TodoItem",
    "TodoListState",
    "TodoSlice",
    "UpdateTodo",
    "add_todo",
    "create_todo_store",
    "remove_todo",
    "todo_reducer",
    "todo_slice",
    "update_todo",
]
