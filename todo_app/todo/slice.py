"""
todo Slice：初始状态 + reducer + Action 构造函数
"""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter

from todo_app.store import Slice, Store
from todo_app.todo.reducers import todo_reducer
from todo_app.todo.schemas import (
    TODO_ACTION_TYPES,
    AddTodo,
    AddTodoPayload,
    RemoveTodo,
    RemoveTodoPayload,
    TodoAction,
    TodoId,
    TodoItem,
    TodoListState,
    UpdateTodo,
    UpdateTodoPayload,
    todo_action_adapter,
)

SEED_TODO_ID = 1
DEFAULT_SEED_TEXT = "Hello everyone."

# 只认 ASCII 0-9，str.isdigit() 会放过 "²"、"١" 之类的字符
_ASCII_DIGITS = re.compile(r"[0-9]+")


class TodoActions:
    """Action 构造函数，调用方不用手写 payload"""

    @staticmethod
    def add_todo(text: str) -> AddTodo:
        return AddTodo(payload=AddTodoPayload(text=text))

    @staticmethod
    def update_todo(todo_id: TodoId, text: str) -> UpdateTodo:
        return UpdateTodo(payload=UpdateTodoPayload(id=todo_id, text=text))

    @staticmethod
    def remove_todo(todo_id: TodoId) -> RemoveTodo:
        return RemoveTodo(payload=RemoveTodoPayload(id=todo_id))


class TodoSlice(Slice):
    """todo 业务域的状态切片"""

    actions = TodoActions()

    def __init__(self, seed_text: str = DEFAULT_SEED_TEXT):
        self._initial_state = TodoListState(
            todos=(TodoItem(id=SEED_TODO_ID, text=seed_text),)
        )

    @property
    def name(self) -> str:
        return "todo"

    @property
    def initial_state(self) -> TodoListState:
        return self._initial_state

    @property
    def action_adapter(self) -> TypeAdapter:
        return todo_action_adapter

    @property
    def action_types(self) -> frozenset[str]:
        return TODO_ACTION_TYPES

    def reduce(self, state: TodoListState, action: TodoAction) -> TodoListState:
        return todo_reducer(state, action)

    def select_todos(self, root_state: Mapping[str, Any]) -> tuple[TodoItem, ...]:
        """从根状态中取出 todos 序列"""
        return root_state[self.name].todos

    def resolve_id(self, root_state: Mapping[str, Any], raw_id: str) -> TodoId:
        """
        外部输入（路径参数、控制台）的 id 一律是字符串：
        先按字符串精确匹配；纯 ASCII 数字时再匹配整数 id 的条目（种子条目 id=1）。
        都找不到时原样返回，交给 reducer 做 no-op。
        """
        todos = self.select_todos(root_state)
        if any(todo.id == raw_id for todo in todos):
            return raw_id
        if _ASCII_DIGITS.fullmatch(raw_id) and any(todo.id == int(raw_id) for todo in todos):
            return int(raw_id)
        return raw_id


todo_slice = TodoSlice()


def create_todo_store(seed_text: str = DEFAULT_SEED_TEXT) -> Store:
    """创建只含 todo Slice 的 Store（应用启动时调用一次）"""
    return Store([TodoSlice(seed_text)])
