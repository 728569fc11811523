"""
Todo 变更处理函数（reducer）

三个纯函数：(当前状态, payload) → 下一状态，从不修改入参。
找不到目标 id 时静默 no-op，返回同一个状态对象（Store 据此判断是否通知订阅者）。
"""

import uuid
from typing import assert_never

import structlog

from todo_app.todo.schemas import (
    AddTodo,
    AddTodoPayload,
    RemoveTodo,
    RemoveTodoPayload,
    TodoAction,
    TodoItem,
    TodoListState,
    UpdateTodo,
    UpdateTodoPayload,
)

log = structlog.get_logger()


def new_todo_id() -> str:
    """生成新条目 id（不与现有 id 比对，碰撞概率可忽略）"""
    return uuid.uuid4().hex


def add_todo(state: TodoListState, payload: AddTodoPayload) -> TodoListState:
    """追加新条目到末尾"""
    todo = TodoItem(id=new_todo_id(), text=payload.text)
    return TodoListState(todos=(*state.todos, todo))


def update_todo(state: TodoListState, payload: UpdateTodoPayload) -> TodoListState:
    """替换第一个 id 匹配条目的 text，长度和顺序不变"""
    for index, todo in enumerate(state.todos):
        if todo.id != payload.id:
            continue
        if todo.text == payload.text:
            return state
        updated = todo.model_copy(update={"text": payload.text})
        return TodoListState(
            todos=(*state.todos[:index], updated, *state.todos[index + 1:])
        )

    log.debug("updateTodo 未匹配到条目，忽略", todo_id=payload.id)
    return state


def remove_todo(state: TodoListState, payload: RemoveTodoPayload) -> TodoListState:
    """过滤掉 id 匹配的条目，其余条目相对顺序不变"""
    remaining = tuple(todo for todo in state.todos if todo.id != payload.id)
    if len(remaining) == len(state.todos):
        log.debug("removeTodo 未匹配到条目，忽略", todo_id=payload.id)
        return state
    return TodoListState(todos=remaining)


def todo_reducer(state: TodoListState, action: TodoAction) -> TodoListState:
    """按 Action 类型分发到对应处理函数"""
    match action:
        case AddTodo(payload=payload):
            return add_todo(state, payload)
        case UpdateTodo(payload=payload):
            return update_todo(state, payload)
        case RemoveTodo(payload=payload):
            return remove_todo(state, payload)
        case _:
            assert_never(action)
