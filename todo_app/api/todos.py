"""
/todos 接口：读取列表 + 通过 dispatch 完成增/改/删

端点：
- GET    /todos            — 当前列表
- POST   /todos            — addTodo，返回新条目
- PUT    /todos/{todo_id}  — updateTodo，id 不存在时静默 no-op
- DELETE /todos/{todo_id}  — removeTodo，id 不存在时静默 no-op
- POST   /actions          — 直接分发原始 Action（{"type", "payload"}）

所有端点都是 async def：dispatch 在事件循环线程上串行执行，不会交错。
"""

from typing import Any

import structlog
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from todo_app.api.deps import get_store
from todo_app.store import Store
from todo_app.todo import TodoItem, todo_slice

router = APIRouter(tags=["待办"])
log = structlog.get_logger()


# ── 请求/响应模型 ──

class TodoTextRequest(BaseModel):
    text: str


class ActionRequest(BaseModel):
    type: str
    payload: dict[str, Any] = {}


class TodoListResponse(BaseModel):
    todos: list[TodoItem]


def _todos(store: Store) -> TodoListResponse:
    return TodoListResponse(todos=list(todo_slice.select_todos(store.get_state())))


@router.get("/todos", response_model=TodoListResponse)
async def list_todos(store: Store = Depends(get_store)):
    """当前待办列表（只读）"""
    return _todos(store)


@router.post("/todos", response_model=TodoItem, status_code=status.HTTP_201_CREATED)
async def create_todo(req: TodoTextRequest, store: Store = Depends(get_store)):
    """新增待办，返回本次新建的条目"""
    before_ids = {todo.id for todo in todo_slice.select_todos(store.get_state())}
    store.dispatch(todo_slice.actions.add_todo(req.text))
    # 订阅者可能在通知期间继续 dispatch，末尾不一定是本次新建的条目
    created = next(
        todo for todo in todo_slice.select_todos(store.get_state())
        if todo.id not in before_ids
    )
    log.info("待办已新增", todo_id=created.id)
    return created


@router.put("/todos/{todo_id}", response_model=TodoListResponse)
async def update_todo(
    todo_id: str,
    req: TodoTextRequest,
    store: Store = Depends(get_store),
):
    """修改待办文本"""
    resolved = todo_slice.resolve_id(store.get_state(), todo_id)
    store.dispatch(todo_slice.actions.update_todo(resolved, req.text))
    return _todos(store)


@router.delete("/todos/{todo_id}", response_model=TodoListResponse)
async def delete_todo(todo_id: str, store: Store = Depends(get_store)):
    """删除待办"""
    resolved = todo_slice.resolve_id(store.get_state(), todo_id)
    store.dispatch(todo_slice.actions.remove_todo(resolved))
    return _todos(store)


@router.post("/actions", response_model=TodoListResponse)
async def dispatch_action(req: ActionRequest, store: Store = Depends(get_store)):
    """
    直接分发原始 Action，type 支持 addTodo / todo/addTodo 两种写法。

    未知 type 或 payload 非法由 main.py 中注册的异常处理器转成 422。
    """
    store.dispatch(req.model_dump())
    return _todos(store)
