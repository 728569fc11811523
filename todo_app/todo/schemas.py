"""
Todo 数据模型

状态与 Action 全部是不可变 Pydantic model：
- TodoItem / TodoListState：todo Slice 的状态
- AddTodo / UpdateTodo / RemoveTodo：封闭的 Action 联合，按 type 字段区分
  （type 取值与前端 Action 名保持一致：addTodo / updateTodo / removeTodo）
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

# 种子条目是整数 id，新建条目是字符串 id
TodoId = str | int


class TodoItem(BaseModel):
    """单个 Todo 条目，id 创建后不可变"""

    model_config = ConfigDict(frozen=True)

    id: TodoId
    text: str


class TodoListState(BaseModel):
    """todo Slice 状态：保持插入顺序的条目序列"""

    model_config = ConfigDict(frozen=True)

    todos: tuple[TodoItem, ...] = ()


# ── Action payload ──

class AddTodoPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str  # 允许空字符串，只校验存在


class UpdateTodoPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: TodoId
    text: str


class RemoveTodoPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: TodoId


# ── Action ──

class AddTodo(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["addTodo"] = "addTodo"
    payload: AddTodoPayload


class UpdateTodo(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["updateTodo"] = "updateTodo"
    payload: UpdateTodoPayload


class RemoveTodo(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["removeTodo"] = "removeTodo"
    payload: RemoveTodoPayload


TodoAction = Annotated[AddTodo | UpdateTodo | RemoveTodo, Field(discriminator="type")]

todo_action_adapter = TypeAdapter(TodoAction)

TODO_ACTION_TYPES: frozenset[str] = frozenset(
    cls.model_fields["type"].default for cls in (AddTodo, UpdateTodo, RemoveTodo)
)
