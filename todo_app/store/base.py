"""
Slice 抽象基类

Slice 强制约束：
1. name — 在根状态中的 key（如 "todo"）
2. initial_state — Store 创建时的初始状态（不可变 Pydantic model）
3. action_adapter / action_types — 本 Slice 接受的 Action 联合类型
4. reduce — (当前状态, action) → 下一状态，纯函数，不得修改入参

Action 类型名支持带前缀写法（"todo/addTodo"），前缀必须与 Slice name 一致。
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from todo_app.store.errors import InvalidPayloadError


class Slice(ABC):
    """状态切片抽象基类，所有 Slice 必须继承"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Slice 唯一名称"""
        ...

    @property
    @abstractmethod
    def initial_state(self) -> BaseModel:
        """初始状态"""
        ...

    @property
    @abstractmethod
    def action_adapter(self) -> TypeAdapter:
        """Action 联合类型的 TypeAdapter，用于把原始 dict 解析为强类型 Action"""
        ...

    @property
    @abstractmethod
    def action_types(self) -> frozenset[str]:
        """本 Slice 处理的 Action 类型名（不带前缀）"""
        ...

    @abstractmethod
    def reduce(self, state: BaseModel, action: Any) -> BaseModel:
        """计算下一状态；状态未变化时必须返回同一个对象"""
        ...

    def normalize_type(self, action_type: str) -> str:
        """去掉 "{name}/" 前缀"""
        prefix = f"{self.name}/"
        if action_type.startswith(prefix):
            return action_type[len(prefix):]
        return action_type

    def accepts(self, action_type: str) -> bool:
        return self.normalize_type(action_type) in self.action_types

    def parse_action(self, raw: Mapping[str, Any]) -> Any:
        """原始 dict → 强类型 Action，payload 非法时抛 InvalidPayloadError"""
        action_type = self.normalize_type(str(raw.get("type", "")))
        try:
            return self.action_adapter.validate_python({**raw, "type": action_type})
        except ValidationError as e:
            raise InvalidPayloadError(action_type, e) from e

    def validate_action(self, action: Any) -> Any:
        """
        强类型 Action 再过一遍 adapter：本 Slice 的 Action 实例原样返回，
        其他对象按属性解析，解析不了抛 InvalidPayloadError，保证 reduce 只收到合法 Action
        """
        try:
            return self.action_adapter.validate_python(action, from_attributes=True)
        except ValidationError as e:
            raise InvalidPayloadError(self.normalize_type(str(action.type)), e) from e
