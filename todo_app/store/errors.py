"""
Store 异常体系

全部继承 StoreError，调用方可按需精确捕获或统一兜底。
update/remove 找不到目标 id 不属于错误（静默 no-op），这里没有 NotFound。
"""

from pydantic import ValidationError


class StoreError(Exception):
    """Store 相关异常基类"""


class SliceConfigError(StoreError):
    """Store 构造时 Slice 配置非法（重名、为空）"""


class SliceNotFoundError(StoreError, KeyError):
    """读取不存在的 Slice"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"未注册的 Slice: {name}")

    def __str__(self) -> str:
        # KeyError 默认会给消息加引号
        return self.args[0]


class UnknownActionError(StoreError):
    """Action 类型不属于任何已注册的 Slice"""

    def __init__(self, action_type: object):
        self.action_type = action_type
        super().__init__(f"未知 Action 类型: {action_type!r}")


class InvalidPayloadError(StoreError):
    """Action payload 校验失败（例如 addTodo 缺少 text）"""

    def __init__(self, action_type: str, error: ValidationError):
        self.action_type = action_type
        self.errors = error.errors(include_url=False)
        super().__init__(f"Action {action_type} payload 非法: {error.error_count()} 处错误")


class DispatchInProgressError(StoreError):
    """在 reducer 执行期间再次 dispatch"""

    def __init__(self, action_type: str):
        self.action_type = action_type
        super().__init__(f"reducer 执行期间不允许 dispatch（{action_type}）")
