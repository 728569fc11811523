"""
Store：集中式状态容器

根状态 = {slice.name: slice_state}，只能通过 dispatch(action) 改变。
- dispatch 同步执行：reducer 全部跑完 → 替换根状态 → 依次通知订阅者
- 根状态 dict 每次变化都整体替换（copy-on-write），get_state() 拿到的是快照
- reducer 内部再 dispatch 直接拒绝（DispatchInProgressError）
- 状态未变化（reducer 返回同一对象）时不通知订阅者
"""

from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any

import structlog

from todo_app.observability.metrics import DISPATCH_TOTAL, ERROR_TOTAL
from todo_app.store.base import Slice
from todo_app.store.errors import (
    DispatchInProgressError,
    InvalidPayloadError,
    SliceConfigError,
    SliceNotFoundError,
    UnknownActionError,
)

log = structlog.get_logger()

Listener = Callable[[], None]


class Store:
    """单写者状态容器"""

    def __init__(self, slices: Iterable[Slice]):
        self._slices: dict[str, Slice] = {}
        for slice_ in slices:
            if slice_.name in self._slices:
                raise SliceConfigError(f"Slice 名称重复: {slice_.name}")
            self._slices[slice_.name] = slice_
        if not self._slices:
            raise SliceConfigError("Store 至少需要一个 Slice")

        self._state: dict[str, Any] = {
            name: slice_.initial_state for name, slice_ in self._slices.items()
        }
        self._listeners: list[Listener] = []
        self._dispatching = False
        log.debug("Store 已创建", slices=list(self._slices))

    # ── 读接口 ──

    def get_state(self) -> Mapping[str, Any]:
        """只读的根状态快照"""
        return MappingProxyType(self._state)

    def select(self, name: str) -> Any:
        """读取单个 Slice 的状态"""
        if name not in self._state:
            raise SliceNotFoundError(name)
        return self._state[name]

    @property
    def slice_names(self) -> list[str]:
        return list(self._slices)

    # ── 订阅 ──

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        注册状态变化监听器，返回取消订阅函数（重复调用无副作用）。

        通知期间新增/取消的订阅从下一次 dispatch 开始生效。
        """
        self._listeners.append(listener)
        subscribed = True

        def unsubscribe() -> None:
            nonlocal subscribed
            if not subscribed:
                return
            subscribed = False
            self._listeners.remove(listener)

        return unsubscribe

    # ── 写接口 ──

    def dispatch(self, action: Any) -> Any:
        """
        分发一个 Action，返回解析后的强类型 Action。

        action 可以是强类型 Action（带 type 属性），也可以是原始 dict：
        {"type": "addTodo", "payload": {"text": "..."}}
        """
        if self._dispatching:
            ERROR_TOTAL.labels(error_type="dispatch_in_progress").inc()
            raise DispatchInProgressError(self._type_of(action))

        try:
            typed = self._coerce(action)
        except UnknownActionError:
            ERROR_TOTAL.labels(error_type="unknown_action").inc()
            log.warning("未知 Action，已拒绝", action=self._type_of(action))
            raise
        except InvalidPayloadError as e:
            ERROR_TOTAL.labels(error_type="invalid_payload").inc()
            log.warning("Action payload 非法，已拒绝", action=e.action_type, errors=e.errors)
            raise

        action_type = typed.type
        next_state = dict(self._state)
        changed = False

        self._dispatching = True
        try:
            for name, slice_ in self._slices.items():
                if not slice_.accepts(action_type):
                    continue
                prev = self._state[name]
                nxt = slice_.reduce(prev, typed)
                if nxt is not prev:
                    next_state[name] = nxt
                    changed = True
        finally:
            self._dispatching = False

        DISPATCH_TOTAL.labels(action=action_type, changed=str(changed).lower()).inc()
        log.info("Action 已分发", action=action_type, changed=changed)

        if changed:
            self._state = next_state
            # 快照遍历：通知期间的订阅变更不影响本轮
            for listener in list(self._listeners):
                listener()

        return typed

    def _coerce(self, action: Any) -> Any:
        """原始 dict 和强类型 Action 都交给所属 Slice 校验"""
        action_type = self._type_of(action)
        if not isinstance(action_type, str):
            raise UnknownActionError(action_type)

        owner = next(
            (s for s in self._slices.values() if s.accepts(action_type)), None
        )
        if owner is None:
            raise UnknownActionError(action_type)

        if isinstance(action, Mapping):
            return owner.parse_action(action)
        return owner.validate_action(action)

    @staticmethod
    def _type_of(action: Any) -> Any:
        if isinstance(action, Mapping):
            return action.get("type")
        return getattr(action, "type", None)
