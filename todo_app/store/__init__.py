"""
Store 模块：集中式状态容器 + Slice 抽象

Store 持有根状态，只能通过 dispatch(action) 变更；
各业务域以 Slice 的形式注册（当前只有 todo）。
"""

from todo_app.store.base import Slice
from todo_app.store.errors import (
    DispatchInProgressError,
    InvalidPayloadError,
    SliceConfigError,
    SliceNotFoundError,
    StoreError,
    UnknownActionError,
)
from todo_app.store.store import Listener, Store

__all__ = [
    "DispatchInProgressError",
    "InvalidPayloadError",
    "Listener",
    "Slice",
    "SliceConfigError",
    "SliceNotFoundError",
    "Store",
    "StoreError",
    "UnknownActionError",
]
