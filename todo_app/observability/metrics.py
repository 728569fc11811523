"""
Prometheus 指标定义

所有指标统一在此文件定义，中间件和 Store 按需引用。
"""

from prometheus_client import Counter, Histogram

# ── 请求级指标 ──

REQUEST_TOTAL = Counter(
    "todo_request_total",
    "HTTP 请求总数",
    ["method", "endpoint", "status_code"],
)

REQUEST_DURATION = Histogram(
    "todo_request_duration_ms",
    "HTTP 请求耗时（毫秒）",
    ["method", "endpoint"],
    buckets=[1, 5, 10, 50, 100, 500, 1000],
)

# ── Store 指标 ──

DISPATCH_TOTAL = Counter(
    "todo_dispatch_total",
    "Action 分发总数",
    ["action", "changed"],  # changed: true/false（状态是否发生变化）
)

# ── 错误指标 ──

ERROR_TOTAL = Counter(
    "todo_error_total",
    "错误总数",
    ["error_type"],  # unknown_action/invalid_payload/dispatch_in_progress
)
