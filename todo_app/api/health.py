"""
健康检查接口：探活 + Store 状态
"""

from fastapi import APIRouter, Depends

from todo_app.api.deps import get_store
from todo_app.store import Store
from todo_app.todo import todo_slice

router = APIRouter(tags=["健康检查"])


@router.get("/health")
async def health_check(store: Store = Depends(get_store)):
    """健康检查：Store 已就绪 + 当前条目数"""
    return {
        "status": "ok",
        "slices": store.slice_names,
        "todo_count": len(todo_slice.select_todos(store.get_state())),
    }
