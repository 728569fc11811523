"""
FastAPI 依赖注入：从 app.state 取出 lifespan 中创建的 Store
"""

from fastapi import Request

from todo_app.store import Store


def get_store(request: Request) -> Store:
    """FastAPI 依赖注入用"""
    return request.app.state.store
