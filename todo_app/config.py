"""
全局配置模块：通过 pydantic-settings 读取 .env 环境变量
"""

from functools import lru_cache
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用全局配置，从 .env 文件加载（文件不存在时全部取默认值）"""

    model_config = SettingsConfigDict(
        env_file=Path(__file__).parent / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── 应用 ──
    ENV: str = "development"  # development | production
    APP_NAME: str = "todo-store"
    APP_PORT: int = 8000

    # ── 日志 ──
    LOG_LEVEL: str = "INFO"

    # ── Todo 初始状态 ──
    TODO_SEED_TEXT: str = "Hello everyone."  # 种子条目（id=1）的文本

    @model_validator(mode="after")
    def _check_env(self) -> "Settings":
        """ENV 只允许 development / production，避免拼写错误静默走开发配置"""
        if self.ENV not in ("development", "production"):
            raise ValueError(f"ENV 只能是 development 或 production，当前为: {self.ENV}")
        return self


@lru_cache
def get_settings() -> Settings:
    """单例获取配置（带缓存）"""
    return Settings()
