"""配置常量模块 -- 可通过环境变量覆盖

包含数据库路径、API 前缀、日志格式等可配置项。
"""

import os
from pathlib import Path

def _get_base_dir() -> Path:
    """获取项目 data 基础目录"""
    return Path(os.environ.get("TASKBOARD_DATA_DIR", "data"))

def get_db_path() -> str:
    """获取 SQLite 数据库路径"""
    return os.environ.get(
        "TASKBOARD_DB_PATH",
        str(_get_base_dir() / "sqlite" / "taskboard.db"),
    )

def get_api_prefix() -> str:
    """获取 REST 资源挂载前缀（默认 /api）"""
    prefix = os.environ.get("TASKBOARD_API_PREFIX", "/api").rstrip("/")
    if prefix and not prefix.startswith("/"):
        prefix = f"/{prefix}"
    return prefix

def get_log_format() -> str:
    """日志渲染模式：dev（默认）或 json"""
    return os.environ.get("TASKBOARD_LOG_FORMAT", "dev")

def get_log_level() -> str:
    """日志级别（默认 INFO）"""
    return os.environ.get("TASKBOARD_LOG_LEVEL", "INFO")
