"""Taskboard Core Domain Models -- 公共类型导出"""

from .task import Task, TaskDraft, normalize_title

__all__ = [
    "Task",
    "TaskDraft",
    "normalize_title",
]
