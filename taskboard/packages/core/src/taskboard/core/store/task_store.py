"""TaskStore SQLite 实现

所有请求共享同一个 aiosqlite 连接，而 SQLite 的事务是按连接划分的：
两个写操作若交错执行，一方的 rollback 会连带撤销另一方已执行但未提交的语句。
因此读写都在 _lock 内完成，写操作的"执行 + 提交/回滚"不会与其他请求交错。
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiosqlite
import structlog

from ..exceptions import TaskNotFoundError
from ..models.task import Task, normalize_title

log = structlog.get_logger()


class SqliteTaskStore:
    """TaskStore 的 SQLite 实现"""

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """独占连接执行一个写事务：正常退出时提交，异常时回滚并向上抛出"""
        async with self._lock:
            try:
                yield self._conn
                await self._conn.commit()
            except Exception:
                await self._conn.rollback()
                raise

    async def list_tasks(self) -> list[Task]:
        """查询任务列表，按 id 升序"""
        async with self._lock:
            cursor = await self._conn.execute(
                "SELECT id, title, completed FROM tasks ORDER BY id"
            )
            rows = await cursor.fetchall()
        return [self._row_to_task(row) for row in rows]

    async def get_task(self, task_id: int) -> Task | None:
        """根据 id 查询任务"""
        async with self._lock:
            cursor = await self._conn.execute(
                "SELECT id, title, completed FROM tasks WHERE id = ?",
                (task_id,),
            )
            row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_task(row)

    async def create_task(self, title: str) -> Task:
        """创建任务记录

        Raises:
            TaskValidationError: 标题非法，此时不发生任何写入
        """
        title = normalize_title(title)
        async with self._transaction() as conn:
            cursor = await conn.execute(
                "INSERT INTO tasks (title, completed) VALUES (?, 0)",
                (title,),
            )
            task_id = cursor.lastrowid
        log.debug("task_row_inserted", task_id=task_id)
        return Task(id=task_id, title=title, completed=False)

    async def replace_task(self, task_id: int, title: str, completed: bool) -> Task:
        """整体替换 title 与 completed

        Raises:
            TaskValidationError: 标题为空或仅含空白，此时不发生任何写入
            TaskNotFoundError: id 不存在
        """
        title = normalize_title(title)
        async with self._transaction() as conn:
            cursor = await conn.execute(
                "UPDATE tasks SET title = ?, completed = ? WHERE id = ?",
                (title, int(completed), task_id),
            )
            updated = cursor.rowcount
        if updated == 0:
            raise TaskNotFoundError(task_id)
        return Task(id=task_id, title=title, completed=completed)

    async def delete_task(self, task_id: int) -> None:
        """删除任务记录（幂等）"""
        async with self._transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM tasks WHERE id = ?",
                (task_id,),
            )
        if cursor.rowcount == 0:
            log.debug("task_delete_noop", task_id=task_id)

    @staticmethod
    def _row_to_task(row) -> Task:
        """将数据库行转换为 Task 模型"""
        return Task(id=row[0], title=row[1], completed=bool(row[2]))
