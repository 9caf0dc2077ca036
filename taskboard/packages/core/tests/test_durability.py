"""进程重启持久性测试

测试内容：
1. 创建任务 → 关闭 DB 连接 → 重新打开 → 验证数据完整
2. 重启后 id 不复用
3. WAL 模式验证
"""

from pathlib import Path

import aiosqlite
from taskboard.core.models import Task
from taskboard.core.store import create_store_group
from taskboard.core.store.sqlite_init import init_db, verify_wal_mode
from taskboard.core.store.task_store import SqliteTaskStore


class TestDurability:
    """进程重启后任务不丢失"""

    async def test_data_survives_restart(self, tmp_path: Path):
        """创建任务 → 关闭 → 重新打开 → 数据完整"""
        db_path = str(tmp_path / "durability.db")

        conn1 = await aiosqlite.connect(db_path)
        await init_db(conn1)
        store1 = SqliteTaskStore(conn1)
        task = await store1.create_task("持久性测试任务")
        await store1.replace_task(task.id, task.title, True)
        await conn1.close()

        conn2 = await aiosqlite.connect(db_path)
        await init_db(conn2)
        store2 = SqliteTaskStore(conn2)
        try:
            assert await store2.list_tasks() == [
                Task(id=task.id, title="持久性测试任务", completed=True)
            ]
        finally:
            await conn2.close()

    async def test_deleted_id_not_reused_after_restart(self, tmp_path: Path):
        db_path = str(tmp_path / "reuse.db")

        group = await create_store_group(db_path)
        task = await group.task_store.create_task("short-lived")
        await group.task_store.delete_task(task.id)
        await group.conn.close()

        group = await create_store_group(db_path)
        try:
            fresh = await group.task_store.create_task("fresh")
            assert fresh.id > task.id
        finally:
            await group.conn.close()

    async def test_create_store_group_makes_parent_dir(self, tmp_path: Path):
        db_path = tmp_path / "nested" / "sqlite" / "tasks.db"

        group = await create_store_group(str(db_path))
        try:
            assert db_path.parent.is_dir()
        finally:
            await group.conn.close()

    async def test_wal_mode_enabled(self, core_db):
        assert await verify_wal_mode(core_db) is True
