"""CLI 入口模块 -- python -m taskboard.core <command>

支持的命令：
  init-db         初始化 SQLite 数据库
  list-tasks      打印当前 Store 中的全部任务
  show-task <id>  打印单个任务
"""

import asyncio
import sys

from .config import get_db_path
from .models import Task

USAGE = """用法: python -m taskboard.core <command>
命令:
  init-db         初始化 SQLite 数据库
  list-tasks      打印全部任务
  show-task <id>  打印单个任务"""


def main() -> None:
    """CLI 主入口"""
    if len(sys.argv) < 2:
        print(USAGE)
        sys.exit(1)

    command = sys.argv[1]

    if command == "init-db":
        asyncio.run(init_database())
    elif command == "list-tasks":
        asyncio.run(list_tasks())
    elif command == "show-task":
        if len(sys.argv) < 3 or not sys.argv[2].isdigit():
            print("用法: python -m taskboard.core show-task <id>")
            sys.exit(1)
        if not asyncio.run(show_task(int(sys.argv[2]))):
            sys.exit(1)
    else:
        print(f"未知命令: {command}")
        print("可用命令: init-db, list-tasks, show-task")
        sys.exit(1)


def _format(task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"[{mark}] {task.id}: {task.title}"


async def init_database() -> None:
    """创建数据库文件与表结构"""
    from .store import create_store_group

    db_path = get_db_path()
    print(f"数据库路径: {db_path}")

    store_group = await create_store_group(db_path)
    await store_group.conn.close()
    print("初始化完成")


async def list_tasks() -> None:
    """直接从 Store 读取任务列表"""
    from .store import create_store_group

    store_group = await create_store_group(get_db_path())
    try:
        tasks = await store_group.task_store.list_tasks()
        for task in tasks:
            print(_format(task))
        print(f"共 {len(tasks)} 条任务")
    finally:
        await store_group.conn.close()


async def show_task(task_id: int) -> bool:
    """按 id 读取单个任务，不存在时返回 False"""
    from .store import create_store_group

    store_group = await create_store_group(get_db_path())
    try:
        task = await store_group.task_store.get_task(task_id)
    finally:
        await store_group.conn.close()

    if task is None:
        print(f"任务不存在: {task_id}")
        return False
    print(_format(task))
    return True


if __name__ == "__main__":
    main()
