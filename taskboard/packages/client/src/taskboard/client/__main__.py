"""CLI 入口模块 -- python -m taskboard.client <command>

支持的命令：
  list            打印任务列表
  add <title>     创建任务
  toggle <id>     翻转任务完成状态
  delete <id>     删除任务
"""

import asyncio
import sys

from taskboard.core.exceptions import TaskError
from taskboard.core.models import Task

from .client import TaskApiClient
from .config import load_client_config
from .controller import TaskController
from .exceptions import TaskClientError

USAGE = """用法: python -m taskboard.client <command>
命令:
  list            打印任务列表
  add <title>     创建任务
  toggle <id>     翻转任务完成状态
  delete <id>     删除任务"""


def format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"[{mark}] {task.id}: {task.title}"


async def run(command: str, args: list[str]) -> int:
    """执行单条命令，返回进程退出码"""
    config = load_client_config()
    async with TaskApiClient(config) as api:
        controller = TaskController(api)
        try:
            await controller.load()

            if command == "list":
                pass
            elif command == "add" and args:
                task = await controller.add(" ".join(args))
                print(f"已创建: {format_task(task)}")
            elif command == "toggle" and len(args) == 1 and args[0].isdigit():
                task = await controller.toggle(int(args[0]))
                if task is None:
                    print(f"任务不存在: {args[0]}")
                    return 1
                print(f"已更新: {format_task(task)}")
            elif command == "delete" and len(args) == 1 and args[0].isdigit():
                await controller.delete(int(args[0]))
                print(f"已删除: {args[0]}")
            else:
                print(USAGE)
                return 1
        except (TaskError, TaskClientError) as e:
            print(f"操作失败: {e}")
            return 1

        for task in controller.tasks:
            print(format_task(task))
        return 0


def main() -> None:
    """CLI 主入口"""
    if len(sys.argv) < 2:
        print(USAGE)
        sys.exit(1)

    sys.exit(asyncio.run(run(sys.argv[1], sys.argv[2:])))


if __name__ == "__main__":
    main()
