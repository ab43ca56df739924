"""CLI 入口模块 -- python -m taskrepo.core <command>

支持的命令：
  add <description> <status>                创建任务
  list                                      列出全部任务
  get <task_id>                             查询任务详情
  set-status <task_id> <status>             更新任务状态
  set-description <task_id> <description>   更新任务描述
  delete <task_id>                          删除任务

输出为 JSON；仓库错误写到 stderr 并以退出码 1 结束。
"""

import asyncio
import sys

from pydantic import TypeAdapter, ValidationError

from .config import RepositoryConfig, load_repository_config
from .exceptions import TaskRepositoryError
from .logging_config import setup_logging
from .models.task import Task
from .repository import TaskRepository, create_repository

# 命令名 -> 位置参数个数
COMMANDS: dict[str, int] = {
    "add": 2,
    "list": 0,
    "get": 1,
    "set-status": 2,
    "set-description": 2,
    "delete": 1,
}

_TASK_LIST = TypeAdapter(list[Task])


def _print_usage() -> None:
    print("用法: python -m taskrepo.core <command> [args...]")
    print("命令:")
    print("  add <description> <status>                创建任务")
    print("  list                                      列出全部任务")
    print("  get <task_id>                             查询任务详情")
    print("  set-status <task_id> <status>             更新任务状态")
    print("  set-description <task_id> <description>   更新任务描述")
    print("  delete <task_id>                          删除任务")


def main(argv: list[str] | None = None) -> None:
    """CLI 主入口"""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        _print_usage()
        sys.exit(1)

    command, params = args[0], args[1:]
    expected = COMMANDS.get(command)
    if expected is None:
        print(f"未知命令: {command}")
        print(f"可用命令: {', '.join(COMMANDS)}")
        sys.exit(1)
    if len(params) != expected:
        print(f"命令 {command} 需要 {expected} 个参数，收到 {len(params)} 个")
        _print_usage()
        sys.exit(1)

    setup_logging()

    try:
        config = load_repository_config()
    except ValidationError as e:
        print(f"error: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        output = asyncio.run(run_command(config, command, params))
    except TaskRepositoryError as e:
        print(f"error: {e.message}", file=sys.stderr)
        sys.exit(1)

    print(output)


async def run_command(config: RepositoryConfig, command: str, params: list[str]) -> str:
    """打开仓库，执行一条命令并返回 JSON 文本"""
    repository = await create_repository(config)
    try:
        return await _dispatch(repository, command, params)
    finally:
        await repository.close()


async def _dispatch(repository: TaskRepository, command: str, params: list[str]) -> str:
    if command == "add":
        return _dump(await repository.add_task(params[0], params[1]))
    if command == "list":
        tasks = await repository.get_task_list()
        return _TASK_LIST.dump_json(tasks).decode()
    if command == "get":
        return _dump(await repository.get_task_details(params[0]))
    if command == "set-status":
        return _dump(await repository.update_task_status(params[0], params[1]))
    if command == "set-description":
        return _dump(await repository.update_task_description(params[0], params[1]))
    if command == "delete":
        return _dump(await repository.delete_task(params[0]))
    raise ValueError(f"unknown command: {command}")


def _dump(task: Task | None) -> str:
    if task is None:
        return "null"
    return task.model_dump_json()


if __name__ == "__main__":
    main()
