"""
控制台交互：不启动 HTTP 服务，直接对内存 Store 分发 Action

运行方式：
    todo-console
    python -m todo_app.console

支持命令：
    /add <text>        — 新增待办
    /edit <id> <text>  — 修改待办文本
    /rm <id>           — 删除待办
    /list              — 显示当前列表
    /quit              — 退出
"""

import asyncio

from prompt_toolkit import PromptSession

from todo_app.config import get_settings
from todo_app.observability.logging_config import setup_logging
from todo_app.store import Store, StoreError
from todo_app.todo import create_todo_store, todo_slice

HELP = "命令: /add <text> | /edit <id> <text> | /rm <id> | /list | /quit"


def render(store: Store) -> str:
    """把当前列表渲染成多行文本"""
    todos = todo_slice.select_todos(store.get_state())
    if not todos:
        return "  （空）"
    return "\n".join(f"  [{todo.id}] {todo.text}" for todo in todos)


def run_command(store: Store, line: str) -> bool:
    """
    执行一条控制台命令，返回 False 表示退出。

    命令格式错误只提示不抛异常；状态变化由订阅者负责重新渲染。
    """
    command, _, rest = line.strip().partition(" ")
    rest = rest.strip()

    if command == "/quit":
        return False
    if command == "/list":
        print(render(store))
    elif command == "/add":
        store.dispatch(todo_slice.actions.add_todo(rest))
    elif command == "/edit":
        raw_id, _, text = rest.partition(" ")
        if not raw_id:
            print(HELP)
        else:
            todo_id = todo_slice.resolve_id(store.get_state(), raw_id)
            store.dispatch(todo_slice.actions.update_todo(todo_id, text))
    elif command == "/rm":
        if not rest:
            print(HELP)
        else:
            todo_id = todo_slice.resolve_id(store.get_state(), rest)
            store.dispatch(todo_slice.actions.remove_todo(todo_id))
    else:
        print(HELP)
    return True


async def main():
    """控制台主循环"""
    settings = get_settings()
    setup_logging(env=settings.ENV, level="WARNING")

    store = create_todo_store(settings.TODO_SEED_TEXT)
    unsubscribe = store.subscribe(lambda: print(render(store)))

    print("=" * 60)
    print("  待办列表控制台")
    print(f"  {HELP}")
    print("=" * 60)
    print(render(store))

    pt_session = PromptSession()
    try:
        while True:
            try:
                line = (await pt_session.prompt_async("todo> ")).strip()
            except (EOFError, KeyboardInterrupt):
                print("\n再见！")
                break

            if not line:
                continue

            try:
                if not run_command(store, line):
                    print("再见！")
                    break
            except StoreError as e:
                print(f"\033[31m错误: {e}\033[0m")
    finally:
        unsubscribe()


def run() -> None:
    """console_scripts 入口"""
    asyncio.run(main())


if __name__ == "__main__":
    run()
