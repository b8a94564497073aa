from __future__ import annotations

import argparse
import builtins
import os
import subprocess
from collections.abc import Callable, Sequence

SOURCES = ["src", "tests", "examples"]


def run(cmd: Sequence[str], env: dict[str, str] | None = None) -> int:
    print("$", " ".join(cmd))
    proc = subprocess.run(cmd, env={**os.environ, **(env or {})})
    return proc.returncode


actions: dict[str, Callable[[], int]] = {}


def action(fn: Callable[[], int]) -> Callable[[], int]:
    actions[fn.__name__.replace("_", ":")] = fn
    return fn


@action
def setup() -> int:
    return run(["uv", "sync", "--all-groups", "--extra", "test"])


@action
def lint() -> int:
    return run(["uv", "run", "ruff", "check", *SOURCES])


@action
def format() -> int:
    return run(["uv", "run", "black", *SOURCES])


@action
def typecheck() -> int:
    return run(["uv", "run", "mypy"])


@action
def test() -> int:
    return run(["uv", "run", "pytest", "-q", "--cov=wxwork_bot", "--cov-report=term-missing"])


@action
def test_live() -> int:
    # Sends real messages to the group behind WXWORK_BOT_KEY
    if not os.environ.get("WXWORK_BOT_KEY"):
        print("WXWORK_BOT_KEY is not set; live tests need a real webhook key")
        return 2
    return run(["uv", "run", "pytest", "-q", "tests/core/test_client.py::TestLive"])


@action
def build() -> int:
    return run(["uv", "build"])


@action
def ci() -> int:  # run common checks
    codes = [
        lint(),
        run(["uv", "run", "black", "--check", *SOURCES]),
        typecheck(),
        test(),
        build(),
    ]
    return 0 if builtins.all(code == 0 for code in codes) else 1


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Task runner for common dev workflows")
    task_list = ", ".join(sorted(actions))
    parser.add_argument("task", nargs="?", default="ci", help=f"Task to run: {task_list}")
    args = parser.parse_args(argv)

    task_name = args.task.replace("_", ":")
    fn = actions.get(task_name)
    if not fn:
        print(f"Unknown task '{args.task}'. Known tasks: {', '.join(sorted(actions))}")
        return 2
    return fn()


if __name__ == "__main__":
    raise SystemExit(main())
