"""An interactive, menu-driven stack of bounded size."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

MENU = "MENU:\n1. Push\n2. Pop\n3. Display Stack\n4. Exit"


def _parse(token: object) -> int | None:
    try:
        return int(str(token).strip())
    except ValueError:
        return None


def _render(stack: list[int]) -> str:
    if not stack:
        return "[]"
    return "\n[" + ", ".join(str(value) for value in stack) + "]"


def run_menu(size: int, commands: Iterable[object], out: TextIO) -> list[int]:
    """Run the menu over ``commands`` tokens, writing to ``out``; return the stack."""
    if size < 0:
        raise ValueError("size must not be negative")
    stack: list[int] = []
    tokens = iter(commands)
    out.write(MENU)
    while True:
        out.write("\nEnter choice: ")
        token = next(tokens, None)
        if token is None:
            break
        choice = _parse(token)
        if choice == 1:
            out.write("Enter value to push: ")
            raw = next(tokens, None)
            if raw is None:
                break
            value = _parse(raw)
            if value is None:
                out.write("Invalid value. Element not pushed.")
            elif len(stack) >= size:
                out.write("Stack overflow. Element not pushed.")
            else:
                stack.append(value)
                out.write(f"{value} pushed in the stack")
        elif choice == 2:
            if stack:
                out.write(f"{stack.pop()} popped from the stack")
            else:
                out.write("Stack underflow. No element available to pop.")
        elif choice == 3:
            out.write(_render(stack))
        elif choice == 4:
            break
        else:
            out.write("Wrong choice. Try again.")
    return stack


def _stdin_tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Run the stack menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Menu-driven stack.")
    parser.add_argument("--size", type=int, default=None, help="stack capacity")
    args = parser.parse_args(argv)
    tokens = _stdin_tokens()
    size = args.size
    while size is None:
        sys.stdout.write("Enter stack size: ")
        sys.stdout.flush()
        token = next(tokens, None)
        if token is None:
            return 1
        size = _parse(token)
        if size is not None and size < 0:
            size = None
    run_menu(size, tokens, sys.stdout)
    sys.stdout.write("\n")
    return 0