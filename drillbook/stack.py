"""A fixed-capacity stack and an interactive menu for exercising it."""

from __future__ import annotations

import sys
from collections.abc import Iterator

DEFAULT_CAPACITY = 100
MENU_CAPACITY = 3

_MENU = "Perform operation on the stack: \n1.Push\n2.Pop\n0.End\nEnter your choice: "


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when popping from an empty stack."""


class BoundedStack:
    """A last-in, first-out stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, item: int) -> None:
        """Put an item on top of the stack."""
        if self.is_full():
            raise StackOverflowError("stack is full")
        self._items.append(item)

    def pop(self) -> int:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)


def _contents(stack: BoundedStack) -> str:
    return "".join(f"{item} " for item in stack)


def _push(stack: BoundedStack, tokens: Iterator[str]) -> bool:
    if stack.is_full():
        print("Present situatation-(Push) of the Stack is: Overflow")
        return True
    print("Enter your Elements: ", end="")
    token = next(tokens, None)
    if token is None:
        return False
    try:
        stack.push(int(token))
    except ValueError:
        print("Invalid Element")
        return True
    print(f"Present situatation-(Push) of the stack: {_contents(stack)}")
    return True


def _pop(stack: BoundedStack) -> None:
    if len(stack) <= 1:
        while not stack.is_empty():
            stack.pop()
        print("Present situatation-(Pop) of the Stack is: Empty")
        return
    stack.pop()
    print(f"Present situatation-(Pop) of the stack: {_contents(stack)}")


def main(argv: list[str] | None = None) -> int:
    """Run the push/pop menu against a three-slot stack, reading from stdin."""
    tokens = iter(sys.stdin.read().split())
    stack = BoundedStack(MENU_CAPACITY)
    while True:
        print(_MENU, end="")
        token = next(tokens, None)
        if token is None:
            return 0
        try:
            choice = int(token)
        except ValueError:
            choice = None
        if choice == 0:
            return 0
        if choice == 1:
            if not _push(stack, tokens):
                return 0
        elif choice == 2:
            _pop(stack)
        else:
            print("Invalid Choice")


if __name__ == "__main__":
    raise SystemExit(main())