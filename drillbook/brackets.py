"""Checking whether brackets in a string close in the right order."""

from __future__ import annotations

import sys

_PAIRS = {"(": ")", "{": "}", "[": "]"}


def is_matching_pair(opening: str, closing: str) -> bool:
    """True if ``closing`` is the bracket that closes ``opening``."""
    return _PAIRS.get(opening) == closing


def is_balanced(text: str) -> bool:
    """True if every closing character closes the most recent open bracket.

    Any character that is not an opening bracket is treated as a closer,
    so it must match the bracket on top of the stack. Brackets that are
    still open when the text ends are not counted as an error.
    """
    stack: list[str] = []
    for ch in text:
        if ch in _PAIRS:
            stack.append(ch)
        elif not stack or not is_matching_pair(stack[-1], ch):
            return False
        else:
            stack.pop()
    return True


def main(argv: list[str] | None = None) -> int:
    """Read one word from stdin and print YES if it is balanced, NO if not."""
    tokens = sys.stdin.read().split()
    word = tokens[0] if tokens else ""
    print("YES" if is_balanced(word) else "NO")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())