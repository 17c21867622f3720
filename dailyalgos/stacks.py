"""Stack manipulation on Python lists whose last element is the top."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def delete_middle(stack: list[T]) -> T | None:
    """Remove and return the middle element of the stack, or None if it is empty.

    The middle lies size // 2 places below the top.
    """
    if not stack:
        return None
    return stack.pop(len(stack) - 1 - len(stack) // 2)