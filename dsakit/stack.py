"""A fixed-capacity stack that refuses to grow past its size."""

from __future__ import annotations

from typing import Any


class StackOverflowError(IndexError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""


class BoundedStack:
    """A last-in first-out stack holding at most ``size`` items."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._items: list[Any] = []

    def push(self, element: Any) -> None:
        """Put ``element`` on top; raise StackOverflowError when full."""
        if len(self._items) >= self.size:
            raise StackOverflowError("stack overflow")
        self._items.append(element)

    def pop(self) -> Any:
        """Remove and return the top item; raise StackUnderflowError when empty."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it; raise StackUnderflowError when empty."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)