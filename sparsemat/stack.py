"""Fixed-capacity double stacks used by sparse graph traversals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Enter(Generic[T]):
    """Marks a node being entered during a depth-first traversal."""

    value: T


@dataclass(frozen=True)
class Exit(Generic[T]):
    """Marks a node being left during a depth-first traversal."""

    value: T


StackVal = Union[Enter, Exit]


def extract_stack_val(stack_val: StackVal) -> Any:
    """Return the value wrapped by an ``Enter`` or ``Exit`` marker."""
    if isinstance(stack_val, (Enter, Exit)):
        return stack_val.value
    raise TypeError(f"expected Enter or Exit, got {type(stack_val).__name__}")


class DStack(Generic[T]):
    """Two stacks sharing one fixed-size storage.

    The left stack grows from the start of the storage towards the end,
    the right stack from the end towards the start. Pushing onto either
    stack raises ``OverflowError`` if the two would overlap.
    """

    def __init__(self, n: int) -> None:
        if n <= 1:
            raise ValueError("a double stack needs a capacity of at least 2")
        self._stacks: list[Optional[T]] = [None] * n
        self._left_head: Optional[int] = None
        self._right_head = n

    def __repr__(self) -> str:
        left = [] if self._left_head is None else self._stacks[: self._left_head + 1]
        right = self._stacks[self._right_head :]
        return f"DStack(capacity={self.capacity()}, left={left!r}, right={right!r})"

    def capacity(self) -> int:
        """Total number of slots shared by both stacks."""
        return len(self._stacks)

    def is_left_empty(self) -> bool:
        return self._left_head is None

    def is_right_empty(self) -> bool:
        return self._right_head == self.capacity()

    def push_left(self, value: T) -> None:
        head = 0 if self._left_head is None else self._left_head + 1
        if head >= self._right_head:
            raise OverflowError("left stack would overlap the right stack")
        self._stacks[head] = value
        self._left_head = head

    def push_right(self, value: T) -> None:
        head = self._right_head - 1
        left = -1 if self._left_head is None else self._left_head
        if head <= left:
            raise OverflowError("right stack would overlap the left stack")
        self._stacks[head] = value
        self._right_head = head

    def pop_left(self) -> Optional[T]:
        """Remove and return the top of the left stack, or None if empty."""
        if self._left_head is None:
            return None
        head = self._left_head
        value = self._stacks[head]
        self._left_head = head - 1 if head > 0 else None
        return value

    def pop_right(self) -> Optional[T]:
        """Remove and return the top of the right stack, or None if empty."""
        if self._right_head >= self.capacity():
            return None
        value = self._stacks[self._right_head]
        self._right_head += 1
        return value

    def len_right(self) -> int:
        return self.capacity() - self._right_head

    def clear_right(self) -> None:
        self._right_head = self.capacity()

    def clear_left(self) -> None:
        self._left_head = None

    def iter_right(self) -> Iterator[T]:
        """Iterate over the right stack from its top, without popping."""
        return iter(self._stacks[self._right_head :])

    def push_left_on_right(self) -> None:
        """Move every value of the left stack onto the right stack."""
        while not self.is_left_empty():
            self.push_right(self.pop_left())

    def push_right_on_left(self) -> None:
        """Move every value of the right stack onto the left stack."""
        while not self.is_right_empty():
            self.push_left(self.pop_right())