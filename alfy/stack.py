"""A last-in, first-out stack of intervals."""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


class IntervalStack(Generic[T]):
    """Stack that holds intervals of any kind while an lcp tree is traversed."""

    def __init__(self) -> None:
        self._items: List[T] = []

    @property
    def top(self) -> Optional[T]:
        """The item on top of the stack, or None when the stack is empty."""
        return self._items[-1] if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def push(self, item: T) -> None:
        """Put an item on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item; raises IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty interval stack")
        return self._items.pop()

    def is_empty(self) -> bool:
        """Tell whether the stack holds no items."""
        return not self._items

    def clear(self, release: Optional[Callable[[T], Any]] = None) -> None:
        """Pop every item, top first, handing each to release if it is given."""
        while self._items:
            item = self._items.pop()
            if release is not None:
                release(item)