"""A singly linked sequence of arbitrary contents."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Deque, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


class LinkedList:
    """An ordered collection supporting front and back insertion."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._items: Deque[Any] = deque(items or ())

    def push_front(self, content: Any) -> None:
        """Insert content at the front."""
        self._items.appendleft(content)

    def push_back(self, content: Any) -> None:
        """Append content at the back."""
        self._items.append(content)

    def last(self) -> Any:
        """Return the content of the last element."""
        if not self._items:
            raise IndexError("last() on an empty list")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinkedList({list(self._items)!r})"

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first element, pass its content to delete, return it."""
        if not self._items:
            raise IndexError("pop_front() on an empty list")
        content = self._items.popleft()
        if delete is not None:
            delete(content)
        return content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every element in order, passing each content to delete."""
        while self._items:
            self.pop_front(delete)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call func on the content of every element in order."""
        for content in self._items:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Return a new list of func applied to every content.

        If func raises, the contents already produced are passed to delete
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self._items:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result