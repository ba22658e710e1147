"""A singly linked list of arbitrary contents.

Contents are released through an optional ``delete`` callback when the list
drops them. ``clear`` and failed ``map`` calls release from tail to head.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps its contents in insertion order."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.append(item)

    @property
    def head(self) -> Optional[Node]:
        """The first node, or None for an empty list."""
        return self._head

    def prepend(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def append(self, content: Any) -> Node:
        """Add ``content`` at the back and return its node."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Any:
        """Return the content of the last node."""
        if self._tail is None:
            raise IndexError("last() of an empty list")
        return self._tail.content

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def map(
        self, func: Optional[Callable[[Any], Any]] = None, delete: Deleter = None
    ) -> "LinkedList":
        """Return a new list of ``func(content)`` for every content.

        Without ``func`` each content is copied. If ``func`` returns None the
        contents made so far are passed to ``delete`` (last first) and
        ``ValueError`` is raised.
        """
        mapped = []
        for index, content in enumerate(self):
            new_content = copy.copy(content) if func is None else func(content)
            if new_content is None:
                if delete is not None:
                    for made in reversed(mapped):
                        delete(made)
                raise ValueError(f"mapping produced no content at position {index}")
            mapped.append(new_content)
        return LinkedList(mapped)

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first node, pass its content to ``delete`` and return it."""
        node = self._head
        if node is None:
            raise IndexError("pop_front() from an empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Empty the list, passing each content to ``delete`` from tail to head."""
        contents = list(self)
        self._head = None
        self._tail = None
        self._size = 0
        if delete is not None:
            for content in reversed(contents):
                delete(content)