"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass
class ListNode:
    """One link of the list."""

    content: Any
    next: Optional[ListNode] = None


class LinkedList:
    """A singly linked list; iteration yields contents from front to back."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[ListNode] = None
        for item in items:
            self.add_back(item)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, content: Any) -> ListNode:
        """Put ``content`` at the front and return its new node."""
        self.head = ListNode(content, self.head)
        return self.head

    def add_back(self, content: Any) -> ListNode:
        """Put ``content`` at the back and return its new node."""
        node = ListNode(content)
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node
        return node

    def last(self) -> Optional[ListNode]:
        """The last node, or None for an empty list."""
        last = None
        for last in self._nodes():
            pass
        return last

    def delete_front(self, delete: Deleter = None) -> None:
        """Unlink the front node, passing its content to ``delete`` if given.

        Does nothing on an empty list.
        """
        node = self.head
        if node is None:
            return
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)

    def clear(self, delete: Deleter = None) -> None:
        """Empty the list, passing each content to ``delete`` if given."""
        contents = list(self)
        self.head = None
        if delete is not None:
            for content in contents:
                delete(content)

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on every content from front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> LinkedList:
        """A new list of ``func`` applied to each content.

        If ``func`` raises, what was built so far is cleared with ``delete``
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result