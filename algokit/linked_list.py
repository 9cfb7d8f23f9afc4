"""Singly linked lists: insertion, cycle detection, splitting and digit-wise addition."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False)
class Node:
    """A node of a singly linked list."""

    data: Any
    next: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def _nodes(head: Node | None) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


class LinkedList:
    """A singly linked list that keeps track of its head and tail nodes."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` in front of the current head."""
        node = Node(value, self.head)
        self.head = node
        if self.tail is None:
            self.tail = node

    def insert_at_tail(self, value: Any) -> None:
        """Put ``value`` after the current tail."""
        node = Node(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node

    def insert_at(self, value: Any, position: int) -> None:
        """Insert ``value`` at a 1-based ``position``.

        A position of 0 or less inserts at the head and one past the length
        appends at the tail. Positions 1 and 2 both insert after the head;
        from there on the new node becomes the ``position``-th node.
        """
        if position <= 0:
            self.insert_at_head(value)
            return
        if position > len(self):
            self.insert_at_tail(value)
            return
        previous = self.head
        assert previous is not None
        for _ in range(1, position - 1):
            assert previous.next is not None
            previous = previous.next
        node = Node(value, previous.next)
        previous.next = node
        if previous is self.tail:
            self.tail = node

    def __len__(self) -> int:
        return sum(1 for _ in _nodes(self.head))

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in _nodes(self.head))


def has_cycle(head: Node | None) -> bool:
    """Return whether following ``next`` from ``head`` ever loops back."""
    tortoise = hare = head
    while True:
        if hare is None or hare.next is None or tortoise is None:
            return False
        tortoise = tortoise.next
        hare = hare.next.next
        if hare is tortoise:
            return True


def split(head: Node | None) -> tuple[Node | None, Node | None]:
    """Cut the list at ``head`` in two halves and return both heads.

    With an odd number of nodes the first half holds the extra one. The
    nodes are relinked in place.
    """
    if head is None:
        return None, None
    count = sum(1 for _ in _nodes(head))
    last_of_first = head
    for _ in range((count - 1) // 2):
        assert last_of_first.next is not None
        last_of_first = last_of_first.next
    second = last_of_first.next
    last_of_first.next = None
    return head, second


def add_two_numbers(first: Node | None, second: Node | None) -> Node | None:
    """Add two numbers stored most significant digit first; return the sum's head.

    The input lists are left unchanged. Two empty lists give ``None``.
    """
    left = [node.data for node in _nodes(first)]
    right = [node.data for node in _nodes(second)]
    result: Node | None = None
    carry = 0
    while left or right or carry:
        total = carry
        if left:
            total += left.pop()
        if right:
            total += right.pop()
        carry, digit = divmod(total, 10)
        result = Node(digit, result)
    return result