"""Parsing of linked lists written as ``1 -> 2 -> 3 -> null``."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class Node:
    """One element of a singly linked list."""

    data: int
    next: Node | None = None

    def __iter__(self) -> Iterator[int]:
        node: Node | None = self
        while node is not None:
            yield node.data
            node = node.next


def parse(text: str) -> Node | None:
    """Parse ``"1 -> 2 -> null"`` into linked nodes; ``"null"`` gives None.

    Only digits form numbers; a number is taken when a space follows it.
    Raises ValueError when the text has no ``null`` terminator.
    """
    end = text.find("n")
    if end < 0:
        raise ValueError("list text must end with 'null'")
    head: Node | None = None
    tail: Node | None = None
    digits = ""
    for char in text[:end]:
        if char == " ":
            if digits:
                node = Node(int(digits))
                if tail is None:
                    head = node
                else:
                    tail.next = node
                tail = node
                digits = ""
        elif char.isdigit() and char.isascii():
            digits += char
    return head