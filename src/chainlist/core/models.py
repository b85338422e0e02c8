"""Data model for chainlist.

A list is represented by an optional reference to its head
:class:`Node`: ``None`` is the empty list, and a non-empty list is the
head node, which transitively holds its successors through ``next``.

Nodes are **mutable**: :func:`~chainlist.core.linked_list.append`
and :func:`~chainlist.core.linked_list.remove` rewire links in place.
:class:`IteratorResult` on the other hand is a frozen value object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------

@dataclass(eq=False, slots=True)
class Node(Generic[T]):
    """A single list element plus its link to the remainder of the chain.

    Equality is identity: two nodes are the same only if they are the
    same object.  Structural comparison goes through
    :func:`~chainlist.core.linked_list.to_array`.
    """

    value: T
    """The element stored in this node."""

    next: Node[T] | None = None
    """The following node, or ``None`` when this is the last node."""

    def __repr__(self) -> str:
        # Only the local link is shown; walking the chain here could be
        # arbitrarily long.
        tail = "None" if self.next is None else "Node(...)"
        return f"Node(value={self.value!r}, next={tail})"


ChainList = Node[T] | None
"""A list handle: the head node, or ``None`` for the empty list."""


# ---------------------------------------------------------------------------
# Iterator result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class IteratorResult(Generic[T]):
    """One step of a pull iterator.

    ``done=False`` carries a produced ``value``; ``done=True`` is the
    terminal result and always carries ``value=None``.
    """

    done: bool
    value: T | None = None

    @classmethod
    def of(cls, value: T) -> IteratorResult[T]:
        """Wrap a produced element."""
        return cls(done=False, value=value)


DONE: IteratorResult = IteratorResult(done=True)
"""Shared terminal result returned by every exhausted iterator."""
