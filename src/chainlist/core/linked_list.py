"""Construction, mutation, query and conversion operations.

A list handle is ``Node | None``.  Two operations share structure with
their input instead of copying it:

* :func:`prepend` returns a new head whose tail **is** the input chain,
  so mutating through the old handle is visible through the new one.
* :func:`append` mutates a non-empty chain in place and returns the
  same head; only on the empty list does it return a new node, so
  callers must always use the return value.

Everything else either only reads the chain or builds a fresh one.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

from chainlist.core.iterators import ArrayIterator, build
from chainlist.core.models import Node

T = TypeVar("T")
U = TypeVar("U")


# ---------------------------------------------------------------------------
# Construction & mutation
# ---------------------------------------------------------------------------

def empty() -> None:
    """Return the canonical empty list."""
    return None


def prepend(head: Node[T] | None, value: T) -> Node[T]:
    """Return a new list with *value* in front of *head*.

    O(1) and non-mutating.  The returned list shares every node of
    *head* from its second element onward.
    """
    return Node(value, head)


def append(head: Node[T] | None, value: T) -> Node[T]:
    """Link *value* after the last node of *head*.

    O(n).  On a non-empty list the chain is mutated in place and the
    same *head* object is returned, so the original handle observes the
    new element.  On the empty list there is nothing to mutate and a new
    single-node list is returned.
    """
    node = Node(value)
    if head is None:
        return node

    last = head
    while last.next is not None:
        last = last.next
    last.next = node
    return head


def remove(head: Node[T] | None, value: T) -> Node[T] | None:
    """Unlink the first node whose value equals *value*.

    Returns *head* unchanged when nothing matches.  When the head itself
    matches, ``head.next`` is returned and the removed node keeps its
    link.  Otherwise the predecessor is rewired in place and *head* is
    returned.
    """
    if head is None:
        return None
    if head.value == value:
        return head.next

    previous = head
    while previous.next is not None and previous.next.value != value:
        previous = previous.next

    if previous.next is None:
        return head

    previous.next = previous.next.next
    return head


# ---------------------------------------------------------------------------
# Query & traversal
# ---------------------------------------------------------------------------

def contains(head: Node[T] | None, value: T) -> bool:
    """Return ``True`` if any element equals *value*."""
    node = head
    while node is not None:
        if node.value == value:
            return True
        node = node.next
    return False


def length(head: Node[T] | None) -> int:
    """Count the nodes of *head* by traversal."""
    count = 0
    node = head
    while node is not None:
        count += 1
        node = node.next
    return count


def iterate(head: Node[T] | None, callback: Callable[[T], object]) -> None:
    """Call *callback* once per element in traversal order."""
    node = head
    while node is not None:
        callback(node.value)
        node = node.next


def reduce(head: Node[T] | None, f: Callable[[U, T], U], init: U) -> U:
    """Left fold: ``acc = f(acc, value)`` for every element, from *init*."""
    current = init

    def _step(value: T) -> None:
        nonlocal current
        current = f(current, value)

    iterate(head, _step)
    return current


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

def to_array(head: Node[T] | None) -> list[T]:
    """Copy the elements of *head* into a new Python list."""
    values: list[T] = []
    iterate(head, values.append)
    return values


def from_array(values: Sequence[T]) -> Node[T] | None:
    """Build a new list with the elements of *values*, in order."""
    if len(values) == 0:
        return None
    return build(ArrayIterator(values))
