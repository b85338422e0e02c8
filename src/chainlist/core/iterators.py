"""Pull iterators and the combinators built on them.

Every iterator here satisfies :class:`~chainlist.core.protocols.ValueIterator`
and is **sticky-terminal**: after the first ``done`` result it keeps
returning :data:`~chainlist.core.models.DONE` forever.

Pipeline shape used by :func:`map_list` and :func:`filter_list`:

1. **Source** — :func:`iterator` walks the list without mutating it.
2. **Adapter** — :class:`MapIterator` / :class:`FilterIterator` wrap the
   source and transform or skip lazily, one pull at a time.
3. **Materialize** — :func:`build` drains the adapter into a new chain.

The adapters also speak the Python iterator protocol, so
``list(iterator(head))`` and ``for value in iterator(head)`` work.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Generic, TypeVar

from chainlist.core.models import DONE, IteratorResult, Node
from chainlist.core.protocols import ValueIterator

T = TypeVar("T")
U = TypeVar("U")


class _PullIterator(Generic[T]):
    """Bridge from :meth:`next` to ``__iter__`` / ``__next__``."""

    __slots__ = ()

    def next(self) -> IteratorResult[T]:
        raise NotImplementedError  # pragma: no cover

    def __iter__(self) -> _PullIterator[T]:
        return self

    def __next__(self) -> T:
        result = self.next()
        if result.done:
            raise StopIteration
        return result.value  # type: ignore[return-value]


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------

class ListIterator(_PullIterator[T]):
    """Cursor over the nodes of a chain.

    Reading never mutates the list.  The cursor holds the next node to
    visit; ``None`` means exhausted, which is also what makes the
    iterator sticky-terminal.
    """

    __slots__ = ("_cursor",)

    def __init__(self, head: Node[T] | None) -> None:
        self._cursor: Node[T] | None = head

    def next(self) -> IteratorResult[T]:
        node = self._cursor
        if node is None:
            return DONE
        self._cursor = node.next
        return IteratorResult.of(node.value)


class ArrayIterator(_PullIterator[T]):
    """Index-based iterator over a dense sequence.

    The sequence is not copied.  Growing it after the iterator has
    reported done does not produce further values.
    """

    __slots__ = ("_values", "_index", "_exhausted")

    def __init__(self, values: Sequence[T]) -> None:
        self._values = values
        self._index = 0
        self._exhausted = False

    def next(self) -> IteratorResult[T]:
        if self._exhausted:
            return DONE
        if self._index >= len(self._values):
            self._exhausted = True
            return DONE
        value = self._values[self._index]
        self._index += 1
        return IteratorResult.of(value)


# ---------------------------------------------------------------------------
# Adapters
# ---------------------------------------------------------------------------

class MapIterator(_PullIterator[U]):
    """Applies *transform* to each element pulled from *source*."""

    __slots__ = ("_source", "_transform", "_exhausted")

    def __init__(self, source: ValueIterator[T], transform: Callable[[T], U]) -> None:
        self._source = source
        self._transform = transform
        self._exhausted = False

    def next(self) -> IteratorResult[U]:
        if self._exhausted:
            return DONE
        current = self._source.next()
        if current.done:
            self._exhausted = True
            return DONE
        return IteratorResult.of(self._transform(current.value))  # type: ignore[arg-type]


class FilterIterator(_PullIterator[T]):
    """Yields only the elements of *source* for which *predicate* holds.

    Each :meth:`next` call keeps pulling from the source until a passing
    element is found or the source is exhausted.
    """

    __slots__ = ("_source", "_predicate", "_exhausted")

    def __init__(self, source: ValueIterator[T], predicate: Callable[[T], bool]) -> None:
        self._source = source
        self._predicate = predicate
        self._exhausted = False

    def next(self) -> IteratorResult[T]:
        if self._exhausted:
            return DONE
        current = self._source.next()
        while not current.done and not self._predicate(current.value):  # type: ignore[arg-type]
            current = self._source.next()
        if current.done:
            self._exhausted = True
            return DONE
        return current


# ---------------------------------------------------------------------------
# Construction and combinators
# ---------------------------------------------------------------------------

def iterator(head: Node[T] | None) -> ListIterator[T]:
    """Return a fresh single-pass iterator over *head* in traversal order."""
    return ListIterator(head)


def build(source: ValueIterator[T]) -> Node[T] | None:
    """Drain *source* into a new chain, preserving production order.

    Returns ``None`` (the empty list) when *source* is already
    exhausted.  *source* must not be shared with another consumer while
    it is being drained.
    """
    current = source.next()
    if current.done:
        return None

    head: Node[T] = Node(current.value)  # type: ignore[arg-type]
    last = head
    current = source.next()
    while not current.done:
        last.next = Node(current.value)  # type: ignore[arg-type]
        last = last.next
        current = source.next()
    return head


def map_list(head: Node[T] | None, transform: Callable[[T], U]) -> Node[U] | None:
    """Return a new list holding ``transform(value)`` for every element.

    *head* is never mutated.
    """
    return build(MapIterator(iterator(head), transform))


def filter_list(head: Node[T] | None, predicate: Callable[[T], bool]) -> Node[T] | None:
    """Return a new list with the elements that satisfy *predicate*.

    Relative order is preserved and *head* is never mutated.
    """
    return build(FilterIterator(iterator(head), predicate))
