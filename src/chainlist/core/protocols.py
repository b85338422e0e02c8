"""Protocols (interfaces) consumed by the core layer.

The combinators in :mod:`chainlist.core.iterators` depend only on the
structural :class:`ValueIterator` contract, never on a concrete
iterator class.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

from chainlist.core.models import IteratorResult

T_co = TypeVar("T_co", covariant=True)


class ValueIterator(Protocol[T_co]):
    """Pull-based, single-pass, stateful sequence of values.

    Any object that implements :meth:`next` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def next(self) -> IteratorResult[T_co]:
        """Produce the next element, or the terminal result.

        Once a terminal result (``done=True``) has been returned, every
        later call must return a terminal result too.  Implementations
        are not restartable: a fresh iterator is needed to replay the
        source.
        """
        ...  # pragma: no cover
