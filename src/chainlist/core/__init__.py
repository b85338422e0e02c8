"""Core layer — the linked-list data type and its operations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Never raises for a well-formed (acyclic) list; exceptions from
  user callbacks propagate unchanged.
"""

from chainlist.core.iterators import (
    ArrayIterator,
    FilterIterator,
    ListIterator,
    MapIterator,
    build,
    filter_list,
    iterator,
    map_list,
)
from chainlist.core.linked_list import (
    append,
    contains,
    empty,
    from_array,
    iterate,
    length,
    prepend,
    reduce,
    remove,
    to_array,
)
from chainlist.core.models import DONE, ChainList, IteratorResult, Node
from chainlist.core.protocols import ValueIterator

__all__: list[str] = [
    "DONE",
    "ArrayIterator",
    "ChainList",
    "FilterIterator",
    "IteratorResult",
    "ListIterator",
    "MapIterator",
    "Node",
    "ValueIterator",
    "append",
    "build",
    "contains",
    "empty",
    "filter_list",
    "from_array",
    "iterate",
    "iterator",
    "length",
    "map_list",
    "prepend",
    "reduce",
    "remove",
    "to_array",
]
