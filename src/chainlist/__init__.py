"""chainlist — a small generic singly-linked-list library.

O(1) structure-sharing prepend, in-place append/remove, and lazy
iterator-based map/filter materialized through a single ``build``.
"""

from chainlist.core import (
    ChainList,
    IteratorResult,
    Node,
    ValueIterator,
    append,
    build,
    contains,
    empty,
    filter_list,
    from_array,
    iterate,
    iterator,
    length,
    map_list,
    prepend,
    reduce,
    remove,
    to_array,
)
from chainlist.version import __version__

__all__: list[str] = [
    "ChainList",
    "IteratorResult",
    "Node",
    "ValueIterator",
    "__version__",
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
