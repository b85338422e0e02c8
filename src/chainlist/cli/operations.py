"""Named list operations for the CLI pipeline.

Each operation is looked up by name and applied to the current chain,
producing a :class:`StepResult`.  Operations are written as
``NAME`` or ``NAME=ARG`` on the command line, e.g.::

    chainlist 1 2 3 --op prepend=0 --op map=double --op reduce=sum

Transforms, predicates and folds that fail on an element are re-raised
as :class:`~chainlist.exceptions.OperationFailedError`; nothing else
from user input escapes this module untyped.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from chainlist.core import (
    append,
    contains,
    filter_list,
    length,
    map_list,
    prepend,
    reduce,
    remove,
    to_array,
)
from chainlist.core.models import Node
from chainlist.exceptions import (
    ChainListError,
    InvalidArgumentError,
    OperationFailedError,
    UnknownOperationError,
    known_names_hint,
)


# ---------------------------------------------------------------------------
# Value parsing
# ---------------------------------------------------------------------------

def parse_value(text: str) -> int | float | str:
    """Coerce a command-line token to ``int``, then ``float``, else ``str``."""
    for convert in (int, float):
        try:
            return convert(text)
        except ValueError:
            continue
    return text


def parse_operation_spec(spec: str) -> tuple[str, str | None]:
    """Split ``"name=arg"`` into ``("name", "arg")``; bare names get ``None``."""
    name, sep, argument = spec.partition("=")
    name = name.strip().lower()
    if not name:
        raise InvalidArgumentError(
            f"Empty operation in {spec!r}.",
            hint="Write operations as NAME or NAME=ARG, e.g. append=4",
        )
    return name, (argument if sep else None)


# ---------------------------------------------------------------------------
# Named callables
# ---------------------------------------------------------------------------

TRANSFORMS: dict[str, Callable[[Any], Any]] = {
    "double": lambda value: value * 2,
    "square": lambda value: value * value,
    "negate": operator.neg,
    "str": str,
}

PREDICATES: dict[str, Callable[[Any], bool]] = {
    "odd": lambda value: value % 2 == 1,
    "even": lambda value: value % 2 == 0,
    "positive": lambda value: value > 0,
    "truthy": bool,
}

FOLDS: dict[str, tuple[Callable[[Any, Any], Any], Any]] = {
    "sum": (operator.add, 0),
    "product": (operator.mul, 1),
    "count": (lambda acc, _value: acc + 1, 0),
}


def _lookup(table: dict[str, Any], name: str | None, kind: str) -> Any:
    if name is None or name not in table:
        raise UnknownOperationError(
            f"Unknown {kind}: {name!r}",
            hint=known_names_hint(list(table)),
        )
    return table[name]


# ---------------------------------------------------------------------------
# Step results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StepResult:
    """Outcome of one pipeline step.

    ``values`` is a snapshot taken right after the step ran.  Later
    in-place steps (``append``, ``remove``) may mutate the chain that
    ``head`` points to, so rendering must use the snapshot.
    """

    label: str
    head: Node[Any] | None
    values: tuple[Any, ...]
    scalar: Any = None
    """Query result (``contains``, ``length``, ``reduce``); ``None`` otherwise."""


def _snapshot(label: str, head: Node[Any] | None, scalar: Any = None) -> StepResult:
    return StepResult(label=label, head=head, values=tuple(to_array(head)), scalar=scalar)


def initial_step(head: Node[Any] | None) -> StepResult:
    """Describe the input list before any operation runs."""
    return _snapshot("input", head)


# ---------------------------------------------------------------------------
# Operation registry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Operation:
    """A named pipeline step."""

    name: str
    description: str
    needs_argument: bool
    run: Callable[[Node[Any] | None, str | None], StepResult]


def _run_prepend(head: Node[Any] | None, argument: str | None) -> StepResult:
    value = parse_value(argument or "")
    return _snapshot(f"prepend {value!r}", prepend(head, value))


def _run_append(head: Node[Any] | None, argument: str | None) -> StepResult:
    value = parse_value(argument or "")
    return _snapshot(f"append {value!r}", append(head, value))


def _run_remove(head: Node[Any] | None, argument: str | None) -> StepResult:
    value = parse_value(argument or "")
    return _snapshot(f"remove {value!r}", remove(head, value))


def _run_contains(head: Node[Any] | None, argument: str | None) -> StepResult:
    value = parse_value(argument or "")
    return _snapshot(f"contains {value!r}", head, contains(head, value))


def _run_length(head: Node[Any] | None, _argument: str | None) -> StepResult:
    return _snapshot("length", head, length(head))


def _run_map(head: Node[Any] | None, argument: str | None) -> StepResult:
    transform = _lookup(TRANSFORMS, argument, "transform")
    return _snapshot(f"map {argument}", map_list(head, transform))


def _run_filter(head: Node[Any] | None, argument: str | None) -> StepResult:
    predicate = _lookup(PREDICATES, argument, "predicate")
    return _snapshot(f"filter {argument}", filter_list(head, predicate))


def _run_reduce(head: Node[Any] | None, argument: str | None) -> StepResult:
    f, init = _lookup(FOLDS, argument, "fold")
    return _snapshot(f"reduce {argument}", head, reduce(head, f, init))


OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (
        Operation("prepend", "prepend VALUE (shares the existing chain)", True, _run_prepend),
        Operation("append", "append VALUE (mutates in place)", True, _run_append),
        Operation("remove", "remove first VALUE", True, _run_remove),
        Operation("contains", "contains VALUE?", True, _run_contains),
        Operation("length", "count elements", False, _run_length),
        Operation("map", "map with " + "|".join(TRANSFORMS), True, _run_map),
        Operation("filter", "filter with " + "|".join(PREDICATES), True, _run_filter),
        Operation("reduce", "reduce with " + "|".join(FOLDS), True, _run_reduce),
    )
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def apply_operation(
    head: Node[Any] | None,
    name: str,
    argument: str | None = None,
) -> StepResult:
    """Run the operation called *name* on *head*.

    Raises
    ------
    UnknownOperationError
        If *name* (or the named transform/predicate/fold) is unknown.
    InvalidArgumentError
        If the operation needs an argument and none was given.
    OperationFailedError
        If a transform, predicate or fold fails on an element.
    """
    operation = _lookup(OPERATIONS, name, "operation")
    if operation.needs_argument and not argument:
        raise InvalidArgumentError(
            f"Operation {name!r} needs an argument.",
            hint=f"Write it as {name}=ARG",
        )

    try:
        return operation.run(head, argument)
    except ChainListError:
        raise
    except Exception as exc:
        raise OperationFailedError(
            f"{name} failed: {type(exc).__name__}: {exc}",
            hint="Check that the values support this transform.",
        ) from exc


def run_pipeline(head: Node[Any] | None, specs: Iterable[str]) -> list[StepResult]:
    """Apply each ``NAME[=ARG]`` spec in order, threading the head through.

    The first entry is always the :func:`initial_step` of *head*.
    """
    steps = [initial_step(head)]
    for spec in specs:
        name, argument = parse_operation_spec(spec)
        step = apply_operation(head, name, argument)
        head = step.head
        steps.append(step)
    return steps
