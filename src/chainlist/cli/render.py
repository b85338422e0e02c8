"""Rendering of pipeline steps for the terminal.

Uses a Rich table when Rich is installed and a plain fixed-width table
on stderr otherwise.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any

from chainlist.cli.console import console, rich_available
from chainlist.cli.operations import StepResult

EMPTY_LABEL = "(empty)"
ARROW = " -> "


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def format_chain(values: Sequence[Any]) -> str:
    """Render values as ``1 -> 2 -> 3``, or ``(empty)``."""
    if not values:
        return EMPTY_LABEL
    return ARROW.join(repr(value) for value in values)


def format_scalar(scalar: Any) -> str:
    """Render a query result, or an empty cell when there is none."""
    if scalar is None:
        return ""
    return repr(scalar)


def _rows(steps: Sequence[StepResult]) -> list[tuple[str, str, str, str, str]]:
    return [
        (
            str(index),
            step.label,
            format_chain(step.values),
            str(len(step.values)),
            format_scalar(step.scalar),
        )
        for index, step in enumerate(steps)
    ]


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def _print_plain_steps(rows: list[tuple[str, str, str, str, str]]) -> None:
    print(f"{'#':>3}  {'Operation':<18} {'Length':>6}  {'Result':<8}  List", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for index, label, chain, size, scalar in rows:
        print(f"{index:>3}  {label:<18} {size:>6}  {scalar:<8}  {chain}", file=sys.stderr)


def render_steps(steps: Sequence[StepResult]) -> None:
    """Print every step with its list snapshot and query result."""
    rows = _rows(steps)
    if not rich_available():
        _print_plain_steps(rows)
        return

    from rich.markup import escape
    from rich.table import Table

    table = Table(
        title="chainlist",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Operation", style="bold")
    table.add_column("List")
    table.add_column("Length", justify="right")
    table.add_column("Result", justify="right", style="cyan")

    for index, label, chain, size, scalar in rows:
        table.add_row(index, escape(label), escape(chain), size, escape(scalar))

    console.print()
    console.print(table)
    console.print()
