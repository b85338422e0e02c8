"""CLI console helpers with optional Rich support.

Rich is imported lazily so that ``--help`` and ``--version`` keep
working when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from chainlist.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def rich_available() -> bool:
    """Return ``True`` when Rich can be imported."""
    try:
        _load_rich_console_class()
    except EnvironmentError:
        return False
    return True


def escape_markup(text: str) -> str:
    """Escape Rich markup in *text*; unchanged when Rich is missing."""
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return text
    return escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with plain-stderr fallback."""

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render with Rich when available, else plain stderr print.

        Pass ``markup=False`` for text that may contain literal brackets.
        """
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects, markup=markup)


console = _ConsoleProxy()
