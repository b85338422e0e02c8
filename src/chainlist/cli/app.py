"""CLI application entry point and command routing for chainlist.

This module is the **sole error boundary** for the application.  It
catches :class:`~chainlist.exceptions.ChainListError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, renders a
message and returns a well-defined exit code.

No list logic lives here — operations are delegated to
:mod:`chainlist.cli.operations`, which in turn calls the core library.
"""

from __future__ import annotations

import argparse
import sys

from chainlist.cli import exit_codes
from chainlist.cli.console import console, escape_markup
from chainlist.exceptions import ChainListError
from chainlist.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``chainlist 1 2 3 --op append=4 --op map=double``
    * ``chainlist 1 2 3 --interactive``
    * ``chainlist doctor``
    * ``chainlist --version``
    """
    parser = argparse.ArgumentParser(
        prog="chainlist",
        description="Build a linked list from VALUES and apply operations to it.",
        epilog=(
            "operations: prepend=V append=V remove=V contains=V length "
            "map=double|square|negate|str filter=odd|even|positive|truthy "
            "reduce=sum|product|count"
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "values",
        nargs="*",
        help=(
            "Initial list elements, or 'doctor' to run diagnostics. "
            "A lone 'doctor' always runs diagnostics; add --op or -i to use it as a value."
        ),
    )
    parser.add_argument(
        "-o",
        "--op",
        dest="ops",
        action="append",
        default=[],
        metavar="NAME[=ARG]",
        help="Operation to apply; repeat to build a pipeline.",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Pick further operations interactively.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_pipeline(values: list[str], ops: list[str], interactive: bool) -> int:
    """Build the list, run ``--op`` steps, optionally prompt, then render."""
    from chainlist.cli.operations import parse_value, run_pipeline
    from chainlist.cli.render import render_steps
    from chainlist.core import from_array

    head = from_array([parse_value(value) for value in values])
    steps = run_pipeline(head, ops)

    if interactive:
        from chainlist.cli.interactive import prompt_pipeline

        steps = prompt_pipeline(steps[-1].head, steps)

    render_steps(steps)
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from chainlist.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the chainlist CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.values and not args.ops and not args.interactive:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.values == ["doctor"] and not args.ops and not args.interactive:
        return _handle_doctor()

    return _handle_pipeline(args.values, args.ops, args.interactive)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except ChainListError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
