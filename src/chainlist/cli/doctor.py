"""``chainlist doctor`` — environment diagnostics command.

Reports the chainlist, Python, Rich and questionary versions plus the
OS in a Rich table (or plain text when Rich is missing).  Rich and
questionary are optional: their absence is a warning, not a failure.
"""

from __future__ import annotations

import platform
import sys
from importlib import metadata

from chainlist.cli import exit_codes
from chainlist.cli.console import console, rich_available
from chainlist.version import __version__

OK = "[green]OK[/green]"
WARN = "[yellow]WARN[/yellow]"
FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _chainlist_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the chainlist version row."""
    return "chainlist", __version__, OK


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _optional_package_check(label: str, module: str, distribution: str) -> tuple[str, str, str]:
    """Return (label, value, status) for an optional UI dependency."""
    try:
        __import__(module)
    except ImportError:
        return label, "NOT INSTALLED", WARN
    try:
        version = metadata.version(distribution)
    except metadata.PackageNotFoundError:
        version = "unknown"
    return label, version, OK


def _rich_check() -> tuple[str, str, str]:
    return _optional_package_check("rich", "rich", "rich")


def _questionary_check() -> tuple[str, str, str]:
    return _optional_package_check("questionary", "questionary", "questionary")


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {"Darwin": "macOS"}.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, OK


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nchainlist doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<32} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = [
        _chainlist_version_check(),
        _python_version_check(),
        _rich_check(),
        _questionary_check(),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    if rich_available():
        from rich.table import Table

        table = Table(
            title="chainlist doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
        if has_failure:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            console.print("[bold green]All checks passed.[/bold green]")
    else:
        _print_plain_doctor_table(checks)
        print("Some checks failed." if has_failure else "All checks passed.", file=sys.stderr)

    return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS
