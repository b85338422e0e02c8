"""Process exit codes returned by :func:`chainlist.cli.app.main`."""

from __future__ import annotations

SUCCESS: int = 0
"""Pipeline rendered, or diagnostics found no failing check."""

GENERAL_ERROR: int = 1
"""A ChainListError was reported, or a doctor check failed."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the error boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C (128 + SIGINT)."""
