"""Custom exception hierarchy for chainlist.

The core list operations never raise these: they are total over
well-formed lists.  The CLI layer raises them for bad user input and
wraps failures of user-selected transforms, so that the error boundary
in :mod:`chainlist.cli.app` can render a clean message.

Hierarchy
---------
ChainListError
├── UnknownOperationError
├── InvalidArgumentError
├── OperationFailedError
└── EnvironmentError
"""

from __future__ import annotations


class ChainListError(Exception):
    """Base exception for all chainlist errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Operation pipeline ----------------------------------------------------

class UnknownOperationError(ChainListError):
    """Raised when an operation or transform name is not registered."""


class InvalidArgumentError(ChainListError):
    """Raised when an operation is missing its argument or gets a bad one."""


class OperationFailedError(ChainListError):
    """Raised when a transform, predicate or fold fails on an element."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ChainListError):
    """Raised when an optional runtime dependency is not available."""


def known_names_hint(names: list[str]) -> str:
    """Build a hint listing the accepted *names*, sorted."""
    return "Choose one of: " + ", ".join(sorted(names))
