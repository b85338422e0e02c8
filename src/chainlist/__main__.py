"""Allow ``python -m chainlist`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m chainlist`` behaves identically to the ``chainlist``
console script.
"""

from __future__ import annotations

from chainlist.cli.app import cli

if __name__ == "__main__":
    cli()
