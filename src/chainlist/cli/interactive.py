"""Interactive operation picker for the CLI layer.

Prompts for one operation at a time with questionary, applies it to the
current chain, and echoes the new list.  Choosing "done" (or pressing
Ctrl+C / Esc, which makes questionary return ``None``) ends the session.
"""

from __future__ import annotations

from typing import Any

from chainlist.cli.console import console
from chainlist.cli.operations import OPERATIONS, Operation, StepResult, apply_operation, initial_step
from chainlist.cli.render import format_chain, format_scalar
from chainlist.core.models import Node
from chainlist.exceptions import ChainListError, EnvironmentError

DONE_CHOICE = "__done__"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
            hint="Interactive mode needs questionary; --op works without it.",
        ) from exc
    return questionary


def _build_choice_label(operation: Operation) -> str:
    """Label shown in the selector, e.g. ``"append     append VALUE ..."``."""
    return f"{operation.name:<10} {operation.description}"


def _describe(step: StepResult) -> str:
    line = f"{step.label}: {format_chain(step.values)}"
    if step.scalar is not None:
        line += f"  => {format_scalar(step.scalar)}"
    return line


def prompt_pipeline(
    head: Node[Any] | None,
    steps: list[StepResult] | None = None,
) -> list[StepResult]:
    """Build a pipeline interactively, starting from *head*.

    Parameters
    ----------
    head:
        Chain to start from.
    steps:
        Steps already applied (e.g. from ``--op``); new steps are
        appended to a copy of it.  When ``None``, the pipeline starts
        with the :func:`initial_step` of *head*.

    Returns
    -------
    list[StepResult]
        All steps, including the ones passed in.
    """
    questionary = _import_questionary()

    history = list(steps) if steps else [initial_step(head)]
    choices = [
        questionary.Choice(title=_build_choice_label(op), value=op.name)
        for op in OPERATIONS.values()
    ]
    choices.append(questionary.Choice(title="done", value=DONE_CHOICE))

    console.print(_describe(history[-1]), markup=False)
    while True:
        name: str | None = questionary.select(
            "Next operation:",
            choices=choices,
            use_arrow_keys=True,
            use_shortcuts=False,
        ).ask()
        if name is None or name == DONE_CHOICE:
            break

        argument: str | None = None
        if OPERATIONS[name].needs_argument:
            argument = questionary.text(f"Argument for {name}:").ask()
            if argument is None:
                break

        try:
            step = apply_operation(head, name, argument)
        except ChainListError as exc:
            console.print(f"Error: {exc}", markup=False)
            if exc.hint:
                console.print(f"Hint: {exc.hint}", markup=False)
            continue

        head = step.head
        history.append(step)
        console.print(_describe(step), markup=False)

    return history
