"""
oracle.py

Responsibility: The interactive question/answer surface.

The resolver and the scaffolder only talk to the `Oracle` protocol. `RichOracle`
is the terminal implementation built on `rich.prompt`; tests substitute a
scripted one. Failures of the underlying terminal (EOF on a non-interactive
stdin, Ctrl-C) are not caught here.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt


@dataclass(frozen=True)
class Choice:
    label: str
    value: str


class Oracle(Protocol):
    def ask_text(self, message: str, *, default: str | None = None) -> str: ...

    def ask_choice(self, message: str, choices: Sequence[Choice], *, default: str | None = None) -> str: ...

    def ask_confirm(self, message: str, *, default: bool) -> bool: ...

    def warn(self, message: str) -> None: ...


class RichOracle:
    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def ask_text(self, message: str, *, default: str | None = None) -> str:
        if default is None:
            return Prompt.ask(message, console=self._console)
        return Prompt.ask(message, console=self._console, default=default)

    def ask_choice(self, message: str, choices: Sequence[Choice], *, default: str | None = None) -> str:
        """
        Print the choices as a numbered list and read back the number.
        """
        if not choices:
            raise ValueError("ask_choice needs at least one choice")

        values = [c.value for c in choices]
        default_index = values.index(default) + 1 if default in values else 1

        self._console.print(f"[bold]{message}[/bold]")
        for i, choice in enumerate(choices, start=1):
            self._console.print(f"  [cyan]{i})[/cyan] {choice.label}")

        answer = Prompt.ask(
            "Enter a number",
            console=self._console,
            choices=[str(i) for i in range(1, len(choices) + 1)],
            default=str(default_index),
            show_choices=False,
        )
        return choices[int(answer) - 1].value

    def ask_confirm(self, message: str, *, default: bool) -> bool:
        return Confirm.ask(message, console=self._console, default=default)

    def warn(self, message: str) -> None:
        self._console.print(f"[red]{message}[/red]")
