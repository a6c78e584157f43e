"""
prompter.py

Responsibility: Ask the user for configuration values on the terminal.
"""

from __future__ import annotations

from typing import Protocol

from rich.console import Console
from rich.prompt import Prompt

from backend_gen.console import console as default_console


class Prompter(Protocol):
    def ask(self, text: str, default: str) -> str: ...


class ConsolePrompter:
    """Blocking line prompt; an empty answer returns `default`."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or default_console

    def ask(self, text: str, default: str) -> str:
        return Prompt.ask(text, default=default, console=self._console, show_default=True)
