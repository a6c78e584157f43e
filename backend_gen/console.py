"""Shared Rich consoles and status-line helpers for terminal output."""

from __future__ import annotations

from rich.console import Console

console = Console(highlight=False, emoji=False)
err_console = Console(stderr=True, highlight=False, emoji=False)


def print_step(message: str) -> None:
    console.print(f"✓ {message}", style="green", markup=False, soft_wrap=True)


def print_success(message: str) -> None:
    console.print(message, style="bold green", markup=False, soft_wrap=True)


def print_warning(message: str) -> None:
    console.print(message, style="bold yellow", markup=False, soft_wrap=True)


def print_error(message: str) -> None:
    # Command output is echoed verbatim, so markup stays off.
    err_console.print(message, style="bold red", markup=False, soft_wrap=True)
