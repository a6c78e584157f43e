"""
errors.py

Responsibility: Error types raised while scaffolding a project.

The CLI maps every `ScaffoldError` to a non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(RuntimeError):
    pass


class AlreadyInitializedError(ScaffoldError):
    def __init__(self, src_dir: Path) -> None:
        super().__init__(f"A project already exists in this directory: {src_dir}")
        self.src_dir = src_dir


class CommandFailedError(ScaffoldError):
    def __init__(self, step: str, command: list[str], output: str) -> None:
        super().__init__(f"Error in {step}: {output}")
        self.step = step
        self.command = command
        self.output = output


class MissingTemplateError(ScaffoldError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Template file missing: {path}")
        self.path = path


class ManifestError(ScaffoldError):
    pass
