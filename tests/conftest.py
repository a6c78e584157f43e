"""Shared pytest fixtures for the gen-backend test suite.

Provides:
- A fake command runner that emulates `npm init` and records every call
- A scripted prompter with canned answers
- A writable copy of the bundled template store
"""

from __future__ import annotations

import json
import shutil
from pathlib import Path
from typing import Any

import pytest

from backend_gen.manifest import BUNDLED_MANIFEST_PATH, BUNDLED_TEMPLATES_DIR, load_manifest
from backend_gen.runner import CommandOutcome
from backend_gen.scaffolder import InvocationContext, Scaffolder

NPM_INIT_PACKAGE_JSON: dict[str, Any] = {
    "name": "my-api",
    "version": "1.0.0",
    "main": "index.js",
    "scripts": {"test": 'echo "Error: no test specified" && exit 1'},
    "license": "ISC",
}


class FakeRunner:
    """Records commands; `init` writes a package.json like `npm init --yes` does."""

    def __init__(
        self,
        cwd: Path,
        *,
        fail_on: str | None = None,
        package_json: dict[str, Any] | None = None,
    ) -> None:
        self.cwd = cwd
        self.fail_on = fail_on
        self.package_json = package_json or NPM_INIT_PACKAGE_JSON
        self.calls: list[tuple[list[str], str]] = []
        self.package_json_seen: list[dict[str, Any]] = []

    def run(self, command: list[str], label: str) -> CommandOutcome:
        self.calls.append((list(command), label))
        if label == self.fail_on:
            return CommandOutcome(returncode=1, output=f"npm ERR! {label} broke")
        pkg = self.cwd / "package.json"
        if command[1] == "init":
            pkg.write_text(json.dumps(self.package_json, indent=2), encoding="utf-8")
        else:
            self.package_json_seen.append(json.loads(pkg.read_text(encoding="utf-8")))
        return CommandOutcome(returncode=0, output="ok\n")


class ScriptedPrompter:
    def __init__(self, answers: list[str] | None = None) -> None:
        self.answers = list(answers or [])
        self.asked: list[tuple[str, str]] = []

    def ask(self, text: str, default: str) -> str:
        self.asked.append((text, default))
        return self.answers.pop(0) if self.answers else ""


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Empty target directory for a generated project."""
    d = tmp_path / "my-api"
    d.mkdir()
    return d


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """Writable copy of the bundled template store."""
    d = tmp_path / "store"
    shutil.copytree(BUNDLED_TEMPLATES_DIR, d)
    return d


@pytest.fixture
def runner(project_dir: Path) -> FakeRunner:
    return FakeRunner(project_dir)


@pytest.fixture
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


@pytest.fixture
def scaffolder(templates_dir: Path, runner: FakeRunner, prompter: ScriptedPrompter) -> Scaffolder:
    return Scaffolder(
        manifest=load_manifest(BUNDLED_MANIFEST_PATH),
        templates_dir=templates_dir,
        runner=runner,
        prompter=prompter,
    )


@pytest.fixture
def confirmed(project_dir: Path) -> InvocationContext:
    return InvocationContext(working_dir=project_dir, argv=("--yes",), auto_confirm=True)


@pytest.fixture
def snapshot():
    """Map every path under a root to its bytes (None for directories)."""

    def _snapshot(root: Path) -> dict[str, bytes | None]:
        return {
            str(p.relative_to(root)): (None if p.is_dir() else p.read_bytes())
            for p in sorted(root.rglob("*"))
        }

    return _snapshot
