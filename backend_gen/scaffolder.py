"""
scaffolder.py

Responsibility: Orchestrate project initialization for `gen-backend`.

High-level flow (strictly ordered, first failure aborts the rest):
1) Guard: no-op without confirmation, refuse when `src/` already exists
2) `npm init`, then mark `package.json` as an ES module project
3) Install runtime and dev dependencies
4) Create the `src/` layout and copy templates
5) Finalize `package.json` (entry point, scripts, engines)
6) Prompt for configuration and write `.env`

Nothing is rolled back on failure: files written before the failing step stay.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from backend_gen import package_json
from backend_gen.console import console, print_step, print_success
from backend_gen.errors import AlreadyInitializedError, CommandFailedError, ScaffoldError
from backend_gen.manifest import ScaffoldManifest
from backend_gen.prompter import Prompter
from backend_gen.renderer import copy_templates, create_directories, render_env_file
from backend_gen.runner import CommandRunner

logger = logging.getLogger(__name__)

USAGE_HINT = "Run 'gen-backend --yes' to initialize the project automatically."


@dataclass(frozen=True)
class InvocationContext:
    working_dir: Path
    argv: tuple[str, ...] = ()
    auto_confirm: bool = False


class Scaffolder:
    def __init__(
        self,
        *,
        manifest: ScaffoldManifest,
        templates_dir: Path,
        runner: CommandRunner,
        prompter: Prompter,
    ) -> None:
        self.manifest = manifest
        self.templates_dir = Path(templates_dir)
        self.runner = runner
        self.prompter = prompter

    def run(self, context: InvocationContext) -> bool:
        """
        Scaffold a project into `context.working_dir`.

        Returns False when confirmation was not given (nothing happens), True
        after a complete run. Raises a `ScaffoldError` on any failure.
        """
        if not context.auto_confirm:
            console.print(USAGE_HINT)
            return False

        target = context.working_dir
        if not target.is_dir():
            raise ScaffoldError(f"Target directory does not exist: {target}")
        src_dir = target / "src"
        # A dangling symlink still counts as an existing `src` entry.
        if src_dir.exists() or src_dir.is_symlink():
            raise AlreadyInitializedError(src_dir)

        m = self.manifest
        pkg_path = target / package_json.PACKAGE_JSON

        console.print()
        self._run_step(m.init_argv(), "Project initialization")

        data = package_json.read_package_json(pkg_path)
        package_json.write_package_json(pkg_path, package_json.set_module_type(data, m.module_type))

        console.print("\nInstalling dependencies...\n")
        if m.dependencies:
            self._run_step(m.install_argv(), "Main dependencies")
        if m.dev_dependencies:
            self._run_step(m.install_dev_argv(), "Dev dependencies")

        create_directories(target, m.directories)
        print_step("Creating project structure ... Done!")

        copy_templates(templates=m.templates, templates_dir=self.templates_dir, destination_dir=target)
        print_step("Copying template files ... Done!")

        data = package_json.read_package_json(pkg_path)
        package_json.write_package_json(
            pkg_path,
            package_json.finalize(data, main=m.main, scripts=m.scripts, engines=m.engines),
        )
        print_step("Updating package.json ... Done!")

        console.print("\nConfiguration setup:")
        answers = self.ask_configuration()
        render_env_file(
            templates_dir=self.templates_dir,
            template_name=m.env_template,
            destination=target / m.env_file,
            values=answers,
        )

        print_success("\nProject setup complete! 🎉")
        console.print("\nYou can now start your server with:\n")
        console.print("> npm run dev", markup=False)
        console.print()
        return True

    def ask_configuration(self) -> dict[str, str]:
        answers: dict[str, str] = {}
        for prompt in self.manifest.prompts:
            answers[prompt.key] = self.prompter.ask(prompt.label, prompt.default).strip() or prompt.default
        return answers

    def _run_step(self, command: list[str], label: str) -> str:
        outcome = self.runner.run(command, label)
        if not outcome.ok:
            logger.debug("%s failed with exit status %d", label, outcome.returncode)
            raise CommandFailedError(label, command, outcome.output)
        print_step(f"{label} ... Done!")
        return outcome.output
