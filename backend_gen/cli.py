"""
cli.py

Responsibility: CLI entrypoint for gen-backend.

Captures the process state once (working directory, argv) into an
`InvocationContext`, wires the real command runner and prompter into the
`Scaffolder`, and maps failures to exit codes:
- 0: project scaffolded, or no confirmation given
- 1: project already exists, command failed, template missing, or any other error
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from backend_gen import __version__
from backend_gen.console import console, print_error, print_warning
from backend_gen.errors import (
    AlreadyInitializedError,
    CommandFailedError,
    MissingTemplateError,
    ScaffoldError,
)
from backend_gen.manifest import BUNDLED_MANIFEST_PATH, BUNDLED_TEMPLATES_DIR, load_manifest
from backend_gen.prompter import ConsolePrompter, Prompter
from backend_gen.runner import CommandRunner, SubprocessRunner
from backend_gen.scaffolder import USAGE_HINT, InvocationContext, Scaffolder

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gen-backend",
        description="Scaffold an Express + MongoDB backend project in the current directory",
    )
    p.add_argument("--yes", "-y", action="store_true", help="Confirm and initialize the project")
    p.add_argument("--dir", default=None, help="Target directory (default: current directory)")
    p.add_argument(
        "--config",
        default=str(BUNDLED_MANIFEST_PATH),
        help="Scaffold manifest YAML (default: bundled scaffold.yaml)",
    )
    p.add_argument(
        "--templates-dir",
        default=str(BUNDLED_TEMPLATES_DIR),
        help="Template store directory (default: bundled templates)",
    )
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def scaffold_cmd(
    args: argparse.Namespace,
    argv: list[str],
    *,
    runner: CommandRunner | None = None,
    prompter: Prompter | None = None,
) -> int:
    context = InvocationContext(
        working_dir=Path(args.dir or os.getcwd()).resolve(),
        argv=tuple(argv),
        auto_confirm=bool(args.yes),
    )
    if not context.auto_confirm:
        console.print(USAGE_HINT)
        return 0
    try:
        manifest = load_manifest(args.config)
        scaffolder = Scaffolder(
            manifest=manifest,
            templates_dir=Path(args.templates_dir).resolve(),
            runner=runner or SubprocessRunner(context.working_dir),
            prompter=prompter or ConsolePrompter(),
        )
        scaffolder.run(context)
    except AlreadyInitializedError:
        print_warning("You have already created a project in this directory.")
        print_warning("If you want to recreate the project, please clear the directory first.")
        return 1
    except CommandFailedError as e:
        print_error(f"✗ Error in {e.step}: {e.output}")
        print_error(f"\nSetup failed: {e.step} exited with a non-zero status")
        return 1
    except MissingTemplateError as e:
        print_error(f"✗ Template file missing: {e.path}")
        return 1
    except ScaffoldError as e:
        print_error(f"\nSetup failed: {e}")
        return 1
    except Exception as e:  # noqa: BLE001 - every orchestration failure exits non-zero
        logger.debug("unhandled setup failure", exc_info=True)
        print_error(f"\nSetup failed: {e}")
        return 1
    return 0


def main(
    argv: list[str] | None = None,
    *,
    runner: CommandRunner | None = None,
    prompter: Prompter | None = None,
) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)
    return scaffold_cmd(args, argv, runner=runner, prompter=prompter)


if __name__ == "__main__":
    raise SystemExit(main())
