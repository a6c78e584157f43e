"""
backend_gen package

This package implements `gen-backend`, a CLI that scaffolds an Express + MongoDB
backend project into the current directory.

Key responsibilities are split across modules:
- `manifest.py`: load the scaffold manifest (dependencies, layout, templates) from YAML
- `runner.py`: run package manager commands and capture their output
- `package_json.py`: read, patch and rewrite the generated project's `package.json`
- `renderer.py`: create the directory layout, copy templates, render the `.env` file
- `prompter.py`: interactive configuration prompts
- `scaffolder.py`: orchestration (guard -> npm -> layout -> templates -> config)
- `cli.py`: CLI entrypoint
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
