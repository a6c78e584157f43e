"""
renderer.py

Responsibility: Lay out the generated project on disk.

Rules:
- Directories are created recursively; existing ones are left alone.
- Template files are copied byte-for-byte in manifest order, overwriting.
- A missing template aborts on the first miss; earlier copies stay in place.
- The env file is the only rendered output (Jinja2, strict undefined).

This module intentionally does NOT know about npm, prompts, or CLI parsing.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound

from backend_gen.errors import MissingTemplateError
from backend_gen.manifest import TemplateEntry

logger = logging.getLogger(__name__)


def create_directories(base_dir: Path, directories: Iterable[str]) -> int:
    count = 0
    for rel in directories:
        (base_dir / rel).mkdir(parents=True, exist_ok=True)
        count += 1
    return count


def copy_templates(
    *,
    templates: Iterable[TemplateEntry],
    templates_dir: str | Path,
    destination_dir: str | Path,
) -> int:
    """
    Copy each template from `templates_dir` to its destination under
    `destination_dir`. Returns the number of files copied.
    """
    tpl_dir = Path(templates_dir)
    dst_dir = Path(destination_dir)

    copied = 0
    for entry in templates:
        src_path = tpl_dir / entry.source
        if not src_path.is_file():
            raise MissingTemplateError(src_path)
        dst_path = dst_dir / entry.destination
        dst_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src_path, dst_path)
        logger.debug("copied %s -> %s", src_path, dst_path)
        copied += 1
    return copied


def render_env_file(
    *,
    templates_dir: str | Path,
    template_name: str,
    destination: str | Path,
    values: dict[str, str],
) -> Path:
    """
    Render the env file template with `values` and write it to `destination`.
    """
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    try:
        template = env.get_template(template_name)
    except TemplateNotFound as e:
        raise MissingTemplateError(Path(templates_dir) / template_name) from e

    dst_path = Path(destination)
    dst_path.write_text(template.render(**values), encoding="utf-8", newline="\n")
    logger.debug("rendered %s -> %s", template_name, dst_path)
    return dst_path
