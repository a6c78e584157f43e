"""
manifest.py

Responsibility: Load the scaffold manifest (YAML) into a typed, immutable model.

The manifest holds everything that differs between generator variants:
package manager commands, dependency lists, the directory plan, the template
list, `package.json` fields and the configuration prompts. The scaffolder treats
the parsed result as the single source of truth.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from backend_gen.errors import ManifestError

BUNDLED_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
BUNDLED_MANIFEST_PATH = BUNDLED_TEMPLATES_DIR / "scaffold.yaml"


@dataclass(frozen=True)
class TemplateEntry:
    """One bundled template file and where it lands in the generated project."""

    source: str
    destination: str


@dataclass(frozen=True)
class ConfigPrompt:
    """A value asked interactively and written to the env file under `key`."""

    key: str
    label: str
    default: str


@dataclass(frozen=True)
class ScaffoldManifest:
    package_manager: str = "npm"
    init_command: tuple[str, ...] = ("init", "--yes")
    install_command: tuple[str, ...] = ("install",)
    install_dev_command: tuple[str, ...] = ("install", "--save-dev")
    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()
    module_type: str = "module"
    directories: tuple[str, ...] = ()
    templates: tuple[TemplateEntry, ...] = ()
    main: str = "src/server.js"
    scripts: dict[str, str] = field(default_factory=dict)
    engines: dict[str, str] = field(default_factory=dict)
    env_file: str = ".env"
    env_template: str = "dotenv.j2"
    prompts: tuple[ConfigPrompt, ...] = ()

    def init_argv(self) -> list[str]:
        return [self.package_manager, *self.init_command]

    def install_argv(self) -> list[str]:
        return [self.package_manager, *self.install_command, *self.dependencies]

    def install_dev_argv(self) -> list[str]:
        return [self.package_manager, *self.install_dev_command, *self.dev_dependencies]


def _str_list(data: dict[str, Any], key: str) -> tuple[str, ...]:
    raw = data.get(key) or []
    if isinstance(raw, str):
        raw = raw.split()
    if not isinstance(raw, list):
        raise ManifestError(f"`{key}` must be a list when provided.")
    return tuple(str(v).strip() for v in raw if str(v).strip())


def _str_mapping(data: dict[str, Any], key: str) -> dict[str, str]:
    raw = data.get(key) or {}
    if not isinstance(raw, dict):
        raise ManifestError(f"`{key}` must be an object/mapping when provided.")
    return {str(k): str(v) for k, v in raw.items()}


def _parse_templates(raw: Any) -> tuple[TemplateEntry, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ManifestError("`templates` must be a list of {src, dest} entries.")
    entries: list[TemplateEntry] = []
    for item in raw:
        if not isinstance(item, dict) or not item.get("src") or not item.get("dest"):
            raise ManifestError(f"Invalid template entry (need `src` and `dest`): {item!r}")
        entries.append(TemplateEntry(source=str(item["src"]), destination=str(item["dest"])))
    return tuple(entries)


def _parse_prompts(raw: Any) -> tuple[ConfigPrompt, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ManifestError("`prompts` must be a list of {key, label, default} entries.")
    prompts: list[ConfigPrompt] = []
    for item in raw:
        if not isinstance(item, dict) or not item.get("key") or not item.get("label"):
            raise ManifestError(f"Invalid prompt entry (need `key` and `label`): {item!r}")
        default = item.get("default")
        prompts.append(
            ConfigPrompt(
                key=str(item["key"]).strip(),
                label=str(item["label"]).strip(),
                default="" if default is None else str(default),
            )
        )
    return tuple(prompts)


def parse_manifest(data: dict[str, Any]) -> ScaffoldManifest:
    """
    Build a `ScaffoldManifest` from an already-decoded mapping.
    """
    if not isinstance(data, dict):
        raise ManifestError("Scaffold manifest must be a mapping/object at the top level.")

    package_manager = str(data.get("package_manager") or "npm").strip()
    commands = data.get("commands") or {}
    if not isinstance(commands, dict):
        raise ManifestError("`commands` must be an object/mapping when provided.")

    defaults = ScaffoldManifest()
    return ScaffoldManifest(
        package_manager=package_manager,
        init_command=_str_list(commands, "init") or defaults.init_command,
        install_command=_str_list(commands, "install") or defaults.install_command,
        install_dev_command=_str_list(commands, "install_dev") or defaults.install_dev_command,
        dependencies=_str_list(data, "dependencies"),
        dev_dependencies=_str_list(data, "dev_dependencies"),
        module_type=str(data.get("module_type") or defaults.module_type).strip(),
        directories=_str_list(data, "directories"),
        templates=_parse_templates(data.get("templates")),
        main=str(data.get("main") or defaults.main).strip(),
        scripts=_str_mapping(data, "scripts"),
        engines=_str_mapping(data, "engines"),
        env_file=str(data.get("env_file") or defaults.env_file).strip(),
        env_template=str(data.get("env_template") or defaults.env_template).strip(),
        prompts=_parse_prompts(data.get("prompts")),
    )


def load_manifest(manifest_path: str | Path = BUNDLED_MANIFEST_PATH) -> ScaffoldManifest:
    """
    Load and validate a scaffold manifest YAML file.

    Recognized top-level keys:
    - package_manager: str
    - commands: {init, install, install_dev} argument lists
    - dependencies / dev_dependencies: list[str]
    - module_type, main, env_file, env_template: str
    - directories: list[str]
    - templates: list of {src, dest}
    - scripts / engines: mapping
    - prompts: list of {key, label, default}
    """
    path = Path(manifest_path)
    if not path.exists():
        raise ManifestError(f"Scaffold manifest does not exist: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ManifestError(f"Scaffold manifest is not valid YAML: {path}") from e
    return parse_manifest(data)
