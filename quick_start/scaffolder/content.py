"""Content generators for the project skeleton.

Every function here is pure: it turns a ``ProjectSpec`` into a string or a
JSON-serialisable dict and never touches the file system.  The materializer
in :mod:`quick_start.scaffolder.generator` decides where the results go.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Optional

from quick_start.config import DEFAULT_CONFIG, GeneratorConfig
from quick_start.models import ProjectSpec, Tool
from quick_start.utils import to_json
from .templates import TemplateRenderer


README_FILE = "README.md"
PACKAGE_JSON_FILE = "package.json"
TSCONFIG_FILE = "tsconfig.json"
PRETTIER_FILE = ".prettierrc"
SOURCE_DIR = "src"

NO_TESTS_SCRIPT = 'echo "No tests specified"'
NO_BUILD_SCRIPT = 'echo "No build step"'


# ---------------------------------------------------------------------------
# Template context
# ---------------------------------------------------------------------------


def build_context(
    spec: ProjectSpec, config: GeneratorConfig = DEFAULT_CONFIG
) -> dict[str, Any]:
    """Build the Jinja2 template context from the project spec.

    ``tool_bullets`` is one ``- <tool>`` line per tool; it renders as an
    empty line when no tools are selected.
    """
    tools = [tool.value for tool in spec.tools]
    return {
        "project_name": spec.project_name,
        "description": config.project_description,
        "language": spec.language.value,
        "tools": tools,
        "tool_bullets": "\n".join(f"- {tool}" for tool in tools),
        "package_manager": spec.package_manager.value,
        "license": config.license,
    }


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------


def render_readme(
    spec: ProjectSpec,
    renderer: Optional[TemplateRenderer] = None,
    config: GeneratorConfig = DEFAULT_CONFIG,
) -> str:
    """Render ``README.md`` with one bullet per tool and package-manager commands."""
    renderer = renderer or TemplateRenderer()
    return renderer.render("README.md.j2", build_context(spec, config))


def render_entry_file(
    spec: ProjectSpec,
    renderer: Optional[TemplateRenderer] = None,
    config: GeneratorConfig = DEFAULT_CONFIG,
) -> str:
    """Render the single greeting statement of ``src/index.<ext>``."""
    renderer = renderer or TemplateRenderer()
    return renderer.render("index.j2", build_context(spec, config))


def build_dev_dependencies(
    spec: ProjectSpec, config: GeneratorConfig = DEFAULT_CONFIG
) -> dict[str, str]:
    """Return the ``devDependencies`` mapping implied by language and tools.

    Husky and Commitlint contribute nothing.
    """
    pins = config.pins
    dev: dict[str, str] = {}
    if spec.is_typescript:
        dev["typescript"] = pins.typescript
        dev["@types/node"] = pins.types_node
    if spec.uses(Tool.PRETTIER):
        dev["prettier"] = pins.prettier
    if spec.uses(Tool.ESLINT):
        dev["eslint"] = pins.eslint
    if spec.uses(Tool.JEST):
        dev["jest"] = pins.jest
    return dev


def build_package_json(
    spec: ProjectSpec, config: GeneratorConfig = DEFAULT_CONFIG
) -> dict[str, Any]:
    """Build the ``package.json`` object."""
    return {
        "name": spec.project_name,
        "version": config.project_version,
        "description": config.project_description,
        "main": "index.js",
        "type": "module" if spec.is_typescript else "commonjs",
        "scripts": {
            "test": "jest" if spec.uses(Tool.JEST) else NO_TESTS_SCRIPT,
            "start": "node index.js",
            "build": "tsc" if spec.is_typescript else NO_BUILD_SCRIPT,
        },
        "dependencies": {},
        "devDependencies": build_dev_dependencies(spec, config),
        "license": config.license,
    }


def build_tsconfig(
    spec: ProjectSpec, config: GeneratorConfig = DEFAULT_CONFIG
) -> Optional[dict[str, Any]]:
    """Build ``tsconfig.json``, or ``None`` for JavaScript projects."""
    if not spec.is_typescript:
        return None
    return {
        "compilerOptions": copy.deepcopy(config.tsconfig_compiler_options),
        "include": list(config.tsconfig_include),
        "exclude": list(config.tsconfig_exclude),
    }


def build_prettier_config(
    spec: ProjectSpec, config: GeneratorConfig = DEFAULT_CONFIG
) -> Optional[dict[str, Any]]:
    """Build ``.prettierrc``, or ``None`` when Prettier is not selected."""
    if not spec.uses(Tool.PRETTIER):
        return None
    return dict(config.prettier_options)


# ---------------------------------------------------------------------------
# Bundle
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProjectContents:
    """Every generated file body, ready to be written."""

    readme: str
    package_json: str
    entry_path: str
    entry: str
    tsconfig: Optional[str] = None
    prettier: Optional[str] = None

    def files(self) -> list[tuple[str, str]]:
        """Return ``(relative_path, content)`` pairs in write order.

        The ``src`` directory is created by the materializer between
        ``package.json`` and the entry file.
        """
        files = [
            (README_FILE, self.readme),
            (PACKAGE_JSON_FILE, self.package_json),
            (self.entry_path, self.entry),
        ]
        if self.tsconfig is not None:
            files.append((TSCONFIG_FILE, self.tsconfig))
        if self.prettier is not None:
            files.append((PRETTIER_FILE, self.prettier))
        return files


def generate_contents(
    spec: ProjectSpec,
    renderer: Optional[TemplateRenderer] = None,
    config: GeneratorConfig = DEFAULT_CONFIG,
) -> ProjectContents:
    """Run every generator for *spec* and bundle the results."""
    renderer = renderer or TemplateRenderer()
    tsconfig = build_tsconfig(spec, config)
    prettier = build_prettier_config(spec, config)
    return ProjectContents(
        readme=render_readme(spec, renderer, config),
        package_json=to_json(build_package_json(spec, config)),
        entry_path=f"{SOURCE_DIR}/index.{spec.entry_extension}",
        entry=render_entry_file(spec, renderer, config),
        tsconfig=to_json(tsconfig) if tsconfig is not None else None,
        prettier=to_json(prettier) if prettier is not None else None,
    )
