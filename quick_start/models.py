"""Pydantic v2 models for the collected project answers.

Defines the enumerated answer types for every question and the resolved
``ProjectSpec`` record consumed by the content generators and the
materializer.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Language(str, Enum):
    """Source language of the generated project."""
    JAVASCRIPT = "JavaScript"
    TYPESCRIPT = "TypeScript"


class ToolPreset(str, Enum):
    """Named bundle of development tools."""
    BASIC = "basic"
    TESTING = "testing"
    FULL = "full"
    CUSTOM = "custom"


class Tool(str, Enum):
    """Development tools offered by the custom multi-select, in choice order."""
    PRETTIER = "Prettier"
    ESLINT = "ESLint"
    JEST = "Jest"
    HUSKY = "Husky"
    COMMITLINT = "Commitlint"


class PackageManager(str, Enum):
    """Package manager used in the README and next-steps commands."""
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


# ---------------------------------------------------------------------------
# Preset derivation
# ---------------------------------------------------------------------------

PRESET_TOOLS: dict[ToolPreset, tuple[Tool, ...]] = {
    ToolPreset.BASIC: (Tool.PRETTIER, Tool.ESLINT),
    ToolPreset.TESTING: (Tool.PRETTIER, Tool.ESLINT, Tool.JEST),
    ToolPreset.FULL: (
        Tool.PRETTIER,
        Tool.ESLINT,
        Tool.JEST,
        Tool.HUSKY,
        Tool.COMMITLINT,
    ),
}

PRESET_LABELS: dict[ToolPreset, str] = {
    ToolPreset.BASIC: "Basic (Prettier + ESLint)",
    ToolPreset.TESTING: "Testing (Prettier + ESLint + Jest)",
    ToolPreset.FULL: "Full (Prettier + ESLint + Jest + Husky + Commitlint)",
    ToolPreset.CUSTOM: "Custom (Choose your own tools)",
}


def derive_tools(
    preset: ToolPreset, custom_tools: Optional[Iterable[Tool]] = None
) -> list[Tool]:
    """Resolve a preset into its ordered, duplicate-free tool list.

    For ``custom`` the user's selection is returned as given (first occurrence
    wins); any other preset ignores *custom_tools*.
    """
    preset = ToolPreset(preset)
    if preset is ToolPreset.CUSTOM:
        selected = [Tool(t) for t in (custom_tools or [])]
        return list(dict.fromkeys(selected))
    try:
        return list(PRESET_TOOLS[preset])
    except KeyError:
        raise ValueError(f"No tool list defined for preset {preset.value!r}") from None


# ---------------------------------------------------------------------------
# ProjectSpec
# ---------------------------------------------------------------------------

class ProjectSpec(BaseModel):
    """The resolved answer record. Frozen once built."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Directory and package name, accepted as typed")
    language: Language = Field(..., description="JavaScript or TypeScript")
    tool_preset: ToolPreset = Field(..., description="Selected tool preset")
    custom_tools: Optional[list[Tool]] = Field(
        default=None, description="Multi-select result, only set for the custom preset"
    )
    package_manager: PackageManager = Field(..., description="npm, yarn or pnpm")
    tools: list[Tool] = Field(default_factory=list, description="Derived tool list")

    @classmethod
    def build(
        cls,
        project_name: str,
        language: Language | str,
        tool_preset: ToolPreset | str,
        package_manager: PackageManager | str,
        custom_tools: Optional[Iterable[Tool | str]] = None,
    ) -> "ProjectSpec":
        """Construct a spec with ``tools`` derived from the preset."""
        preset = ToolPreset(tool_preset)
        custom: Optional[list[Tool]] = None
        if preset is ToolPreset.CUSTOM:
            custom = [Tool(t) for t in (custom_tools or [])]
        return cls(
            project_name=project_name,
            language=Language(language),
            tool_preset=preset,
            custom_tools=custom,
            package_manager=PackageManager(package_manager),
            tools=derive_tools(preset, custom),
        )

    def uses(self, tool: Tool | str) -> bool:
        """Return ``True`` if *tool* is part of the derived tool list."""
        return Tool(tool) in self.tools

    @property
    def is_typescript(self) -> bool:
        return self.language is Language.TYPESCRIPT

    @property
    def entry_extension(self) -> str:
        """File extension of ``src/index.*``."""
        return "ts" if self.is_typescript else "js"
