"""Interactive answer collection.

Asks the fixed question sequence with ``rich.prompt`` and resolves the
answers into a ``ProjectSpec``.  Interrupts (Ctrl-C, end of input) are not
handled here and propagate to the caller.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.prompt import Confirm, Prompt

from quick_start.config import DEFAULT_CONFIG, GeneratorConfig
from quick_start.models import (
    PRESET_LABELS,
    Language,
    PackageManager,
    ProjectSpec,
    Tool,
    ToolPreset,
)
from quick_start.utils import console as default_console


class VerbatimPrompt(Prompt):
    """Free-text prompt that returns the answer without stripping whitespace.

    Empty input still falls back to the default.
    """

    def process_response(self, value: str) -> str:
        return value


class AnswerCollector:
    """Runs the question sequence against a Rich console.

    Questions, in order: project name, language, tool preset, custom tools
    (custom preset only), package manager.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        config: GeneratorConfig = DEFAULT_CONFIG,
    ) -> None:
        self.console = console or default_console
        self.config = config

    def collect(self) -> ProjectSpec:
        """Ask every question and return the resolved spec."""
        project_name = self.ask_project_name()
        language = self.ask_language()
        preset = self.ask_tool_preset()
        custom_tools = self.ask_custom_tools() if preset is ToolPreset.CUSTOM else None
        package_manager = self.ask_package_manager()
        return ProjectSpec.build(
            project_name=project_name,
            language=language,
            tool_preset=preset,
            package_manager=package_manager,
            custom_tools=custom_tools,
        )

    # -- Individual questions ----------------------------------------------

    def ask_project_name(self) -> str:
        return VerbatimPrompt.ask(
            "What is your project name?",
            console=self.console,
            default=self.config.default_project_name,
        )

    def ask_language(self) -> Language:
        answer = Prompt.ask(
            "Which language would you like to use?",
            console=self.console,
            choices=[lang.value for lang in Language],
            default=Language.JAVASCRIPT.value,
        )
        return Language(answer)

    def ask_tool_preset(self) -> ToolPreset:
        self.console.print("Choose your development tools setup:")
        for preset in ToolPreset:
            self.console.print(f"  [cyan]{preset.value}[/cyan]  {PRESET_LABELS[preset]}")
        answer = Prompt.ask(
            "Preset",
            console=self.console,
            choices=[preset.value for preset in ToolPreset],
            default=ToolPreset.BASIC.value,
        )
        return ToolPreset(answer)

    def ask_custom_tools(self) -> list[Tool]:
        """Multi-select: one yes/no question per tool, in choice order."""
        self.console.print("Select the tools you want to include:")
        return [
            tool
            for tool in Tool
            if Confirm.ask(f"  {tool.value}", console=self.console, default=False)
        ]

    def ask_package_manager(self) -> PackageManager:
        answer = Prompt.ask(
            "Which package manager do you prefer?",
            console=self.console,
            choices=[pm.value for pm in PackageManager],
            default=PackageManager.NPM.value,
        )
        return PackageManager(answer)
