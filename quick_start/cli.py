"""create-quick-start command-line entry point.

Usage::

    create-quick-start
    python -m quick_start --version
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from quick_start.collector import AnswerCollector
from quick_start.config import (
    DEFAULT_CONFIG,
    PROGRAM_DESCRIPTION,
    GeneratorConfig,
)
from quick_start.models import ProjectSpec
from quick_start.scaffolder import ProjectGenerator, generate_contents
from quick_start.utils import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_summary_table,
)


def build_parser(config: GeneratorConfig = DEFAULT_CONFIG) -> argparse.ArgumentParser:
    """Build the argument parser. Only ``--help`` and ``--version`` exist."""
    parser = argparse.ArgumentParser(prog=config.program_name, description=PROGRAM_DESCRIPTION)
    parser.add_argument("--version", "-V", action="version", version=config.version)
    return parser


def next_steps(spec: ProjectSpec) -> str:
    """The literal three-step hint printed after a successful run."""
    return (
        "Next steps:\n"
        f"1. cd {spec.project_name}\n"
        f"2. {spec.package_manager.value} install\n"
        "3. Start coding!"
    )


def _summary(spec: ProjectSpec) -> dict[str, str]:
    return {
        "Project name": spec.project_name,
        "Language": spec.language.value,
        "Preset": spec.tool_preset.value,
        "Tools": ", ".join(tool.value for tool in spec.tools) or "(none)",
        "Package manager": spec.package_manager.value,
    }


def create_project(
    cwd: Path,
    collector: Optional[AnswerCollector] = None,
    out: Optional[Console] = None,
    err: Optional[Console] = None,
    config: GeneratorConfig = DEFAULT_CONFIG,
) -> int:
    """Collect answers, generate the files under *cwd* and report the outcome.

    This is the only place errors are caught.  Returns the process exit code:
    0 on success, 1 on any failure, including an aborted prompt.
    """
    out = out or console
    err = err or err_console
    collector = collector or AnswerCollector(out, config)

    try:
        spec = collector.collect()
        print_summary_table(_summary(spec), title="Project configuration", out=out)

        generator = ProjectGenerator(spec, config=config)
        contents = generate_contents(spec, generator.renderer, config)
        asyncio.run(generator.generate(cwd, contents))
    except (Exception, KeyboardInterrupt) as exc:
        cause = str(exc) or type(exc).__name__
        print_error(f"Error creating project: {escape(cause)}", out=err)
        return 1

    print_success("\nProject created successfully! 🎉", out=out)
    print_info(f"\n{escape(next_steps(spec))}", out=out)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``create-quick-start``."""
    parser = build_parser()
    parser.parse_args(argv)
    sys.exit(create_project(Path.cwd()))


if __name__ == "__main__":
    main()
