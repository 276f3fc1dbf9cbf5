"""create-quick-start configuration.

Centralised, typed configuration for the generator.  All settings use Pydantic
v2 models so the fixed values that end up in generated files (dependency pins,
compiler options, formatter options) live in one place and can be overridden
in tests without touching the generators.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


PROGRAM_NAME = "create-quick-start"
PROGRAM_DESCRIPTION = "CLI to create new projects with custom configurations"


class DependencyPins(BaseModel):
    """Version ranges written into ``devDependencies``."""

    typescript: str = Field(default="^5.0.0")
    types_node: str = Field(default="^20.0.0", description="Pin for @types/node")
    prettier: str = Field(default="^3.0.0")
    eslint: str = Field(default="^8.0.0")
    jest: str = Field(default="^29.0.0")


class GeneratorConfig(BaseModel):
    """Fixed values used by the content generators.

    Instances are typically created once by the CLI entry point and passed
    through to the generators; every generator falls back to a default
    instance when none is given.
    """

    program_name: str = Field(default=PROGRAM_NAME)
    version: str = Field(default="1.0.0")
    default_project_name: str = Field(default="my-app")
    project_version: str = Field(default="1.0.0")
    project_description: str = Field(
        default=f"Project created with {PROGRAM_NAME} CLI"
    )
    license: str = Field(default="MIT")
    pins: DependencyPins = Field(default_factory=DependencyPins)

    tsconfig_compiler_options: dict[str, Any] = Field(
        default_factory=lambda: {
            "target": "es2020",
            "module": "commonjs",
            "strict": True,
            "esModuleInterop": True,
            "skipLibCheck": True,
            "forceConsistentCasingInFileNames": True,
            "outDir": "./dist",
        }
    )
    tsconfig_include: list[str] = Field(default_factory=lambda: ["src/**/*"])
    tsconfig_exclude: list[str] = Field(default_factory=lambda: ["node_modules"])

    prettier_options: dict[str, Any] = Field(
        default_factory=lambda: {
            "semi": True,
            "singleQuote": True,
            "trailingComma": "es5",
            "printWidth": 80,
            "tabWidth": 2,
        }
    )


DEFAULT_CONFIG = GeneratorConfig()
