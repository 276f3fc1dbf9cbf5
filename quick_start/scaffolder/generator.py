"""Project materializer.

Takes a ``ProjectSpec`` and writes the project skeleton to disk in a fixed
order.  Nothing here catches, retries, or cleans up: the first failing
file-system call propagates to the caller and anything already written stays
on disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from quick_start.config import DEFAULT_CONFIG, GeneratorConfig
from quick_start.models import ProjectSpec
from quick_start.utils import is_within, make_dir, write_text
from .content import (
    PACKAGE_JSON_FILE,
    PRETTIER_FILE,
    README_FILE,
    SOURCE_DIR,
    TSCONFIG_FILE,
    ProjectContents,
    generate_contents,
)
from .templates import TemplateRenderer


class ProjectGenerator:
    """Materializes a ``ProjectSpec`` as a directory tree.

    Given a spec, ``generate`` creates ``<output_dir>/<project_name>`` with:
    - README.md and package.json
    - src/index.js or src/index.ts
    - tsconfig.json (TypeScript only)
    - .prettierrc (when Prettier is selected)
    """

    def __init__(
        self,
        spec: ProjectSpec,
        renderer: Optional[TemplateRenderer] = None,
        config: GeneratorConfig = DEFAULT_CONFIG,
    ) -> None:
        self.spec = spec
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.written: list[Path] = []

    # -- Public API --------------------------------------------------------

    async def generate(
        self, output_dir: str | Path, contents: Optional[ProjectContents] = None
    ) -> Path:
        """Generate the project structure.

        Args:
            output_dir: Existing parent directory.  A subdirectory named after
                the project is created inside it.
            contents: Pre-generated file bodies.  Generated from ``self.spec`` when
                omitted.

        Returns:
            Path to the generated project root.

        Raises:
            FileExistsError: If the project directory already exists.
            OSError: On any other file-system failure.
        """
        if contents is None:
            contents = generate_contents(self.spec, self.renderer, self.config)

        project_root = Path(output_dir) / self.spec.project_name
        self.written = []

        # 1. Project root
        await make_dir(project_root)

        # 2-3. README and manifest
        await self._write(project_root, README_FILE, contents.readme)
        await self._write(project_root, PACKAGE_JSON_FILE, contents.package_json)

        # 4-5. Source directory and entry file
        await make_dir(self._target(project_root, SOURCE_DIR))
        await self._write(project_root, contents.entry_path, contents.entry)

        # 6. TypeScript compiler config
        if contents.tsconfig is not None:
            await self._write(project_root, TSCONFIG_FILE, contents.tsconfig)

        # 7. Formatter config
        if contents.prettier is not None:
            await self._write(project_root, PRETTIER_FILE, contents.prettier)

        return project_root

    # -- Helpers -----------------------------------------------------------

    def _target(self, root: Path, relative: str) -> Path:
        """Resolve *relative* under *root*, refusing paths that escape it."""
        target = root / relative
        if not is_within(target, root):
            raise ValueError(f"Refusing to write outside {root}: {relative}")
        return target

    async def _write(self, root: Path, relative: str, content: str) -> Path:
        path = await write_text(self._target(root, relative), content)
        self.written.append(path)
        return path
