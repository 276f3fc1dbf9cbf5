"""Tests for the project materializer (quick_start.scaffolder.generator).

Covers:
- End-to-end generation for the three reference scenarios
- Conditional tsconfig.json / .prettierrc for all language x Prettier combinations
- Fixed write order
- Failure when the project directory already exists (no overwrite)
- Failures propagate and leave partial output in place
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from quick_start.models import ProjectSpec
from quick_start.scaffolder import ProjectGenerator
from quick_start.scaffolder.content import generate_contents


pytestmark = pytest.mark.unit


def _tree(root: Path) -> list[str]:
    return sorted(str(p.relative_to(root)) for p in root.rglob("*"))


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


class TestScenarios:
    async def test_javascript_basic_npm(self, workdir, basic_js_spec):
        root = await ProjectGenerator(basic_js_spec).generate(workdir)

        assert root == workdir / "my-app"
        assert _tree(root) == [".prettierrc", "README.md", "package.json", "src", "src/index.js"]

        readme = (root / "README.md").read_text(encoding="utf-8")
        assert "- Prettier\n" in readme
        assert "- ESLint\n" in readme

        pkg = json.loads((root / "package.json").read_text(encoding="utf-8"))
        assert pkg["type"] == "commonjs"
        assert pkg["scripts"]["build"] == 'echo "No build step"'

        assert not (root / "tsconfig.json").exists()
        assert (root / "src" / "index.js").read_text(encoding="utf-8") == (
            "console.log('Hello from my-app!');"
        )

    async def test_typescript_full_pnpm(self, workdir, full_ts_spec):
        root = await ProjectGenerator(full_ts_spec).generate(workdir)

        assert (root / "tsconfig.json").is_file()
        assert (root / "src" / "index.ts").is_file()
        assert not (root / "src" / "index.js").exists()

        pkg = json.loads((root / "package.json").read_text(encoding="utf-8"))
        assert pkg["type"] == "module"
        assert pkg["scripts"]["build"] == "tsc"
        assert pkg["scripts"]["test"] == "jest"
        for dep in ("typescript", "@types/node", "prettier", "eslint", "jest"):
            assert dep in pkg["devDependencies"]

        readme = (root / "README.md").read_text(encoding="utf-8")
        assert "`pnpm install`" in readme

    async def test_custom_without_tools(self, workdir, empty_custom_spec):
        root = await ProjectGenerator(empty_custom_spec).generate(workdir)

        readme = (root / "README.md").read_text(encoding="utf-8")
        section = readme.split("## Technologies Used\n", 1)[1].split("\n## ", 1)[0]
        assert section.strip() == "- Language: JavaScript"

        pkg = json.loads((root / "package.json").read_text(encoding="utf-8"))
        assert pkg["devDependencies"] == {}
        assert not (root / ".prettierrc").exists()
        assert not (root / "tsconfig.json").exists()


# ---------------------------------------------------------------------------
# Conditional files
# ---------------------------------------------------------------------------


class TestConditionalFiles:
    @pytest.mark.parametrize("language", ["JavaScript", "TypeScript"])
    @pytest.mark.parametrize("with_prettier", [True, False])
    async def test_presence_matrix(self, workdir, language, with_prettier):
        tools = ["Prettier", "Jest"] if with_prettier else ["Jest"]
        spec = ProjectSpec.build("matrix", language, "custom", "npm", custom_tools=tools)

        root = await ProjectGenerator(spec).generate(workdir)

        assert (root / "tsconfig.json").exists() is (language == "TypeScript")
        assert (root / ".prettierrc").exists() is with_prettier


# ---------------------------------------------------------------------------
# Ordering and bookkeeping
# ---------------------------------------------------------------------------


class TestWriteOrder:
    async def test_written_in_fixed_order(self, workdir, full_ts_spec):
        generator = ProjectGenerator(full_ts_spec)
        root = await generator.generate(workdir)
        assert [p.relative_to(root).as_posix() for p in generator.written] == [
            "README.md",
            "package.json",
            "src/index.ts",
            "tsconfig.json",
            ".prettierrc",
        ]

    async def test_uses_supplied_contents(self, workdir, basic_js_spec):
        contents = generate_contents(basic_js_spec)
        root = await ProjectGenerator(basic_js_spec).generate(workdir, contents)
        assert (root / "package.json").read_text(encoding="utf-8") == contents.package_json

    async def test_entry_path_escaping_root_rejected(self, workdir, basic_js_spec):
        contents = generate_contents(basic_js_spec)
        bad = type(contents)(
            readme=contents.readme,
            package_json=contents.package_json,
            entry_path="../outside.js",
            entry=contents.entry,
        )
        with pytest.raises(ValueError):
            await ProjectGenerator(basic_js_spec).generate(workdir, bad)
        assert not (workdir / "outside.js").exists()


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestFailures:
    async def test_second_run_fails_without_overwriting(self, workdir, basic_js_spec):
        root = await ProjectGenerator(basic_js_spec).generate(workdir)
        (root / "README.md").write_text("edited", encoding="utf-8")

        other = ProjectSpec.build("my-app", "TypeScript", "full", "yarn")
        with pytest.raises(FileExistsError):
            await ProjectGenerator(other).generate(workdir)

        assert (root / "README.md").read_text(encoding="utf-8") == "edited"
        assert not (root / "tsconfig.json").exists()
        assert (root / "src" / "index.js").exists()

    async def test_empty_name_targets_existing_cwd(self, workdir):
        spec = ProjectSpec.build("", "JavaScript", "basic", "npm")
        with pytest.raises(FileExistsError):
            await ProjectGenerator(spec).generate(workdir)
        assert list(workdir.iterdir()) == []

    async def test_missing_parent_directory(self, tmp_path, basic_js_spec):
        with pytest.raises(FileNotFoundError):
            await ProjectGenerator(basic_js_spec).generate(tmp_path / "missing")

    async def test_write_failure_leaves_partial_output(self, workdir, basic_js_spec):
        real_write_text = Path.write_text

        def failing_write(self, data, *args, **kwargs):
            if self.name == "package.json":
                raise PermissionError("denied")
            return real_write_text(self, data, *args, **kwargs)

        with patch.object(Path, "write_text", failing_write):
            with pytest.raises(PermissionError):
                await ProjectGenerator(basic_js_spec).generate(workdir)

        root = workdir / "my-app"
        assert (root / "README.md").exists()
        assert not (root / "package.json").exists()
        assert not (root / "src").exists()
