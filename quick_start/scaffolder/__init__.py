"""create-quick-start scaffolder -- turns a ``ProjectSpec`` into files.

Quick usage::

    from quick_start.models import ProjectSpec
    from quick_start.scaffolder import ProjectGenerator

    spec = ProjectSpec.build("my-app", "JavaScript", "basic", "npm")
    project_path = await ProjectGenerator(spec).generate(Path.cwd())
"""

from quick_start.scaffolder.content import ProjectContents, generate_contents
from quick_start.scaffolder.generator import ProjectGenerator
from quick_start.scaffolder.templates import TemplateRenderer

__all__ = [
    "ProjectContents",
    "ProjectGenerator",
    "TemplateRenderer",
    "generate_contents",
]
