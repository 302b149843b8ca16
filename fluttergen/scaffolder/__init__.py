"""fluttergen scaffolder -- renders a ``GenerationPlan`` into a project tree.

Quick usage::

    from fluttergen.scaffolder import ProjectGenerator

    generator = ProjectGenerator()
    project_path = await generator.generate(raw_config, "/tmp/output")
"""

from fluttergen.scaffolder.generator import ProjectGenerator
from fluttergen.scaffolder.templates import TemplateRenderer
from fluttergen.scaffolder.writer import ProjectWriter, WriteResult

__all__ = [
    "ProjectGenerator",
    "ProjectWriter",
    "TemplateRenderer",
    "WriteResult",
]
