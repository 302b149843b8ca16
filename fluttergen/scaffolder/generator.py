"""Main scaffolding orchestrator.

Takes raw project configuration, resolves it into a ``GenerationPlan`` with
the engine, and materialises the plan below ``<output_dir>/<project_name>``.
Planning completes before the first directory is created, so an invalid
configuration never leaves a partial project behind.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from ..config import GeneratorSettings
from ..engine.planner import PlanResult, ProjectPlanner
from ..reporting import Reporter
from .templates import TemplateRenderer
from .writer import ProjectWriter, WriteResult


class ProjectGenerator:
    """Plan-then-write facade used by the CLI and by library callers."""

    def __init__(
        self,
        settings: Optional[GeneratorSettings] = None,
        reporter: Optional[Reporter] = None,
    ) -> None:
        self.settings = settings or GeneratorSettings()
        self.reporter = reporter or Reporter()
        self.renderer = TemplateRenderer(self.settings.template_dir)
        self.planner = ProjectPlanner(
            self.reporter,
            force_default_feature=self.settings.force_default_feature,
            extension=self.settings.source_extension,
        )
        self.writer = ProjectWriter(self.renderer, self.reporter)
        self.last_result: Optional[WriteResult] = None

    # -- Public API --------------------------------------------------------

    def plan(self, raw: Mapping[str, Any]) -> PlanResult:
        """Resolve *raw* into a plan without touching the file system."""
        return self.planner.plan(raw)

    async def generate(
        self, raw: Mapping[str, Any], output_dir: str | Path | None = None
    ) -> Path:
        """Generate the complete project structure.

        Args:
            raw: Raw project configuration mapping.
            output_dir: Parent directory where the project folder will be
                created.  Defaults to ``settings.output_dir``.

        Returns:
            Path to the generated project root (not created on dry runs).
        """
        return await self.write(self.plan(raw), output_dir)

    async def write(self, result: PlanResult, output_dir: str | Path | None = None) -> Path:
        """Materialise an already resolved plan.

        Lets a caller inspect or print a ``PlanResult`` and then write that
        same plan without resolving the configuration a second time.
        """
        parent = Path(output_dir) if output_dir is not None else self.settings.output_dir
        project_root = parent / result.config.project_name

        if self.settings.dry_run:
            self.reporter.info(f"Dry run: nothing written to {project_root}")
            self.last_result = WriteResult(project_root=project_root)
            return project_root

        self.last_result = await self.writer.write(result.plan, project_root)
        self.reporter.success(
            f"Project {result.config.project_name} generated at {project_root} "
            f"({len(self.last_result.written_files)} files written, "
            f"{len(self.last_result.skipped_files)} skipped)"
        )
        return project_root
