"""Plan materialisation.

``ProjectWriter`` is the only component that touches the file system.  It
owns the no-clobber policy for the whole run:

* an existing file is never overwritten;
* a file guarded by a directory that already existed before the run is not
  written at all, and no planned sub-directory is created inside that
  directory (this keeps a pre-existing module directory untouched).
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..engine.plan import GenerationPlan
from ..reporting import Reporter
from .templates import TemplateRenderer


@dataclass
class WriteResult:
    """Outcome of materialising a plan."""

    project_root: Path
    created_directories: list[str] = field(default_factory=list)
    written_files: list[str] = field(default_factory=list)
    skipped_files: list[str] = field(default_factory=list)


class ProjectWriter:
    """Writes a ``GenerationPlan`` below a project root."""

    def __init__(
        self,
        renderer: Optional[TemplateRenderer] = None,
        reporter: Optional[Reporter] = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.reporter = reporter or Reporter()

    async def write(self, plan: GenerationPlan, project_root: str | Path) -> WriteResult:
        """Create every planned directory and write every planned file.

        Args:
            plan: The finalised plan.
            project_root: Directory the plan's relative paths resolve under.

        Returns:
            A ``WriteResult`` listing what was created and what was skipped.
        """
        root = Path(project_root)
        result = WriteResult(project_root=root)

        # Snapshot before creating anything: guards refer to the state the
        # user had, not to directories this run just made.
        preexisting = {d for d in plan.directories if (root / d).is_dir()}
        locked = {
            spec.guard for spec in plan.files if spec.guard is not None and spec.guard in preexisting
        }

        await asyncio.to_thread(root.mkdir, parents=True, exist_ok=True)
        for directory in plan.directories:
            if directory in preexisting:
                continue
            guard = next((g for g in locked if directory.startswith(f"{g}/")), None)
            if guard is not None:
                self.reporter.info(f"Skipping directory {directory} ({guard} already exists)")
                continue
            await asyncio.to_thread((root / directory).mkdir, parents=True, exist_ok=True)
            result.created_directories.append(directory)
            self.reporter.info(f"Created directory: {directory}")

        for spec in plan.files:
            target = root / spec.path
            if spec.guard is not None and spec.guard in preexisting:
                self.reporter.warning(f"Skipping {spec.path} ({spec.guard} already exists)")
                result.skipped_files.append(spec.path)
                continue
            if target.exists():
                self.reporter.warning(f"Skipping {spec.path} (exists)")
                result.skipped_files.append(spec.path)
                continue
            await self.renderer.write_spec(spec, target, plan.variables)
            result.written_files.append(spec.path)
            self.reporter.info(f"Created file: {spec.path}")

        return result
