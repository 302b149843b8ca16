"""The generation plan: everything a run will create, computed before any I/O.

A ``GenerationPlan`` is an ordered set of directories plus an ordered mapping
of file path -> ``FileSpec``.  Expanders only ever append to it:

* Registering a directory twice is a no-op (directories form a set).
* Registering an identical file twice is a no-op.
* Registering a *different* file at an already-registered path raises
  ``PlanCollision``; there is no last-write-wins.

Insertion is guarded by a lock so independent expanders writing disjoint
regions can safely share one plan.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Any, Optional

from .errors import PlanCollision


@dataclass(frozen=True)
class FileSpec:
    """A single file to materialise.

    Exactly one of *template* / *content* is set.  Template files are
    rendered with the plan's shared variables overlaid by *bindings*.

    Attributes:
        path: Project-relative POSIX path.
        template: Template identifier relative to the template root.
        content: Literal file content.
        bindings: Per-file template variables.
        guard: Project-relative directory; the writer skips this file when
            that directory already existed before the run.
    """

    path: str
    template: Optional[str] = None
    content: Optional[str] = None
    bindings: dict[str, Any] = field(default_factory=dict)
    guard: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.template is None) == (self.content is None):
            raise ValueError(f"FileSpec for '{self.path}' needs exactly one of template/content")

    @property
    def is_template(self) -> bool:
        return self.template is not None


def normalize_path(path: str) -> str:
    """Return *path* as a clean, relative POSIX path.

    Raises:
        ValueError: If the path is empty, absolute, or escapes the project
            root with ``..``.
    """
    pure = PurePosixPath(path.replace("\\", "/"))
    if not path or pure.is_absolute() or ".." in pure.parts:
        raise ValueError(f"Plan paths must be relative to the project root: {path!r}")
    normalized = str(pure)
    if normalized == ".":
        raise ValueError(f"Plan paths must name a file or directory: {path!r}")
    return normalized


class GenerationPlan:
    """Additive, collision-checked set of directories and files."""

    def __init__(self) -> None:
        self._directories: dict[str, None] = {}
        self._files: dict[str, FileSpec] = {}
        self._lock = threading.Lock()
        self.variables: dict[str, Any] = {}

    # -- Directories -------------------------------------------------------

    def add_directory(self, path: str) -> bool:
        """Register *path*; return ``True`` if it was not registered yet."""
        key = normalize_path(path)
        with self._lock:
            if key in self._directories:
                return False
            self._directories[key] = None
            return True

    def add_directories(self, paths: Any) -> None:
        for path in paths:
            self.add_directory(path)

    def has_directory(self, path: str) -> bool:
        return normalize_path(path) in self._directories

    @property
    def directories(self) -> list[str]:
        """Registered directories in registration order."""
        return list(self._directories)

    # -- Files -------------------------------------------------------------

    def add_file(self, spec: FileSpec) -> bool:
        """Register *spec*; return ``True`` if it is a new entry.

        Raises:
            PlanCollision: If a different spec is already registered at the
                same path.
        """
        key = normalize_path(spec.path)
        if key != spec.path:
            spec = FileSpec(
                path=key,
                template=spec.template,
                content=spec.content,
                bindings=dict(spec.bindings),
                guard=spec.guard,
            )
        with self._lock:
            existing = self._files.get(key)
            if existing is not None:
                if existing == spec:
                    return False
                raise PlanCollision(key)
            self._files[key] = spec
            return True

    def add_template(
        self,
        path: str,
        template: str,
        bindings: Optional[dict[str, Any]] = None,
        guard: Optional[str] = None,
    ) -> bool:
        return self.add_file(
            FileSpec(path=path, template=template, bindings=dict(bindings or {}), guard=guard)
        )

    def add_content(self, path: str, content: str, guard: Optional[str] = None) -> bool:
        return self.add_file(FileSpec(path=path, content=content, guard=guard))

    def has_file(self, path: str) -> bool:
        return normalize_path(path) in self._files

    def get_file(self, path: str) -> Optional[FileSpec]:
        return self._files.get(normalize_path(path))

    @property
    def files(self) -> list[FileSpec]:
        """Registered files in registration order."""
        return list(self._files.values())

    @property
    def file_paths(self) -> list[str]:
        return list(self._files)

    def summary(self) -> dict[str, int]:
        return {
            "directories": len(self._directories),
            "files": len(self._files),
            "templates": sum(1 for spec in self._files.values() if spec.is_template),
        }

    def __len__(self) -> int:
        return len(self._directories) + len(self._files)

    def __repr__(self) -> str:
        return (
            f"GenerationPlan(directories={len(self._directories)}, "
            f"files={len(self._files)})"
        )
