"""Architecture-to-layout resolution.

This module is the single place that knows how each architecture pattern
shapes the generated tree.  ``resolve_architecture`` is a pure lookup from
the ``Architecture`` enum to an immutable ``ArchitectureRule``; both the
feature and the module expanders read the rule instead of branching on the
architecture themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .models import Architecture


# ---------------------------------------------------------------------------
# Fixed project skeleton (identical for every architecture)
# ---------------------------------------------------------------------------

BASE_DIRECTORIES: tuple[str, ...] = (
    "lib",
    "test",
    "assets",
    "assets/images",
    "assets/icons",
    "assets/fonts",
    "assets/json",
)

FEATURE_BASE_PATH = "features"

# Placeholder substituted with the state-management directory name.
STATE_DIR = "{state_dir}"

VIEW_TEMPLATE = "feature/view.dart.j2"


# ---------------------------------------------------------------------------
# Rule types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FeatureLayer:
    """One directory inside a feature sub-tree.

    Attributes:
        directory: Path relative to the feature root.
        stub: File-name suffix of the stub generated in this layer
            (``<feature>_<stub>.<ext>``), or ``None`` for an empty layer.
        template: Template used for the stub.
    """

    directory: str
    stub: Optional[str] = None
    template: Optional[str] = None


@dataclass(frozen=True)
class ArchitectureRule:
    """Resolved layout rules for one architecture."""

    architecture: Optional[Architecture]
    architecture_directories: tuple[str, ...]
    module_base_path: str
    feature_layers: tuple[FeatureLayer, ...]
    state_directory: str
    feature_base_path: str = FEATURE_BASE_PATH
    base_directories: tuple[str, ...] = BASE_DIRECTORIES

    def feature_root(self, feature_slug: str) -> str:
        return f"lib/{self.feature_base_path}/{feature_slug}"

    def module_root(self, module_slug: str) -> str:
        return f"lib/{self.module_base_path}/{module_slug}"

    def state_path(self, state_dir: str) -> str:
        """Return the state directory relative to the feature root."""
        return self.state_directory.replace(STATE_DIR, state_dir)

    @property
    def view_layer(self) -> FeatureLayer:
        """The layer holding each feature's entry widget."""
        for layer in self.feature_layers:
            if layer.template == VIEW_TEMPLATE:
                return layer
        raise LookupError(f"No view layer for {self.architecture}")


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------

_CLEAN_LAYERS = (
    FeatureLayer("data/datasources", "remote_data_source", "feature/data_source.dart.j2"),
    FeatureLayer("data/models", "model", "feature/model.dart.j2"),
    FeatureLayer("data/repositories", "repository_impl", "feature/repository_impl.dart.j2"),
    FeatureLayer("domain/entities", "entity", "feature/entity.dart.j2"),
    FeatureLayer("domain/repositories", "repository", "feature/repository.dart.j2"),
    FeatureLayer("domain/usecases", "usecase", "feature/usecase.dart.j2"),
    FeatureLayer("presentation/pages", "page", VIEW_TEMPLATE),
    FeatureLayer("presentation/widgets"),
)

_LAYERED_LAYERS = (
    FeatureLayer("models", "model", "feature/model.dart.j2"),
    FeatureLayer("views", "view", VIEW_TEMPLATE),
    FeatureLayer("widgets"),
)

_FEATURE_DRIVEN_LAYERS = (
    FeatureLayer("models", "model", "feature/model.dart.j2"),
    FeatureLayer("screens", "screen", VIEW_TEMPLATE),
    FeatureLayer("services", "service", "feature/service.dart.j2"),
    FeatureLayer("widgets"),
)

_RULES: dict[Architecture, ArchitectureRule] = {
    Architecture.CLEAN: ArchitectureRule(
        architecture=Architecture.CLEAN,
        architecture_directories=(
            "lib/app",
            "lib/core",
            "lib/core/di",
            "lib/core/usecases",
            "lib/features",
        ),
        module_base_path="core",
        feature_layers=_CLEAN_LAYERS,
        state_directory=f"presentation/{STATE_DIR}",
    ),
    Architecture.MVVM: ArchitectureRule(
        architecture=Architecture.MVVM,
        architecture_directories=("lib/app", "lib/core", "lib/features", "lib/services"),
        module_base_path="core",
        feature_layers=_LAYERED_LAYERS,
        state_directory="viewmodels",
    ),
    Architecture.MVC: ArchitectureRule(
        architecture=Architecture.MVC,
        architecture_directories=("lib/app", "lib/core", "lib/features"),
        module_base_path="core",
        feature_layers=_LAYERED_LAYERS,
        state_directory="controllers",
    ),
    Architecture.FEATURE_DRIVEN: ArchitectureRule(
        architecture=Architecture.FEATURE_DRIVEN,
        architecture_directories=(
            "lib/app",
            "lib/features",
            "lib/shared",
            "lib/shared/services",
            "lib/shared/widgets",
        ),
        module_base_path="shared/services",
        feature_layers=_FEATURE_DRIVEN_LAYERS,
        state_directory=STATE_DIR,
    ),
}

DEFAULT_RULE = ArchitectureRule(
    architecture=None,
    architecture_directories=("lib/app", "lib/core", "lib/features"),
    module_base_path="core",
    feature_layers=_CLEAN_LAYERS,
    state_directory=f"presentation/{STATE_DIR}",
)


def resolve_architecture(architecture: object) -> ArchitectureRule:
    """Return the layout rule for *architecture*.

    Accepts an ``Architecture`` member or any string ``Architecture.parse``
    understands.  Unrecognised values never raise; they get ``DEFAULT_RULE``
    (modules under ``core``) so the resolver stays a total function.
    """
    member = Architecture.parse(architecture)
    if member is None:
        return DEFAULT_RULE
    return _RULES[member]
