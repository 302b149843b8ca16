"""Feature sub-tree expansion.

Each feature becomes ``lib/features/<slug>/`` shaped by the architecture rule
(layer directories plus one stub per stub-bearing layer) and carries exactly
one state-holding artifact chosen by the state-management approach.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

from ..reporting import Reporter
from .architecture import ArchitectureRule, resolve_architecture
from .models import StateManagement, normalize_tag, to_pascal
from .plan import GenerationPlan


@dataclass(frozen=True)
class StateArtifact:
    """The state-holding file attached to every feature.

    Attributes:
        directory: State directory name used where the architecture defers
            to the state-management convention.
        suffix: File-name suffix (``<feature>_<suffix>.<ext>``).
        template: Template rendering the artifact.
        class_suffix: Suffix of the generated Dart class name.
    """

    directory: str
    suffix: str
    template: str
    class_suffix: str


STATE_ARTIFACTS: dict[StateManagement, StateArtifact] = {
    StateManagement.PROVIDER: StateArtifact("providers", "provider", "state/provider.dart.j2", "Provider"),
    StateManagement.RIVERPOD: StateArtifact("providers", "notifier", "state/notifier.dart.j2", "Notifier"),
    StateManagement.BLOC: StateArtifact("bloc", "bloc", "state/bloc.dart.j2", "Bloc"),
    StateManagement.GETX: StateArtifact("controllers", "controller", "state/controller.dart.j2", "Controller"),
    StateManagement.MOBX: StateArtifact("stores", "store", "state/store.dart.j2", "Store"),
    StateManagement.REDUX: StateArtifact("redux", "reducer", "state/reducer.dart.j2", "Reducer"),
}


def state_artifact(state_management: object) -> StateArtifact:
    member = StateManagement.parse(state_management)
    if member is None:
        raise ValueError(f"Unknown state management: {state_management!r}")
    return STATE_ARTIFACTS[member]


def describe_feature(name: str) -> dict[str, Any]:
    """Template variables describing one feature."""
    slug = normalize_tag(name)
    return {
        "name": name,
        "slug": slug,
        "class_name": to_pascal(slug),
    }


class FeatureExpander:
    """Expands feature tags into architecture-shaped sub-trees."""

    def __init__(self, reporter: Optional[Reporter] = None, extension: str = "dart") -> None:
        self.reporter = reporter or Reporter()
        self.extension = extension

    def expand(
        self,
        features: Iterable[str],
        architecture: object,
        state_management: object,
        plan: Optional[GenerationPlan] = None,
    ) -> GenerationPlan:
        """Append the sub-tree of every feature to *plan*.

        Args:
            features: Feature tags (validated, non-empty).
            architecture: Architecture selecting the layer layout.
            state_management: Approach selecting the state artifact.
            plan: Plan to extend; a fresh one is created when omitted.

        Returns:
            The extended plan.
        """
        plan = plan if plan is not None else GenerationPlan()
        rule = resolve_architecture(architecture)
        artifact = state_artifact(state_management)

        # Sorting makes the contribution independent of input order.
        for name in sorted(set(features), key=normalize_tag):
            self._expand_feature(plan, rule, artifact, describe_feature(name))
        return plan

    def _expand_feature(
        self,
        plan: GenerationPlan,
        rule: ArchitectureRule,
        artifact: StateArtifact,
        feature: dict[str, Any],
    ) -> None:
        slug = feature["slug"]
        root = rule.feature_root(slug)
        plan.add_directory(root)

        for layer in rule.feature_layers:
            layer_dir = f"{root}/{layer.directory}"
            plan.add_directory(layer_dir)
            if layer.stub is None or layer.template is None:
                continue
            plan.add_template(
                f"{layer_dir}/{slug}_{layer.stub}.{self.extension}",
                layer.template,
                {"feature": feature, "layer": layer.stub},
            )

        state_dir = f"{root}/{rule.state_path(artifact.directory)}"
        plan.add_directory(state_dir)
        plan.add_template(
            f"{state_dir}/{slug}_{artifact.suffix}.{self.extension}",
            artifact.template,
            {"feature": feature, "state_class": f"{feature['class_name']}{artifact.class_suffix}"},
        )
        self.reporter.info(f"Planned feature {feature['name']} at {root}")
