"""Configuration-to-plan pipeline.

Runs the resolution stages in a fixed order::

    VALIDATING -> DERIVING -> RESOLVING -> EXPANDING -> PLANNED

There are no backward transitions and no retries.  A failure while
validating aborts the run before any plan exists, so nothing is written.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..reporting import Reporter
from .architecture import ArchitectureRule, resolve_architecture
from .features import FeatureExpander, describe_feature, state_artifact
from .identifiers import derive_identifiers
from .models import DerivedIdentifiers, ProjectConfig, contains_tag, to_pascal
from .modules import KNOWN_MODULES, ModuleExpander, describe_module
from .plan import GenerationPlan
from .project import ProjectExpander
from .validator import ConfigValidator


class PlannerStage(str, Enum):
    """Linear states of a planning run."""
    IDLE = "idle"
    VALIDATING = "validating"
    DERIVING = "deriving"
    RESOLVING = "resolving"
    EXPANDING = "expanding"
    PLANNED = "planned"


@dataclass(frozen=True)
class PlanResult:
    """Everything produced by one planning run."""

    config: ProjectConfig
    identifiers: DerivedIdentifiers
    rule: ArchitectureRule
    plan: GenerationPlan


class ProjectPlanner:
    """Drives validation, derivation, resolution and expansion.

    Args:
        reporter: Shared by every stage.
        force_default_feature: Forwarded to ``ConfigValidator``.
        extension: Source-file extension for generated stubs.
    """

    def __init__(
        self,
        reporter: Optional[Reporter] = None,
        force_default_feature: bool = False,
        extension: str = "dart",
    ) -> None:
        self.reporter = reporter or Reporter()
        self.validator = ConfigValidator(self.reporter, force_default_feature=force_default_feature)
        self.feature_expander = FeatureExpander(self.reporter, extension=extension)
        self.module_expander = ModuleExpander(self.reporter, extension=extension)
        self.project_expander = ProjectExpander(self.reporter, extension=extension)
        self.extension = extension
        self.stage = PlannerStage.IDLE

    def plan(self, raw: Mapping[str, Any]) -> PlanResult:
        """Resolve *raw* configuration into a complete ``GenerationPlan``.

        Raises:
            InvalidConfig: If validation fails.
            PlanCollision: If two expanders register conflicting files.
        """
        self.stage = PlannerStage.VALIDATING
        config = self.validator.validate(raw)

        self.stage = PlannerStage.DERIVING
        identifiers = derive_identifiers(config.organization_identifier)

        self.stage = PlannerStage.RESOLVING
        rule = resolve_architecture(config.architecture)
        plan = GenerationPlan()
        plan.add_directories(rule.base_directories)
        plan.add_directories(rule.architecture_directories)

        self.stage = PlannerStage.EXPANDING
        # A module whose directory the layout already owns is skipped by the
        # expander and must not be advertised to the templates either.
        expanded_modules = tuple(
            name
            for name in config.modules
            if not plan.has_directory(describe_module(name, rule.module_base_path)["path"])
        )
        self.feature_expander.expand(
            config.features, config.architecture, config.state_management, plan
        )
        self.module_expander.expand(
            config.modules, config.architecture, plan, project_name=config.project_name
        )
        self.project_expander.expand(config, identifiers, rule, plan)
        plan.variables.update(
            self.template_variables(config, identifiers, rule, modules=expanded_modules)
        )

        self.stage = PlannerStage.PLANNED
        summary = plan.summary()
        self.reporter.success(
            f"Planned {config.project_name}: {summary['directories']} directories, "
            f"{summary['files']} files"
        )
        return PlanResult(config=config, identifiers=identifiers, rule=rule, plan=plan)

    def template_variables(
        self,
        config: ProjectConfig,
        identifiers: DerivedIdentifiers,
        rule: ArchitectureRule,
        modules: Optional[Sequence[str]] = None,
    ) -> dict[str, Any]:
        """Build the variables shared by every template of the run.

        *modules* narrows the published modules to those actually expanded;
        it defaults to every configured module.
        """
        if modules is None:
            modules = config.modules
        artifact = state_artifact(config.state_management)
        view = rule.view_layer
        features = []
        for name in config.features:
            feature = describe_feature(name)
            slug = feature["slug"]
            root = f"{rule.feature_base_path}/{slug}"
            feature["state_import"] = (
                f"{root}/{rule.state_path(artifact.directory)}/{slug}_{artifact.suffix}"
            )
            feature["state_class"] = f"{feature['class_name']}{artifact.class_suffix}"
            feature["page_import"] = f"{root}/{view.directory}/{slug}_{view.stub}"
            feature["page_class"] = f"{feature['class_name']}{to_pascal(view.stub or '')}"
            features.append(feature)

        variables: dict[str, Any] = {
            "project_name": config.project_name,
            "project_title": to_pascal(config.project_name),
            "organization_identifier": config.organization_identifier,
            "application_id_android": identifiers.android,
            "application_id_ios": identifiers.ios,
            "architecture": config.architecture.value,
            "state_management": config.state_management.value,
            "feature_names": list(config.features),
            "module_names": list(modules),
            "features": features,
            "modules": [describe_module(name, rule.module_base_path) for name in modules],
            "feature_base_path": rule.feature_base_path,
            "module_base_path": rule.module_base_path,
            "source_extension": self.extension,
        }
        for module in KNOWN_MODULES:
            flag = "has_" + module.lower().replace(" ", "_")
            variables[flag] = contains_tag(modules, module)
        return variables
