"""fluttergen resolution engine -- configuration in, ``GenerationPlan`` out.

The engine performs no file-system I/O.  It validates the raw configuration,
derives platform identifiers, resolves the architecture layout and expands
features, modules and project-level artifacts into one plan.

Usage::

    from fluttergen.engine import ProjectPlanner

    result = ProjectPlanner().plan({
        "project_name": "demo_app",
        "bundle_identifier": "com_demo_app",
        "architecture": "MVC",
        "state_management": "Provider",
        "features": [],
        "modules": ["Network Layer"],
    })
    print(result.plan.directories)
"""

from fluttergen.engine.architecture import ArchitectureRule, resolve_architecture
from fluttergen.engine.errors import FluttergenError, InvalidConfig, PlanCollision
from fluttergen.engine.features import FeatureExpander
from fluttergen.engine.identifiers import derive_identifiers
from fluttergen.engine.models import (
    Architecture,
    DerivedIdentifiers,
    ProjectConfig,
    StateManagement,
)
from fluttergen.engine.modules import ModuleExpander
from fluttergen.engine.plan import FileSpec, GenerationPlan
from fluttergen.engine.planner import PlannerStage, PlanResult, ProjectPlanner
from fluttergen.engine.validator import ConfigValidator

__all__ = [
    "Architecture",
    "ArchitectureRule",
    "ConfigValidator",
    "DerivedIdentifiers",
    "FeatureExpander",
    "FileSpec",
    "FluttergenError",
    "GenerationPlan",
    "InvalidConfig",
    "ModuleExpander",
    "PlanCollision",
    "PlanResult",
    "PlannerStage",
    "ProjectConfig",
    "ProjectPlanner",
    "StateManagement",
    "derive_identifiers",
    "resolve_architecture",
]
