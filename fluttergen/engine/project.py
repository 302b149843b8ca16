"""Project-level artifacts that depend on the whole configuration.

Features and modules own their sub-trees; everything else a generated
project needs (``pubspec.yaml``, the entry point, error handling, state
observability, Redux store wiring, platform identifier files) is registered
here.
"""

from __future__ import annotations

from typing import Optional

from ..reporting import Reporter
from .architecture import ArchitectureRule
from .dependencies import resolve_dependencies
from .models import Architecture, DerivedIdentifiers, ProjectConfig, StateManagement
from .modules import LOCALIZATION
from .plan import GenerationPlan


ERROR_DIRECTORIES: tuple[str, ...] = (
    "lib/core/error",
    "lib/core/error/exceptions",
    "lib/core/error/failures",
)

REDUX_DIRECTORIES: tuple[str, ...] = (
    "lib/core/redux",
    "lib/core/redux/actions",
    "lib/core/redux/middleware",
    "lib/core/redux/models",
    "lib/core/redux/reducers",
    "lib/core/redux/store",
)

ANDROID_GRADLE_PATH = "android/app/build.gradle"
IOS_XCCONFIG_PATH = "ios/Runner/Configs/AppInfo.xcconfig"


class ProjectExpander:
    """Registers configuration-wide files and directories."""

    def __init__(self, reporter: Optional[Reporter] = None, extension: str = "dart") -> None:
        self.reporter = reporter or Reporter()
        self.extension = extension

    def expand(
        self,
        config: ProjectConfig,
        identifiers: DerivedIdentifiers,
        rule: ArchitectureRule,
        plan: Optional[GenerationPlan] = None,
    ) -> GenerationPlan:
        plan = plan if plan is not None else GenerationPlan()
        ext = self.extension

        plan.add_template(
            "pubspec.yaml",
            "project/pubspec.yaml.j2",
            {"pubspec": resolve_dependencies(config).as_context()},
        )
        plan.add_template("README.md", "project/README.md.j2")
        plan.add_template(".env", "project/env.j2")
        plan.add_directory("lib/app")
        plan.add_template(f"lib/main.{ext}", "project/main.dart.j2")
        plan.add_template(f"lib/app/app.{ext}", "project/app.dart.j2")
        plan.add_template(f"test/widget_test.{ext}", "project/widget_test.dart.j2")

        self._expand_error_handling(plan, config)
        self._expand_observability(plan)

        if config.architecture is Architecture.CLEAN:
            plan.add_directory("lib/core/di")
            plan.add_template(f"lib/core/di/injection.{ext}", "core/injection.dart.j2")
        if config.architecture is Architecture.FEATURE_DRIVEN:
            plan.add_template(f"lib/app/app_module.{ext}", "project/app_module.dart.j2")
            plan.add_template(f"lib/app/app_router.{ext}", "project/app_router.dart.j2")
        if config.state_management is StateManagement.REDUX:
            self._expand_redux(plan)
        if config.has_module(LOCALIZATION):
            plan.add_directory("assets/translations")
            plan.add_template("l10n.yaml", "project/l10n.yaml.j2")

        self._expand_platform_identifiers(plan, identifiers)
        return plan

    # -- Sections ----------------------------------------------------------

    def _expand_error_handling(self, plan: GenerationPlan, config: ProjectConfig) -> None:
        ext = self.extension
        plan.add_directories(ERROR_DIRECTORIES)
        plan.add_template(f"lib/core/error/exceptions/app_exception.{ext}", "core/app_exception.dart.j2")
        plan.add_template(f"lib/core/error/failures/failure.{ext}", "core/failure.dart.j2")
        plan.add_template(f"lib/core/error/error_mapper.{ext}", "core/error_mapper.dart.j2")
        if config.architecture is Architecture.CLEAN:
            plan.add_template(
                f"lib/core/error/either_extensions.{ext}", "core/either_extensions.dart.j2"
            )

    def _expand_observability(self, plan: GenerationPlan) -> None:
        plan.add_directory("lib/core/utils")
        plan.add_template(
            f"lib/core/utils/state_management_observability.{self.extension}",
            "core/state_observability.dart.j2",
        )

    def _expand_redux(self, plan: GenerationPlan) -> None:
        ext = self.extension
        plan.add_directories(REDUX_DIRECTORIES)
        plan.add_template(f"lib/core/redux/app_state.{ext}", "redux/app_state.dart.j2")
        plan.add_template(f"lib/core/redux/app_reducer.{ext}", "redux/app_reducer.dart.j2")
        plan.add_template(f"lib/core/redux/middleware/middleware.{ext}", "redux/middleware.dart.j2")
        plan.add_template(f"lib/core/redux/store/store.{ext}", "redux/store.dart.j2")

    def _expand_platform_identifiers(
        self, plan: GenerationPlan, identifiers: DerivedIdentifiers
    ) -> None:
        if identifiers.android:
            plan.add_directory("android/app")
            plan.add_template(ANDROID_GRADLE_PATH, "platform/build.gradle.j2")
        else:
            self.reporter.info("No Android application id; skipping Android identifier files")
        if identifiers.ios:
            plan.add_directory("ios/Runner/Configs")
            plan.add_template(IOS_XCCONFIG_PATH, "platform/AppInfo.xcconfig.j2")
        else:
            self.reporter.info("No iOS bundle identifier; skipping iOS identifier files")
