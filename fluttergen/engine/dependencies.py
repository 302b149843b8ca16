"""Pubspec dependency resolution.

Computes the ``dependencies`` / ``dev_dependencies`` sections and the asset
list of the generated ``pubspec.yaml`` from the validated configuration.
Each table below contributes packages for one configuration axis; the
result is an ordered mapping so the rendered file is stable between runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import Architecture, ProjectConfig, StateManagement
from .modules import LOCAL_STORAGE, LOCALIZATION, NETWORK_LAYER


# ---------------------------------------------------------------------------
# Package tables
# ---------------------------------------------------------------------------

CORE_DEPENDENCIES: dict[str, str] = {
    "cupertino_icons": "^1.0.6",
    "intl": "any",
    "equatable": "^2.0.5",
    "path_provider": "^2.1.1",
    "shared_preferences": "^2.5.2",
    "flutter_secure_storage": "^9.0.0",
    "cached_network_image": "^3.3.0",
    "url_launcher": "^6.1.14",
    "connectivity_plus": "^6.0.0",
    "flutter_svg": "^2.0.9",
    "flutter_dotenv": "^5.1.0",
    "json_annotation": "^4.8.1",
    "freezed_annotation": "^2.4.1",
    "shimmer": "^3.0.0",
    "dio": "^5.3.3",
    "logger": "^2.0.2",
}

STATE_DEPENDENCIES: dict[StateManagement, dict[str, str]] = {
    StateManagement.BLOC: {"flutter_bloc": "^8.1.3", "bloc": "^8.1.2", "hydrated_bloc": "^8.0.0"},
    StateManagement.PROVIDER: {"provider": "^6.0.5"},
    StateManagement.RIVERPOD: {"flutter_riverpod": "^2.6.1"},
    StateManagement.GETX: {"get": "^4.7.2"},
    StateManagement.MOBX: {"mobx": "^2.5.0", "flutter_mobx": "^2.1.0"},
    StateManagement.REDUX: {"redux": "^5.0.0", "flutter_redux": "^0.10.0", "redux_thunk": "^0.4.0"},
}

ARCHITECTURE_DEPENDENCIES: dict[Architecture, dict[str, str]] = {
    Architecture.CLEAN: {"dartz": "^0.10.1", "injectable": "^2.3.0", "get_it": "^7.6.4"},
    Architecture.MVVM: {"stacked": "^3.4.1", "stacked_services": "^1.3.0"},
    Architecture.FEATURE_DRIVEN: {"go_router": "^12.1.1", "flutter_modular": "^6.3.2"},
}

FEATURE_DEPENDENCIES: dict[str, dict[str, str]] = {
    "User Profile": {"image_picker": "^1.0.4", "image_cropper": "^5.0.1"},
    "Products": {"carousel_slider": "^4.2.1", "infinite_scroll_pagination": "^4.0.0"},
}

MODULE_DEPENDENCIES: dict[str, dict[str, str]] = {
    NETWORK_LAYER: {"retrofit": "^4.0.3", "internet_connection_checker": "^3.0.1"},
    LOCAL_STORAGE: {"hive": "^2.2.3", "hive_flutter": "^1.1.0"},
    LOCALIZATION: {"easy_localization": "^3.0.3"},
}

CORE_DEV_DEPENDENCIES: dict[str, str] = {
    "flutter_lints": "^3.0.0",
    "build_runner": "^2.4.6",
    "flutter_gen_runner": "^5.3.2",
    "flutter_launcher_icons": "^0.13.1",
    "source_gen": "^1.4.0",
}

STATE_DEV_DEPENDENCIES: dict[StateManagement, dict[str, str]] = {
    StateManagement.BLOC: {"bloc_test": "^9.1.4"},
    StateManagement.RIVERPOD: {"riverpod_generator": "^2.3.5"},
    StateManagement.MOBX: {"mobx_codegen": "^2.7.0"},
}

CODEGEN_DEV_DEPENDENCIES: dict[str, str] = {
    "json_serializable": "^6.7.1",
    "freezed": "^2.4.5",
}

MODULE_DEV_DEPENDENCIES: dict[str, dict[str, str]] = {
    LOCAL_STORAGE: {"hive_generator": "^2.0.1"},
}

ARCHITECTURE_DEV_DEPENDENCIES: dict[Architecture, dict[str, str]] = {
    Architecture.CLEAN: {"injectable_generator": "^2.4.0"},
}

BASE_ASSETS: tuple[str, ...] = (
    "assets/images/",
    "assets/icons/",
    "assets/json/",
)


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

@dataclass
class PubspecDependencies:
    """Resolved pubspec sections."""

    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)
    assets: list[str] = field(default_factory=list)
    native_splash: bool = False

    def as_context(self) -> dict[str, object]:
        return {
            "dependencies": self.dependencies,
            "dev_dependencies": self.dev_dependencies,
            "assets": self.assets,
            "native_splash": self.native_splash,
        }


def resolve_dependencies(config: ProjectConfig) -> PubspecDependencies:
    """Resolve the pubspec sections for *config*.

    Packages are added axis by axis (core, state management, architecture,
    features, modules).  A package listed by more than one axis keeps the
    first constraint seen.
    """
    result = PubspecDependencies()

    _extend(result.dependencies, CORE_DEPENDENCIES)
    _extend(result.dependencies, STATE_DEPENDENCIES.get(config.state_management, {}))
    _extend(result.dependencies, ARCHITECTURE_DEPENDENCIES.get(config.architecture, {}))
    for feature, packages in FEATURE_DEPENDENCIES.items():
        if config.has_feature(feature):
            _extend(result.dependencies, packages)
    for module, packages in MODULE_DEPENDENCIES.items():
        if config.has_module(module):
            _extend(result.dependencies, packages)

    _extend(result.dev_dependencies, CORE_DEV_DEPENDENCIES)
    _extend(result.dev_dependencies, STATE_DEV_DEPENDENCIES.get(config.state_management, {}))
    _extend(result.dev_dependencies, CODEGEN_DEV_DEPENDENCIES)
    for module, packages in MODULE_DEV_DEPENDENCIES.items():
        if config.has_module(module):
            _extend(result.dev_dependencies, packages)
    _extend(result.dev_dependencies, ARCHITECTURE_DEV_DEPENDENCIES.get(config.architecture, {}))

    result.assets = list(BASE_ASSETS)
    if config.has_module(LOCALIZATION):
        result.assets.append("assets/translations/")
    result.native_splash = config.has_feature("Dashboard")
    return result


def _extend(target: dict[str, str], packages: dict[str, str]) -> None:
    for package, constraint in packages.items():
        target.setdefault(package, constraint)
