"""Module sub-tree expansion.

Each module becomes ``lib/<module base path>/<slug>/`` with one base service
file.  The base path comes from the architecture rule, so Feature-Driven
projects place modules under ``shared/services`` while the other patterns
use ``core``.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any, Optional

from ..reporting import Reporter
from .architecture import resolve_architecture
from .models import normalize_tag, to_pascal
from .plan import GenerationPlan


MODULE_SERVICE_TEMPLATE = "module/service.dart.j2"

NETWORK_LAYER = "Network Layer"
LOCAL_STORAGE = "Local Storage"
LOCALIZATION = "Localization"
PUSH_NOTIFICATION = "Push Notification"
THEME_MANAGER = "Theme Manager"

KNOWN_MODULES: tuple[str, ...] = (
    NETWORK_LAYER,
    LOCAL_STORAGE,
    LOCALIZATION,
    PUSH_NOTIFICATION,
    THEME_MANAGER,
)

# Extra directories created inside a known module's directory, keyed by slug.
MODULE_SUBDIRECTORIES: dict[str, tuple[str, ...]] = {
    normalize_tag(NETWORK_LAYER): ("exceptions", "interceptors", "models"),
    normalize_tag(PUSH_NOTIFICATION): ("models", "services"),
    normalize_tag(LOCALIZATION): ("l10n",),
    normalize_tag(THEME_MANAGER): ("app_colors", "theme_extension"),
}

SUPPORTED_LOCALES: dict[str, str] = {
    "en": "English",
    "es": "Español",
}


def describe_module(name: str, base_path: str) -> dict[str, Any]:
    """Template variables describing one module."""
    slug = normalize_tag(name)
    return {
        "name": name,
        "slug": slug,
        "class_name": to_pascal(slug),
        "path": f"lib/{base_path}/{slug}",
        "import_path": f"{base_path}/{slug}/{slug}_service",
    }


def arb_catalog(project_name: str, locale: str) -> str:
    """Return a minimal ARB message catalogue for *locale*."""
    catalog = {
        "@@locale": locale,
        "appTitle": to_pascal(project_name),
        "language": SUPPORTED_LOCALES[locale],
    }
    return json.dumps(catalog, indent=2, ensure_ascii=False) + "\n"


class ModuleExpander:
    """Expands module tags into a directory plus a base service file."""

    def __init__(self, reporter: Optional[Reporter] = None, extension: str = "dart") -> None:
        self.reporter = reporter or Reporter()
        self.extension = extension

    def expand(
        self,
        modules: Iterable[str],
        architecture: object,
        plan: Optional[GenerationPlan] = None,
        project_name: str = "app",
    ) -> GenerationPlan:
        """Append every module's sub-tree to *plan*.

        A module whose directory is already registered is skipped entirely,
        so expanding the same module twice never registers its service file
        again.  The service file is guarded by the module directory: the
        writer leaves it alone when that directory already exists on disk.
        """
        plan = plan if plan is not None else GenerationPlan()
        base_path = resolve_architecture(architecture).module_base_path

        for name in modules:
            module = describe_module(name, base_path)
            directory = module["path"]
            if not plan.add_directory(directory):
                self.reporter.info(f"Module directory {directory} already planned, skipping")
                continue

            for sub in MODULE_SUBDIRECTORIES.get(module["slug"], ()):
                plan.add_directory(f"{directory}/{sub}")

            plan.add_template(
                f"{directory}/{module['slug']}_service.{self.extension}",
                MODULE_SERVICE_TEMPLATE,
                {"module": module},
                guard=directory,
            )

            if module["slug"] == normalize_tag(LOCALIZATION):
                for locale in SUPPORTED_LOCALES:
                    plan.add_content(
                        f"{directory}/l10n/app_{locale}.arb",
                        arb_catalog(project_name, locale),
                        guard=directory,
                    )
            self.reporter.info(f"Planned module {name} at {directory}")
        return plan
