"""Raw configuration validation.

Turns the loosely-typed mapping handed over by a front end (CLI flags, a
YAML/JSON file, an interactive prompt) into a frozen ``ProjectConfig``.
Validation is the only fallible step of a run: once it succeeds, every
downstream expander is total.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Optional

from ..reporting import Reporter
from .errors import InvalidConfig
from .models import (
    DEFAULT_FEATURE,
    PROJECT_NAME_PATTERN,
    Architecture,
    ProjectConfig,
    StateManagement,
    normalize_tag,
)


# Keys accepted for the organisation identifier, in order of preference.
IDENTIFIER_KEYS = ("bundle_identifier", "org_name", "organization_identifier")


class ConfigValidator:
    """Validates and normalises raw project configuration.

    Args:
        reporter: Receives informational notes (never errors).
        force_default_feature: When ``True`` the default feature is appended
            to a non-empty feature list that lacks it.  Off by default: the
            validator only recommends it.
    """

    def __init__(
        self,
        reporter: Optional[Reporter] = None,
        force_default_feature: bool = False,
    ) -> None:
        self.reporter = reporter or Reporter()
        self.force_default_feature = force_default_feature

    def validate(self, raw: Mapping[str, Any]) -> ProjectConfig:
        """Validate *raw* and return the normalised ``ProjectConfig``.

        Raises:
            InvalidConfig: On a bad project name, an unknown architecture or
                state-management value, or malformed feature/module lists.
        """
        project_name = raw.get("project_name")
        if not isinstance(project_name, str) or not PROJECT_NAME_PATTERN.fullmatch(project_name):
            raise InvalidConfig("bad project name", repr(project_name))

        architecture = Architecture.parse(raw.get("architecture"))
        if architecture is None:
            raise InvalidConfig("unknown architecture", repr(raw.get("architecture")))

        state_management = StateManagement.parse(raw.get("state_management"))
        if state_management is None:
            raise InvalidConfig("unknown state management", repr(raw.get("state_management")))

        features = self._normalize_features(_tag_list(raw.get("features"), "bad feature list"))
        modules = _tag_list(raw.get("modules"), "bad module list")

        return ProjectConfig(
            project_name=project_name,
            organization_identifier=_organization_identifier(raw),
            architecture=architecture,
            state_management=state_management,
            features=features,
            modules=modules,
        )

    def _normalize_features(self, features: tuple[str, ...]) -> tuple[str, ...]:
        """Guarantee the feature set is never empty."""
        if not features:
            self.reporter.info(f"No features selected, adding default feature: {DEFAULT_FEATURE}")
            return (DEFAULT_FEATURE,)
        if any(normalize_tag(f) == normalize_tag(DEFAULT_FEATURE) for f in features):
            return features
        if self.force_default_feature:
            self.reporter.info(f"Adding default feature: {DEFAULT_FEATURE}")
            return features + (DEFAULT_FEATURE,)
        self.reporter.info(
            f"Default feature {DEFAULT_FEATURE} not selected; consider including it"
        )
        return features


def _organization_identifier(raw: Mapping[str, Any]) -> str:
    for key in IDENTIFIER_KEYS:
        value = raw.get(key)
        if value:
            if not isinstance(value, str):
                raise InvalidConfig("bad organization identifier", repr(value))
            return value.strip()
    return ""


def _tag_list(value: Any, reason: str) -> tuple[str, ...]:
    """Return *value* as a de-duplicated tuple of stripped tags.

    ``None`` means "nothing selected".  Strings are rejected on purpose: a
    bare ``"Settings"`` is almost always a front-end bug, not a list.
    """
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise InvalidConfig(reason, repr(value))

    tags: list[str] = []
    seen: set[str] = set()
    for item in value:
        if not isinstance(item, str) or not normalize_tag(item):
            raise InvalidConfig(reason, repr(item))
        # "User Profile" and "user profile" share a directory; keep the first.
        key = normalize_tag(item)
        if key not in seen:
            seen.add(key)
            tags.append(item.strip())
    return tuple(tags)
