"""Pydantic v2 models for the fluttergen resolution engine.

Defines the closed enumerations accepted by the generator (architecture
pattern, state-management approach) and the immutable value objects built
once per run: the validated ``ProjectConfig`` and the ``DerivedIdentifiers``.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_FEATURE = "Authentication"

PROJECT_NAME_PATTERN = re.compile(r"^[a-z_][a-z0-9_]*$")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

def _lookup_key(value: str) -> str:
    """Reduce an enum label to a case- and separator-insensitive key."""
    return re.sub(r"[^a-z0-9]", "", value.lower())


class Architecture(str, Enum):
    """Structural convention governing the generated directory layering."""
    CLEAN = "Clean Architecture"
    MVVM = "MVVM"
    MVC = "MVC"
    FEATURE_DRIVEN = "Feature-Driven"

    @classmethod
    def parse(cls, value: object) -> Optional["Architecture"]:
        """Return the member matching *value*, or ``None`` if unrecognised.

        ``"Clean Architecture"``, ``"CleanArchitecture"`` and
        ``"clean_architecture"`` all resolve to ``CLEAN``.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = _lookup_key(value)
        for member in cls:
            if _lookup_key(member.value) == key or _lookup_key(member.name) == key:
                return member
        return None


class StateManagement(str, Enum):
    """State-management approach used by every generated feature."""
    PROVIDER = "Provider"
    RIVERPOD = "Riverpod"
    BLOC = "Bloc"
    GETX = "GetX"
    MOBX = "MobX"
    REDUX = "Redux"

    @classmethod
    def parse(cls, value: object) -> Optional["StateManagement"]:
        """Return the member matching *value*, or ``None`` if unrecognised.

        Matching ignores case, so the ``"BLoC"`` spelling is accepted too.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = _lookup_key(value)
        for member in cls:
            if _lookup_key(member.value) == key:
                return member
        return None


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------

class ProjectConfig(BaseModel):
    """Validated, normalised project configuration.

    Built once by ``ConfigValidator`` and never mutated afterwards.
    ``features`` and ``modules`` behave as sets (no duplicates) but keep the
    order in which tags were first supplied so output stays deterministic.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., pattern=PROJECT_NAME_PATTERN.pattern)
    organization_identifier: str = Field(default="", description="Source for platform identifiers")
    architecture: Architecture = Field(..., description="Exactly one architecture pattern")
    state_management: StateManagement = Field(..., description="Exactly one state-management approach")
    features: tuple[str, ...] = Field(
        default=(DEFAULT_FEATURE,), min_length=1, description="Feature tags, never empty"
    )
    modules: tuple[str, ...] = Field(default=(), description="Module tags")

    def has_feature(self, name: str) -> bool:
        return contains_tag(self.features, name)

    def has_module(self, name: str) -> bool:
        return contains_tag(self.modules, name)


class DerivedIdentifiers(BaseModel):
    """Per-platform application identifiers derived from the organisation id."""

    model_config = ConfigDict(frozen=True)

    android: str = ""
    ios: str = ""


# ---------------------------------------------------------------------------
# Name normalisation
# ---------------------------------------------------------------------------

def normalize_tag(tag: str) -> str:
    """Convert a feature/module tag to a directory-safe name.

    Lower-cases the tag and replaces spaces with underscores.  Any other
    character that is not valid in a Dart file name collapses to an
    underscore as well.

    Examples::

        normalize_tag("Network Layer") -> "network_layer"
        normalize_tag("User Profile")  -> "user_profile"
    """
    name = tag.strip().lower().replace(" ", "_")
    name = re.sub(r"[^a-z0-9_]+", "_", name)
    return re.sub(r"_+", "_", name).strip("_")


def to_pascal(name: str) -> str:
    """Convert ``some-thing``, ``some_thing`` or ``Some Thing`` to ``SomeThing``."""
    parts = re.split(r"[-_\s]+", name)
    return "".join(word[:1].upper() + word[1:].lower() for word in parts if word)


def contains_tag(tags: tuple[str, ...], name: str) -> bool:
    """Return ``True`` if *name* is among *tags*, comparing normalised names."""
    key = normalize_tag(name)
    return any(normalize_tag(tag) == key for tag in tags)
