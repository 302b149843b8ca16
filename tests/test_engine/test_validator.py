"""Tests for raw configuration validation.

Covers:
- Project name pattern
- Architecture / state-management parsing and rejection
- Default feature handling (note-only and forced)
- Feature/module list shape checks and de-duplication
- Organisation identifier keys
"""

from __future__ import annotations

from typing import Any

import pytest

from fluttergen.engine.errors import InvalidConfig
from fluttergen.engine.models import DEFAULT_FEATURE, Architecture, StateManagement
from fluttergen.engine.validator import ConfigValidator
from fluttergen.reporting import INFO, Reporter


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def base_raw() -> dict[str, Any]:
    return {
        "project_name": "demo_app",
        "architecture": "MVC",
        "state_management": "Provider",
        "features": ["Authentication"],
    }


@pytest.fixture
def validator(reporter: Reporter) -> ConfigValidator:
    return ConfigValidator(reporter)


def _with(raw: dict[str, Any], **changes: Any) -> dict[str, Any]:
    return {**raw, **changes}


# ---------------------------------------------------------------------------
# Project name
# ---------------------------------------------------------------------------


class TestProjectName:
    @pytest.mark.parametrize("name", ["demo_app", "app", "_private", "app2", "a_b_c_1"])
    def test_valid_names_accepted(self, validator, base_raw, name):
        config = validator.validate(_with(base_raw, project_name=name))
        assert config.project_name == name

    @pytest.mark.parametrize(
        "name",
        ["DemoApp", "demo app", "2fast", "demo-app", "", "démo", "demo.app", "demo_app\n"],
    )
    def test_invalid_names_rejected(self, validator, base_raw, name):
        with pytest.raises(InvalidConfig) as exc_info:
            validator.validate(_with(base_raw, project_name=name))
        assert exc_info.value.reason == "bad project name"

    @pytest.mark.parametrize("name", [None, 42, ["demo_app"]])
    def test_non_string_rejected(self, validator, base_raw, name):
        with pytest.raises(InvalidConfig) as exc_info:
            validator.validate(_with(base_raw, project_name=name))
        assert exc_info.value.reason == "bad project name"

    def test_missing_name_rejected(self, validator, base_raw):
        del base_raw["project_name"]
        with pytest.raises(InvalidConfig, match="bad project name"):
            validator.validate(base_raw)


# ---------------------------------------------------------------------------
# Architecture & state management
# ---------------------------------------------------------------------------


class TestArchitectureAndState:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("Clean Architecture", Architecture.CLEAN),
            ("clean architecture", Architecture.CLEAN),
            ("CleanArchitecture", Architecture.CLEAN),
            ("MVVM", Architecture.MVVM),
            ("mvc", Architecture.MVC),
            ("Feature-Driven", Architecture.FEATURE_DRIVEN),
            ("feature_driven", Architecture.FEATURE_DRIVEN),
        ],
    )
    def test_architecture_parsing(self, validator, base_raw, value, expected):
        config = validator.validate(_with(base_raw, architecture=value))
        assert config.architecture is expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("Provider", StateManagement.PROVIDER),
            ("riverpod", StateManagement.RIVERPOD),
            ("BLoC", StateManagement.BLOC),
            ("Bloc", StateManagement.BLOC),
            ("GetX", StateManagement.GETX),
            ("mobx", StateManagement.MOBX),
            ("Redux", StateManagement.REDUX),
        ],
    )
    def test_state_management_parsing(self, validator, base_raw, value, expected):
        config = validator.validate(_with(base_raw, state_management=value))
        assert config.state_management is expected

    @pytest.mark.parametrize("value", ["Hexagonal", "", None, 3])
    def test_unknown_architecture(self, validator, base_raw, value):
        with pytest.raises(InvalidConfig) as exc_info:
            validator.validate(_with(base_raw, architecture=value))
        assert exc_info.value.reason == "unknown architecture"

    @pytest.mark.parametrize("value", ["Vuex", "", None])
    def test_unknown_state_management(self, validator, base_raw, value):
        with pytest.raises(InvalidConfig) as exc_info:
            validator.validate(_with(base_raw, state_management=value))
        assert exc_info.value.reason == "unknown state management"

    def test_missing_architecture_is_unknown(self, validator, base_raw):
        del base_raw["architecture"]
        with pytest.raises(InvalidConfig, match="unknown architecture"):
            validator.validate(base_raw)


# ---------------------------------------------------------------------------
# Features
# ---------------------------------------------------------------------------


class TestFeatures:
    def test_empty_features_become_default(self, validator, base_raw, reporter):
        config = validator.validate(_with(base_raw, features=[]))
        assert config.features == (DEFAULT_FEATURE,)
        assert any(DEFAULT_FEATURE in msg for msg in reporter.messages(INFO))

    def test_missing_features_become_default(self, validator, base_raw):
        del base_raw["features"]
        assert validator.validate(base_raw).features == (DEFAULT_FEATURE,)

    def test_without_default_is_note_only(self, validator, base_raw, reporter):
        config = validator.validate(_with(base_raw, features=["Settings", "Dashboard"]))
        assert config.features == ("Settings", "Dashboard")
        assert any("consider" in msg for msg in reporter.messages(INFO))

    def test_force_default_feature_appends(self, base_raw, reporter):
        validator = ConfigValidator(reporter, force_default_feature=True)
        config = validator.validate(_with(base_raw, features=["Settings"]))
        assert config.features == ("Settings", DEFAULT_FEATURE)

    def test_force_default_feature_when_present(self, base_raw):
        validator = ConfigValidator(force_default_feature=True)
        config = validator.validate(_with(base_raw, features=["authentication", "Settings"]))
        assert config.features == ("authentication", "Settings")

    def test_duplicates_dropped_keeping_first(self, validator, base_raw):
        config = validator.validate(
            _with(base_raw, features=["Authentication", " User Profile ", "user profile", "Authentication"])
        )
        assert config.features == ("Authentication", "User Profile")

    def test_tuple_accepted(self, validator, base_raw):
        config = validator.validate(_with(base_raw, features=("Authentication", "Settings")))
        assert config.features == ("Authentication", "Settings")

    @pytest.mark.parametrize(
        "features",
        ["Authentication", ["Authentication", ""], ["   "], [1], {"Authentication": True}, 5],
    )
    def test_bad_feature_list(self, validator, base_raw, features):
        with pytest.raises(InvalidConfig) as exc_info:
            validator.validate(_with(base_raw, features=features))
        assert exc_info.value.reason == "bad feature list"


# ---------------------------------------------------------------------------
# Modules
# ---------------------------------------------------------------------------


class TestModules:
    def test_missing_modules_is_empty(self, validator, base_raw):
        assert validator.validate(base_raw).modules == ()

    def test_modules_kept_in_order(self, validator, base_raw):
        config = validator.validate(_with(base_raw, modules=["Network Layer", "Localization"]))
        assert config.modules == ("Network Layer", "Localization")
        assert config.has_module("network layer")
        assert not config.has_module("Theme Manager")

    def test_module_duplicates_dropped(self, validator, base_raw):
        config = validator.validate(_with(base_raw, modules=["Network Layer", "network_layer"]))
        assert config.modules == ("Network Layer",)

    @pytest.mark.parametrize("modules", ["Network Layer", [None], [""]])
    def test_bad_module_list(self, validator, base_raw, modules):
        with pytest.raises(InvalidConfig) as exc_info:
            validator.validate(_with(base_raw, modules=modules))
        assert exc_info.value.reason == "bad module list"


# ---------------------------------------------------------------------------
# Organisation identifier
# ---------------------------------------------------------------------------


class TestOrganizationIdentifier:
    @pytest.mark.parametrize("key", ["bundle_identifier", "org_name", "organization_identifier"])
    def test_accepted_keys(self, validator, base_raw, key):
        config = validator.validate(_with(base_raw, **{key: " com.example.app "}))
        assert config.organization_identifier == "com.example.app"

    def test_bundle_identifier_preferred(self, validator, base_raw):
        config = validator.validate(
            _with(base_raw, bundle_identifier="com.bundle", org_name="com.org")
        )
        assert config.organization_identifier == "com.bundle"

    def test_absent_is_empty(self, validator, base_raw):
        assert validator.validate(base_raw).organization_identifier == ""

    def test_non_string_rejected(self, validator, base_raw):
        with pytest.raises(InvalidConfig, match="bad organization identifier"):
            validator.validate(_with(base_raw, bundle_identifier=123))


class TestInvalidConfigError:
    def test_message_includes_reason_and_detail(self):
        error = InvalidConfig("bad project name", "'X'")
        assert error.reason == "bad project name"
        assert error.detail == "'X'"
        assert str(error) == "Invalid configuration: bad project name ('X')"

    def test_message_without_detail(self):
        assert str(InvalidConfig("unknown architecture")) == (
            "Invalid configuration: unknown architecture"
        )
