"""Tests for identifier derivation and tag normalisation helpers."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fluttergen.engine.identifiers import derive_identifiers
from fluttergen.engine.models import (
    Architecture,
    DerivedIdentifiers,
    ProjectConfig,
    StateManagement,
    contains_tag,
    normalize_tag,
    to_pascal,
)


pytestmark = pytest.mark.unit


class TestDeriveIdentifiers:
    def test_underscores_removed_for_both_platforms(self):
        identifiers = derive_identifiers("com_example_app")
        assert identifiers.android == "comexampleapp"
        assert identifiers.ios == "comexampleapp"

    def test_lowercased(self):
        identifiers = derive_identifiers("Com.Example.My_App")
        assert identifiers == DerivedIdentifiers(android="com.example.myapp", ios="com.example.myapp")

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_source(self, value):
        assert derive_identifiers(value) == DerivedIdentifiers(android="", ios="")

    def test_deterministic(self):
        assert derive_identifiers("org_x") == derive_identifiers("org_x")

    def test_identifiers_frozen(self):
        identifiers = derive_identifiers("com.example")
        with pytest.raises(ValidationError):
            identifiers.android = "other"


class TestNormalizeTag:
    @pytest.mark.parametrize(
        "tag, expected",
        [
            ("Network Layer", "network_layer"),
            ("User Profile", "user_profile"),
            ("Authentication", "authentication"),
            ("  Push  Notification ", "push_notification"),
            ("Q&A / Help", "q_a_help"),
            ("Theme-Manager", "theme_manager"),
            ("already_snake", "already_snake"),
        ],
    )
    def test_normalize(self, tag, expected):
        assert normalize_tag(tag) == expected

    def test_to_pascal(self):
        assert to_pascal("user_profile") == "UserProfile"
        assert to_pascal("demo_app") == "DemoApp"
        assert to_pascal("Network Layer") == "NetworkLayer"

    def test_contains_tag_ignores_case_and_spacing(self):
        tags = ("Network Layer", "Localization")
        assert contains_tag(tags, "network_layer")
        assert contains_tag(tags, "LOCALIZATION")
        assert not contains_tag(tags, "Local Storage")


class TestProjectConfigModel:
    def test_frozen(self):
        config = ProjectConfig(
            project_name="demo_app",
            architecture=Architecture.MVC,
            state_management=StateManagement.PROVIDER,
        )
        with pytest.raises(ValidationError):
            config.project_name = "other"

    def test_default_features(self):
        config = ProjectConfig(
            project_name="demo_app",
            architecture=Architecture.MVC,
            state_management=StateManagement.PROVIDER,
        )
        assert config.features == ("Authentication",)

    def test_empty_features_rejected(self):
        with pytest.raises(ValidationError):
            ProjectConfig(
                project_name="demo_app",
                architecture=Architecture.MVC,
                state_management=StateManagement.PROVIDER,
                features=(),
            )

    def test_bad_name_rejected(self):
        with pytest.raises(ValidationError):
            ProjectConfig(
                project_name="Demo",
                architecture=Architecture.MVC,
                state_management=StateManagement.PROVIDER,
            )
