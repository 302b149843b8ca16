"""Shared pytest fixtures for the fluttergen test suite.

Provides reusable fixtures for:
- Raw project configurations (the canonical ``demo_app`` and variants)
- Recording reporters
- Temporary output directories
- Real and mocked template renderers
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from fluttergen.reporting import Reporter
from fluttergen.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Raw configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def demo_raw_config() -> dict[str, Any]:
    """The canonical end-to-end configuration: MVC + Provider, one module."""
    return {
        "project_name": "demo_app",
        "bundle_identifier": "com_demo_app",
        "architecture": "MVC",
        "state_management": "Provider",
        "features": [],
        "modules": ["Network Layer"],
    }


@pytest.fixture
def clean_raw_config() -> dict[str, Any]:
    """A richer configuration exercising Clean Architecture and Bloc."""
    return {
        "project_name": "shop_app",
        "bundle_identifier": "com.example.shop_app",
        "architecture": "Clean Architecture",
        "state_management": "Bloc",
        "features": ["Authentication", "User Profile", "Products", "Dashboard"],
        "modules": ["Network Layer", "Local Storage", "Localization"],
    }


@pytest.fixture
def feature_driven_raw_config() -> dict[str, Any]:
    """Feature-Driven + Redux, no organisation identifier."""
    return {
        "project_name": "field_notes",
        "architecture": "Feature-Driven",
        "state_management": "Redux",
        "features": ["Authentication", "Settings"],
        "modules": ["Network Layer", "Theme Manager"],
    }


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

@pytest.fixture
def reporter() -> Reporter:
    """A reporter that only records messages."""
    return Reporter()


@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Parent directory for generated projects (auto-cleanup)."""
    output = tmp_path / "output"
    output.mkdir()
    yield output


@pytest.fixture
def renderer() -> TemplateRenderer:
    """A renderer over the bundled templates."""
    return TemplateRenderer()


@pytest.fixture
def mock_renderer() -> MagicMock:
    """A mock TemplateRenderer that tracks write_spec calls.

    Literal entries are written verbatim; template entries get a marker line.
    """
    renderer = MagicMock(spec=TemplateRenderer)

    async def mock_write_spec(spec, output_path, variables):
        out = Path(output_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        if spec.template is None:
            out.write_text(spec.content or "", encoding="utf-8")
        else:
            out.write_text(f"// Rendered from {spec.template}\n", encoding="utf-8")
        return out

    renderer.write_spec = AsyncMock(side_effect=mock_write_spec)
    return renderer
