"""Tests for the plan-then-write ProjectGenerator facade.

Covers:
- Output location (<output_dir>/<project_name>)
- Dry runs write nothing
- Invalid configuration leaves no trace on disk
- Settings forwarded to the planner
"""

from __future__ import annotations

import pytest

from fluttergen.config import GeneratorSettings
from fluttergen.engine.errors import InvalidConfig
from fluttergen.reporting import SUCCESS
from fluttergen.scaffolder.generator import ProjectGenerator


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


class TestProjectGenerator:
    async def test_generate_to_explicit_dir(self, demo_raw_config, tmp_output_dir, reporter):
        generator = ProjectGenerator(reporter=reporter)
        root = await generator.generate(demo_raw_config, tmp_output_dir)

        assert root == tmp_output_dir / "demo_app"
        assert (root / "pubspec.yaml").is_file()
        assert generator.last_result is not None
        assert generator.last_result.skipped_files == []
        assert any("demo_app" in msg for msg in reporter.messages(SUCCESS))

    async def test_generate_uses_settings_output_dir(self, demo_raw_config, tmp_output_dir):
        generator = ProjectGenerator(GeneratorSettings(output_dir=tmp_output_dir))
        root = await generator.generate(demo_raw_config)
        assert root == tmp_output_dir / "demo_app"
        assert root.is_dir()

    async def test_dry_run_writes_nothing(self, demo_raw_config, tmp_output_dir):
        settings = GeneratorSettings(output_dir=tmp_output_dir, dry_run=True)
        generator = ProjectGenerator(settings)
        root = await generator.generate(demo_raw_config)

        assert root == tmp_output_dir / "demo_app"
        assert not root.exists()
        assert generator.last_result.written_files == []

    async def test_write_reuses_plan(self, demo_raw_config, tmp_output_dir, reporter):
        generator = ProjectGenerator(reporter=reporter)
        result = generator.plan(demo_raw_config)
        root = await generator.write(result, tmp_output_dir)

        assert root == tmp_output_dir / "demo_app"
        assert generator.last_result.written_files == result.plan.file_paths
        planned = [msg for msg in reporter.messages(SUCCESS) if msg.startswith("Planned")]
        assert len(planned) == 1

    async def test_invalid_config_writes_nothing(self, demo_raw_config, tmp_output_dir):
        generator = ProjectGenerator(GeneratorSettings(output_dir=tmp_output_dir))
        with pytest.raises(InvalidConfig):
            await generator.generate({**demo_raw_config, "architecture": "Hexagonal"})
        assert list(tmp_output_dir.iterdir()) == []

    def test_plan_only(self, demo_raw_config):
        result = ProjectGenerator().plan(demo_raw_config)
        assert result.config.project_name == "demo_app"
        assert result.plan.has_file("pubspec.yaml")

    def test_settings_forwarded(self, demo_raw_config):
        settings = GeneratorSettings(force_default_feature=True, source_extension="txt")
        generator = ProjectGenerator(settings)
        result = generator.plan({**demo_raw_config, "features": ["Settings"]})
        assert result.config.features == ("Settings", "Authentication")
        assert result.plan.has_file("lib/main.txt")

    def test_template_dir_override(self, tmp_path):
        generator = ProjectGenerator(GeneratorSettings(template_dir=tmp_path))
        assert generator.renderer.template_dir == tmp_path
