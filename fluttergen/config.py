"""fluttergen configuration.

Centralised, typed settings for the generator itself (where to write, which
templates to use, how strict to be).  Uses a Pydantic v2 model so settings
are validated at construction time and can be serialised to/from JSON or
read from environment variables without boiler-plate.

Project configuration (name, architecture, features, ...) is *not* held
here; it is the raw input validated by ``fluttergen.engine``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> Optional[bool]:
    value = os.environ.get(name)
    if value is None or value == "":
        return None
    return value.strip().lower() in _TRUE_VALUES


class GeneratorSettings(BaseModel):
    """Global generator settings.

    Instances are typically created once by the CLI entry point and then
    passed to ``ProjectGenerator``.
    """

    output_dir: Path = Field(default=Path("."), description="Parent directory of generated projects")
    template_dir: Optional[Path] = Field(
        default=None, description="Override for the bundled template directory"
    )
    source_extension: str = Field(
        default="dart", pattern=r"^[a-z0-9]+$", description="Extension of generated source stubs"
    )
    force_default_feature: bool = Field(
        default=False,
        description="Append the default feature when a non-empty selection lacks it",
    )
    dry_run: bool = Field(default=False, description="Plan only; write nothing")
    verbose: bool = Field(default=False, description="Print informational notes")

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the settings to a JSON file.

        Args:
            path: Destination file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "GeneratorSettings":
        """Load previously-saved settings from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorSettings":
        """Build ``GeneratorSettings`` from environment variables.

        Recognised variables (all optional):
            FLUTTERGEN_OUTPUT_DIR, FLUTTERGEN_TEMPLATE_DIR,
            FLUTTERGEN_SOURCE_EXTENSION, FLUTTERGEN_FORCE_DEFAULT_FEATURE,
            FLUTTERGEN_DRY_RUN, FLUTTERGEN_VERBOSE.

        Boolean variables accept ``1``, ``true``, ``yes`` or ``on``.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("FLUTTERGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["FLUTTERGEN_OUTPUT_DIR"])
        if os.environ.get("FLUTTERGEN_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["FLUTTERGEN_TEMPLATE_DIR"])
        if os.environ.get("FLUTTERGEN_SOURCE_EXTENSION"):
            kwargs["source_extension"] = os.environ["FLUTTERGEN_SOURCE_EXTENSION"]

        for field_name, env_name in (
            ("force_default_feature", "FLUTTERGEN_FORCE_DEFAULT_FEATURE"),
            ("dry_run", "FLUTTERGEN_DRY_RUN"),
            ("verbose", "FLUTTERGEN_VERBOSE"),
        ):
            flag = _env_flag(env_name)
            if flag is not None:
                kwargs[field_name] = flag

        return cls(**kwargs)
