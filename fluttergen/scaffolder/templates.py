"""Jinja2 rendering of planned files.

``TemplateRenderer`` turns one ``FileSpec`` of a ``GenerationPlan`` into file
content.  Template entries are rendered from the bundled
``fluttergen/scaffolder/templates/`` tree (or a user-supplied directory) with
the plan's shared variables overlaid by the entry's own bindings; literal
entries are passed through unchanged.
"""

from __future__ import annotations

import asyncio
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..engine.plan import FileSpec


_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateRenderer:
    """Renders planned files for a Flutter project.

    Undefined variables raise instead of rendering as empty strings, so a
    template that drifts from the planner's variables fails loudly.  Output
    is Dart, YAML, Gradle and Markdown, never HTML, so nothing is escaped.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["pascal_case"] = _pascal_case_filter
        self.env.filters["camel_case"] = _camel_case_filter

    def render(self, template_path: str, context: Mapping[str, Any]) -> str:
        """Render the template *template_path* (e.g. ``"project/main.dart.j2"``)."""
        return self.env.get_template(template_path).render(**context)

    def render_spec(self, spec: FileSpec, variables: Mapping[str, Any]) -> str:
        """Return the content of *spec*.

        Args:
            spec: A planned file.
            variables: The plan's shared template variables.  The entry's
                bindings win on conflicting keys.
        """
        if spec.template is None:
            return spec.content or ""
        return self.render(spec.template, {**variables, **spec.bindings})

    async def write_spec(
        self,
        spec: FileSpec,
        output_path: str | Path,
        variables: Mapping[str, Any],
    ) -> Path:
        """Render *spec* and write it to *output_path*, creating parents."""
        content = self.render_spec(spec, variables)
        out = Path(output_path)
        await asyncio.to_thread(write_file, out, content)
        return out


# ---------------------------------------------------------------------------
# Jinja2 filters
# ---------------------------------------------------------------------------

def _pascal_case_filter(value: str) -> str:
    """``network_layer`` -> ``NetworkLayer``."""
    parts = re.split(r"[-_\s]+", value)
    return "".join(word[:1].upper() + word[1:] for word in parts if word)


def _camel_case_filter(value: str) -> str:
    """``network_layer`` -> ``networkLayer``."""
    pascal = _pascal_case_filter(value)
    return pascal[:1].lower() + pascal[1:]


def write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
