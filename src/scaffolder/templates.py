"""Jinja2 template rendering for generated CRUD artifacts.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``src/scaffolder/templates/`` directory and renders them with a context built
from one entity preset.  Rendering only produces strings; writing files is
the job of :mod:`src.scaffolder.writer`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for CRUD artifacts.

    Undefined variables raise instead of rendering as empty strings, so a
    template that drifts from the context fails loudly.

    TSX templates must not contain a literal ``{{``; write JSX object props as
    ``style={ { ... } }``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["ts_string"] = _ts_string_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"page.tsx.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------


def _ts_string_filter(value: str) -> str:
    """Quote *value* as a single-quoted TypeScript string literal."""
    body = json.dumps(str(value), ensure_ascii=False)[1:-1]
    body = body.replace('\\"', '"').replace("'", "\\'")
    return f"'{body}'"
