"""Jinja2 template rendering for the generated project.

Provides the TemplateRenderer class which compiles template files found in
the copied project skeleton and renders them with design-derived context
data.  Shared fragments live in a partials directory and are reachable from
any template through ``{% include %}``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, Template, select_autoescape

from .errors import PreconditionError
from .naming import lower_camel, pluralize, snake_case, upper_camel


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates read from arbitrary paths.

    Unlike a loader-bound environment, templates here are addressed by their
    path inside the output tree, because the skeleton is copied before it is
    rendered.  Compiled templates are cached per path for the lifetime of
    the renderer.
    """

    def __init__(self, partials_dir: str | Path | None = None) -> None:
        search_path = []
        if partials_dir is not None and Path(partials_dir).is_dir():
            search_path.append(str(partials_dir))
        self.partials_dir = Path(partials_dir) if partials_dir is not None else None
        self.env = Environment(
            loader=FileSystemLoader(search_path),
            autoescape=select_autoescape([], default_for_string=False),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["pascal_case"] = _pascal_case_filter
        self.env.filters["camel_case"] = _camel_case_filter
        self.env.filters["snake_case"] = snake_case
        self.env.filters["pluralize"] = pluralize
        self._compiled: dict[Path, Template] = {}

    # -- Compilation -------------------------------------------------------

    def compile_file(self, template_path: str | Path) -> Template:
        """Compile the template stored at *template_path*.

        Raises:
            PreconditionError: If the file does not exist.
        """
        path = Path(template_path)
        cached = self._compiled.get(path)
        if cached is not None:
            return cached
        if not path.is_file():
            raise PreconditionError(f"couldn't get template: {path}", stage="templates")
        template = self.env.from_string(path.read_text(encoding="utf-8"))
        self._compiled[path] = template
        return template

    # -- Rendering ---------------------------------------------------------

    def render_file(self, template_path: str | Path, context: dict[str, Any]) -> str:
        """Render the template at *template_path* with *context*."""
        return self.compile_file(template_path).render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    def list_partials(self) -> list[str]:
        """Return the sorted names of templates available to ``include``."""
        return sorted(self.env.list_templates())


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _pascal_case_filter(value: str) -> str:
    """Convert ``city cell`` to ``CityCell``."""
    return upper_camel(value)


def _camel_case_filter(value: str) -> str:
    """Convert ``city cell`` to ``cityCell``."""
    return lower_camel(value)
