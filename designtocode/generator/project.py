"""Project skeleton assembly.

Copies the template project into the output location, replaces the project
placeholder in file and directory names, and renders the one-shot
project-level templates (project manifest, test target scaffolds).
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any

from designtocode.config import TemplateConfig
from designtocode.utils import search_paths, write_text

from .errors import PreconditionError
from .templates import TemplateRenderer

STAGE = "assemble"


def output_path_for(template_path: Path) -> Path:
    """Drop the last extension: ``project.yml.j2`` -> ``project.yml``."""
    return template_path.with_suffix("")


class TemplateProjectAssembler:
    """Stages the template skeleton as a project named by the caller."""

    def __init__(
        self,
        renderer: TemplateRenderer,
        skeleton_dir: Path,
        project_dir: Path,
        templates: TemplateConfig | None = None,
    ) -> None:
        self.renderer = renderer
        self.skeleton_dir = Path(skeleton_dir)
        self.project_dir = Path(project_dir)
        self.templates = templates or TemplateConfig()

    # -- Public API --------------------------------------------------------

    def assemble(self, project_name: str) -> Path:
        """Copy and rename the skeleton, then render project-level templates.

        Any previous output at the project path is removed first.

        Returns:
            The project directory.

        Raises:
            PreconditionError: If the skeleton directory does not exist.
        """
        if not self.skeleton_dir.is_dir():
            raise PreconditionError(
                f"template project not found: {self.skeleton_dir}", stage=STAGE
            )

        if self.project_dir.exists():
            shutil.rmtree(self.project_dir)
        shutil.copytree(self.skeleton_dir, self.project_dir, symlinks=True)

        self.rename_placeholders(self.project_dir, project_name)

        context = {"projectName": project_name}
        for pattern in self.templates.project_patterns:
            self.adopt_templates(self.project_dir, pattern, context)
        return self.project_dir

    def rename_placeholders(self, directory: Path, to_name: str) -> list[Path]:
        """Replace the placeholder token in every name below *directory*.

        Entries are renamed top-down: a directory is renamed before its
        children are visited, so descent always follows the new name.  A
        clashing target is overwritten.

        Returns:
            The renamed paths, under their new names.
        """
        token = self.templates.project_placeholder
        renamed: list[Path] = []
        for entry in sorted(directory.iterdir()):
            target = entry
            if token in entry.name:
                target = entry.with_name(entry.name.replace(token, to_name))
                _remove(target)
                entry.rename(target)
                renamed.append(target)
            if target.is_dir() and not target.is_symlink():
                renamed.extend(self.rename_placeholders(target, to_name))
        return renamed

    def adopt_templates(self, search_dir: Path, pattern: str, context: dict[str, Any]) -> list[Path]:
        """Render every file below *search_dir* whose name matches *pattern*.

        Each template is replaced by its rendering, written under the same
        name minus the last extension.

        Returns:
            The written output paths.
        """
        written: list[Path] = []
        for template_path in search_paths(search_dir, pattern):
            if not template_path.is_file():
                continue
            content = self.renderer.render_file(template_path, context)
            out = output_path_for(template_path)
            template_path.unlink()
            write_text(out, content)
            written.append(out)
        return written


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _remove(path: Path) -> None:
    """Delete a file, symlink or directory tree if present."""
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)
