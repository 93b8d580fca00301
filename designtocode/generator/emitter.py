"""Per-screen source emission.

For every container in the design export, renders a configuration artifact
(from the derived :class:`ContainerConfig`) and a controller artifact (from
the raw container and its views), then the aggregate registry and tree
consumer.  Nothing is written until every artifact has rendered; the
consumed templates are removed, the rendered files written, and the raw tree
copied next to the tree consumer.
"""

from __future__ import annotations

import shutil
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from designtocode.config import TemplateConfig
from designtocode.design.index import containers, member_views
from designtocode.design.models import Element, GeneratedOutput, TreeNode
from designtocode.utils import find_first, save_json, write_text

from .container_config import derive_container_config
from .errors import PreconditionError
from .project import output_path_for
from .templates import TemplateRenderer

STAGE = "sources"


@dataclass(frozen=True)
class SourceTemplatePaths:
    """The four templates consumed by source emission."""

    container_config: Path
    container_controller: Path
    registry: Path
    tree_consumer: Path

    def all(self) -> list[Path]:
        return [self.container_config, self.container_controller, self.registry, self.tree_consumer]


@dataclass
class EmitResult:
    """What one emission pass produced."""

    container_names: list[str] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)


class SourceCodeEmitter:
    """Fans per-container templates out over the containers of a design."""

    def __init__(self, renderer: TemplateRenderer, templates: TemplateConfig | None = None) -> None:
        self.renderer = renderer
        self.templates = templates or TemplateConfig()

    # -- Public API --------------------------------------------------------

    def find_templates(self, search_dir: Path) -> SourceTemplatePaths:
        """Locate the source templates below *search_dir*.

        Raises:
            PreconditionError: If any of the four templates is missing.
        """
        found: dict[str, Path] = {}
        for key in ("container_config", "container_controller", "registry", "tree_consumer"):
            name = getattr(self.templates, key)
            path = find_first(search_dir, name)
            if path is None or not path.is_file():
                raise PreconditionError(f"{name} is not found", stage=STAGE)
            found[key] = path
        return SourceTemplatePaths(**found)

    def render_container(
        self,
        container: Element,
        views: Sequence[Element],
        paths: SourceTemplatePaths,
    ) -> list[GeneratedOutput]:
        """Render the config and controller artifacts of one container."""
        config = derive_container_config(container, views)
        config_output = GeneratedOutput(
            file_path=paths.container_config.parent
            / self._artifact_name(paths.container_config, container.name),
            content=self.renderer.render_file(paths.container_config, config.to_context()),
        )

        controller_context = {
            "container": container.to_context(),
            "views": [view.to_context() for view in views],
        }
        controller_output = GeneratedOutput(
            file_path=paths.container_controller.parent.parent
            / container.name
            / self._artifact_name(paths.container_controller, container.name),
            content=self.renderer.render_file(paths.container_controller, controller_context),
        )
        return [config_output, controller_output]

    def emit(
        self,
        destination_root: Path,
        elements: Sequence[Element],
        forest: Sequence[TreeNode],
        raw_tree: list[Any],
    ) -> EmitResult:
        """Generate every per-container and aggregate source file.

        Args:
            destination_root: Assembled project directory.
            elements: Decoded element records, in export order.
            forest: Decoded tree.
            raw_tree: The tree exactly as parsed from JSON; handed to the tree
                consumer template and copied verbatim.

        Raises:
            PreconditionError: If a required template is missing.  Raised
                before any file is written.
        """
        paths = self.find_templates(destination_root)
        result = EmitResult()

        outputs: list[GeneratedOutput] = []
        for container in containers(elements):
            views = member_views(elements, forest, container)
            outputs.extend(self.render_container(container, views, paths))
            result.container_names.append(container.name)

        outputs.append(self._render_registry(paths.registry, result.container_names))
        outputs.append(
            self._render_tree_consumer(paths.tree_consumer, result.container_names, raw_tree)
        )

        # Templates are removed first: an output may land in the controller template directory
        self._remove_templates(paths)

        # Batch commit: nothing is written until every artifact rendered
        for output in outputs:
            write_text(output.file_path, output.content)
            result.written.append(output.file_path)

        tree_json = save_json(
            raw_tree,
            paths.tree_consumer.parent / self.templates.tree_json_name,
            compact=True,
        )
        result.written.append(tree_json)
        return result

    # -- Aggregate templates -----------------------------------------------

    def _render_registry(self, template_path: Path, container_names: list[str]) -> GeneratedOutput:
        suffix = self.controller_suffix()
        names = [{"name": name + suffix} for name in container_names]
        return self._adopt(template_path, {"names": names})

    def _render_tree_consumer(
        self, template_path: Path, container_names: list[str], raw_tree: list[Any]
    ) -> GeneratedOutput:
        context = {
            "names": [{"name": name} for name in container_names],
            "tree": raw_tree,
            "dynamicClasses": list(self.templates.dynamic_classes),
        }
        return self._adopt(template_path, context)

    def _adopt(self, template_path: Path, context: dict[str, Any]) -> GeneratedOutput:
        return GeneratedOutput(
            file_path=output_path_for(template_path),
            content=self.renderer.render_file(template_path, context),
        )

    # -- Naming ------------------------------------------------------------

    def controller_suffix(self) -> str:
        """Identifier suffix of controller classes.

        ``containerNameViewController.swift.j2`` -> ``ViewController``.
        """
        stem = self.templates.container_controller.split(".", 1)[0]
        return stem.replace(self.templates.container_placeholder, "")

    def _artifact_name(self, template_path: Path, container_name: str) -> str:
        name = template_path.name
        if name.endswith(self.templates.extension):
            name = name[: -len(self.templates.extension)]
        return name.replace(self.templates.container_placeholder, container_name)

    # -- Cleanup -----------------------------------------------------------

    def _remove_templates(self, paths: SourceTemplatePaths) -> None:
        """Delete consumed templates and the per-container template directory."""
        shutil.rmtree(paths.container_controller.parent, ignore_errors=True)
        for path in (paths.container_config, paths.registry, paths.tree_consumer):
            path.unlink(missing_ok=True)
