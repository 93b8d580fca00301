"""Main generation orchestrator.

Takes a :class:`~designtocode.config.Config` and turns the design export found
in its output directory into a project: the skeleton is assembled, the asset
catalog populated, and per-screen sources emitted.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from designtocode.config import Config
from designtocode.design.index import parse_elements, parse_forest
from designtocode.design.models import Element, TreeNode
from designtocode.utils import load_json, print_stage_header

from .assets import AssetCatalogSynthesizer, find_manifest_templates
from .emitter import SourceCodeEmitter
from .errors import InputError, PreconditionError
from .project import TemplateProjectAssembler
from .templates import TemplateRenderer

_PATH_SEPARATORS = ("/", "\\")


@dataclass
class DesignExport:
    """Decoded ``metadata.json`` and ``tree.json``."""

    elements: list[Element]
    forest: list[TreeNode]
    raw_tree: list[Any]


@dataclass
class GenerationReport:
    """Summary of one generation run."""

    project_dir: Path
    container_names: list[str] = field(default_factory=list)
    source_files: list[Path] = field(default_factory=list)
    asset_manifests: list[Path] = field(default_factory=list)


def validate_project_name(project_name: str | None) -> str:
    """Return the trimmed project name.

    The name becomes a file and directory name inside the project, so it
    may not contain a path separator.

    Raises:
        PreconditionError: If the name is empty, blank or contains ``/`` or
            ``\\``.
    """
    trimmed = (project_name or "").strip()
    if not trimmed:
        raise PreconditionError("project name is empty", stage="validate")
    if any(sep in trimmed for sep in _PATH_SEPARATORS):
        raise PreconditionError(
            f"project name must not contain a path separator: {trimmed!r}", stage="validate"
        )
    return trimmed


def load_design_export(config: Config) -> DesignExport:
    """Read and decode the element list and tree from the output directory.

    Raises:
        PreconditionError: If either file is missing.
        InputError: If either file is not valid JSON or fails validation.
    """
    for path in (config.metadata_path, config.tree_path):
        if not path.is_file():
            raise PreconditionError(f"cannot find file: {path}", stage="load")

    raw_elements = _read_array(config.metadata_path)
    raw_tree = _read_array(config.tree_path)

    try:
        elements = parse_elements(raw_elements)
        forest = parse_forest(raw_tree)
    except ValidationError as exc:
        raise InputError(f"design export does not match schema: {exc}", stage="load") from exc

    return DesignExport(elements=elements, forest=forest, raw_tree=raw_tree)


class ProjectGenerator:
    """Drives one full generation run.

    Stages run strictly in order and are not rolled back individually: a
    failure leaves a partial project that the next run replaces.
    """

    def __init__(self, config: Config, *, verbose: bool = False) -> None:
        self.config = config
        self.verbose = verbose
        self.renderer = TemplateRenderer(config.partials_dir)
        self.assembler = TemplateProjectAssembler(
            self.renderer, config.skeleton_dir, config.project_dir, config.templates
        )
        self.assets = AssetCatalogSynthesizer(self.renderer, config.assets)
        self.emitter = SourceCodeEmitter(self.renderer, config.templates)

    # -- Public API --------------------------------------------------------

    def generate(self, project_name: str | None = None) -> GenerationReport:
        """Generate the project.

        Args:
            project_name: Overrides ``config.project_name``.  Surrounding
                whitespace is ignored.

        Returns:
            A :class:`GenerationReport` describing what was written.

        Raises:
            PreconditionError: Blank project name or missing inputs, raised
                before the filesystem is touched; missing templates, raised at
                the start of the stage that needs them.
            InputError: Malformed design export, raised before the filesystem
                is touched.
        """
        name = validate_project_name(
            project_name if project_name is not None else self.config.project_name
        )
        export = load_design_export(self.config)

        # 1. Skeleton
        self._header(1)
        project_dir = self.assembler.assemble(name)
        report = GenerationReport(project_dir=project_dir)

        # 2. Asset catalog
        self._header(2)
        templates = find_manifest_templates(self.config.skeleton_dir, self.config.assets)
        report.asset_manifests = self.assets.synthesize(
            project_dir, templates, self.config.slices_dir, self.config.images_dir
        )

        # 3. Sources
        self._header(3)
        result = self.emitter.emit(project_dir, export.elements, export.forest, export.raw_tree)
        report.container_names = result.container_names
        report.source_files = result.written
        return report

    def _header(self, stage: int) -> None:
        if self.verbose:
            print_stage_header(stage)


def _read_array(path: Path) -> list[Any]:
    try:
        data = load_json(path)
    except json.JSONDecodeError as exc:
        raise InputError(f"invalid JSON in {path.name}: {exc}", stage="load") from exc
    if not isinstance(data, list):
        raise InputError(f"{path.name} must contain a JSON array", stage="load")
    return data
