"""design-to-code generator -- turns a design export into a project.

Takes the element list and tree exported by the design tool, a template
skeleton and the exported images, and renders a buildable project with one
controller and one configuration file per screen.

Quick usage::

    from designtocode.config import Config
    from designtocode.generator import ProjectGenerator

    config = Config(output_dir=Path("./output"))
    report = ProjectGenerator(config).generate("TravelApp")
    print(report.project_dir)
"""

from designtocode.generator.assets import AssetCatalogSynthesizer, ManifestTemplates
from designtocode.generator.container_config import derive_container_config
from designtocode.generator.emitter import SourceCodeEmitter
from designtocode.generator.errors import GenerationError, InputError, PreconditionError
from designtocode.generator.generator import (
    DesignExport,
    GenerationReport,
    ProjectGenerator,
    load_design_export,
    validate_project_name,
)
from designtocode.generator.project import TemplateProjectAssembler
from designtocode.generator.templates import TemplateRenderer

__all__ = [
    "AssetCatalogSynthesizer",
    "DesignExport",
    "GenerationError",
    "GenerationReport",
    "InputError",
    "ManifestTemplates",
    "PreconditionError",
    "ProjectGenerator",
    "SourceCodeEmitter",
    "TemplateProjectAssembler",
    "TemplateRenderer",
    "derive_container_config",
    "load_design_export",
    "validate_project_name",
]
