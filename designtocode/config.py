"""design-to-code configuration.

Centralised, typed configuration for the generator. All settings use
Pydantic v2 models so they can be validated at construction time and serialised
to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

_PACKAGED_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateConfig(BaseModel):
    """Names and patterns used to locate templates inside the skeleton."""

    project_placeholder: str = Field(
        default="projectName", description="Token replaced by the project name in paths"
    )
    container_placeholder: str = Field(
        default="containerName", description="Token replaced by the container name in paths"
    )
    extension: str = Field(default=".j2", description="Suffix marking a file as a template")
    project_patterns: list[str] = Field(
        default=[r"^project\.yml\.j2$", r"Tests.*\.j2$"],
        description="Basename regexes of project-level templates rendered once",
    )
    container_config: str = Field(default="containerNameConfig.swift.j2")
    container_controller: str = Field(default="containerNameViewController.swift.j2")
    registry: str = Field(default="viewController.swift.j2")
    tree_consumer: str = Field(default="DesignToCode.generated.swift.j2")
    tree_json_name: str = Field(default="tree.json")
    dynamic_classes: list[str] = Field(
        default_factory=lambda: ["cityCell", "HotelCell"],
        description="Class names the tree consumer instantiates at runtime",
    )


class AssetCatalogConfig(BaseModel):
    """Layout of the asset catalog inside the skeleton and the output."""

    catalog_suffix: str = Field(default=".xcassets")
    generated_dir: str = Field(default="DtcGenerated")
    placeholder_dir: str = Field(default="intermediateDirectory")
    intermediate_manifest: str = Field(default="midDirContents.json")
    leaf_manifest: str = Field(default="iconName.imageset/lastDirContents.json.j2")
    manifest_name: str = Field(default="Contents.json")
    item_suffix: str = Field(default="imageset")


class Config(BaseModel):
    """Global generator configuration.

    Holds every tuneable parameter and derived path used by the generator.
    Instances are typically created once by the CLI entry point and then
    passed into each component's constructor.
    """

    project_name: str = Field(default="")
    output_dir: Path = Field(default=Path("./output"))
    template_dir: Path = Field(default=_PACKAGED_TEMPLATE_DIR)
    platform: str = Field(default="ios")
    templates: TemplateConfig = Field(default_factory=TemplateConfig)
    assets: AssetCatalogConfig = Field(default_factory=AssetCatalogConfig)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def metadata_path(self) -> Path:
        """Path to the flat element list exported by the design tool."""
        return self.output_dir / "metadata.json"

    @property
    def tree_path(self) -> Path:
        """Path to the hierarchical tree exported by the design tool."""
        return self.output_dir / "tree.json"

    @property
    def slices_dir(self) -> Path:
        """Flat directory of exported icon slices."""
        return self.output_dir / "slices"

    @property
    def images_dir(self) -> Path:
        """Hierarchical directory of exported images."""
        return self.output_dir / "images"

    @property
    def project_dir(self) -> Path:
        """Where the generated project is assembled."""
        return self.output_dir / "sourcecodes" / self.platform / "XcodeProject"

    @property
    def skeleton_dir(self) -> Path:
        """Pristine template project copied into :attr:`project_dir`."""
        return self.template_dir / self.platform / "XcodeProjectTemplate"

    @property
    def partials_dir(self) -> Path:
        """Directory of shared template fragments available to ``include``."""
        return self.template_dir / self.platform / "partials"

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``<output_dir>/dtc-config.json``.

        Returns:
            The resolved path where the file was written.
        """
        target = path or (self.output_dir / "dtc-config.json")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            DTC_PROJECT_NAME, DTC_OUTPUT_DIR, DTC_TEMPLATE_DIR, DTC_PLATFORM.

        A relative ``DTC_TEMPLATE_DIR`` is resolved against the current
        working directory.
        """
        kwargs: dict[str, object] = {
            "project_name": os.environ.get("DTC_PROJECT_NAME", ""),
            "output_dir": Path(os.environ.get("DTC_OUTPUT_DIR", "./output")),
        }
        if os.environ.get("DTC_TEMPLATE_DIR"):
            template_dir = Path(os.environ["DTC_TEMPLATE_DIR"])
            if not template_dir.is_absolute():
                template_dir = Path.cwd() / template_dir
            kwargs["template_dir"] = template_dir
        if os.environ.get("DTC_PLATFORM"):
            kwargs["platform"] = os.environ["DTC_PLATFORM"]
        return cls(**kwargs)
