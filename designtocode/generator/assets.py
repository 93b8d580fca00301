"""Asset catalog synthesis from exported slices and images.

The skeleton's catalog (``*.xcassets``) ships two manifest templates under a
placeholder directory: one for intermediate (namespace) directories and one
for leaf image sets.  Exported images are mirrored into the catalog like so::

    DtcGenerated/Contents.json
    DtcGenerated/images/Contents.json
    DtcGenerated/images/1e02f.imageset/Contents.json
    DtcGenerated/images/1e02f.imageset/1e02f.png
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path

from designtocode.config import AssetCatalogConfig
from designtocode.utils import ensure_dir, print_warning, search_paths, write_text

from .errors import PreconditionError
from .templates import TemplateRenderer

STAGE = "assets"


@dataclass(frozen=True)
class ManifestTemplates:
    """Paths of the two manifest templates inside the pristine skeleton."""

    intermediate: Path
    leaf: Path


def find_catalog(search_dir: Path, layout: AssetCatalogConfig) -> Path:
    """Return the first asset catalog directory below *search_dir*.

    Raises:
        PreconditionError: If the tree contains no catalog.
    """
    suffix = layout.catalog_suffix.replace(".", r"\.")
    catalogs = [path for path in search_paths(search_dir, f"{suffix}$") if path.is_dir()]
    if not catalogs:
        raise PreconditionError(
            f"no {layout.catalog_suffix} directory within {search_dir}", stage=STAGE
        )
    return catalogs[0]


def find_manifest_templates(skeleton_dir: Path, layout: AssetCatalogConfig) -> ManifestTemplates:
    """Locate the manifest templates in the pristine skeleton."""
    placeholder = find_catalog(skeleton_dir, layout) / layout.placeholder_dir
    templates = ManifestTemplates(
        intermediate=placeholder / layout.intermediate_manifest,
        leaf=placeholder / layout.leaf_manifest,
    )
    for path in (templates.intermediate, templates.leaf):
        if not path.is_file():
            raise PreconditionError(f"manifest template not found: {path}", stage=STAGE)
    return templates


class AssetCatalogSynthesizer:
    """Populates the project's asset catalog from exported image files."""

    def __init__(self, renderer: TemplateRenderer, layout: AssetCatalogConfig | None = None) -> None:
        self.renderer = renderer
        self.layout = layout or AssetCatalogConfig()

    # -- Public API --------------------------------------------------------

    def synthesize(
        self,
        destination_root: Path,
        templates: ManifestTemplates,
        slices_dir: Path,
        images_dir: Path,
    ) -> list[Path]:
        """Mirror slices and images into the catalog under *destination_root*.

        Args:
            destination_root: Assembled project; must contain a catalog.
            templates: Manifest templates from the pristine skeleton.
            slices_dir: Flat directory of icon slices.  Missing or empty is
                tolerated.
            images_dir: Hierarchical image directory, itself mirrored as a
                namespace directory.  Missing is tolerated.

        Returns:
            Every manifest file written, in creation order.

        Raises:
            PreconditionError: If *destination_root* holds no catalog.
        """
        catalog = find_catalog(destination_root, self.layout)
        generated = catalog / self.layout.generated_dir
        ensure_dir(generated)
        shutil.rmtree(catalog / self.layout.placeholder_dir, ignore_errors=True)

        manifests = [self._write_intermediate_manifest(generated, templates)]

        slices = sorted(slices_dir.iterdir()) if slices_dir.is_dir() else []
        if not slices:
            print_warning(f"  No slices found in {slices_dir}; skipping icons.")
        for source in slices:
            manifests.extend(self.synthesize_node(source, generated, templates))

        if images_dir.exists():
            manifests.extend(self.synthesize_node(images_dir, generated, templates))
        else:
            print_warning(f"  Images directory {images_dir} does not exist; skipping images.")

        return manifests

    def synthesize_node(self, source: Path, destination: Path, templates: ManifestTemplates) -> list[Path]:
        """Mirror one file or directory into *destination*.

        A directory becomes a same-named namespace directory with an
        intermediate manifest, and its children are mirrored into it.  A file
        becomes ``<stem>.<item suffix>/`` holding a leaf manifest and a copy
        of the file.  Directory symlinks are skipped.
        """
        if source.is_symlink() and source.is_dir():
            print_warning(f"  Skipping symlinked directory {source}.")
            return []

        if source.is_dir():
            namespace = destination / source.name
            ensure_dir(namespace)
            written = [self._write_intermediate_manifest(namespace, templates)]
            for child in sorted(source.iterdir()):
                written.extend(self.synthesize_node(child, namespace, templates))
            return written

        item_dir = destination / f"{source.stem}.{self.layout.item_suffix}"
        item_dir.mkdir(parents=True, exist_ok=True)
        manifest = item_dir / self.layout.manifest_name
        write_text(manifest, self.renderer.render_file(templates.leaf, {"filename": source.name}))
        shutil.copyfile(source, item_dir / source.name)
        return [manifest]

    # -- Internal helpers --------------------------------------------------

    def _write_intermediate_manifest(self, directory: Path, templates: ManifestTemplates) -> Path:
        manifest = directory / self.layout.manifest_name
        write_text(manifest, self.renderer.render_file(templates.intermediate, {}))
        return manifest
