"""Shared pytest fixtures for the design-to-code test suite.

Provides reusable fixtures for:
- A small template skeleton and partials directory on disk
- A Config pointing at temporary output and template roots
- Sample element lists and trees
- Writing a design export (metadata, tree, slices, images) into the output
"""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any, Callable

import pytest

from designtocode.config import Config


# ---------------------------------------------------------------------------
# Template skeleton
# ---------------------------------------------------------------------------

SKELETON_FILES: dict[str, str] = {
    "project.yml.j2": """\
        name: {{ projectName }}
        targets:
          {{ projectName }}:
            type: application
            sources:
              - {{ projectName }}
        """,
    "projectName/Info.plist": "<plist/>\n",
    "projectName/projectNameApp.swift": "// app entry\n",
    "projectName/Assets.xcassets/Contents.json": '{"info": {"version": 1}}\n',
    "projectName/Assets.xcassets/intermediateDirectory/midDirContents.json": (
        '{"properties": {"provides-namespace": true}}\n'
    ),
    "projectName/Assets.xcassets/intermediateDirectory/iconName.imageset/lastDirContents.json.j2": (
        '{"images": [{"filename": "{{ filename }}"}]}\n'
    ),
    "projectName/Screens/containerNameConfig.swift.j2": """\
        container={{ container.name }}
        list={{ listName }}
        {% for s in listSections %}
        section={{ s.sectionName }} var={{ s.variableName }} size={{ s.size.width }}x{{ s.size.height }}
        {% endfor %}
        {% for v in dataVariables %}
        data={{ v.name }}:{{ v.type }}
        {% endfor %}
        classes={{ dynamicClasses | join(",") }}
        """,
    "projectName/Screens/containerName/containerNameViewController.swift.j2": """\
        controller={{ container.name }}
        {% for v in views %}
        view={{ v.id }}:{{ v.type }}:{{ v.name }}
        {% endfor %}
        """,
    "projectName/Screens/viewController.swift.j2": """\
        {% for n in names %}
        {{ n.name }}
        {% endfor %}
        """,
    "projectName/DesignToCode/DesignToCode.generated.swift.j2": """\
        names={{ names | map(attribute="name") | join(",") }}
        roots={{ tree | length }}
        classes={{ dynamicClasses | join(",") }}
        {% include "footer.j2" %}
        """,
    "projectNameTests/projectNameTests.swift.j2": "@testable import {{ projectName }}\n",
}

PARTIAL_FILES: dict[str, str] = {
    "footer.j2": "// end of generated file\n",
}


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Write ``{relative path: content}`` below *root* (content is dedented)."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content), encoding="utf-8")
    return root


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """Template root with ``ios/XcodeProjectTemplate`` and ``ios/partials``."""
    root = tmp_path / "templates"
    write_tree(root / "ios" / "XcodeProjectTemplate", SKELETON_FILES)
    write_tree(root / "ios" / "partials", PARTIAL_FILES)
    return root


@pytest.fixture
def config(tmp_path: Path, template_root: Path) -> Config:
    """Config with temporary output and template directories."""
    output = tmp_path / "output"
    output.mkdir()
    return Config(project_name="TravelApp", output_dir=output, template_dir=template_root)


# ---------------------------------------------------------------------------
# Design export samples
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_elements() -> list[dict[str, Any]]:
    """Flat element records for two screens plus an unreferenced view."""
    return [
        {"id": "c1", "name": "travelCities", "type": "Container",
         "rect": {"x": 0, "y": 0, "width": 375, "height": 812}},
        {"id": "l1", "name": "city list", "type": "List",
         "rect": {"width": 375, "height": 700}},
        {"id": "v1", "name": "city cell", "type": "Cell",
         "rect": {"width": 100, "height": 80}},
        {"id": "v2", "name": "city cell", "type": "Cell",
         "rect": {"width": 120, "height": 90}},
        {"id": "t1", "name": "title", "type": "Text",
         "rect": {"width": 80, "height": 20}},
        {"id": "c2", "name": "hotelDetail", "type": "Container",
         "rect": {"width": 375, "height": 812}},
        {"id": "b1", "name": "book button", "type": "Button",
         "rect": {"width": 200, "height": 44}},
        {"id": "x9", "name": "orphan", "type": "View",
         "rect": {"width": 10, "height": 10}},
    ]


@pytest.fixture
def sample_tree() -> list[dict[str, Any]]:
    """Tree nesting the sample elements under their containers."""
    return [
        {
            "uid": "c1",
            "name": "travelCities",
            "properties": {"type": "container", "backgroundColor": "#FFFFFF"},
            "excludeOnAdopt": False,
            "elements": [
                {
                    "uid": "l1",
                    "name": "list",
                    "properties": {"type": "list", "scrollDirection": "vertical"},
                    "elements": [
                        {
                            "uid": "v1",
                            "name": "cityCell",
                            "properties": {"type": "cell"},
                            "elements": [
                                {
                                    "uid": "t1",
                                    "name": "title",
                                    "properties": {"type": "text", "text": "Tokyo"},
                                    "elements": [],
                                },
                            ],
                        },
                        {"uid": "v2", "name": "cityCell", "elements": []},
                    ],
                },
            ],
        },
        {
            "uid": "c2",
            "name": "hotelDetail",
            "elements": [
                {
                    "uid": "b1",
                    "name": "book",
                    "properties": {"type": "button", "title": "Book"},
                    "shuoldExcludeOnAdopt": True,
                },
            ],
        },
    ]


@pytest.fixture
def write_export(config: Config) -> Callable[..., Path]:
    """Return a helper that writes a design export into ``config.output_dir``.

    ``slices`` is a list of file names; ``images`` maps relative paths to
    bytes.  Passing ``None`` leaves the corresponding directory absent.
    """

    def _write(
        elements: list[dict[str, Any]],
        tree: list[dict[str, Any]],
        slices: list[str] | None = None,
        images: dict[str, bytes] | None = None,
    ) -> Path:
        config.metadata_path.write_text(json.dumps(elements), encoding="utf-8")
        config.tree_path.write_text(json.dumps(tree), encoding="utf-8")
        if slices is not None:
            config.slices_dir.mkdir(parents=True, exist_ok=True)
            for name in slices:
                (config.slices_dir / name).write_bytes(b"\x89PNG slice")
        if images is not None:
            config.images_dir.mkdir(parents=True, exist_ok=True)
            for rel, data in images.items():
                path = config.images_dir / rel
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_bytes(data)
        return config.output_dir

    return _write
