"""Tests for the generation orchestrator (designtocode.generator.generator).

Covers:
- Project name validation before any filesystem change
- Loading and validating the design export
- A full run with the test skeleton
"""

from __future__ import annotations

import json

import pytest

from designtocode.generator import (
    InputError,
    PreconditionError,
    ProjectGenerator,
    load_design_export,
    validate_project_name,
)

pytestmark = pytest.mark.unit


class TestValidateProjectName:
    def test_trims(self):
        assert validate_project_name("  TravelApp ") == "TravelApp"

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_rejected(self, name):
        with pytest.raises(PreconditionError, match="project name is empty"):
            validate_project_name(name)

    @pytest.mark.parametrize("name", ["Travel/App", "../TravelApp", "Travel\\App"])
    def test_path_separator_rejected(self, name):
        with pytest.raises(PreconditionError, match="path separator"):
            validate_project_name(name)


class TestLoadDesignExport:
    def test_loads(self, config, write_export, sample_elements, sample_tree):
        write_export(sample_elements, sample_tree)
        export = load_design_export(config)
        assert len(export.elements) == 8
        assert [root.uid for root in export.forest] == ["c1", "c2"]
        assert export.raw_tree == sample_tree

    def test_missing_metadata(self, config):
        with pytest.raises(PreconditionError, match="metadata.json"):
            load_design_export(config)

    def test_missing_tree(self, config, sample_elements):
        config.metadata_path.write_text(json.dumps(sample_elements), encoding="utf-8")
        with pytest.raises(PreconditionError, match="tree.json"):
            load_design_export(config)

    def test_invalid_json(self, config, sample_tree):
        config.metadata_path.write_text("{not json", encoding="utf-8")
        config.tree_path.write_text(json.dumps(sample_tree), encoding="utf-8")
        with pytest.raises(InputError, match="invalid JSON in metadata.json"):
            load_design_export(config)

    def test_non_array(self, config, sample_elements):
        config.metadata_path.write_text(json.dumps(sample_elements), encoding="utf-8")
        config.tree_path.write_text(json.dumps({"uid": "c1"}), encoding="utf-8")
        with pytest.raises(InputError, match="must contain a JSON array"):
            load_design_export(config)

    def test_schema_mismatch(self, config, write_export):
        write_export([{"id": "c1"}], [{"uid": "c1", "properties": {"type": "hologram"}}])
        with pytest.raises(InputError, match="does not match schema"):
            load_design_export(config)


class TestProjectGenerator:
    def test_blank_name_touches_nothing(self, config, write_export, sample_elements, sample_tree):
        write_export(sample_elements, sample_tree)
        with pytest.raises(PreconditionError):
            ProjectGenerator(config).generate("  ")
        assert not config.project_dir.exists()

    def test_name_with_separator_touches_nothing(self, config, write_export, sample_elements, sample_tree):
        write_export(sample_elements, sample_tree)
        with pytest.raises(PreconditionError, match="path separator"):
            ProjectGenerator(config).generate("Travel/App")
        assert not config.project_dir.exists()

    def test_bad_export_touches_nothing(self, config):
        config.metadata_path.write_text("[]", encoding="utf-8")
        config.tree_path.write_text("oops", encoding="utf-8")
        with pytest.raises(InputError):
            ProjectGenerator(config).generate()
        assert not config.project_dir.exists()

    def test_generate(self, config, write_export, sample_elements, sample_tree):
        write_export(sample_elements, sample_tree, slices=["back.png"], images={"a/b.png": b"b"})

        report = ProjectGenerator(config).generate()

        project = config.project_dir
        assert report.project_dir == project
        assert report.container_names == ["travelCities", "hotelDetail"]
        assert (project / "project.yml").is_file()
        assert (project / "TravelApp" / "Screens" / "travelCitiesConfig.swift").is_file()
        assert len(report.asset_manifests) == 5
        catalog = project / "TravelApp" / "Assets.xcassets" / "DtcGenerated"
        assert (catalog / "back.imageset" / "back.png").is_file()
        assert (catalog / "images" / "a" / "b.imageset" / "b.png").is_file()
        assert not list(project.rglob("*.j2"))

    def test_name_override(self, config, write_export, sample_elements, sample_tree):
        write_export(sample_elements, sample_tree)
        ProjectGenerator(config).generate(" HotelApp ")
        assert (config.project_dir / "HotelApp").is_dir()
        assert "name: HotelApp" in (config.project_dir / "project.yml").read_text(encoding="utf-8")

    def test_verbose_prints_stage_headers(self, config, write_export, sample_elements, sample_tree, capsys):
        write_export(sample_elements, sample_tree)
        ProjectGenerator(config, verbose=True).generate()
        out = capsys.readouterr().out
        assert "ASSEMBLE" in out
        assert "SOURCES" in out
