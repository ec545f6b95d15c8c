"""Tests for data.py module."""

import json
import logging

import pytest

from radial_wheel.config import WheelConfig
from radial_wheel.data import (
    InteriorNode,
    JsonFileProvider,
    LeafGroup,
    load_data,
    parse_data,
    parse_hierarchy,
)
from radial_wheel.errors import DataLoadFailure
from radial_wheel.visualize import load_and_build


class FailingProvider:
    """Provider whose fetch always fails."""

    def fetch(self):
        raise DataLoadFailure("connection refused")


class StaticProvider:
    def __init__(self, payload):
        self.payload = payload

    def fetch(self):
        return self.payload


class TestParseHierarchy:
    """Tests for parse_hierarchy function."""

    def test_mapping_becomes_interior_node(self):
        node = parse_hierarchy({"A": ["x", "y"]})
        assert node == InteriorNode((("A", LeafGroup(("x", "y"))),))

    def test_keeps_document_order(self):
        node = parse_hierarchy({"b": [], "a": [], "c": []})
        assert [label for label, _ in node.items()] == ["b", "a", "c"]

    def test_missing_item_label_is_empty(self):
        assert parse_hierarchy(["x", None]) == LeafGroup(("x", ""))

    def test_scalar_rejected(self):
        with pytest.raises(DataLoadFailure, match="labels.A"):
            parse_hierarchy({"A": 5})

    def test_nested_item_rejected(self):
        with pytest.raises(DataLoadFailure):
            parse_hierarchy(["x", {"y": []}])


class TestParseData:
    """Tests for parse_data function."""

    def test_three_levels(self, feelings_payload):
        data = parse_data(feelings_payload)
        assert len(data.labels) == 4
        joy = dict(data.labels.items())["Joy"]
        assert dict(joy.items())["Proud"] == LeafGroup(("Successful", "Confident"))
        assert data.colors["Sadness"] == "#5b8bd9"

    def test_colors_optional(self):
        data = parse_data({"labels": {"A": {"B": ["c"]}}})
        assert data.colors == {}

    def test_category_must_have_subcategories(self):
        with pytest.raises(DataLoadFailure, match="subcategories"):
            parse_data({"labels": {"A": ["x"]}})

    def test_subcategory_must_have_items(self):
        with pytest.raises(DataLoadFailure, match="item labels"):
            parse_data({"labels": {"A": {"B": {"C": ["x"]}}}})

    def test_not_an_object(self):
        with pytest.raises(DataLoadFailure):
            parse_data(["labels"])

    def test_bad_colors(self):
        with pytest.raises(DataLoadFailure, match="colors"):
            parse_data({"colors": ["red"], "labels": {}})


class TestJsonFileProvider:
    """Tests for JsonFileProvider."""

    def test_reads_file(self, data_file, feelings_payload):
        assert JsonFileProvider(data_file).fetch() == feelings_payload

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataLoadFailure):
            JsonFileProvider(tmp_path / "missing.json").fetch()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(DataLoadFailure):
            JsonFileProvider(path).fetch()


class TestLoadData:
    """Tests for the load boundary."""

    def test_success(self, data_file):
        data = load_data(JsonFileProvider(data_file))
        assert data is not None
        assert "Joy" in data.colors

    def test_failure_returns_none_and_logs(self, caplog):
        with caplog.at_level(logging.ERROR, logger="radial_wheel"):
            assert load_data(FailingProvider()) is None
        assert "connection refused" in caplog.text

    def test_undecodable_file_returns_none_and_logs(self, tmp_path, caplog):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"labels": {"\xff": {"B": ["c"]}}}')
        with caplog.at_level(logging.ERROR, logger="radial_wheel"):
            assert load_data(JsonFileProvider(path)) is None
        assert "Could not load wheel data" in caplog.text

    def test_parse_failure_returns_none(self):
        assert load_data(StaticProvider({"labels": {"A": 1}})) is None

    def test_failure_draws_nothing(self):
        """A failed fetch leaves the wheel unrendered without raising."""
        surface, layout = load_and_build(FailingProvider(), WheelConfig())
        assert layout.sectors == []
        assert layout.color_arcs == []
        assert surface.find_all("sector") == []

    def test_missing_file_draws_nothing(self, tmp_path):
        _, layout = load_and_build(JsonFileProvider(tmp_path / "nope.json"))
        assert layout.sectors == []

    def test_last_color_wins(self, tmp_path):
        """Repeated color keys in the document keep the last value."""
        path = tmp_path / "dup.json"
        path.write_text('{"colors": {"A": "red", "A": "blue"}, "labels": {"A": {"B": ["c"]}}}')
        data = load_data(JsonFileProvider(path))
        assert data.colors["A"] == "blue"

    def test_round_trip_through_file(self, tmp_path, feelings_payload, feelings):
        path = tmp_path / "copy.json"
        path.write_text(json.dumps(feelings_payload))
        assert load_data(JsonFileProvider(path)) == feelings
