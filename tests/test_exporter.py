"""Tests for the drawlr JSON exporter."""

import json

import numpy as np
import pytest

from drawlr.track.exporter import FIELD_NAMES, dumps, field_name, to_field_tree, write_text
from drawlr.track.entities import Line, LineType, Layer, Rider, Version
from drawlr.track.geometry import Coordinates


class TestFieldNames:
    """Test renaming to the game's schema."""

    def test_renames(self):
        """Test every renamed field."""
        assert FIELD_NAMES == {
            "start_position": "startPosition",
            "start_velocity": "startVelocity",
            "kind": "type",
            "left_extended": "leftExtended",
            "right_extended": "rightExtended",
        }

    def test_unlisted_names_unchanged(self):
        """Test other names pass through."""
        assert field_name("remountable") == "remountable"
        assert field_name("x1") == "x1"


class TestFieldTree:
    """Test conversion of entities to JSON trees."""

    def test_line_tree(self):
        """Test uncommitted line keeps a null id."""
        tree = to_field_tree(Line(kind=LineType.SCENERY, x1=1.0))

        assert tree["id"] is None
        assert tree["type"] == 2
        assert list(tree.keys()) == [
            "id", "type", "x1", "y1", "x2", "y2",
            "flipped", "leftExtended", "rightExtended",
        ]

    def test_layer_tree(self):
        """Test layer fields."""
        assert to_field_tree(Layer.base()) == {
            "id": 0,
            "name": "Base Layer",
            "visible": True,
            "editable": True,
        }

    def test_nested_rider_tree(self):
        """Test nested coordinates are converted."""
        tree = to_field_tree([Rider(start_velocity=Coordinates(0.5, -1.0))])

        assert tree == [{
            "startPosition": {"x": 0.0, "y": 0.0},
            "startVelocity": {"x": 0.5, "y": -1.0},
            "remountable": 0,
        }]

    def test_version_is_plain_string(self):
        """Test version serializes as its tag."""
        tree = to_field_tree(Version("6.2"))

        assert type(tree) is str
        assert tree == "6.2"


class TestDumps:
    """Test JSON text encoding."""

    def test_non_finite_floats_become_null(self):
        """Test NaN and infinities are written as null."""
        line = Line(x1=float("nan"), y1=float("inf"), x2=np.float32(-np.inf), y2=1.0)

        data = json.loads(dumps(to_field_tree(line)))

        assert data["x1"] is None
        assert data["y1"] is None
        assert data["x2"] is None
        assert data["y2"] == 1.0

    def test_rejects_raw_non_finite(self):
        """Test values that bypass the tree conversion are not written as NaN."""
        with pytest.raises(ValueError):
            dumps({"x": float("nan")})

    def test_compact_by_default(self):
        """Test compact separators."""
        assert dumps({"a": [1, 2]}) == '{"a":[1,2]}'

    def test_numpy_values(self):
        """Test numpy scalars are encoded as plain numbers."""
        line = Line(kind=np.int64(1), x1=np.float32(1.5), y2=np.float64(2.0))

        data = json.loads(dumps(to_field_tree(line)))

        assert data["type"] == 1
        assert data["x1"] == 1.5
        assert data["y2"] == 2.0


class TestWriteText:
    """Test file writing."""

    def test_write_text(self, tmp_path):
        """Test text is written as given."""
        output = write_text(tmp_path / "out.json", '{"a":1}')

        assert output.read_text(encoding="utf-8") == '{"a":1}'
