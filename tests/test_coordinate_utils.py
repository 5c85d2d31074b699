"""Tests for coordinate parsing and property extraction."""

import pytest

from table2geojson.errors import CoordinateError, InvalidCoordinateFormat, NumericParseError
from table2geojson.utils.coordinate_utils import (
    CoordinateParser, PropertyCollections, parse_coordinate, parse_properties
)


class TestParseCoordinate:

    def test_parses_longitude_and_latitude(self):
        assert parse_coordinate([1, 2], ["A", "139.6471", "35.4436"]) == [139.6471, 35.4436]

    def test_column_order_decides_axis(self):
        assert parse_coordinate([2, 1], ["A", "35.0", "139.0"]) == [139.0, 35.0]

    def test_strips_surrounding_whitespace(self):
        assert CoordinateParser.parse_coordinate([0, 1], [" 1.5 ", "-2"]) == [1.5, -2.0]

    @pytest.mark.parametrize("columns", [[], [0]])
    def test_fewer_than_two_columns_is_invalid_format(self, columns):
        with pytest.raises(InvalidCoordinateFormat):
            parse_coordinate(columns, ["1.0", "2.0"])

    def test_non_numeric_longitude(self):
        with pytest.raises(NumericParseError):
            parse_coordinate([0, 1], ["east", "2.0"])

    def test_non_numeric_latitude(self):
        with pytest.raises(NumericParseError):
            parse_coordinate([0, 1], ["1.0", ""])

    def test_missing_cell(self):
        with pytest.raises(NumericParseError):
            parse_coordinate([0, 5], ["1.0", "2.0"])

    @pytest.mark.parametrize("cell", ["nan", "inf", "-Infinity"])
    def test_non_finite_values_are_rejected(self, cell):
        with pytest.raises(NumericParseError):
            parse_coordinate([0, 1], [cell, "2.0"])

    def test_errors_are_value_errors(self):
        assert issubclass(NumericParseError, CoordinateError)
        assert issubclass(InvalidCoordinateFormat, ValueError)


class TestParseProperties:

    def test_excludes_coordinate_columns(self):
        props = parse_properties(["key", "lon", "lat", "name"], ["A", "1.0", "2.0", "x"], "lon", "lat")
        assert props == {"key": "A", "name": "x"}

    def test_keeps_header_order(self):
        props = parse_properties(["c", "b", "a"], ["3", "2", "1"], "lon", "lat")
        assert list(props) == ["c", "b", "a"]


class TestPropertyCollections:

    def test_append_properties_keeps_row_order(self):
        pc = PropertyCollections()
        pc.append_properties({"name": "first", "kind": "road"})
        pc.append_properties({"name": "second", "kind": "path"})

        assert pc == {"name": ["first", "second"], "kind": ["road", "path"]}

    def test_missing_property_only_in_later_row(self):
        pc = PropertyCollections()
        pc.append_properties({"name": "first"})
        pc.append_properties({"name": "second", "note": "n"})

        assert pc == {"name": ["first", "second"], "note": [None, "n"]}

    def test_missing_property_in_later_row_is_padded(self):
        pc = PropertyCollections()
        pc.append_properties({"name": "first", "note": "x"})
        pc.append_properties({"name": "second"})
        pc.append_properties({"name": "third", "note": "z"})

        assert pc == {"name": ["first", "second", "third"], "note": ["x", None, "z"]}
        assert pc.rows == 3
