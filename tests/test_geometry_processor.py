"""Tests for polygon ring construction."""

import copy

import pytest

from table2geojson.errors import PolygonRingError, RingTooShort, TooManyRings
from table2geojson.utils.geometry_processor import GeometryProcessor, parse_polygon

OPEN_RING = [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0]]
CLOSED_RING = [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]


class TestParsePolygon:

    def test_open_ring_is_closed(self):
        polygon = parse_polygon([OPEN_RING])

        assert len(polygon) == 1
        assert len(polygon[0]) == len(OPEN_RING) + 1
        assert polygon[0][-1] == polygon[0][0]
        assert polygon[0][:-1] == OPEN_RING

    def test_closed_ring_is_unchanged(self):
        assert parse_polygon([CLOSED_RING]) == [CLOSED_RING]

    def test_closing_is_idempotent(self):
        once = parse_polygon([OPEN_RING])
        assert parse_polygon(once) == once

    def test_input_ring_is_not_mutated(self):
        ring = copy.deepcopy(OPEN_RING)
        polygon = parse_polygon([ring])

        assert ring == OPEN_RING
        assert polygon[0] is not ring
        assert polygon[0][-1] is not ring[0]

    def test_two_rings(self):
        hole = [[0.2, 0.2], [0.4, 0.2], [0.4, 0.4]]
        polygon = parse_polygon([OPEN_RING, hole])

        assert len(polygon) == 2
        for ring in polygon:
            assert ring[0] == ring[-1]

    def test_three_rings_is_too_many(self):
        with pytest.raises(TooManyRings):
            parse_polygon([OPEN_RING, OPEN_RING, OPEN_RING])

    def test_two_point_ring_is_too_short(self):
        with pytest.raises(RingTooShort):
            parse_polygon([[[0.0, 0.0], [1.0, 1.0]]])

    def test_short_second_ring_fails_whole_polygon(self):
        with pytest.raises(RingTooShort):
            parse_polygon([OPEN_RING, [[0.0, 0.0]]])

    def test_no_rings(self):
        with pytest.raises(PolygonRingError):
            parse_polygon([])

    def test_ring_errors_share_base_class(self):
        assert issubclass(TooManyRings, PolygonRingError)
        assert issubclass(RingTooShort, PolygonRingError)


class TestCloseRing:

    def test_compares_first_two_components(self):
        ring = [[0.0, 0.0, 5.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0, 7.0]]
        assert GeometryProcessor.close_ring(ring) == ring
