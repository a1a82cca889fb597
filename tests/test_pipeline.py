"""Тести пайплайна: чистка кільця + тріангуляція."""

import pytest

from cg2d.geom import Pt2, polygon_area, triangle_area
from cg2d.earclip import InvalidPolygon
from cg2d.pipeline import clean_ring, triangulate_polygon

RING = [(0, 0), (4, 0), (4, 0), (4, 3), (2, 1), (0, 3), (0, 0)]


class TestCleanRing:
    def test_drops_closing_and_consecutive_duplicates(self):
        assert clean_ring(RING) == [Pt2(0, 0), Pt2(4, 0), Pt2(4, 3), Pt2(2, 1), Pt2(0, 3)]

    def test_quantized_duplicates(self):
        pts = clean_ring([(0, 0), (1, 0), (1 + 1e-12, 0), (1, 1)])
        assert pts == [Pt2(0, 0), Pt2(1, 0), Pt2(1, 1)]

    def test_keeps_non_consecutive_repeats(self):
        pts = clean_ring([(0, 0), (2, 0), (1, 1), (2, 0), (1, 2)])
        assert len(pts) == 5


class TestTriangulatePolygon:
    def test_geojson_ring(self):
        pts, tris, result = triangulate_polygon(RING)
        assert len(pts) == 5
        assert result.complete
        assert tris == [(0, 4, 3), (3, 2, 1), (3, 1, 0)]
        area = sum(triangle_area(pts[a], pts[b], pts[c]) for a, b, c in tris)
        assert area == pytest.approx(polygon_area(pts))
        assert area == pytest.approx(8.0)

    def test_without_dedupe(self):
        pts, tris, result = triangulate_polygon(RING, dedupe=False)
        assert len(pts) == len(RING)
        assert all(0 <= i < len(pts) for tri in tris for i in tri)

    @pytest.mark.parametrize("dedupe", [True, False])
    def test_malformed_point(self, dedupe):
        with pytest.raises(InvalidPolygon, match="point 1"):
            triangulate_polygon([(0, 0), (None, 1), (1, 1)], dedupe=dedupe)

    def test_ring_collapses_below_three_vertices(self):
        with pytest.raises(InvalidPolygon, match="at least 3"):
            triangulate_polygon([(0, 0), (0, 0), (0, 0)])
