"""
cg2d: мінімальна бібліотека 2D комп'ютерної геометрії.
Зараз: тріангуляція простих полігонів відсіканням вух (ear clipping).
"""

__version__ = "0.1.0"

from cg2d.geom import Pt2, EPS, add, sub, cross, as_points, signed_area, polygon_area, triangle_area
from cg2d.predicates import is_clockwise, is_convex, is_point_inside_triangle
from cg2d.earclip import (
    EarClipper, Triangulation, InvalidPolygon, IncompleteTriangulation,
    is_ear, triangulate, triangulate_strict,
)
from cg2d.pipeline import clean_ring, triangulate_polygon

__all__ = [
    "Pt2", "EPS", "add", "sub", "cross", "as_points",
    "signed_area", "polygon_area", "triangle_area",
    "is_clockwise", "is_convex", "is_point_inside_triangle",
    "EarClipper", "Triangulation", "InvalidPolygon", "IncompleteTriangulation",
    "is_ear", "triangulate", "triangulate_strict",
    "clean_ring", "triangulate_polygon", "__version__",
]
