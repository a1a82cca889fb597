# cg2d/predicates.py
from __future__ import annotations
from typing import Sequence

from .geom import Pt2, sub, cross

# Усі предикати використовують звичайну float-арифметику без епсилону:
# точки рівно на ребрі можуть класифікуватися по-різному через округлення.

def is_clockwise(vertices: Sequence[Pt2]) -> bool:
    """
    Перевірка обходу за годинниковою стрілкою (формула шнурівки):
    сума (next.x - cur.x) * (next.y + cur.y) по всіх циклічних парах > 0.
    Нульова сума (вироджений полігон) вважається «не за годинниковою».
    """
    n = len(vertices)
    s = 0.0
    for i in range(n):
        cur = vertices[i]
        nxt = vertices[(i + 1) % n]
        s += (nxt.x - cur.x) * (nxt.y + cur.y)
    return s > 0.0

def is_convex(prev: Pt2, current: Pt2, next: Pt2) -> bool:
    """Опуклий кут при current (< 180°), лише для полігона з обходом за годинниковою."""
    prev_edge = sub(prev, current)
    next_edge = sub(next, current)
    return cross(prev_edge, next_edge) > 0.0

def is_point_inside_triangle(point: Pt2, prev: Pt2, current: Pt2, next: Pt2) -> bool:
    """
    Чи лежить point у трикутнику (prev, current, next), заданому за годинниковою.
    Знаки трьох векторних добутків «ребро × (точка - початок ребра)»:
    будь-який строго > 0 означає, що точка зовні. Межа (нуль) вважається всередині.
    """
    alpha = cross(sub(current, prev), sub(point, prev))
    beta = cross(sub(next, current), sub(point, current))
    gamma = cross(sub(prev, next), sub(point, next))
    if alpha > 0.0 or beta > 0.0 or gamma > 0.0:
        return False
    return True
