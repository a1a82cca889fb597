from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

EPS = 1e-9  # допуск лише для діагностики (validate), не для предикатів

@dataclass(frozen=True)
class Pt2:
    x: float
    y: float
    def __iter__(self):
        yield self.x; yield self.y

PointLike = Union[Pt2, Tuple[float, float]]

def add(a: Pt2, b: Pt2) -> Pt2:
    return Pt2(a.x + b.x, a.y + b.y)

def sub(a: Pt2, b: Pt2) -> Pt2:
    return Pt2(a.x - b.x, a.y - b.y)

def cross(a: Pt2, b: Pt2) -> float:
    """
    2D векторний добуток (скаляр) a.x*b.y - a.y*b.x.
    >0: поворот від a до b проти годинникової стрілки, <0: за.
    """
    return a.x*b.y - a.y*b.x

def as_points(points: Iterable[PointLike]) -> List[Pt2]:
    """Привести вхід (пари (x, y) або Pt2) до списку Pt2."""
    out: List[Pt2] = []
    for i, p in enumerate(points):
        if isinstance(p, Pt2):
            out.append(p)
            continue
        try:
            x, y = p
            out.append(Pt2(float(x), float(y)))
        except (TypeError, ValueError):
            raise ValueError(f"point {i}: expected (x, y) numbers, got {p!r}") from None
    return out

def signed_area(points: Sequence[Pt2]) -> float:
    """Формула шнурівки: >0 для обходу проти годинникової стрілки."""
    n = len(points)
    s = 0.0
    for i in range(n):
        a = points[i]
        b = points[(i + 1) % n]
        s += a.x*b.y - b.x*a.y
    return 0.5 * s

def polygon_area(points: Sequence[Pt2]) -> float:
    return abs(signed_area(points))

def triangle_area(a: Pt2, b: Pt2, c: Pt2) -> float:
    return 0.5 * abs(cross(sub(b, a), sub(c, a)))
