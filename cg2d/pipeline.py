from __future__ import annotations
from typing import Iterable, List, Tuple

from .geom import Pt2, PointLike, as_points
from .earclip import EarClipper, InvalidPolygon, Triangulation


def clean_ring(points: Iterable[PointLike], scale: float = 1e9) -> List[Pt2]:
    """
    Прибрати послідовні дублікати вершин (з квантуванням, як у грубій дедуплікації)
    і явне замикання кільця (остання вершина == перша, як у GeoJSON).
    """
    def key(p: Pt2) -> Tuple[int, int]:
        return (int(round(p.x*scale)), int(round(p.y*scale)))

    out: List[Pt2] = []
    for p in as_points(points):
        if out and key(out[-1]) == key(p):
            continue
        out.append(p)
    while len(out) > 1 and key(out[0]) == key(out[-1]):
        out.pop()
    return out


def triangulate_polygon(
    points: Iterable[PointLike],
    dedupe: bool = True,
) -> Tuple[List[Pt2], List[Tuple[int, int, int]], Triangulation]:
    """
    Повний пайплайн:
      - приводить точки до Pt2 (і, якщо dedupe, чистить кільце);
      - тріангулює відсіканням вух.

    Повертає:
      pts:    список Pt2 у фінальному порядку;
      tris:   трикутники як індекси у pts;
      result: Triangulation (complete/remaining/reason).
    """
    try:
        pts = clean_ring(points) if dedupe else as_points(points)
    except ValueError as e:
        raise InvalidPolygon(str(e)) from e
    clipper = EarClipper(pts)
    return pts, clipper.indices(), clipper.result
