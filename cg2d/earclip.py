from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .geom import Pt2, PointLike, EPS, as_points, polygon_area, triangle_area
from .predicates import is_clockwise, is_convex, is_point_inside_triangle

log = logging.getLogger(__name__)

Tri = Tuple[Pt2, Pt2, Pt2]          # трикутник як копії координат (prev, current, next)
TriIdx = Tuple[int, int, int]       # той самий трикутник як індекси у вхідному списку


class InvalidPolygon(ValueError):
    """Вхід не є полігоном (менше 3 вершин або некоректні точки)."""


class IncompleteTriangulation(RuntimeError):
    """Цикл відсікання зупинився, не дійшовши до 3 вершин (непростий/вироджений полігон)."""

    def __init__(self, result: "Triangulation"):
        super().__init__(result.reason or "triangulation incomplete")
        self.result = result


@dataclass
class Triangulation:
    """
    Результат одного запуску.
    triangles: трикутники (копії точок) у порядку відсікання.
    indices:   ті самі трикутники як індекси у вхідній послідовності (до розвороту).
    complete:  True, якщо цикл дійшов рівно до 3 вершин.
    remaining: активне кільце на момент ранньої зупинки (порожнє при complete).
    reason:    пояснення, якщо complete == False.
    """
    triangles: List[Tri] = field(default_factory=list)
    indices: List[TriIdx] = field(default_factory=list)
    complete: bool = True
    remaining: List[Pt2] = field(default_factory=list)
    reason: Optional[str] = None

    def __len__(self) -> int:
        return len(self.triangles)

    def __iter__(self) -> Iterator[Tri]:
        return iter(self.triangles)


def is_ear(vertices: Sequence[Pt2], prev_index: int, current_index: int, next_index: int) -> bool:
    """
    Чи утворює вершина current_index «вухо»: жодна інша вершина vertices
    не лежить у трикутнику (prev, current, next). Опуклість тут НЕ перевіряється.
    """
    prev = vertices[prev_index]
    current = vertices[current_index]
    nxt = vertices[next_index]
    for j, point in enumerate(vertices):
        if j == prev_index or j == current_index or j == next_index:
            continue
        if is_point_inside_triangle(point, prev, current, nxt):
            return False
    return True


class EarClipper:
    """
    Тріангуляція простого полігона відсіканням вух.

    Вхід: послідовність точок (мінімум 3) у будь-якому обході; не змінюється.
    Робоча копія приводиться до обходу за годинниковою стрілкою, активні вершини
    тримаються у двозв'язному списку індексів (prv/nxt), видалення O(1).
    Після кожного відсікання пошук починається знову з голови списку,
    тож порядок трикутників детермінований.
    """

    def __init__(self, points: Iterable[PointLike]):
        try:
            self.input: List[Pt2] = as_points(points)  # копія у вхідному порядку
        except ValueError as e:
            raise InvalidPolygon(str(e)) from e
        n = len(self.input)
        if n < 3:
            raise InvalidPolygon(f"Need at least 3 vertices, got {n}")

        # робочий порядок: order[k] це індекс у self.input
        order = list(range(n))
        self.reversed = not is_clockwise(self.input)
        if self.reversed:
            order.reverse()
        self.order: List[int] = order
        self.P: List[Pt2] = [self.input[i] for i in order]

        # Активна множина
        self.prv: List[int] = [(k - 1) % n for k in range(n)]
        self.nxt: List[int] = [(k + 1) % n for k in range(n)]
        self.head = 0
        self.count = n

        self.result = Triangulation()
        self._run()

    # ---------------- Публічний API ----------------
    def triangles(self) -> List[Tri]:
        return list(self.result.triangles)

    def indices(self) -> List[TriIdx]:
        return list(self.result.indices)

    # ---------------- Внутрішні методи ----------------
    def _active(self) -> Iterator[int]:
        """Активні вершини від голови у робочому порядку."""
        k = self.head
        for _ in range(self.count):
            yield k
            k = self.nxt[k]

    def _emit(self, p: int, k: int, n: int) -> None:
        self.result.triangles.append((self.P[p], self.P[k], self.P[n]))
        self.result.indices.append((self.order[p], self.order[k], self.order[n]))

    def _unlink(self, k: int) -> None:
        p, n = self.prv[k], self.nxt[k]
        self.nxt[p] = n
        self.prv[n] = p
        if self.head == k:
            self.head = n
        self.count -= 1

    def _clip_one(self) -> bool:
        """Відсікти перше (у порядку від голови) опукле вухо. False, якщо вух немає."""
        ring = list(self._active())
        pts = [self.P[k] for k in ring]
        m = len(ring)
        for i, k in enumerate(ring):
            p, n = self.prv[k], self.nxt[k]
            if is_convex(self.P[p], self.P[k], self.P[n]) and is_ear(pts, (i - 1) % m, i, (i + 1) % m):
                log.debug("clip vertex %d: %s", self.order[k], self.P[k])
                self._emit(p, k, n)
                self._unlink(k)
                return True
        return False

    def _run(self) -> None:
        """Головний цикл: відсікаємо вуха, поки не лишиться 3 вершини."""
        while self.count > 3:
            if not self._clip_one():
                self.result.complete = False
                self.result.remaining = [self.P[k] for k in self._active()]
                self.result.reason = f"no ear found with {self.count} vertices remaining"
                log.warning("ear clipping stopped early: %s", self.result.reason)
                break

        # останній трикутник: перші три активні вершини (навіть після ранньої зупинки)
        a = self.head
        b = self.nxt[a]
        c = self.nxt[b]
        self._emit(a, b, c)

    # ---------------- Діагностика / Експорт ----------------
    def validate(self) -> dict:
        """
        Перевірка результату:
          - кількість трикутників n-2;
          - сума площ трикутників == площа полігона (допуск EPS відносно площі);
          - кожна вершина трикутника є точкою вхідного полігона;
          - трикутники ненульової площі.
        Повертає словник із діагностикою (порожні списки = все ок);
        "ok" враховує також повноту тріангуляції.
        """
        tris = self.result.triangles
        expected = len(self.input) - 2
        area = polygon_area(self.input)
        tri_area = sum(triangle_area(a, b, c) for a, b, c in tris)

        bad_count: List[Tuple[int, int]] = []
        if len(tris) != expected:
            bad_count.append((len(tris), expected))

        bad_area: List[Tuple[float, float]] = []
        if abs(tri_area - area) > EPS * max(1.0, area):
            bad_area.append((tri_area, area))

        known = set(self.input)
        foreign: List[Pt2] = [p for t in tris for p in t if p not in known]

        degenerate: List[int] = [
            ti for ti, (a, b, c) in enumerate(tris) if triangle_area(a, b, c) == 0.0
        ]

        ok = (self.result.complete and not bad_count and not bad_area
              and not foreign and not degenerate)

        return {
            "ok": ok,
            "triangles": len(tris),
            "complete": self.result.complete,
            "polygon_area": area,
            "triangles_area": tri_area,
            "bad_count": bad_count,
            "bad_area": bad_area,
            "foreign_vertices": foreign,
            "degenerate_triangles": degenerate,
        }

    def to_off(self) -> str:
        """
        Експорт трикутників у формат OFF (z = 0).
        """
        faces = self.result.indices
        used = sorted({i for f in faces for i in f})
        remap: Dict[int, int] = {old: new for new, old in enumerate(used)}
        lines = ["OFF", f"{len(used)} {len(faces)} 0"]
        for i in used:
            p = self.input[i]
            lines.append(f"{p.x} {p.y} 0.0")
        for f in faces:
            a, b, c = (remap[i] for i in f)
            lines.append(f"3 {a} {b} {c}")
        return "\n".join(lines)


def triangulate(points: Iterable[PointLike]) -> Triangulation:
    """Тріангулювати полігон; рання зупинка відображається у result.complete."""
    return EarClipper(points).result


def triangulate_strict(points: Iterable[PointLike]) -> List[Tri]:
    """Як triangulate(), але неповна тріангуляція є помилкою IncompleteTriangulation."""
    result = triangulate(points)
    if not result.complete:
        raise IncompleteTriangulation(result)
    return result.triangles
