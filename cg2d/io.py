from __future__ import annotations
from typing import List, Tuple

from .earclip import EarClipper


def parse_points_from_text(text: str) -> List[Tuple[float, float]]:
    """
    Парсить вершини полігона з багаторядкового тексту.
    Кожен рядок: x y або x, y. Порожні рядки та '#'-коментарі пропускаються.
    """
    points = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.replace(",", " ").split()
        if len(parts) != 2:
            raise ValueError(f"Line {lineno}: expected 2 numbers, got {len(parts)}")
        try:
            x, y = map(float, parts)
        except ValueError:
            raise ValueError(f"Line {lineno}: cannot parse numbers '{line}'") from None
        points.append((x, y))
    if len(points) < 3:
        raise ValueError("Need at least 3 points for a polygon")
    return points


def write_off(path: str, clipper: EarClipper) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(clipper.to_off())
