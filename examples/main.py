# examples/main.py
from __future__ import annotations

import logging

from cg2d.earclip import EarClipper
from cg2d.io import write_off


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # --- 1) Вхідні дані: увігнутий п'ятикутник ---
    polygon = [
        (-1, -1),
        (-2, 1),
        (1, 1),
        (0, 0),
        (3, -1),
    ]

    # --- 2) Тріангуляція ---
    clipper = EarClipper(polygon)
    result = clipper.result

    for tri in result:
        print("Triangle: " + " ".join(f"({p.x:f}, {p.y:f})" for p in tri))

    print(f"Трикутників:  {len(result)}")
    print(f"Повна:        {result.complete}")

    # --- 3) Валідація ---
    report = clipper.validate()
    print("VALIDATION:", report)

    # --- 4) polygon.off ---
    write_off("polygon.off", clipper)
    print("polygon.off записано.")


if __name__ == "__main__":
    main()
