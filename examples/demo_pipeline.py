# examples/demo_pipeline.py
from cg2d.pipeline import triangulate_polygon

if __name__ == "__main__":
    # GeoJSON-кільце: остання вершина повторює першу, плюс дубль (4,0)
    ring = [
        (0, 0), (4, 0), (4, 0), (4, 3), (2, 1), (0, 3), (0, 0),
    ]

    pts, tris, result = triangulate_polygon(ring)
    print("Vertices:", len(pts))
    print("Triangles:", tris)
    print("Complete:", result.complete)
