# examples/gui.py
from __future__ import annotations

import logging
import math
import random
import tkinter as tk
from tkinter import ttk, messagebox

from cg2d.earclip import EarClipper
from cg2d.io import parse_points_from_text, write_off

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.patches import Polygon as MplPolygon


def generate_star_polygon(n: int):
    """
    Генерує простий зірчастий полігон з n вершинами:
    випадкові кути (відсортовані) + випадкові радіуси навколо початку координат.
    """
    angles = sorted(random.uniform(0.0, 2.0 * math.pi) for _ in range(n))
    pts = []
    for a in angles:
        r = random.uniform(0.3, 1.0)
        pts.append((r * math.cos(a), r * math.sin(a)))
    return pts


class EarClipApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Ear clipping")
        self.geometry("800x650")

        self.fig = None
        self.ax = None
        self.canvas = None

        self._build_widgets()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Режим вводу ---
        mode_frame = ttk.LabelFrame(main, text="Режим вводу полігона")
        mode_frame.pack(fill="x", pady=5)

        self.input_mode = tk.StringVar(value="random")

        random_rb = ttk.Radiobutton(
            mode_frame,
            text="Випадковий зірчастий полігон",
            variable=self.input_mode,
            value="random",
            command=self._update_mode_state,
        )
        random_rb.grid(row=0, column=0, sticky="w", padx=5, pady=2)

        manual_rb = ttk.Radiobutton(
            mode_frame,
            text="Ручне введення вершин",
            variable=self.input_mode,
            value="manual",
            command=self._update_mode_state,
        )
        manual_rb.grid(row=0, column=1, sticky="w", padx=5, pady=2)

        input_frame = ttk.LabelFrame(main, text="Параметри (для випадкового полігона)")
        input_frame.pack(fill="x", pady=5)

        ttk.Label(input_frame, text="Кількість вершин:").grid(
            row=0, column=0, sticky="w", padx=5, pady=5
        )
        self.n_entry = ttk.Entry(input_frame, width=10)
        self.n_entry.insert(0, "12")
        self.n_entry.grid(row=0, column=1, sticky="w", padx=5, pady=5)

        manual_frame = ttk.LabelFrame(main, text="Вершини по порядку (одна вершина - один рядок)")
        manual_frame.pack(fill="both", expand=True, pady=5)

        self.points_text = tk.Text(manual_frame, height=6, wrap="none")
        self.points_text.pack(fill="both", expand=True, padx=5, pady=5)
        self.points_text.insert(
            "1.0",
            "-1 -1\n"
            "-2 1\n"
            "1 1\n"
            "0 0\n"
            "3 -1\n"
        )

        run_btn = ttk.Button(main, text="Тріангулювати", command=self.run_pipeline)
        run_btn.pack(fill="x", pady=10)

        # --- Результати ---
        result_frame = ttk.LabelFrame(main, text="Результати")
        result_frame.pack(fill="x", pady=5)

        self.vertices_var = tk.StringVar(value="—")
        self.tris_var = tk.StringVar(value="—")
        self.valid_var = tk.StringVar(value="—")

        ttk.Label(result_frame, text="Вершини:").grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.vertices_var).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(result_frame, text="Трикутників:").grid(row=1, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.tris_var).grid(row=1, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(result_frame, text="Валідація:").grid(row=2, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.valid_var).grid(row=2, column=1, sticky="w", padx=5, pady=2)

        plot_frame = ttk.LabelFrame(main, text="Візуалізація")
        plot_frame.pack(fill="both", expand=True, pady=5)

        self.fig = Figure(figsize=(4, 3))
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

        self._update_mode_state()

    def _update_mode_state(self):
        if self.input_mode.get() == "random":
            self.n_entry.configure(state="normal")
        else:
            self.n_entry.configure(state="disabled")

    def update_plot(self, pts, triangles):
        """Перемалювати полігон і трикутники."""
        self.ax.clear()

        if not triangles:
            self.ax.set_title("Немає трикутників")
            self.canvas.draw()
            return

        for tri in triangles:
            patch = MplPolygon([(p.x, p.y) for p in tri], closed=True,
                               facecolor="tab:blue", alpha=0.25, edgecolor="tab:blue", linewidth=0.8)
            self.ax.add_patch(patch)

        xs = [p.x for p in pts] + [pts[0].x]
        ys = [p.y for p in pts] + [pts[0].y]
        self.ax.plot(xs, ys, color="black", linewidth=1.2)
        self.ax.plot(xs[:-1], ys[:-1], "o", color="black", markersize=3)

        self.ax.set_aspect("equal", adjustable="datalim")
        self.ax.autoscale_view()
        self.ax.set_title("Triangulation")
        self.canvas.draw()

    def run_pipeline(self):
        if self.input_mode.get() == "random":
            try:
                n = int(self.n_entry.get())
                if n < 3:
                    raise ValueError
            except ValueError:
                messagebox.showerror("Помилка", "Кількість вершин має бути цілим числом не менше 3.")
                return
            points = generate_star_polygon(n)
        else:
            raw_text = self.points_text.get("1.0", "end").strip()
            try:
                points = parse_points_from_text(raw_text)
            except ValueError as e:
                messagebox.showerror("Помилка парсингу точок", str(e))
                return

        try:
            clipper = EarClipper(points)
            report = clipper.validate()
            write_off("polygon.off", clipper)
            self.update_plot(clipper.input, clipper.triangles())
        except (ValueError, OSError) as e:
            messagebox.showerror("Помилка виконання", str(e))
            return

        self.vertices_var.set(str(len(clipper.input)))
        self.tris_var.set(str(report["triangles"]))

        if report["ok"]:
            self.valid_var.set("OK")
        else:
            self.valid_var.set("Є проблеми (див. консоль)")

        print("VALIDATION:", report)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app = EarClipApp()
    app.mainloop()
