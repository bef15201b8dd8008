"""Command-line demo: sample a curve in a zoomed view and report the result."""
from __future__ import annotations

import argparse
import logging
import math
from typing import Callable

from mathview import config
from mathview.controller.camera import Zoom
from mathview.controller.viewport import ViewBox, Viewport, ZoomConfig
from mathview.logging_config import resolve_level, setup_logging
from mathview.model.geometry_primitives import Vec2
from mathview.model.sampling import sample_of_x, split_polyline

logger = logging.getLogger("mathview.demo")

FUNCTIONS: dict[str, Callable[[float], float]] = {
    "sin": math.sin,
    "tan": math.tan,
    "parabola": lambda x: x * x / 4,
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mathview", description=__doc__)
    parser.add_argument("--function", choices=sorted(FUNCTIONS), default="sin")
    parser.add_argument("--zoom", type=float, default=1.0, help="Zoom factor about the origin.")
    parser.add_argument("--width", type=float, default=800.0)
    parser.add_argument("--height", type=float, default=500.0)
    parser.add_argument("--min-depth", type=int, default=config.DEFAULT_MIN_SAMPLING_DEPTH)
    parser.add_argument("--max-depth", type=int, default=config.DEFAULT_MAX_SAMPLING_DEPTH)
    parser.add_argument("--plot", action="store_true", help="Show the polyline with matplotlib.")
    parser.add_argument("--log-level", type=resolve_level, default=config.LOG_LEVEL)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level)

    camera = ZoomConfig().create_camera()
    camera.set_base()
    camera.move(zoom=Zoom(at=Vec2.zero(), factor=args.zoom))

    viewport = Viewport.from_camera(ViewBox(), args.width, args.height, camera)
    points = sample_of_x(
        FUNCTIONS[args.function],
        viewport.x_bounds,
        min_depth=args.min_depth,
        max_depth=args.max_depth,
        threshold=viewport.error_threshold,
    )
    runs = split_polyline(points)
    panes = viewport.compute_panes()
    grid = viewport.auto_grid()
    x_lines, y_lines = viewport.grid_lines(grid)

    logger.info(f"Viewport x={tuple(viewport.x_bounds)}, y={tuple(viewport.y_bounds)} at scale {camera.scale}")
    logger.info(f"Sampled {len(points)} vertices in {len(runs)} finite run(s).")
    logger.info(f"{panes}")
    logger.info(f"Grid step {grid.lines} with {grid.subdivisions} subdivisions: {len(x_lines)}x{len(y_lines)} lines.")

    if args.plot:
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots()
        for run in runs:
            ax.plot(run[:, 0], run[:, 1], linewidth=1.5)
        for pane in panes.x_panes:
            ax.axvline(pane.min, color="grey", linewidth=0.5, linestyle="--")
        ax.set_xticks(x_lines)
        ax.set_yticks(y_lines)
        ax.grid(True, linewidth=0.3)
        ax.set_xlim(viewport.x_min, viewport.x_max)
        ax.set_ylim(viewport.y_min, viewport.y_max)
        ax.set_aspect("equal")
        ax.set_title(f"{args.function}: {len(points)} samples")
        plt.show()


if __name__ == "__main__":
    main()
