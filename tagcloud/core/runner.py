# tagcloud/core/runner.py
"""
CLI entrypoint: build sizes, lay them out as a circular cloud, report and render.
Sizes come from --sizes ('40x20,30x10') or are generated from --count and --seed.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tagcloud.core.config import (
    DEFAULT_CENTER,
    DEFAULT_RECT_COUNT,
    LOG_LEVEL,
    MAX_RECT_SIDE,
    MIN_RECT_SIDE,
    REPORTS_DIR,
    SEED,
)
from tagcloud.core.error_codes import LayoutError, user_message
from tagcloud.core.layout import layout_sizes
from tagcloud.core.metrics import cloud_metrics
from tagcloud.core.reporting import (
    ensure_report_dir,
    write_layout_json,
    write_run_metadata_json,
)
from tagcloud.core.sizes import parse_sizes, random_sizes, sort_by_area
from tagcloud.core.types import Point

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Circular tag cloud layout.")
    p.add_argument("--count", type=int, default=DEFAULT_RECT_COUNT, help="Number of generated rects")
    p.add_argument("--sizes", type=str, default="", help="Explicit sizes: '40x20,30x10' (overrides --count)")
    p.add_argument("--min-side", type=int, default=MIN_RECT_SIDE, dest="min_side", help="Min generated height")
    p.add_argument("--max-side", type=int, default=MAX_RECT_SIDE, dest="max_side", help="Max generated height")
    p.add_argument("--center-x", type=int, default=DEFAULT_CENTER[0], dest="center_x", help="Cloud center x")
    p.add_argument("--center-y", type=int, default=DEFAULT_CENTER[1], dest="center_y", help="Cloud center y")
    p.add_argument("--seed", type=int, default=SEED, help="Random seed for generated sizes")
    p.add_argument("--sort", action="store_true", help="Place larger rects first")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--no-render", action="store_true", dest="no_render", help="Skip cloud.png")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()
    center = Point(args.center_x, args.center_y)

    if args.sizes.strip():
        sizes = parse_sizes(args.sizes)
        size_source = args.sizes
    else:
        sizes = random_sizes(args.count, args.min_side, args.max_side, seed=args.seed)
        size_source = "random"
    if args.sort:
        sizes = sort_by_area(sizes)
    logger.info("Laying out %d rects (source: %s)", len(sizes), size_source)

    try:
        layouter = layout_sizes(sizes, center)
    except LayoutError as e:
        logger.error("Layout failed: %s", e)
        print(user_message(e.error_key), file=sys.stderr)
        return 2

    rects = layouter.rectangles
    metrics = cloud_metrics(rects, center)
    logger.info(
        "Cloud: %d rects, radius %.1f, fill %.2f, aspect %.2f",
        metrics.n_rects, metrics.enclosing_radius, metrics.fill_ratio, metrics.aspect_ratio,
    )

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    paths = [
        write_layout_json(report_dir, rects, center, metrics),
        write_run_metadata_json(report_dir, args.run_name, len(rects), center, args.seed, size_source),
    ]
    if not args.no_render:
        from tagcloud.core.render import render_cloud
        cloud_path = report_dir / "cloud.png"
        render_cloud(rects, center, cloud_path)
        paths.append(cloud_path)

    for p in paths:
        print(p)
    return 0


if __name__ == "__main__":
    sys.exit(main())
