# tagcloud/core/reporting.py
"""
Create reports/<run_name>/ and write layout.json (placed rects + metrics), run_metadata.json.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path

from tagcloud.core.config import (
    ANGLE_STEP_RAD,
    COMPACTION_STEP,
    MAX_COMPACTION_STEPS,
    MAX_SPIRAL_STEPS,
    MIN_LAYER_SPACING,
    REPORTS_DIR,
    SEED,
)
from tagcloud.core.metrics import CloudMetrics
from tagcloud.core.types import Point, Rect

SCHEMA_VERSION = "1.0"


def rect_to_dict(rect: Rect) -> dict:
    return {"x": rect.x, "y": rect.y, "width": rect.width, "height": rect.height}


def layout_to_dict(
    rects: Sequence[Rect],
    center: Point,
    metrics: CloudMetrics | None = None,
) -> dict:
    """Exact structure for layout.json. Rects keep placement order."""
    out = {
        "schema_version": SCHEMA_VERSION,
        "center": {"x": center.x, "y": center.y},
        "rectangles": [rect_to_dict(r) for r in rects],
    }
    if metrics is not None:
        out["metrics"] = metrics.to_dict()
    return out


def run_metadata_dict(
    run_name: str,
    n_rects: int,
    center: Point,
    seed: int | None,
    size_source: str,
) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "n_rects": n_rects,
        "center": {"x": center.x, "y": center.y},
        "seed": seed,
        "size_source": size_source,
        "config": {
            "ANGLE_STEP_RAD": ANGLE_STEP_RAD,
            "MIN_LAYER_SPACING": MIN_LAYER_SPACING,
            "COMPACTION_STEP": COMPACTION_STEP,
            "MAX_COMPACTION_STEPS": MAX_COMPACTION_STEPS,
            "MAX_SPIRAL_STEPS": MAX_SPIRAL_STEPS,
            "SEED": SEED,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_layout_json(
    report_dir: Path,
    rects: Sequence[Rect],
    center: Point,
    metrics: CloudMetrics | None = None,
) -> Path:
    """Write layout.json to report_dir. Returns path to file."""
    path = report_dir / "layout.json"
    data = layout_to_dict(rects, center, metrics)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    n_rects: int,
    center: Point,
    seed: int | None,
    size_source: str,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, n_rects, center, seed, size_source)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
