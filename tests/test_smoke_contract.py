# tests/test_smoke_contract.py
"""
Validate layout.json shape and required keys; smoke-run the CLI end to end
into tmp_path and render a cloud PNG. Deterministic (fixed seed).
"""

from __future__ import annotations

import json

from tagcloud.core.error_codes import INVALID_SIZE, user_message
from tagcloud.core.layout import layout_sizes
from tagcloud.core.metrics import cloud_metrics
from tagcloud.core.render import render_cloud
from tagcloud.core.reporting import layout_to_dict, write_layout_json
from tagcloud.core.runner import main
from tagcloud.core.types import Point, Rect, Size

REQUIRED_KEYS = [
    "schema_version",
    ("center", "x"),
    ("center", "y"),
    "rectangles",
    ("metrics", "n_rects"),
    ("metrics", "total_area"),
    ("metrics", "enclosing_radius"),
    ("metrics", "fill_ratio"),
    ("metrics", "bbox"),
    ("metrics", "aspect_ratio"),
    ("metrics", "overlap_pairs"),
]


def _minimal_layout() -> tuple[list[Rect], Point]:
    return [Rect(-1, 1, 2, 2), Rect(-1, 3, 2, 2)], Point(0, 0)


def test_layout_schema_required_keys_exist() -> None:
    rects, center = _minimal_layout()
    data = layout_to_dict(rects, center, cloud_metrics(rects, center))
    for key in REQUIRED_KEYS:
        if isinstance(key, tuple):
            obj = data
            for k in key:
                assert k in obj, f"Missing key: {key}"
                obj = obj[k]
        else:
            assert key in data, f"Missing key: {key}"
    assert data["schema_version"] == "1.0"


def test_layout_json_keeps_placement_order(tmp_path) -> None:
    rects, center = _minimal_layout()
    path = write_layout_json(tmp_path, rects, center)
    loaded = json.loads(path.read_text(encoding="utf-8"))
    assert loaded["rectangles"] == [
        {"x": -1, "y": 1, "width": 2, "height": 2},
        {"x": -1, "y": 3, "width": 2, "height": 2},
    ]
    assert "metrics" not in loaded


def test_render_cloud_writes_png(tmp_path) -> None:
    layouter = layout_sizes([Size(8, 3)] * 10, Point(5, 5))
    out = tmp_path / "cloud.png"
    render_cloud(layouter.rectangles, layouter.center, out, width_px=200, height_px=200)
    assert out.exists()
    assert out.stat().st_size > 0


def test_runner_smoke_run(tmp_path) -> None:
    code = main([
        "--count", "15",
        "--seed", "3",
        "--run-name", "smoke",
        "--repo-root", str(tmp_path),
        "--output-dir", "reports",
        "--no-render",
    ])
    assert code == 0
    report_dir = tmp_path / "reports" / "smoke"
    data = json.loads((report_dir / "layout.json").read_text(encoding="utf-8"))
    assert len(data["rectangles"]) == 15
    assert data["metrics"]["overlap_pairs"] == 0
    meta = json.loads((report_dir / "run_metadata.json").read_text(encoding="utf-8"))
    assert meta["seed"] == 3
    assert meta["size_source"] == "random"


def test_runner_explicit_sizes_with_render(tmp_path) -> None:
    code = main([
        "--sizes", "40x20,30x10,12x12",
        "--sort",
        "--run-name", "explicit",
        "--repo-root", str(tmp_path),
    ])
    assert code == 0
    report_dir = tmp_path / "reports" / "explicit"
    data = json.loads((report_dir / "layout.json").read_text(encoding="utf-8"))
    assert data["rectangles"][0] == {"x": -20, "y": 10, "width": 40, "height": 20}
    assert (report_dir / "cloud.png").exists()


def test_runner_rejects_negative_size(tmp_path, capsys) -> None:
    code = main([
        "--sizes", "10x5,-1x2",
        "--run-name", "bad",
        "--repo-root", str(tmp_path),
        "--no-render",
    ])
    assert code == 2
    assert user_message(INVALID_SIZE) in capsys.readouterr().err
    assert not (tmp_path / "reports" / "bad").exists()
