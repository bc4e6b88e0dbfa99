# tagcloud/core/config.py
"""
Central configuration for the circular cloud layouter.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations

import math
import os

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Spiral -----
ANGLE_STEP_RAD: float = math.pi / 4
"""Angular step per spiral point; 8 points complete one revolution."""

MIN_LAYER_SPACING: float = 1.0
"""Minimum radial distance between spiral revolutions (zero-sized seeds)."""

MAX_SPIRAL_STEPS: int = 1_000_000
"""Spiral points tried for one rectangle before the search is treated as broken."""

# ----- Compaction -----
COMPACTION_STEP: int = 1
"""Integer shift per axis when pulling an accepted rectangle toward the center."""

MAX_COMPACTION_STEPS: int = 10_000
"""Upper bound on accepted compaction moves for one rectangle."""

# ----- Cloud -----
DEFAULT_CENTER: tuple[int, int] = (0, 0)

# ----- Demo size source -----
DEFAULT_RECT_COUNT: int = 50
MIN_RECT_SIDE: int = 10
MAX_RECT_SIDE: int = 60

DEFAULT_ASPECT_RANGE: tuple[float, float] = (1.5, 4.0)
"""Width/height ratio range for generated tag boxes (tags are wider than tall)."""

# ----- Determinism -----
SEED: int | None = 42
"""Random seed for generated sizes; None for non-deterministic."""

# ----- Rendering -----
RENDER_WIDTH_PX: int = 800
RENDER_HEIGHT_PX: int = 800
RENDER_PAD_FRAC: float = 0.05

# ----- Logging -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
"""Log level for the CLI. Set env LOG_LEVEL=DEBUG to trace placements."""
