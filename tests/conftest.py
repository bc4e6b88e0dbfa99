# tests/conftest.py
from __future__ import annotations

import matplotlib

# Headless rendering in tests
matplotlib.use("Agg")
