"""Configuration constants for bundleburst."""

import math
from pathlib import Path

# Nodes narrower than this (radians, ~0.29 degrees) are not drawn.
VISIBILITY_EPSILON: float = 0.005

FULL_CIRCLE: float = 2 * math.pi

# Breadcrumb polygon dimensions: width, height, width of tip/tail.
BREADCRUMB_WIDTH: float = 30
BREADCRUMB_HEIGHT: float = 20
BREADCRUMB_TIP: float = 8

# Horizontal room per label character inside a breadcrumb.
CHAR_WIDTH: float = 7.5

# Gap between the last breadcrumb and the percentage label.
END_LABEL_GAP: float = 15

# (threshold, divisor, unit). Decimal divisors, binary-looking unit names.
SIZE_UNITS: list[tuple[float, float, str]] = [
    (1_000_000_000, 1_000_000_000, "GiB"),
    (1_000_000, 1_000_000, "MiB"),
    (1_000, 1_000, "KiB"),
]

PALETTE: tuple[str, ...] = ("#53c79f", "#64b0cc", "#7a6fca", "#ca6f96", "#e58c72", "#e5c072")

# Opacity of segments outside the hovered ancestor chain.
DIM_OPACITY: float = 0.3

# Fade-in duration after hover-end, in milliseconds.
TRANSITION_MS: int = 1000

# Build-stats artifacts looked up when none is given. First file found is used.
STATS_FILE_CANDIDATES: list[Path] = [
    Path("stats.json"),
    Path("dist/stats.json"),
    Path("build/stats.json"),
    Path("stats.csv"),
]


def resolve_stats_file(base_dir: Path | None = None) -> Path | None:
    """Return the first existing stats artifact under base_dir, or None."""
    base = base_dir or Path.cwd()
    for candidate in STATS_FILE_CANDIDATES:
        path = base / candidate
        if path.is_file():
            return path
    return None
