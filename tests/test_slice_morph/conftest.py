from typing import Callable, Dict, List, Sequence, Tuple

import numpy as np
import pytest

from slice_morph.types import Interval


def pytest_configure(config):
    """Expose custom markers to ``pytest --markers`` output."""

    config.addinivalue_line(
        "markers",
        "raster: marks tests that draw text with Pillow",
    )


@pytest.fixture
def rgba_canvas() -> Callable[..., np.ndarray]:
    """Return a factory for white RGBA canvases with black rectangles painted in.

    ``boxes`` holds ``(row_start, row_end, col_start, col_end)`` half-open ranges.
    """

    def _maker(
        height: int,
        width: int,
        boxes: Sequence[Tuple[int, int, int, int]] = (),
    ) -> np.ndarray:
        canvas = np.full((height, width, 4), 255, dtype=np.uint8)
        for r0, r1, c0, c1 in boxes:
            canvas[r0:r1, c0:c1, :3] = 0
        return canvas

    return _maker


@pytest.fixture
def converging_column() -> Dict[str, List[Interval]]:
    return {
        "current": [Interval(0.2, 0.4), Interval(0.5, 0.7), Interval(0.8, 0.9)],
        "target": [Interval(0.4, 0.6)],
    }


@pytest.fixture
def random_columns() -> List[Tuple[List[Interval], List[Interval]]]:
    """Deterministic (current, target) column pairs with 0-5 intervals per side."""
    rng = np.random.default_rng(0)
    grid = np.round(np.linspace(0.05, 0.95, 19), 2)

    def _column() -> List[Interval]:
        count = int(rng.integers(0, 6))
        if count == 0:
            return []
        edges = np.sort(rng.choice(grid, size=2 * count, replace=False))
        return [Interval(float(edges[2 * k]), float(edges[2 * k + 1])) for k in range(count)]

    return [(_column(), _column()) for _ in range(60)]
