"""Raster previews of slice maps for debugging extraction and morphs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Sequence

import matplotlib.pyplot as plt
import numpy as np

from ..extract_slices import column_bounds
from ..types import Interval

LOGGER = logging.getLogger(__name__)


def render_slice_map_image(
    slice_map: Sequence[Sequence[Any]],
    width: int,
    height: int,
) -> np.ndarray:
    """Fill each interval of each column band; returns a ``(height, width)`` bool mask.

    Rows are rounded to the nearest pixel, so extracting the result with the
    same column count gives back the slice map at pixel resolution.
    """
    image = np.zeros((height, width), dtype=bool)
    if not slice_map:
        return image

    for (start_x, end_x), column in zip(column_bounds(width, len(slice_map)), slice_map):
        for value in column:
            seg = Interval.coerce(value)
            y0 = int(np.clip(round(seg.top * height), 0, height))
            y1 = int(np.clip(round(seg.bottom * height), 0, height))
            if y1 > y0:
                image[y0:y1, start_x:end_x] = True
    return image


def slice_map_to_rgba(slice_map: Sequence[Sequence[Any]], width: int, height: int) -> np.ndarray:
    """Black-on-white RGBA buffer of a slice map, in the rasterizer's layout."""
    mask = render_slice_map_image(slice_map, width, height)
    rgba = np.full((height, width, 4), 255, dtype=np.uint8)
    rgba[mask, :3] = 0
    return rgba


def save_slice_map_preview(
    slice_map: Sequence[Sequence[Any]],
    output_path: str | Path,
    *,
    width: int = 400,
    height: int = 200,
) -> Path | None:
    """Write a grayscale PNG preview of ``slice_map``; returns None if saving fails."""
    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    mask = render_slice_map_image(slice_map, width, height)
    try:
        plt.imsave(out, (~mask).astype(np.float32), cmap="gray", vmin=0.0, vmax=1.0)
    except (OSError, ValueError) as exc:
        LOGGER.warning("Failed to save slice map preview %s: %s", out, exc)
        return None
    return out
