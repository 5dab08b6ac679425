from __future__ import annotations

import logging
from typing import Any

import numpy as np
from skimage.util import img_as_ubyte

from .config import INK_THRESHOLD
from .types import SEED_INTERVAL, Column, Interval, SliceMap


logger = logging.getLogger(__name__)


def _as_pixels(value: Any, width: int, height: int) -> np.ndarray:
    """Return ``value`` as a ``(height, width, channels)`` uint8 array.

    Accepts a flat RGBA buffer (canvas ``ImageData`` layout, or raw bytes such
    as ``Image.tobytes()``) or an image array. Float images in [0, 1] are
    converted to 8-bit.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        arr = np.frombuffer(value, dtype=np.uint8)
    else:
        arr = np.asarray(value)
    if arr.ndim == 1:
        if arr.size != width * height * 4:
            raise ValueError(
                f"Flat pixel buffer has {arr.size} values, expected {width * height * 4} "
                f"for a {width}x{height} RGBA image."
            )
        arr = arr.reshape(height, width, 4)
    elif arr.ndim == 2:
        arr = arr[..., np.newaxis]

    if arr.ndim != 3 or arr.shape[:2] != (height, width):
        raise ValueError(f"Pixel array shape {arr.shape} does not match {height}x{width}.")

    if np.issubdtype(arr.dtype, np.floating) or arr.dtype == bool:
        arr = img_as_ubyte(np.clip(arr, 0.0, 1.0) if arr.dtype != bool else arr)
    return arr


def ink_mask(pixels: Any, width: int, height: int, *, threshold: int = INK_THRESHOLD) -> np.ndarray:
    """Boolean ``(height, width)`` mask of pixels with any RGB channel below ``threshold``."""
    arr = _as_pixels(pixels, width, height)
    color = arr[..., :3]
    return np.any(color < threshold, axis=-1)


def column_bounds(width: int, column_count: int) -> list[tuple[int, int]]:
    """Integer ``[start, end)`` pixel bounds of each column band."""
    slice_width = width / column_count
    return [
        (int(np.floor(i * slice_width)), int(np.floor((i + 1) * slice_width)))
        for i in range(column_count)
    ]


def _runs_to_intervals(rows: np.ndarray, height: int) -> Column:
    """Convert a boolean per-row ink flag into intervals in scan order."""
    padded = np.concatenate(([False], rows, [False])).astype(np.int8)
    edges = np.diff(padded)
    starts = np.flatnonzero(edges == 1)
    ends = np.flatnonzero(edges == -1)

    segments: Column = []
    for start, end in zip(starts, ends):
        bottom = 1.0 if end >= height else end / height
        segments.append(Interval(top=start / height, bottom=bottom))
    return segments


def extract_slice_map(
    pixels: Any,
    width: int,
    height: int,
    column_count: int,
    *,
    threshold: int = INK_THRESHOLD,
) -> SliceMap:
    """Scan each column band of ``pixels`` for vertical ink runs.

    Args:
        pixels: Flat RGBA buffer of length ``width * height * 4`` or an image array.
        width: Buffer width in pixels.
        height: Buffer height in pixels.
        column_count: Number of equal-width column bands.
        threshold: Channel value below which a pixel counts as ink.

    Returns:
        A slice map with exactly ``column_count`` columns. Columns without ink hold
        a single seed interval so every column can take part in matching.
    """
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    if column_count <= 0:
        raise ValueError("column_count must be positive")

    mask = ink_mask(pixels, width, height, threshold=threshold)

    slice_map: SliceMap = []
    empty_columns = 0
    for start_x, end_x in column_bounds(width, column_count):
        if end_x > start_x:
            rows = mask[:, start_x:end_x].any(axis=1)
            segments = _runs_to_intervals(rows, height)
        else:
            segments = []

        if not segments:
            segments = [SEED_INTERVAL]
            empty_columns += 1
        slice_map.append(segments)

    logger.debug(
        "Extracted %d columns from %dx%d buffer (%d empty)",
        column_count,
        width,
        height,
        empty_columns,
    )
    return slice_map


def create_default_slice_map(column_count: int) -> SliceMap:
    """One centered seed interval per column."""
    if column_count < 0:
        raise ValueError("column_count cannot be negative")
    return [[SEED_INTERVAL] for _ in range(column_count)]


__all__ = [
    "extract_slice_map",
    "create_default_slice_map",
    "ink_mask",
    "column_bounds",
]
