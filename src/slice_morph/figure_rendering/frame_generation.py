from __future__ import annotations

from typing import List, Sequence

import numpy as np

from ..debug.visualizations import render_slice_map_image
from ..interpolate import interpolate_pairs
from ..types import MatchPair, SliceMap


def sample_progress(frame_count: int) -> List[float]:
    """Evenly spaced progress values from 0 to 1 inclusive.

    A single frame samples the start of the morph.
    """
    if frame_count <= 0:
        raise ValueError("frame_count must be positive")
    if frame_count == 1:
        return [0.0]
    return np.linspace(0.0, 1.0, num=frame_count).tolist()


def generate_morph_slice_maps(pairs: Sequence[MatchPair], frame_count: int) -> List[SliceMap]:
    """Interpolated slice maps at each sampled progress value."""
    return [interpolate_pairs(pairs, p) for p in sample_progress(frame_count)]


def generate_morph_sequence(
    pairs: Sequence[MatchPair],
    frame_count: int,
    *,
    width: int = 400,
    height: int = 200,
) -> List[np.ndarray]:
    """Generate raster frames for a morph sampled at evenly spaced progress values.

    Parameters
    - pairs: matched columns from ``match_slice_maps``.
    - frame_count: number of frames; the first is progress 0, the last progress 1.
    - width, height: frame size in pixels.

    Returns
    - List of ``(height, width)`` boolean ink masks.

    Notes
    - Frames are sampled uniformly; easing and playback timing belong to the caller.
    """
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    return [
        render_slice_map_image(slice_map, width, height)
        for slice_map in generate_morph_slice_maps(pairs, frame_count)
    ]
