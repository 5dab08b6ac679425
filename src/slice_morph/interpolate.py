from __future__ import annotations

import math
from typing import Any, Sequence

from .types import SEED_INTERVAL, Interval, MatchPair, SliceMap, as_column


def clamp_progress(progress: float) -> float:
    """Clamp ``progress`` to [0, 1]."""
    value = float(progress)
    if math.isnan(value):
        raise ValueError("progress must be a number, got NaN")
    return min(1.0, max(0.0, value))


def _lerp(start: float, end: float, t: float) -> float:
    # Exact at both ends: t == 0 -> start, t == 1 -> end.
    return start * (1.0 - t) + end * t


def lerp_interval(current: Interval, target: Interval, progress: float) -> Interval:
    """Blend both endpoints of a pair at ``progress`` (clamped to [0, 1])."""
    t = clamp_progress(progress)
    return Interval(
        top=_lerp(current.top, target.top, t),
        bottom=_lerp(current.bottom, target.bottom, t),
    )


def interpolate_pairs(pairs: Sequence[MatchPair], progress: float) -> SliceMap:
    """Blend every matched pair; one output column per MatchPair."""
    t = clamp_progress(progress)
    return [
        [lerp_interval(cur, tgt, t) for cur, tgt in zip(pair.current_segments, pair.target_segments)]
        for pair in pairs
    ]


def align_slice_maps(
    start_map: Sequence[Sequence[Any]],
    end_map: Sequence[Sequence[Any]],
) -> tuple[SliceMap, SliceMap]:
    """Pad both maps to the same column count and per-column segment count.

    Missing columns and missing segments are filled with the seed interval so
    padding never introduces a zero-height interval.
    """
    column_count = max(len(start_map), len(end_map))
    aligned_start: SliceMap = []
    aligned_end: SliceMap = []
    for i in range(column_count):
        start_col = as_column(start_map[i]) if i < len(start_map) else []
        end_col = as_column(end_map[i]) if i < len(end_map) else []
        size = max(len(start_col), len(end_col))
        aligned_start.append(start_col + [SEED_INTERVAL] * (size - len(start_col)))
        aligned_end.append(end_col + [SEED_INTERVAL] * (size - len(end_col)))
    return aligned_start, aligned_end


def interpolate_slice_maps(
    start_map: Sequence[Sequence[Any]],
    end_map: Sequence[Sequence[Any]],
    progress: float,
) -> SliceMap:
    """Blend two slice maps index by index after aligning their shapes."""
    t = clamp_progress(progress)
    aligned_start, aligned_end = align_slice_maps(start_map, end_map)
    return [
        [lerp_interval(a, b, t) for a, b in zip(start_col, end_col)]
        for start_col, end_col in zip(aligned_start, aligned_end)
    ]


__all__ = [
    "clamp_progress",
    "lerp_interval",
    "interpolate_pairs",
    "align_slice_maps",
    "interpolate_slice_maps",
]
