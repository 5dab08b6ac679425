"""
Segment matching between two columns.

Every interval on both sides has to take part in the transition, so the
result is always as long as the longer input. Pairing happens in two phases:

1. Greedy global pass: repeatedly take the pair with the closest centers among
   intervals that are still unused on both sides, until the shorter side runs
   out. Heights play no part here so pairs never cross over each other.
   Taking the global best first keeps surplus intervals from all being pulled
   onto the same partner (the "center collapse" artifact).
2. Surplus pass: each remaining interval on the longer side, in original
   order, takes its best-scoring partner on the shorter side (weighted center
   distance and height difference), reusing partners. The usage weight adds a
   penalty per prior use of a partner.

Ties go to the first minimum in row-major order of the matrix in use, that is
the lower current index and then the lower target index.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import numpy as np

from ..types import SEED_INTERVAL, Column, MatchPair, MorphPairs, as_column
from .scoring import center_distance_matrix, resolve_weights, score_matrix


logger = logging.getLogger(__name__)


def _greedy_global_pairs(distances: np.ndarray) -> dict[int, int]:
    """Row -> column assignment picking the globally closest pair each round."""
    working = distances.astype(np.float64, copy=True)
    n_rows, n_cols = working.shape
    assignment: dict[int, int] = {}

    for _ in range(min(n_rows, n_cols)):
        flat_index = int(np.argmin(working))
        row, col = divmod(flat_index, n_cols)
        assignment[row] = col
        working[row, :] = np.inf
        working[:, col] = np.inf

    return assignment


def _assign_surplus(
    scores: np.ndarray,
    assignment: dict[int, int],
    usage_weight: float,
) -> list[int]:
    """Complete ``assignment`` so every row of ``scores`` has a column partner.

    ``scores`` must be oriented longer side (rows) by shorter side (columns).
    """
    n_rows, n_cols = scores.shape
    usage = np.zeros(n_cols, dtype=np.float64)
    for col in assignment.values():
        usage[col] += 1

    partners: list[int] = []
    for row in range(n_rows):
        if row in assignment:
            partners.append(assignment[row])
            continue
        cost = scores[row] + usage_weight * usage
        col = int(np.argmin(cost))
        usage[col] += 1
        partners.append(col)
    return partners


def match_segments(
    current: Sequence[Any],
    target: Sequence[Any],
    *,
    weights: Mapping[str, float] | None = None,
    slice_index: int = 0,
) -> MatchPair:
    """Pair the intervals of one column so each side morphs into the other.

    Args:
        current: Intervals currently shown in the column.
        target: Intervals the column should morph into.
        weights: Optional overrides for ``distance``, ``size`` and ``usage``
            weights, merged over the defaults of the matching direction.
        slice_index: Column index recorded on the result.

    Returns:
        A MatchPair whose two sequences both have ``max(len(current), len(target))``
        entries. An empty side is represented by seed intervals.
    """
    current_col: Column = as_column(current)
    target_col: Column = as_column(target)

    if not current_col and not target_col:
        return MatchPair([], [], slice_index)

    if not current_col:
        # Appear from a small centered seed.
        return MatchPair([SEED_INTERVAL] * len(target_col), list(target_col), slice_index)

    if not target_col:
        # Collapse into a small centered seed.
        return MatchPair(list(current_col), [SEED_INTERVAL] * len(current_col), slice_index)

    converging = len(current_col) >= len(target_col)
    resolved = resolve_weights(converging, weights)
    scores = score_matrix(current_col, target_col, resolved)
    global_pairs = _greedy_global_pairs(center_distance_matrix(current_col, target_col))

    if converging:
        partners = _assign_surplus(scores, global_pairs, resolved["usage"])
        matched_current = list(current_col)
        matched_target = [target_col[idx] for idx in partners]
    else:
        inverted = {col: row for row, col in global_pairs.items()}
        partners = _assign_surplus(scores.T, inverted, resolved["usage"])
        matched_current = [current_col[idx] for idx in partners]
        matched_target = list(target_col)

    logger.debug(
        "Column %d: %d -> %d segments (%s), partners %s",
        slice_index,
        len(current_col),
        len(target_col),
        "converging" if converging else "diverging",
        partners,
    )
    return MatchPair(matched_current, matched_target, slice_index)


def match_slice_maps(
    current_map: Sequence[Sequence[Any]],
    target_map: Sequence[Sequence[Any]],
    column_count: int | None = None,
    *,
    weights: Mapping[str, float] | None = None,
) -> MorphPairs:
    """Match every column of two slice maps.

    Columns missing from either map are treated as empty. ``column_count``
    defaults to the length of the longer map.
    """
    if column_count is None:
        column_count = max(len(current_map), len(target_map))
    if column_count < 0:
        raise ValueError("column_count cannot be negative")

    morph_pairs: MorphPairs = []
    for i in range(column_count):
        current_segments = current_map[i] if i < len(current_map) else []
        target_segments = target_map[i] if i < len(target_map) else []
        morph_pairs.append(
            match_segments(current_segments, target_segments, weights=weights, slice_index=i)
        )
    return morph_pairs


__all__ = ["match_segments", "match_slice_maps"]
