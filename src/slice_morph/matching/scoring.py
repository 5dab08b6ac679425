"""
Pair scoring for the segment matcher.

The global pass pairs intervals by center distance alone. Leftover intervals
are scored by how far their centers are apart and how much their heights
differ. Lower is better. When one current interval has to feed several
targets, a usage penalty spreads the targets over the available currents
instead of piling them onto one.
"""

from __future__ import annotations

from typing import Mapping, Sequence

import numpy as np

from ..types import Interval


DEFAULT_CONVERGING_WEIGHTS = {
    "distance": 0.7,  # Dominant - keep motion short
    "size": 0.3,      # Secondary - prefer similarly sized partners
    "usage": 0.0,     # Several currents may settle on one target freely
}

DEFAULT_DIVERGING_WEIGHTS = {
    "distance": 0.5,
    "size": 0.3,
    "usage": 0.2,     # Penalize splitting one current into many targets
}


def resolve_weights(
    converging: bool,
    weights: Mapping[str, float] | None = None,
) -> dict[str, float]:
    """Return the defaults for the matching direction with ``weights`` merged on top."""
    base = DEFAULT_CONVERGING_WEIGHTS if converging else DEFAULT_DIVERGING_WEIGHTS
    resolved = dict(base)
    if weights:
        unknown = set(weights) - set(resolved)
        if unknown:
            raise ValueError(f"Unknown scoring weights: {sorted(unknown)}")
        resolved.update({key: float(value) for key, value in weights.items()})
    return resolved


def _centers_and_heights(segments: Sequence[Interval]) -> tuple[np.ndarray, np.ndarray]:
    tops = np.array([seg.top for seg in segments], dtype=np.float64)
    bottoms = np.array([seg.bottom for seg in segments], dtype=np.float64)
    return (tops + bottoms) / 2, bottoms - tops


def score_matrix(
    current: Sequence[Interval],
    target: Sequence[Interval],
    weights: Mapping[str, float],
) -> np.ndarray:
    """``(len(current), len(target))`` matrix of weighted center/height differences."""
    current_centers, current_heights = _centers_and_heights(current)
    target_centers, target_heights = _centers_and_heights(target)

    distance = np.abs(current_centers[:, np.newaxis] - target_centers[np.newaxis, :])
    size = np.abs(current_heights[:, np.newaxis] - target_heights[np.newaxis, :])
    return weights.get("distance", 0.0) * distance + weights.get("size", 0.0) * size


def center_distance_matrix(
    current: Sequence[Interval],
    target: Sequence[Interval],
) -> np.ndarray:
    """``(len(current), len(target))`` matrix of absolute center distances."""
    current_centers, _ = _centers_and_heights(current)
    target_centers, _ = _centers_and_heights(target)
    return np.abs(current_centers[:, np.newaxis] - target_centers[np.newaxis, :])


def pair_score(a: Interval, b: Interval, weights: Mapping[str, float]) -> float:
    """Score of a single pair; same formula as :func:`score_matrix`."""
    return (
        weights.get("distance", 0.0) * abs(a.center - b.center)
        + weights.get("size", 0.0) * abs(a.height - b.height)
    )


__all__ = [
    "DEFAULT_CONVERGING_WEIGHTS",
    "DEFAULT_DIVERGING_WEIGHTS",
    "resolve_weights",
    "score_matrix",
    "center_distance_matrix",
    "pair_score",
]
