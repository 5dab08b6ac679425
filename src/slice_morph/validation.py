"""
Slice map validation and morph diagnostics.

``validate_slice_map`` checks structure and coordinate ranges and answers with
a boolean; it never raises. ``validate_morphing_segments`` samples a morph at
one progress value and looks for intervals that shrink to a sliver at the
vertical center ("center collapse"), leave the unit range, or invert. The seed
interval used for appearing/vanishing columns is small and centered on
purpose and is not reported.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from .config import (
    COLLAPSE_CENTER_TOLERANCE,
    COLLAPSE_MIN_HEIGHT,
    SEED_CENTER_TOLERANCE,
    SEED_HEIGHT,
    SEED_HEIGHT_TOLERANCE,
)
from .interpolate import clamp_progress, lerp_interval
from .types import Interval, MatchPair


logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and math.isfinite(float(value))
    )


def _interval_fields(segment: Any) -> tuple[Any, Any] | None:
    if isinstance(segment, Interval):
        return segment.top, segment.bottom
    if isinstance(segment, Mapping):
        if "top" not in segment or "bottom" not in segment:
            return None
        return segment["top"], segment["bottom"]
    if isinstance(segment, Sequence) and not isinstance(segment, (str, bytes)):
        if len(segment) != 2:
            return None
        return segment[0], segment[1]
    return None


def validate_slice_map(slice_map: Any) -> bool:
    """Return True when ``slice_map`` is a well-formed slice map.

    Every column must be a sequence of intervals (``Interval`` objects,
    ``{"top", "bottom"}`` mappings or ``(top, bottom)`` pairs, the same shapes
    ``Interval.coerce`` accepts) with finite numeric endpoints in [0, 1] and
    ``top < bottom``.
    """
    if isinstance(slice_map, (str, bytes)) or not isinstance(slice_map, Sequence):
        return False

    for column in slice_map:
        if isinstance(column, (str, bytes)) or not isinstance(column, Sequence):
            return False

        for segment in column:
            fields = _interval_fields(segment)
            if fields is None:
                return False
            top, bottom = fields
            if not _is_number(top) or not _is_number(bottom):
                return False
            if top < 0 or top > 1 or bottom < 0 or bottom > 1:
                return False
            if top >= bottom:
                return False

    return True


def is_intentional_seed(interval: Interval) -> bool:
    """True for the small centered seed interval used for appearing/vanishing columns."""
    return (
        abs(interval.center - 0.5) < SEED_CENTER_TOLERANCE
        and abs(interval.height - SEED_HEIGHT) < SEED_HEIGHT_TOLERANCE
    )


def is_center_collapse(interval: Interval) -> bool:
    return (
        abs(interval.center - 0.5) < COLLAPSE_CENTER_TOLERANCE
        and interval.height < COLLAPSE_MIN_HEIGHT
        and not is_intentional_seed(interval)
    )


def find_center_collapse(segments: Sequence[Any]) -> list[Interval]:
    """Return the intervals of a column that look like an unintended center collapse."""
    return [seg for seg in (Interval.coerce(s) for s in segments) if is_center_collapse(seg)]


@dataclass(frozen=True)
class MorphIssue:
    """A problem found in one blended segment."""
    slice_index: int
    segment_index: int
    kind: str          # "collapse", "out_of_range" or "inverted"
    progress: float
    top: float
    bottom: float
    current: Interval
    target: Interval


def find_morphing_issues(pairs: Sequence[MatchPair], progress: float) -> list[MorphIssue]:
    """Blend every pair at ``progress`` and collect collapse, range and inversion issues."""
    t = clamp_progress(progress)
    issues: list[MorphIssue] = []

    for position, pair in enumerate(pairs):
        slice_index = getattr(pair, "slice_index", position)
        for j, (current, target) in enumerate(zip(pair.current_segments, pair.target_segments)):
            blended = lerp_interval(current, target, t)

            kinds = []
            if is_center_collapse(blended):
                kinds.append("collapse")
            if not (0 <= blended.top <= 1 and 0 <= blended.bottom <= 1):
                kinds.append("out_of_range")
            if blended.top >= blended.bottom:
                kinds.append("inverted")

            for kind in kinds:
                issues.append(
                    MorphIssue(
                        slice_index=slice_index,
                        segment_index=j,
                        kind=kind,
                        progress=t,
                        top=blended.top,
                        bottom=blended.bottom,
                        current=current,
                        target=target,
                    )
                )
    return issues


def validate_morphing_segments(pairs: Sequence[MatchPair], progress: float) -> bool:
    """Return True when the morph has no issues at ``progress``; issues are logged."""
    issues = find_morphing_issues(pairs, progress)
    for issue in issues:
        logger.warning(
            "Slice %d segment %d: %s at progress %.3f (top=%.4f, bottom=%.4f, from %s to %s)",
            issue.slice_index,
            issue.segment_index,
            issue.kind,
            issue.progress,
            issue.top,
            issue.bottom,
            issue.current,
            issue.target,
        )
    return not issues


__all__ = [
    "validate_slice_map",
    "is_intentional_seed",
    "is_center_collapse",
    "find_center_collapse",
    "MorphIssue",
    "find_morphing_issues",
    "validate_morphing_segments",
]
