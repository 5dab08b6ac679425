from .segment_matcher import match_segments, match_slice_maps
from .scoring import DEFAULT_CONVERGING_WEIGHTS, DEFAULT_DIVERGING_WEIGHTS, resolve_weights

__all__ = [
    "match_segments",
    "match_slice_maps",
    "DEFAULT_CONVERGING_WEIGHTS",
    "DEFAULT_DIVERGING_WEIGHTS",
    "resolve_weights",
]
