"""
Slice morph.

Converts rendered glyphs into per-column interval maps and morphs one map into
another by matching and interpolating the intervals of each column.
"""

__version__ = "1.0.0"

from .types import Interval, MatchPair, SEED_INTERVAL, SliceMap, MorphPairs
from .config import AnimationConfig, MorphConfig
from .extract_slices import extract_slice_map, create_default_slice_map
from .matching import match_segments, match_slice_maps
from .interpolate import interpolate_pairs, interpolate_slice_maps, lerp_interval
from .svg_paths import slice_map_to_paths, slice_map_to_svg
from .validation import validate_slice_map, validate_morphing_segments, find_morphing_issues
from .rasterize import text_to_slice_map, text_to_slice_map_delayed

__all__ = [
    'Interval',
    'MatchPair',
    'SEED_INTERVAL',
    'SliceMap',
    'MorphPairs',
    'AnimationConfig',
    'MorphConfig',
    'extract_slice_map',
    'create_default_slice_map',
    'match_segments',
    'match_slice_maps',
    'interpolate_pairs',
    'interpolate_slice_maps',
    'lerp_interval',
    'slice_map_to_paths',
    'slice_map_to_svg',
    'validate_slice_map',
    'validate_morphing_segments',
    'find_morphing_issues',
    'text_to_slice_map',
    'text_to_slice_map_delayed',
]
