"""Debug and reporting helpers for slice maps and morphs."""

from .visualizations import render_slice_map_image, slice_map_to_rgba, save_slice_map_preview
from .numerical_reports import summarize_morph_pairs, summarize_issues

__all__ = [
    "render_slice_map_image",
    "slice_map_to_rgba",
    "save_slice_map_preview",
    "summarize_morph_pairs",
    "summarize_issues",
]
