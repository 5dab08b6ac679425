"""SVG path emission for slice maps.

Each interval becomes one closed outline inside its column: an ellipse when
the interval is no taller than the inset column is wide, otherwise a capsule
(straight sides with semicircular caps).
"""

from __future__ import annotations

from typing import Any, Sequence

from .config import PATH_INSET_RATIO, PATH_MIN_INSET
from .types import Interval


def fmt(x: float) -> str:
    return f"{x:.3f}"


def _ellipse_path(cx: float, cy: float, rx: float, ry: float) -> str:
    return (
        f"M {fmt(cx - rx)} {fmt(cy)} "
        f"A {fmt(rx)} {fmt(ry)} 0 1 0 {fmt(cx + rx)} {fmt(cy)} "
        f"A {fmt(rx)} {fmt(ry)} 0 1 0 {fmt(cx - rx)} {fmt(cy)} Z"
    )


def _capsule_path(left: float, right: float, top: float, bottom: float) -> str:
    r = (right - left) / 2
    return (
        f"M {fmt(left)} {fmt(top + r)} "
        f"A {fmt(r)} {fmt(r)} 0 0 1 {fmt(right)} {fmt(top + r)} "
        f"L {fmt(right)} {fmt(bottom - r)} "
        f"A {fmt(r)} {fmt(r)} 0 0 1 {fmt(left)} {fmt(bottom - r)} Z"
    )


def interval_to_path(
    interval: Any,
    column_index: int,
    column_width: float,
    canvas_height: float,
) -> str | None:
    """Outline for one interval, or None when the inset shape is degenerate."""
    seg = Interval.coerce(interval)
    inset = max(column_width * PATH_INSET_RATIO, PATH_MIN_INSET)
    left = column_index * column_width + inset
    width = column_width - 2 * inset
    top = seg.top * canvas_height
    bottom = seg.bottom * canvas_height
    height = bottom - top

    if width <= 0 or height <= 0:
        return None

    if height <= width:
        return _ellipse_path(left + width / 2, top + height / 2, width / 2, height / 2)
    return _capsule_path(left, left + width, top, bottom)


def slice_map_to_paths(
    slice_map: Sequence[Sequence[Any]],
    canvas_width: float,
    canvas_height: float,
) -> list[str]:
    """One path string per drawable interval, in column then scan order."""
    if not slice_map:
        return []
    column_width = canvas_width / len(slice_map)
    paths: list[str] = []
    for i, column in enumerate(slice_map):
        for interval in column:
            d = interval_to_path(interval, i, column_width, canvas_height)
            if d is not None:
                paths.append(d)
    return paths


def slice_map_to_svg(
    slice_map: Sequence[Sequence[Any]],
    canvas_width: float,
    canvas_height: float,
    *,
    fill: str = "black",
) -> str:
    """Standalone SVG document with one ``<path>`` per interval."""
    body = "".join(
        f'  <path d="{d}" fill="{fill}"/>\n'
        for d in slice_map_to_paths(slice_map, canvas_width, canvas_height)
    )
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{fmt(canvas_width)}" '
        f'height="{fmt(canvas_height)}" viewBox="0 0 {fmt(canvas_width)} {fmt(canvas_height)}">\n'
        f"{body}"
        f"</svg>\n"
    )


__all__ = ["interval_to_path", "slice_map_to_paths", "slice_map_to_svg"]
