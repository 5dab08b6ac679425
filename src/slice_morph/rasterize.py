"""
Text rasterization into slice maps.

Text is drawn black on an opaque white buffer that is ``column_count * 4``
pixels wide and 200 pixels tall, centered on both axes. The font size is
stepped until the text fills roughly 90% of the width (80% when the caller
passes a size hint). The pixel buffer is then handed to the column extractor.
"""

from __future__ import annotations

import logging

import numpy as np
from dask import delayed
from dask.delayed import Delayed
from PIL import Image, ImageDraw, ImageFont

from .config import (
    DEFAULT_FONT_SIZE,
    FONT_CANDIDATES,
    FONT_FIT_MAX_STEPS,
    FONT_GROW_LIMIT,
    FONT_SIZE_MAX,
    FONT_SIZE_MIN,
    FONT_SIZE_STEP,
    HINTED_WIDTH_RATIO,
    RASTER_COLUMN_SCALE,
    RASTER_HEIGHT,
    TARGET_WIDTH_RATIO,
    UNDERFILL_RATIO,
)
from .extract_slices import create_default_slice_map, extract_slice_map
from .types import SliceMap


logger = logging.getLogger(__name__)


def _load_font(size: int, font_path: str | None = None) -> ImageFont.FreeTypeFont:
    """Load ``font_path`` or the first available candidate font at ``size``.

    An explicit ``font_path`` that cannot be opened raises ``OSError``.
    """
    if font_path is not None:
        return ImageFont.truetype(font_path, size=size)

    for name in FONT_CANDIDATES:
        try:
            return ImageFont.truetype(name, size=size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)


def _is_bold(font_weight: str | int) -> bool:
    if isinstance(font_weight, str):
        if font_weight.isdigit():
            return int(font_weight) >= 600
        return font_weight.lower() in {"bold", "bolder"}
    return int(font_weight) >= 600


def fit_font_size(
    text: str,
    target_width: float,
    *,
    start_size: int = DEFAULT_FONT_SIZE,
    font_path: str | None = None,
) -> int:
    """Step the font size until ``text`` roughly fills ``target_width``.

    Shrinks while the text is wider than the target and grows while it is
    narrower than ``UNDERFILL_RATIO`` of the target, staying within the
    configured size bounds.
    """
    measure = ImageDraw.Draw(Image.new("RGBA", (1, 1)))
    font_size = int(start_size)

    for _ in range(FONT_FIT_MAX_STEPS):
        font = _load_font(font_size, font_path)
        text_width = measure.textlength(text, font=font)

        if text_width > target_width:
            font_size -= FONT_SIZE_STEP
        elif text_width < target_width * UNDERFILL_RATIO and font_size < FONT_GROW_LIMIT:
            font_size += FONT_SIZE_STEP
        else:
            break

        if not (FONT_SIZE_MIN < font_size < FONT_SIZE_MAX):
            break

    return font_size


def render_text_pixels(
    text: str,
    column_count: int,
    *,
    font_size_hint: int | None = None,
    font_weight: str | int = "normal",
    font_path: str | None = None,
) -> np.ndarray:
    """Draw ``text`` into an ``(200, column_count * 4, 4)`` uint8 RGBA array."""
    if column_count <= 0:
        raise ValueError("column_count must be positive")

    width = column_count * RASTER_COLUMN_SCALE
    height = RASTER_HEIGHT
    ratio = HINTED_WIDTH_RATIO if font_size_hint is not None else TARGET_WIDTH_RATIO
    start_size = font_size_hint if font_size_hint is not None else DEFAULT_FONT_SIZE

    font_size = fit_font_size(text, width * ratio, start_size=start_size, font_path=font_path)
    font = _load_font(font_size, font_path)

    image = Image.new("RGBA", (width, height), (255, 255, 255, 255))
    draw = ImageDraw.Draw(image)
    stroke_width = max(1, round(font_size / 40)) if _is_bold(font_weight) else 0
    draw.text(
        (width / 2, height / 2),
        text,
        fill=(0, 0, 0, 255),
        font=font,
        anchor="mm",
        stroke_width=stroke_width,
        stroke_fill=(0, 0, 0, 255),
    )
    logger.debug("Rendered %r at %dpx into %dx%d buffer", text, font_size, width, height)
    return np.asarray(image, dtype=np.uint8)


def text_to_slice_map(
    text: str,
    column_count: int,
    *,
    font_size_hint: int | None = None,
    font_weight: str | int = "normal",
    font_path: str | None = None,
) -> SliceMap:
    """Rasterize ``text`` and extract its slice map.

    When no drawing surface or font can be set up, a warning is logged and the
    default slice map (one seed interval per column) is returned instead.
    """
    if column_count <= 0:
        raise ValueError("column_count must be positive")

    try:
        pixels = render_text_pixels(
            text,
            column_count,
            font_size_hint=font_size_hint,
            font_weight=font_weight,
            font_path=font_path,
        )
    except (OSError, ValueError) as exc:
        logger.warning("text_to_slice_map fallback for %r: %s", text, exc)
        return create_default_slice_map(column_count)

    height, width = pixels.shape[:2]
    return extract_slice_map(pixels, width, height, column_count)


def text_to_slice_map_delayed(
    text: str,
    column_count: int,
    **kwargs,
) -> Delayed:
    """Lazy :func:`text_to_slice_map`; ``.compute()`` resolves once with the full slice map."""
    return delayed(text_to_slice_map, pure=True)(text, column_count, **kwargs)


__all__ = [
    "fit_font_size",
    "render_text_pixels",
    "text_to_slice_map",
    "text_to_slice_map_delayed",
]
