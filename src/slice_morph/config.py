"""Configuration constants and morph settings.

Module-level constants cover the rasterizer, the column extractor, the path
emitter and the collapse checks. ``MorphConfig`` bundles the per-view settings a
UI passes around (column count, SVG canvas size and animation hints).
"""

from __future__ import annotations

from dataclasses import dataclass, field

# ---------------------------------------------------------------------------
# Rasterization / extraction
# ---------------------------------------------------------------------------

INK_THRESHOLD = 128            # Any RGB channel below this counts as ink
RASTER_HEIGHT = 200            # Fixed pixel height of the glyph buffer
RASTER_COLUMN_SCALE = 4        # Buffer width = column_count * RASTER_COLUMN_SCALE

DEFAULT_FONT_SIZE = 120
FONT_SIZE_STEP = 5
FONT_GROW_LIMIT = 200          # Never grow past this while fitting
FONT_SIZE_MIN = 10
FONT_SIZE_MAX = 300
FONT_FIT_MAX_STEPS = 100       # Upper bound on shrink/grow iterations
TARGET_WIDTH_RATIO = 0.9       # Fraction of buffer width the text should fill
HINTED_WIDTH_RATIO = 0.8       # Same, when the caller supplies a size hint
UNDERFILL_RATIO = 0.8          # Grow when text is narrower than this * target

FONT_CANDIDATES: tuple[str, ...] = (
    "Helvetica.ttc",
    "Helvetica.ttf",
    "Arial.ttf",
    "arial.ttf",
    "DejaVuSans.ttf",
)

# ---------------------------------------------------------------------------
# Path emission
# ---------------------------------------------------------------------------

PATH_INSET_RATIO = 0.05
PATH_MIN_INSET = 1.0

# ---------------------------------------------------------------------------
# Collapse detection
# ---------------------------------------------------------------------------

COLLAPSE_CENTER_TOLERANCE = 0.01
COLLAPSE_MIN_HEIGHT = 0.02
SEED_CENTER_TOLERANCE = 0.001
SEED_HEIGHT = 0.03
SEED_HEIGHT_TOLERANCE = 0.005


@dataclass
class AnimationConfig:
    """Animation hints carried alongside a morph; scheduling is up to the caller."""
    duration: float = 800.0      # ms
    easing: str = "ease-in-out"


@dataclass
class MorphConfig:
    slice_count: int = 40
    svg_width: float = 400.0
    svg_height: float = 200.0
    animation: AnimationConfig = field(default_factory=AnimationConfig)

    @property
    def column_width(self) -> float:
        return self.svg_width / self.slice_count

    @property
    def raster_width(self) -> int:
        return self.slice_count * RASTER_COLUMN_SCALE

    def validate(self) -> "MorphConfig":
        if self.slice_count <= 0:
            raise ValueError("slice_count must be positive")
        if self.svg_width <= 0 or self.svg_height <= 0:
            raise ValueError("svg_width and svg_height must be positive")
        if self.animation.duration < 0:
            raise ValueError("animation duration cannot be negative")
        return self
