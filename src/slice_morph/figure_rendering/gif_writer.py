from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

import numpy as np


def _to_uint8(frame: np.ndarray, *, ink_dark: bool = True) -> np.ndarray:
    arr = np.asarray(frame)
    if arr.dtype == bool:
        # Ink masks: draw ink black on white unless asked otherwise.
        ink = arr if ink_dark else ~arr
        return np.where(ink, 0, 255).astype(np.uint8)
    if arr.dtype == np.uint8:
        return arr
    return np.clip(np.rint(arr * 255.0), 0, 255).astype(np.uint8)


def write_gif(
    frames: Sequence[np.ndarray],
    output_path: str | Path,
    *,
    fps: int = 24,
    loop: int = 0,
    ink_dark: bool = True,
) -> Path:
    """Write morph frames to a GIF using imageio.

    Parameters
    - frames: boolean ink masks, uint8 images, or float images in [0, 1].
    - output_path: path to save the GIF.
    - fps: frames per second for the GIF.
    - loop: number of loops (0 = loop forever).
    - ink_dark: render ink pixels of boolean masks black on white.
    """
    from imageio import v2 as imageio

    if not frames:
        raise ValueError("No frames provided to write_gif")
    if fps <= 0:
        raise ValueError("fps must be positive")
    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    frames_u8: List[np.ndarray] = [_to_uint8(f, ink_dark=ink_dark) for f in frames]
    duration = 1.0 / float(fps)
    imageio.mimsave(out, frames_u8, format="GIF", duration=duration, loop=loop)
    return out
