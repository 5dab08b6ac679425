from .frame_generation import generate_morph_sequence, generate_morph_slice_maps, sample_progress
from .gif_writer import write_gif

__all__ = [
    "generate_morph_sequence",
    "generate_morph_slice_maps",
    "sample_progress",
    "write_gif",
]
