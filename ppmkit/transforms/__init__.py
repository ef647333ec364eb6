from .channels import grayscale, invert, pixel_to_gray, swap_channels
from .edges import detect_edges
from .geometry import CENTER, downsample_half, rotate_90_cw, swirl

__all__ = [
    "CENTER",
    "detect_edges",
    "downsample_half",
    "grayscale",
    "invert",
    "pixel_to_gray",
    "rotate_90_cw",
    "swap_channels",
    "swirl",
]
