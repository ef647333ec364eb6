from .codec import decode, decode_bytes, encode, encode_bytes
from .errors import (
    AllocationError,
    ArgumentCountError,
    ArgumentRangeError,
    EncodeError,
    FormatError,
    InvalidRasterError,
    PpmkitError,
    TruncatedDataError,
    UnsupportedOperationError,
)
from .pipeline import OperationRegistry, run_pipeline
from .raster import Pixel, Raster, copy_raster, make_raster, release_raster
from .transforms import (
    detect_edges,
    downsample_half,
    grayscale,
    invert,
    pixel_to_gray,
    rotate_90_cw,
    swap_channels,
    swirl,
)

__version__ = "1.0.0"

__all__ = [
    "AllocationError",
    "ArgumentCountError",
    "ArgumentRangeError",
    "copy_raster",
    "decode",
    "decode_bytes",
    "detect_edges",
    "downsample_half",
    "encode",
    "encode_bytes",
    "EncodeError",
    "FormatError",
    "grayscale",
    "invert",
    "InvalidRasterError",
    "make_raster",
    "OperationRegistry",
    "Pixel",
    "pixel_to_gray",
    "PpmkitError",
    "Raster",
    "release_raster",
    "rotate_90_cw",
    "run_pipeline",
    "swap_channels",
    "swirl",
    "TruncatedDataError",
    "UnsupportedOperationError",
]
