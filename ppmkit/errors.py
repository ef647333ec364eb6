from __future__ import annotations


class PpmkitError(Exception):
    """Base class for every error raised by ppmkit."""


class FormatError(PpmkitError, ValueError):
    """Input is not a valid P6 raster (magic, dimensions or maxval)."""


class TruncatedDataError(FormatError):
    """Fewer pixel bytes are available than the header declares."""


class InvalidRasterError(PpmkitError, ValueError):
    """Operation was given a missing, released or malformed raster."""


class AllocationError(PpmkitError, MemoryError):
    """Pixel storage could not be obtained."""


class EncodeError(PpmkitError, OSError):
    """Byte sink did not accept the whole encoded raster."""


class UnsupportedOperationError(PpmkitError, ValueError):
    """Operation name is not in the registry."""


class ArgumentCountError(PpmkitError, ValueError):
    """Operation or command line was given the wrong number of arguments."""


class ArgumentRangeError(PpmkitError, ValueError):
    """Operation argument is malformed or outside its allowed range."""
