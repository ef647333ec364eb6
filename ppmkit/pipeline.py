from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .codec import decode, encode
from .errors import ArgumentCountError, ArgumentRangeError, EncodeError, UnsupportedOperationError
from .raster import Raster
from .transforms import (
    CENTER,
    detect_edges,
    downsample_half,
    grayscale,
    invert,
    rotate_90_cw,
    swap_channels,
    swirl,
)

logger = logging.getLogger(__name__)


def parse_number(text: str, name: str) -> float:
    """Parse a finite numeric operation argument."""
    try:
        value = float(text)
    except ValueError as exc:
        raise ArgumentRangeError(f"Argument {name} must be a number, got {text!r}") from exc
    if not math.isfinite(value):
        raise ArgumentRangeError(f"Argument {name} must be finite, got {text!r}")
    return value


def _check_swirl(cx: float, cy: float, strength: float) -> None:
    if cx < CENTER or cy < CENTER:
        raise ArgumentRangeError("Swirl center coordinates must be >= -1")
    if strength == 0:
        raise ArgumentRangeError("Swirl strength must be non-zero")


def _check_threshold(threshold: float) -> None:
    if threshold < 0:
        raise ArgumentRangeError("Edge detection threshold must be non-negative")


@dataclass(frozen=True)
class Operation:
    name: str
    apply: Callable[..., None]
    arg_names: Tuple[str, ...] = ()
    check: Optional[Callable[..., None]] = None

    @property
    def usage(self) -> str:
        return " ".join([self.name] + [f"<{arg}>" for arg in self.arg_names])

    def bind(self, args: Sequence[str]) -> "BoundOperation":
        if len(args) != len(self.arg_names):
            raise ArgumentCountError(
                f"Operation {self.name} takes {len(self.arg_names)} argument(s), got {len(args)}"
            )
        values = tuple(parse_number(text, name) for text, name in zip(args, self.arg_names))
        if self.check:
            self.check(*values)
        return BoundOperation(self, values)


@dataclass(frozen=True)
class BoundOperation:
    operation: Operation
    args: Tuple[float, ...]

    def apply(self, raster: Raster) -> None:
        logger.debug("Applying %s%s to %dx%d raster", self.operation.name, self.args, raster.cols, raster.rows)
        self.operation.apply(raster, *self.args)


DEFAULT_OPERATIONS: Tuple[Operation, ...] = (
    Operation("grayscale", grayscale),
    Operation("swap", swap_channels),
    Operation("invert", invert),
    Operation("zoom-out", downsample_half),
    Operation("rotate-right", rotate_90_cw),
    Operation("swirl", swirl, ("cx", "cy", "strength"), _check_swirl),
    Operation("edge-detection", detect_edges, ("threshold",), _check_threshold),
)


class OperationRegistry:
    def __init__(self, operations: Optional[Sequence[Operation]] = None) -> None:
        if operations is None:
            operations = DEFAULT_OPERATIONS
        self._operations: Dict[str, Operation] = {op.name: op for op in operations}

    @property
    def operations(self) -> List[Operation]:
        return list(self._operations.values())

    def get(self, name: str) -> Operation:
        operation = self._operations.get(name)
        if not operation:
            raise UnsupportedOperationError(f"Unsupported image processing operation {name}")
        return operation

    def resolve(self, name: str, args: Sequence[str]) -> BoundOperation:
        return self.get(name).bind(args)


def read_raster(path: str) -> Raster:
    with open(path, "rb") as handle:
        return decode(handle)


def write_raster(raster: Raster, path: str) -> None:
    try:
        with open(path, "wb") as handle:
            encode(raster, handle)
    except EncodeError:
        raise
    except OSError as exc:
        raise EncodeError(f"Failed to open output file {path} for writing: {exc}") from exc


def run_pipeline(
    input_path: str,
    output_path: str,
    operation: str,
    args: Sequence[str] = (),
    registry: Optional[OperationRegistry] = None,
) -> Raster:
    """Decode input, apply one named operation and encode the result.

    The output file is only created once the transform has succeeded.
    """
    registry = registry or OperationRegistry()
    raster = read_raster(input_path)
    bound = registry.resolve(operation, args)
    bound.apply(raster)
    write_raster(raster, output_path)
    logger.info("Wrote %dx%d raster to %s", raster.cols, raster.rows, output_path)
    return raster
