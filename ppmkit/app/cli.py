from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from ..errors import (
    ArgumentCountError,
    ArgumentRangeError,
    EncodeError,
    FormatError,
    UnsupportedOperationError,
)
from ..pipeline import OperationRegistry, run_pipeline
from ..settings import PipelineSettings, setup_logging

logger = logging.getLogger(__name__)

RC_SUCCESS = 0
RC_MISSING_FILENAME = 1
RC_OPEN_FAILED = 2
RC_INVALID_PPM = 3
RC_INVALID_OPERATION = 4
RC_INVALID_OP_ARGS = 5
RC_OP_ARGS_RANGE_ERR = 6
RC_WRITE_FAILED = 7
RC_UNSPECIFIED_ERR = 8


def usage_text(registry: OperationRegistry) -> str:
    lines = ["USAGE: ppmkit <input-image> <output-image> <command-name> <command-args>", "SUPPORTED COMMANDS:"]
    lines.extend(f"   {op.usage}" for op in registry.operations)
    return "\n".join(lines)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        raise ArgumentCountError(message)


def parse_args(argv: Optional[Sequence[str]], registry: OperationRegistry) -> argparse.Namespace:
    parser = _ArgumentParser(
        prog="ppmkit",
        description="Apply a single transformation to a binary P6 raster image.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", nargs="?", help="Input P6 image")
    parser.add_argument("output", nargs="?", help="Output P6 image")
    parser.add_argument("operation", nargs="?", help="Operation name")
    parser.add_argument("args", nargs="*", help="Numeric operation arguments")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--show", action="store_true", help="Preview the result after writing it")
    parser.epilog = usage_text(registry)
    # Negative numbers such as -2e1 look like options to argparse; keep them as operation args.
    args, extra = parser.parse_known_args(argv)
    args.args = list(args.args) + extra
    return args


def _resolve_settings(args: argparse.Namespace) -> PipelineSettings:
    settings = PipelineSettings.from_env()
    if args.verbose:
        settings.log_level = "DEBUG"
    settings.show = args.show
    return settings


def run(args: argparse.Namespace, registry: OperationRegistry, settings: PipelineSettings) -> int:
    try:
        raster = run_pipeline(args.input, args.output, args.operation, args.args, registry)
    except FormatError as exc:
        print(f"Error: Failed to read input file {args.input} as a PPM image file: {exc}", file=sys.stderr)
        return RC_INVALID_PPM
    except UnsupportedOperationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return RC_INVALID_OPERATION
    except ArgumentCountError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return RC_INVALID_OP_ARGS
    except ArgumentRangeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return RC_OP_ARGS_RANGE_ERR
    except EncodeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return RC_WRITE_FAILED
    except OSError as exc:
        print(f"Error: Failed to open input file {args.input} for reading: {exc}", file=sys.stderr)
        return RC_OPEN_FAILED
    except Exception as exc:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return RC_UNSPECIFIED_ERR
    if settings.show:
        from ..rendering import show_raster

        show_raster(raster, title=args.output)
    return RC_SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    registry = OperationRegistry()
    try:
        args = parse_args(argv, registry)
    except ArgumentCountError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return RC_INVALID_OP_ARGS
    settings = _resolve_settings(args)
    setup_logging(settings)
    if not args.input or not args.output:
        print("Missing input/output filenames", file=sys.stderr)
        print(usage_text(registry))
        return RC_MISSING_FILENAME
    if not args.operation:
        print("Missing operation name", file=sys.stderr)
        print(usage_text(registry))
        return RC_MISSING_FILENAME
    return run(args, registry, settings)


if __name__ == "__main__":
    raise SystemExit(main())
