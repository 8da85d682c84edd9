"""Command-line helper that writes a synthetic stream to a file or stdout."""

from __future__ import annotations

import shutil
import sys
from argparse import ArgumentParser, Namespace
from contextlib import nullcontext
from pathlib import Path

import structlog

from endless_stream.core import StreamFactory
from endless_stream.core.factory import DEFAULT_CHUNK_SIZE
from endless_stream.shared import ConfigurationError, configure_logging, load_stream_config, parse_size
from endless_stream.shared.config import StreamConfig


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="endless-stream",
        description="Write a synthetic image-like byte stream of the given size.",
    )
    parser.add_argument(
        "size",
        type=str,
        help="Number of bytes to write, e.g. 4096, 512K, 10M",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="-",
        help="Output file path, '-' for stdout (default: -)",
    )
    parser.add_argument(
        "--buffer-size",
        type=str,
        help="Backing buffer capacity (default: ENDLESS_STREAM_BUFFER_SIZE or 2M)",
    )
    parser.add_argument(
        "--image-format",
        type=str,
        help="Header image format: GIF, PNG or BMP (default: GIF)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for reproducible filler bytes",
    )
    parser.add_argument(
        "--chunk-size",
        type=str,
        default=str(DEFAULT_CHUNK_SIZE),
        help=f"Copy chunk size (default: {DEFAULT_CHUNK_SIZE})",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON lines on stderr",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logs",
    )
    return parser


def _config_from_args(args: Namespace) -> StreamConfig:
    base = load_stream_config()
    return StreamConfig(
        buffer_size=parse_size(args.buffer_size) if args.buffer_size else base.buffer_size,
        image_format=(args.image_format or base.image_format).upper(),
        seed=args.seed if args.seed is not None else base.seed,
        default_stream_size=base.default_stream_size,
    ).validate()


def _run(args: Namespace) -> int:
    logger = structlog.get_logger(__name__)

    try:
        size = parse_size(args.size)
        chunk_size = parse_size(args.chunk_size)
        if chunk_size <= 0:
            raise ConfigurationError("Chunk size must be positive")
        factory = StreamFactory(_config_from_args(args))
    except ConfigurationError as exc:
        logger.error("invalid-configuration", error=str(exc))
        return 1

    to_stdout = args.output == "-"
    try:
        target = nullcontext(sys.stdout.buffer) if to_stdout else Path(args.output).open("wb")
        with target as out, factory.open(size) as stream:
            shutil.copyfileobj(stream, out, chunk_size)
            out.flush()
    except OSError as exc:
        logger.error("stream-write-failed", output=args.output, error=str(exc))
        return 1

    logger.info(
        "stream-written",
        output="stdout" if to_stdout else args.output,
        size=size,
        buffer_size=factory.config.buffer_size,
        header_length=factory.buffer.header_length,
    )
    return 0


def main() -> int:
    parser = _build_parser()
    args = parser.parse_args()
    configure_logging(level=10 if args.verbose else 20, json_output=args.json_logs)
    return _run(args)


if __name__ == "__main__":
    sys.exit(main())
