"""Command-line interface for uppercase counter."""

import argparse
import logging
import sys

from uppercase_counter.errors import CountError
from uppercase_counter.solver.solve import main_count

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="uppercase-counter",
        description="Count the uppercase letters in a text file using parallel workers.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the input file",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of workers the file is split across (default: CPU count)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    if args.workers is not None and args.workers < 1:
        parser.error(f"--workers must be at least 1, got {args.workers}")

    try:
        main_count(
            input_path=args.input_file,
            workers=args.workers,
        )
    except CountError as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
