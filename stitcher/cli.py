# File: stitcher/cli.py

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from stitcher.core.common.enums import parse_direction
from stitcher.core.common.errors import ConfigurationError, StitcherError
from stitcher.core.config.settings import settings
from stitcher.core.jobs.service.manager import create_job_manager
from stitcher.features.batch.domain.models import StitchOptions
from stitcher.features.batch.service.api import BatchService
from stitcher.features.naming.domain.models import NamingPolicy
from stitcher.features.stitching.data.pillow_adapter import PillowStitchAdapter

logger = logging.getLogger("stitcher")


class _ArgumentParser(argparse.ArgumentParser):
    """Reports usage errors as ConfigurationError so they share exit code 1."""

    def error(self, message):
        raise ConfigurationError(message)


def _direction(value: str):
    try:
        return parse_direction(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(prog="image-stitcher", description="Image stitcher utility")
    p.add_argument(
        "direction",
        type=_direction,
        help="Direction to stitch the files in, h for horizontal, v for vertical",
    )
    p.add_argument("files", nargs="*", type=Path, help="List of files to stitch together")
    p.add_argument(
        "-a", "--all-subdirectories",
        action="store_true",
        help="Stitch the files of every subdirectory of --root-dir; cannot be used with <files>",
    )
    p.add_argument(
        "-d", "--root-dir",
        type=Path,
        default=None,
        help="Root scanned with -a (default: current directory), and output directory for the result",
    )
    p.add_argument("--file-filter", default=settings.DEFAULT_FILE_FILTER, help="Glob for files inside each subdirectory")
    p.add_argument("--dir-filter", default=settings.DEFAULT_DIR_FILTER, help="Glob for subdirectories of the root")
    p.add_argument(
        "-r", "--reverse",
        action="store_true",
        help="Reverse the stitch order; horizontal defaults to right to left, vertical to top to bottom",
    )
    p.add_argument("-p", "--prefix", default="", help="Output file prefix")
    p.add_argument("-s", "--separator", default=settings.DEFAULT_SEPARATOR, help="Output file separator")
    p.add_argument(
        "-w", "--workers",
        type=int,
        help="Maximum number of jobs stitched at once (default: STITCHER_MAX_WORKERS, else host parallelism)",
    )
    verbosity = p.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    return p


def workers_from_env(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"STITCHER_MAX_WORKERS must be an integer, got '{raw}'") from None


def options_from_args(args: argparse.Namespace) -> StitchOptions:
    """Validates the parsed arguments. Touches no files or directories."""
    return StitchOptions(
        direction=args.direction,
        files=tuple(args.files),
        all_subdirectories=args.all_subdirectories,
        root_dir=args.root_dir,
        file_filter=args.file_filter,
        dir_filter=args.dir_filter,
        reverse=args.reverse,
        naming=NamingPolicy(prefix=args.prefix, separator=args.separator),
        max_workers=args.workers if args.workers is not None else workers_from_env(settings.MAX_WORKERS),
    )


def configure_logging(level: str) -> None:
    # basicConfig is a no-op once the root logger has handlers; the level is always applied
    logging.basicConfig(
        format="[%(asctime)s] %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger().setLevel(getattr(logging, level, logging.INFO))


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()

    if not argv:
        parser.print_help()
        return 0

    configure_logging(settings.LOG_LEVEL)

    try:
        args = parser.parse_intermixed_args(argv)
        if args.verbose:
            configure_logging("DEBUG")
        elif args.quiet:
            configure_logging("WARNING")

        options = options_from_args(args)
        service = BatchService(
            backend=PillowStitchAdapter(),
            job_manager=create_job_manager(settings.DATABASE_URL),
        )
        result = service.run(options)

    except StitcherError as e:
        logger.error(f"[{type(e).__name__}]: {e}")
        return 1
    except Exception as e:
        logger.exception(f"[{type(e).__name__}]: {e}")
        return 1

    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
