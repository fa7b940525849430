"""Command-line interface for print-covers."""

import argparse
import logging
import sys
from pathlib import Path

from print_covers.clients import CoverClient
from print_covers.pipeline.orchestrator import Orchestrator
from print_covers.settings import DEFAULT_BASE_URL, DEFAULT_FIRST_YEAR, CoverSettings

DEFAULT_ROOT_DIR = Path(".")
DEFAULT_OUTPUT_DIR = Path("./output")

DESCRIPTION = """\
Fetch all available print cover images from the print edition Web site, and
generate a comprehensive index of all the print covers on a single page.

To determine which print cover images are available, a print editions index
page is fetched for every year back to the first supported year.

The index pages are cached under _CACHE/ so that subsequent runs load them from
local disk. For the current year the cached page expires after 24 hours so new
issues are not missed.

Three cover images are fetched for each print edition and cached as:

    images/<year>/<YYYY-MM-DD>/thumbnail.jpg
    images/<year>/<YYYY-MM-DD>/medium.jpg
    images/<year>/<YYYY-MM-DD>/large.jpg

The following index files are generated in the output directory:

    index.html       - covers with date captions
    index_tight.html - images only, no captions
    index_min.html   - images only, no space between them
    index_tiny.html  - tiny images, 25 pixels wide
"""

EPILOG = """\
exit status:
  0    success
  >0   an error occurred
"""


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging for the CLI.

    Progress goes to stdout, warnings and errors go to stderr.
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    progress = logging.StreamHandler(sys.stdout)
    progress.addFilter(_BelowWarning())
    errors = logging.StreamHandler(sys.stderr)
    errors.setLevel(logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[progress, errors],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


def run_pipeline(args: argparse.Namespace) -> int:
    """Run the full harvest and render pipeline.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose, args.quiet)
    logger = logging.getLogger(__name__)

    try:
        settings = CoverSettings(
            base_url=args.base_url,
            first_supported_year=args.first_year,
            use_remote_images=args.remote_images,
            throttle_enabled=not args.no_throttle,
            root_dir=args.root,
            output_dir=args.output,
        )
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    config = {"base_url": settings.base_url}

    try:
        with CoverClient(config) as client:
            orchestrator = Orchestrator(settings, client)
            aggregate = orchestrator.run()

        logger.info(f"Years: {len(aggregate.years)}")
        logger.info(f"Issues: {aggregate.issue_count()}")
        logger.info(f"Output: {settings.output_dir}")

        return 0

    except Exception as e:
        logger.error(f"Pipeline failed: {e}")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="print-covers",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-r", "--remote-images",
        action="store_true",
        help="Link to remote images in the generated index files",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only report warnings and errors",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=DEFAULT_ROOT_DIR,
        help=f"Root directory of the cache tree (default: {DEFAULT_ROOT_DIR})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory for index files (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--first-year",
        type=int,
        default=DEFAULT_FIRST_YEAR,
        help=f"Oldest year to process (default: {DEFAULT_FIRST_YEAR})",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=DEFAULT_BASE_URL,
        help=f"Print edition base URL (default: {DEFAULT_BASE_URL})",
    )
    parser.add_argument(
        "--no-throttle",
        action="store_true",
        help="Do not pause between image fetches",
    )

    args = parser.parse_args(argv)
    return run_pipeline(args)


if __name__ == "__main__":
    sys.exit(main())
