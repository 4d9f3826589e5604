import argparse
import logging
import sys
from pathlib import Path

from . import config
from .core import BatchRunner

EPILOG = """\
The read metadata will be written to JSON files in the same directory as the matching images.

Example usage:
imagemeta images/my_image1.jpg images/my_image2.tiff
"""


def setup_logging():
    """Logs to stderr so stdout stays free for --help output."""
    logging.basicConfig(
        level=logging.INFO,
        format=config.LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    # Silence chatty libraries
    logging.getLogger("exifread").setLevel(logging.ERROR)


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="imagemeta",
        description="Provide paths (absolute or relative) to image files whose metadata should be read.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("paths", nargs="+", type=Path, help="Image files to read")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging()

    runner = BatchRunner(show_progress=sys.stderr.isatty())
    try:
        runner.run(args.paths)
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        sys.exit(1)
    except Exception:
        logging.exception("imagemeta encountered a fatal error.")
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
