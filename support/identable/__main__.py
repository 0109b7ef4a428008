#!/usr/bin/env python3
#
# Regenerates the identity members of all cog blocks in the given swift files.

import argparse
import logging
import subprocess
import sys

from .tools import run_cog

logger = logging.getLogger("identable")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="identable",
        description="Generate identity types for the enums in swift source files.",
    )
    parser.add_argument(
        "files", metavar="PATH", nargs="+", help="Swift files containing cog blocks."
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only check that the generated code is up to date.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        run_cog(*args.files, check=args.check)
    except subprocess.CalledProcessError as e:
        logger.error("cog failed with exit code %d", e.returncode)
        return e.returncode
    return 0


if __name__ == "__main__":
    sys.exit(main())
