"""Command-line entry point for binarywalk.

Builds the classic nine-node tree and prints one line per traversal
strategy:

    pre-order: 1 2 4 7 5 8 9 3 6
    in-order: 7 4 2 8 5 9 1 6 3
    post-order: 7 4 8 9 5 2 6 3 1
    level-order: 1 2 3 4 5 6 7 8 9

Usage:
    python -m binarywalk          # Print the four traversals
    python -m binarywalk -v       # Same, with debug logging on stderr
"""

import argparse
import logging
import sys
from typing import List, Optional

from .api import format_report
from .core.store import NodeStore, NodeStoreError

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="binarywalk",
        description="Print pre-, in-, post- and level-order traversals of the example tree",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log node construction and traversal to stderr")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    store = NodeStore()
    try:
        root = store.build()
    except NodeStoreError as e:
        logger.error(f"Could not build tree: {e}")
        return 1

    for line in format_report(root):
        logger.debug(f"Reporting {line.split(':', 1)[0]}")
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
