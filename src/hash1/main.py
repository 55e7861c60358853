"""Main CLI entry point for hash1.

This module provides the minimal entry point for the command-line
interface, delegating all functionality to the CLI runner.
"""

import sys

from hash1.cli import CLIRunner
from hash1.logger import flush_all_handlers, get_logger

logger = get_logger(__name__)


def main() -> None:
    """Run the CLI application and exit with its exit code."""
    logger.debug("CLI started")
    try:
        code = CLIRunner().run()
    finally:
        flush_all_handlers()
    sys.exit(code)


if __name__ == "__main__":
    main()
