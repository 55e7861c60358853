"""Base command handler for hash1 CLI commands.

This module provides the abstract base class that all command handlers
inherit from, ensuring a consistent interface and shared functionality
across commands.
"""

import sys
import traceback
from abc import ABC, abstractmethod
from argparse import Namespace
from typing import Any, TextIO

from hash1.core.registry import AlgorithmRegistry
from hash1.logger import get_logger

logger = get_logger(__name__)


def report_error(error: BaseException, debug: bool) -> None:  # noqa: FBT001
    """Print an error message to the standard error stream.

    With debug set, the traceback and the chain of causes follow the
    message.
    """
    logger.debug("Command failed: %s", error)
    print(f"Error: {error}", file=sys.stderr)
    if debug:
        sys.stderr.write("".join(traceback.format_exception(error)))


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    Dependencies are injected by CLIRunner, which acts as the
    composition root.
    """

    def __init__(
        self,
        global_config: dict[str, Any],
        registry: AlgorithmRegistry,
    ) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            global_config: Loaded global configuration
            registry: Registry of the supported hash algorithms

        """
        self.global_config = global_config
        self.registry = registry

    @abstractmethod
    def execute(self, args: Namespace) -> int:
        """Execute the command with the given arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            Process exit code

        """

    @property
    def stdout(self) -> TextIO:
        """Standard output stream at call time."""
        return sys.stdout

    @property
    def stderr(self) -> TextIO:
        """Standard error stream at call time."""
        return sys.stderr

    @staticmethod
    def report_error(error: BaseException, debug: bool) -> None:  # noqa: FBT001
        """Report a failed command; see report_error."""
        report_error(error, debug)
