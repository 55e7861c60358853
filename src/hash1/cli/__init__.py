"""CLI package for hash1.

This package contains the command-line interface components:
argument parsing, command routing and the command handlers.
"""

from .parser import CLIParser
from .runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
