"""Top-level package for hash1.

Author: 2023 - 2025 hash1 contributors
License: GPL-3.0
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("hash1")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
