"""Checksum engine: one pass over a file, many hash accumulators.

The file is read once; every chunk is fed to every requested accumulator.
Results always follow registry order, whatever order the caller used.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from hash1.constants import (
    DEFAULT_HASH_NAME,
    FALLBACK_BUFFER_SIZE,
    MIN_BUFFER_SIZE,
)
from hash1.core.registry import (
    AlgorithmDescriptor,
    AlgorithmRegistry,
    HashAlgorithm,
    default_registry,
)
from hash1.core.results import ChecksumResult
from hash1.exceptions import (
    FileMissingError,
    FileReadError,
    PathIsDirectoryError,
)
from hash1.logger import get_logger

if TYPE_CHECKING:
    from os import PathLike

    from hash1.core.registry import Hasher

logger = get_logger(__name__)


def buffer_size_for(block_sizes: Iterable[int]) -> int:
    """Choose a read buffer size that is a multiple of every block size.

    The least common multiple is doubled until it reaches MIN_BUFFER_SIZE.
    If any block size is zero or unknown, FALLBACK_BUFFER_SIZE is used.
    """
    sizes = list(block_sizes)
    if not sizes or any(size <= 0 for size in sizes):
        return FALLBACK_BUFFER_SIZE
    size = math.lcm(*sizes)
    while size < MIN_BUFFER_SIZE:
        size <<= 1
    return size


class ChecksumEngine:
    """Computes hash checksums of local files."""

    def __init__(self, registry: AlgorithmRegistry | None = None) -> None:
        """Create an engine bound to an algorithm registry.

        Args:
            registry: Registry to resolve names against (default registry
                if omitted)

        """
        self.registry = registry or default_registry()

    def select(
        self, algorithms: Iterable[str | HashAlgorithm] = ()
    ) -> list[AlgorithmDescriptor]:
        """Resolve, deduplicate, and order the requested algorithms.

        Args:
            algorithms: Names, aliases, or enum members; SHA-256 if empty

        Returns:
            Descriptors in registry order

        Raises:
            UnknownAlgorithmError: If a name does not resolve

        """
        if isinstance(algorithms, str | HashAlgorithm):
            algorithms = (algorithms,)
        selected: dict[HashAlgorithm, AlgorithmDescriptor] = {}
        for name in algorithms:
            desc = self.registry.require(name)
            selected[desc.algorithm] = desc
        if not selected:
            desc = self.registry.require(DEFAULT_HASH_NAME)
            selected[desc.algorithm] = desc
        return sorted(
            selected.values(), key=lambda d: self.registry.rank(d.algorithm)
        )

    def compute_checksums(
        self,
        file_path: str | PathLike[str],
        algorithms: Iterable[str | HashAlgorithm] = (),
        upper: bool = False,  # noqa: FBT001, FBT002
    ) -> list[ChecksumResult]:
        """Calculate the checksums of a file.

        Args:
            file_path: File to hash
            algorithms: Names, aliases, or enum members; duplicates are
                ignored and SHA-256 is used if none are given
            upper: Whether to render digests in uppercase

        Returns:
            One result per algorithm, in registry order

        Raises:
            UnknownAlgorithmError: If an algorithm name does not resolve
            PathIsDirectoryError: If the path is a directory
            FileMissingError: If the path does not exist
            FileReadError: If opening or reading the file fails

        """
        descriptors = self.select(algorithms)
        path = Path(file_path)
        logger.debug(
            "Computing %s for %s",
            ", ".join(d.display_name for d in descriptors),
            path,
        )

        hashers = [desc.new() for desc in descriptors]
        self._feed(path, hashers)

        results = []
        for desc, hasher in zip(descriptors, hashers, strict=True):
            digest = hasher.hexdigest()
            results.append(
                ChecksumResult(
                    hash_name=desc.display_name,
                    checksum=digest.upper() if upper else digest,
                )
            )
        return results

    def _feed(self, path: Path, hashers: list[Hasher]) -> None:
        if path.is_dir():
            raise PathIsDirectoryError(
                "cannot calculate the checksum of a directory", str(path)
            )

        buffer_size = buffer_size_for(h.block_size for h in hashers)
        logger.debug("Reading %s with a %d-byte buffer", path, buffer_size)
        total = 0
        try:
            with path.open("rb") as f:
                for chunk in iter(lambda: f.read(buffer_size), b""):
                    for hasher in hashers:
                        hasher.update(chunk)
                    total += len(chunk)
        except FileNotFoundError as e:
            raise FileMissingError(
                e.strerror or "no such file", str(path)
            ) from e
        except IsADirectoryError as e:
            raise PathIsDirectoryError(
                "cannot calculate the checksum of a directory", str(path)
            ) from e
        except OSError as e:
            raise FileReadError(e.strerror or str(e), str(path)) from e

        logger.debug("Read %d bytes from %s", total, path)


def compute_checksums(
    file_path: str | PathLike[str],
    algorithms: Iterable[str | HashAlgorithm] = (),
    upper: bool = False,  # noqa: FBT001, FBT002
) -> list[ChecksumResult]:
    """Calculate file checksums using the default registry.

    See ChecksumEngine.compute_checksums for details.
    """
    return ChecksumEngine().compute_checksums(file_path, algorithms, upper)
