"""Exception classes for hash1 operations.

Every error carries an ``ErrorKind`` so the command-line layer can tell
illegal invocations apart from faults of the environment.
"""

from enum import Enum


class ErrorKind(Enum):
    """Classification of hash1 errors."""

    USAGE = "usage"
    UNKNOWN_ALGORITHM = "unknown_algorithm"
    NOT_FOUND = "not_found"
    IS_DIRECTORY = "is_directory"
    IO = "io"

    @property
    def is_usage(self) -> bool:
        """Whether the caller can fix the error by correcting its input."""
        return self in (ErrorKind.USAGE, ErrorKind.UNKNOWN_ALGORITHM)


class Hash1Error(Exception):
    """Base exception for hash1 operations."""

    error_prefix: str = "Operation failed"
    kind: ErrorKind = ErrorKind.IO

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"

    @property
    def is_usage_error(self) -> bool:
        """Whether this error reports an illegal use of hash1."""
        return self.kind.is_usage


class UsageError(Hash1Error):
    """Raised when the verification input is malformed or absent."""

    error_prefix = "Invalid usage"
    kind = ErrorKind.USAGE


class InvalidHexError(UsageError):
    """Raised when a checksum expression is not valid hexadecimal."""

    error_prefix = "Invalid checksum"

    def __init__(
        self, part: str, value: str, target: str | None = None
    ) -> None:
        """Initialize error with the offending part of the expression.

        Args:
            part: Which side of the expression is invalid ("prefix" or
                "suffix").
            value: The candidate text before whitespace and "0x" removal.
            target: Optional display name of the hash algorithm.

        """
        message = (
            f"hash checksum {part} {value!r} "
            "is not a valid hexadecimal representation"
        )
        super().__init__(message, target)
        self.part = part
        self.value = value


class NoChecksumError(UsageError):
    """Raised when verification is requested without any checksum."""

    def __init__(self) -> None:
        """Initialize error with the fixed message."""
        super().__init__("hash checksum not specified")


class UnknownAlgorithmError(Hash1Error):
    """Raised when a hash algorithm name does not resolve."""

    error_prefix = "Unknown hash algorithm"
    kind = ErrorKind.UNKNOWN_ALGORITHM

    def __init__(self, hash_name: str) -> None:
        """Initialize error with the unresolved name.

        Args:
            hash_name: The name as supplied by the caller.

        """
        super().__init__(f"the hash algorithm {hash_name!r} is unknown")
        self.hash_name = hash_name


class FileAccessError(Hash1Error):
    """Base class for failures to access the file being hashed."""

    error_prefix = "Cannot read file"
    kind = ErrorKind.IO

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize error with message and the offending path.

        Args:
            message: Error message, usually taken from the OSError.
            path: Path of the file that could not be read.

        """
        super().__init__(message, path)
        self.path = path


class FileMissingError(FileAccessError):
    """Raised when the file to hash does not exist."""

    error_prefix = "File not found"
    kind = ErrorKind.NOT_FOUND


class PathIsDirectoryError(FileAccessError):
    """Raised when the path to hash refers to a directory."""

    error_prefix = "Is a directory"
    kind = ErrorKind.IS_DIRECTORY


class FileReadError(FileAccessError):
    """Raised when opening or reading the file fails."""

    error_prefix = "Failed to read file"
    kind = ErrorKind.IO
