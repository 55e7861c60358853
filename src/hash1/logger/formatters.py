"""Console log formatters.

INFO records are printed as the bare message; every other level gets the
structured format with a level name colored by ANSI codes when the
console is a terminal.
"""

import logging
import os
import sys

from hash1.constants import LOG_COLORS


def stderr_supports_color() -> bool:
    """Whether ANSI colors should be written to the standard error stream.

    Honors the NO_COLOR convention and never colors redirected output.
    """
    if os.getenv("NO_COLOR"):
        return False
    isatty = getattr(sys.stderr, "isatty", None)
    return bool(isatty and isatty())


class ColoredConsoleFormatter(logging.Formatter):
    """Formatter coloring the level name of each record.

    The record is restored after formatting so the file handler never
    sees escape codes.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_color: bool = True,  # noqa: FBT001, FBT002
    ) -> None:
        super().__init__(fmt, datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = LOG_COLORS.get(record.levelname) if self.use_color else None
        if color is None:
            return super().format(record)

        levelname = record.levelname
        record.levelname = f"{color}{levelname}{LOG_COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class HybridConsoleFormatter(logging.Formatter):
    """Message-only output for INFO, structured output for other levels.

    Example Output:
        INFO:     "Computing SHA-256 for image.iso"
        WARNING:  "12:30:45 - hash1.config.settings - WARNING - Invalid ..."
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_color: bool = True,  # noqa: FBT001, FBT002
    ) -> None:
        """Initialize hybrid formatter.

        Args:
            fmt: Format string for structured messages
            datefmt: Date format string for timestamps
            use_color: Whether level names are colored

        """
        super().__init__(fmt, datefmt)
        self._message_formatter = logging.Formatter("%(message)s")
        self._structured_formatter = ColoredConsoleFormatter(
            fmt, datefmt, use_color
        )

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == logging.INFO:
            return self._message_formatter.format(record)
        return self._structured_formatter.format(record)
