"""Print command handler.

Calculates the checksums of one file and writes them to stdout, stderr,
or a target file, as text or JSON.
"""

import os
import re
from argparse import Namespace
from pathlib import Path
from typing import TextIO

from hash1.constants import (
    EXIT_CODE_ERROR,
    EXIT_CODE_SUCCESS,
    KEY_JSON,
    KEY_UPPERCASE,
    OUTPUT_FILE_MODE,
    OUTPUT_STDERR,
    SECTION_OUTPUT,
)
from hash1.core.engine import ChecksumEngine
from hash1.exceptions import Hash1Error
from hash1.logger import get_logger
from hash1.ui.formatters import format_checksums

from .base import BaseCommandHandler

logger = get_logger(__name__)

_NAME_SEPARATORS = re.compile(r"[,\s]+")


def split_hash_names(value: str) -> list[str]:
    """Split a --hash value on commas and whitespace into lowercase names."""
    return [name for name in _NAME_SEPARATORS.split(value.lower()) if name]


class PrintHandler(BaseCommandHandler):
    """Handler for the print command."""

    def execute(self, args: Namespace) -> int:
        """Calculate and output the checksums of args.file."""
        if args.file is None:
            args.print_help()
            return EXIT_CODE_SUCCESS

        output_config = self.global_config[SECTION_OUTPUT]
        upper = (
            output_config[KEY_UPPERCASE] if args.upper is None else args.upper
        )
        as_json = output_config[KEY_JSON] if args.json is None else args.json

        try:
            checksums = ChecksumEngine(self.registry).compute_checksums(
                args.file, self.hash_names(args), upper
            )
            self._write(args.output, format_checksums(checksums, as_json))
        except (Hash1Error, OSError) as e:
            self.report_error(e, args.debug)
            return EXIT_CODE_ERROR

        logger.debug("Printed %d checksums of %s", len(checksums), args.file)
        return EXIT_CODE_SUCCESS

    def hash_names(self, args: Namespace) -> list[str]:
        """Return the hash algorithm names selected by the options."""
        if args.all:
            return [desc.name for desc in self.registry]
        if args.md5:
            return ["md5"]
        return split_hash_names(args.hash)

    def _write(self, output: str, text: str) -> None:
        if not output:
            self._write_stream(self.stdout, text)
        elif output == OUTPUT_STDERR:
            self._write_stream(self.stderr, text)
        else:
            path = Path(output)
            fd = os.open(
                path,
                os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
                OUTPUT_FILE_MODE,
            )
            with open(fd, "w", encoding="utf-8") as f:
                f.write(text)
            logger.debug("Wrote checksums to %s", path)

    @staticmethod
    def _write_stream(stream: TextIO, text: str) -> None:
        stream.write(text)
        stream.flush()
