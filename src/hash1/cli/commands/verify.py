"""Verify command handler.

Compares the checksums of one file with the expected expressions given on
the command line and reports OK or FAIL.
"""

from argparse import Namespace

from hash1.cli.parser import VERIFY_FLAGS, verify_dest
from hash1.constants import (
    EXIT_CODE_ERROR,
    EXIT_CODE_SUCCESS,
    EXIT_CODE_VERIFY_FAIL,
    KEY_UPPERCASE,
    SECTION_OUTPUT,
)
from hash1.core.registry import HashAlgorithm
from hash1.core.verifier import Verifier
from hash1.logger import get_logger
from hash1.ui.formatters import format_verification

from .base import BaseCommandHandler

logger = get_logger(__name__)


class VerifyHandler(BaseCommandHandler):
    """Handler for the verify command."""

    def execute(self, args: Namespace) -> int:
        """Verify args.file against the expected checksums."""
        if args.file is None:
            args.print_help()
            return EXIT_CODE_SUCCESS

        upper = self.global_config[SECTION_OUTPUT][KEY_UPPERCASE]
        outcome = Verifier(self.registry).verify(
            args.file, self.expressions(args), upper
        )

        if outcome.error is not None:
            # Illegal use is reported even in silent mode
            if outcome.is_usage_error or not args.silent:
                self.report_error(outcome.error, args.debug)
            return EXIT_CODE_ERROR

        logger.debug("Verification of %s: %s", args.file, outcome.status.value)
        if not args.silent:
            self.stdout.write(format_verification(outcome))
            self.stdout.flush()
        return EXIT_CODE_SUCCESS if outcome.passed else EXIT_CODE_VERIFY_FAIL

    @staticmethod
    def expressions(args: Namespace) -> dict[HashAlgorithm, str]:
        """Collect the expected checksum expression of every algorithm."""
        return {
            algorithm: getattr(args, verify_dest(algorithm))
            for algorithm, _, _ in VERIFY_FLAGS
        }
