"""CLI argument parser for hash1.

Handles parsing of command-line arguments and provides a clean
interface for defining CLI commands and their options.
"""

import argparse
import sys
from argparse import Namespace
from collections.abc import Sequence
from typing import NoReturn

from hash1.constants import (
    APP_COPYRIGHT,
    APP_DESCRIPTION,
    APP_NAME,
    APP_SOURCE_URL,
    EXIT_CODE_ERROR,
)
from hash1.core.registry import AlgorithmRegistry, HashAlgorithm

# Verify flag of each algorithm: (algorithm, long option, shorthand)
VERIFY_FLAGS: tuple[tuple[HashAlgorithm, str, str | None], ...] = (
    (HashAlgorithm.MD5, "md5", "m"),
    (HashAlgorithm.SHA1, "sha1", None),
    (HashAlgorithm.SHA224, "sha224", None),
    (HashAlgorithm.SHA256, "sha256", "s"),
    (HashAlgorithm.SHA384, "sha384", None),
    (HashAlgorithm.SHA512, "sha512", None),
    (HashAlgorithm.SHA512_224, "sha512-224", None),
    (HashAlgorithm.SHA512_256, "sha512-256", None),
    (HashAlgorithm.SHA3_224, "sha3-224", None),
    (HashAlgorithm.SHA3_256, "sha3-256", None),
    (HashAlgorithm.SHA3_384, "sha3-384", None),
    (HashAlgorithm.SHA3_512, "sha3-512", None),
    (HashAlgorithm.SHAKE128_256, "shake128-256", None),
    (HashAlgorithm.SHAKE256_512, "shake256-512", None),
    (HashAlgorithm.BLAKE2S_256, "blake2s-256", None),
    (HashAlgorithm.BLAKE2B_256, "blake2b-256", None),
    (HashAlgorithm.BLAKE2B_384, "blake2b-384", None),
    (HashAlgorithm.BLAKE2B_512, "blake2b-512", None),
)

SHOW_WARRANTY = ("w", "warranty")
SHOW_CONDITIONS = ("c", "conditions")

NOTICE = f"""{APP_NAME}  {APP_COPYRIGHT}
This program comes with ABSOLUTELY NO WARRANTY; for details type "{APP_NAME} show w".
This is free software, and you are welcome to redistribute it
under certain conditions; type "{APP_NAME} show c" for details.
Program source: <{APP_SOURCE_URL}>."""


def verify_dest(algorithm: HashAlgorithm) -> str:
    """Return the namespace attribute holding an algorithm's expression."""
    return f"expect_{algorithm.name.lower()}"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser reporting illegal use with exit code 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_CODE_ERROR, f"{self.prog}: error: {message}\n")


class CLIParser:
    """Command-line argument parser for hash1."""

    def __init__(self, registry: AlgorithmRegistry) -> None:
        """Initialize the CLI parser.

        Settings are loaded after parsing so that silent mode also
        covers their warnings.

        Args:
            registry: Registry listing the supported algorithms

        """
        self.registry = registry

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments without the program name (sys.argv if None)

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self.build()
        return parser.parse_args(argv)

    def build(self) -> argparse.ArgumentParser:
        """Create the main parser with global options and subcommands."""
        parser = _ArgumentParser(
            prog=APP_NAME,
            description=(
                f"{NOTICE}\n\n"
                f"{APP_DESCRIPTION}\n"
                f"and then prints it ({APP_NAME} print) or compares it with\n"
                f"the expected value ({APP_NAME} verify)."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        parser.add_argument(
            "--version",
            action="store_true",
            help=f"Show {APP_NAME} version and exit",
        )
        parser.add_argument(
            "--debug",
            action="store_true",
            help="print more information when encountering an error",
        )
        parser.set_defaults(print_help=parser.print_help)

        subparsers = parser.add_subparsers(
            dest="command",
            help="Available commands",
            parser_class=_ArgumentParser,
        )
        self._add_print_command(subparsers)
        self._add_verify_command(subparsers)
        self._add_show_command(subparsers)
        return parser

    def _algorithm_list(self) -> str:
        names = [desc.display_name for desc in self.registry]
        lines = []
        for start in range(0, len(names), 9):
            lines.append("    " + ", ".join(names[start : start + 9]))
        return ",\n".join(lines)

    @staticmethod
    def _add_debug_option(subparser: argparse.ArgumentParser) -> None:
        # SUPPRESS keeps a --debug given before the subcommand
        subparser.add_argument(
            "--debug",
            action="store_true",
            default=argparse.SUPPRESS,
            help="print more information when encountering an error",
        )

    def _add_print_command(self, subparsers) -> None:
        """Add print command parser."""
        count = len(self.registry)
        print_parser = subparsers.add_parser(
            "print",
            help="Output the hash checksum of the specified local file",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=f"""\
Print ({APP_NAME} print) outputs the hash checksum of the specified local file
to the console or a target file (see the option "--output" ("-o" for short)).

The {count} supported hash algorithms are listed as follows:
{self._algorithm_list()}

Hash algorithms are chosen with "--hash" ("-H" for short): lowercase names
separated by commas or whitespace. Hyphens and slashes in a name can be
replaced with underscores or omitted ("sha-512/224" can be "sha_512_224" or
"sha512224"). "--md5" ("-m") selects MD5 and "--all" ("-a") selects all
{count} algorithms. These three options are mutually exclusive.
If no hash algorithm is given, SHA-256 is used.

The output is plain text by default or JSON with "--json" ("-j").
Checksums are hexadecimal, lowercase unless "--upper" ("-u") is set.""",
        )
        print_parser.add_argument(
            "file", nargs="?", help="the local file to hash"
        )
        selection = print_parser.add_mutually_exclusive_group()
        selection.add_argument(
            "-a",
            "--all",
            action="store_true",
            help="use all the supported hash algorithms",
        )
        selection.add_argument(
            "-H",
            "--hash",
            default="",
            help="specify hash algorithms (see help for details)",
        )
        selection.add_argument(
            "-m",
            "--md5",
            action="store_true",
            help="use the MD5 hash algorithm",
        )
        print_parser.add_argument(
            "-j",
            "--json",
            action="store_true",
            default=None,
            help="output the result in JSON format",
        )
        print_parser.add_argument(
            "-o",
            "--output",
            default="",
            help=(
                'specify the output file; "STDERR" (in uppercase) means '
                "the standard error stream (default: standard output)"
            ),
        )
        print_parser.add_argument(
            "-u",
            "--upper",
            action="store_true",
            default=None,
            help="output the result in uppercase (lowercase by default)",
        )
        self._add_debug_option(print_parser)
        print_parser.set_defaults(print_help=print_parser.print_help)

    def _add_verify_command(self, subparsers) -> None:
        """Add verify command parser."""
        verify_parser = subparsers.add_parser(
            "verify",
            help="Verify the hash checksum of the specified local file",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=f"""\
Verify ({APP_NAME} verify) compares the hash checksum of the specified local
file with the expected values given by the options below.
If they are consistent, it outputs "OK" and exits with code 0.
If they are inconsistent, it outputs "FAIL" followed by the actual checksums
and exits with code 3. (Code 1 is for errors; 2 is for unexpected failures.)

The supported hash algorithms are listed as follows:
{self._algorithm_list()}

The expected checksum is hexadecimal (case insensitive). It can be the entire
checksum or any prefix of it. A suffix follows "..." (three periods), and a
prefix and a suffix can be combined with "...". For example:
    "{APP_NAME} verify -s 123abc FILE"          prefix "123abc"
    "{APP_NAME} verify -s ...456def FILE"       suffix "456def"
    "{APP_NAME} verify -s 123abc...456def FILE" both
"..." alone reports OK as long as the checksum can be calculated.

"--silent" ("-S") disables output of results and errors, except help and
messages about illegal use of this command.""",
        )
        verify_parser.add_argument(
            "file", nargs="?", help="the local file to verify"
        )
        verify_parser.add_argument(
            "-S",
            "--silent",
            action="store_true",
            help=(
                "disable the output to the standard output and error "
                "streams, excluding help and illegal use messages"
            ),
        )
        for algorithm, flag, shorthand in VERIFY_FLAGS:
            display_name = self.registry.descriptor(algorithm).display_name
            options = [f"--{flag}"]
            if shorthand:
                options.insert(0, f"-{shorthand}")
            verify_parser.add_argument(
                *options,
                dest=verify_dest(algorithm),
                default="",
                metavar="CHECKSUM",
                help=f"specify the expected {display_name} hash checksum",
            )
        self._add_debug_option(verify_parser)
        verify_parser.set_defaults(print_help=verify_parser.print_help)

    def _add_show_command(self, subparsers) -> None:
        """Add show command parser."""
        show_parser = subparsers.add_parser(
            "show",
            help=(
                "Print the disclaimer of warranty or the terms and "
                "conditions of the license"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=f"""\
Show ({APP_NAME} show) prints the disclaimer of warranty or the terms and
conditions of the GNU General Public License.

    "{APP_NAME} show w" or "{APP_NAME} show warranty" prints the disclaimer of warranty.
    "{APP_NAME} show c" or "{APP_NAME} show conditions" prints the terms and conditions.""",
        )
        show_parser.add_argument(
            "topic",
            nargs="?",
            choices=SHOW_WARRANTY + SHOW_CONDITIONS,
            help="w|warranty or c|conditions",
        )
        self._add_debug_option(show_parser)
        show_parser.set_defaults(print_help=show_parser.print_help)
