"""CLI runner for hash1.

Orchestrates the execution of CLI commands by routing parsed
arguments to the appropriate command handlers.
"""

import sys
from argparse import Namespace
from collections.abc import Sequence

from .. import __version__
from ..config import GlobalConfig, GlobalConfigManager
from ..constants import (
    APP_COPYRIGHT,
    APP_NAME,
    EXIT_CODE_ERROR,
    EXIT_CODE_PANIC,
    EXIT_CODE_SUCCESS,
)
from ..core.registry import default_registry
from ..logger import get_logger, set_console_level, update_logger_from_config
from .commands import PrintHandler, ShowHandler, VerifyHandler
from .commands.base import BaseCommandHandler, report_error
from .parser import CLIParser

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, config_manager: GlobalConfigManager | None = None) -> None:
        """Initialize CLI runner with shared dependencies.

        Settings are read by run(), once the arguments are known.

        Args:
            config_manager: Settings manager; the default location is
                used if omitted

        """
        self.config_manager = config_manager or GlobalConfigManager()
        self.registry = default_registry()
        self.global_config: GlobalConfig | None = None
        self.command_handlers: dict[str, BaseCommandHandler] = {}

    def _load_settings(self, silent: bool) -> None:  # noqa: FBT001
        """Load settings.conf and apply it to logging and the handlers.

        Args:
            silent: Keep settings warnings off the console

        """
        if silent:
            set_console_level("CRITICAL")
        self.global_config = self.config_manager.load_global_config()
        update_logger_from_config(self.global_config)
        if silent:
            # the settings carry their own console level
            set_console_level("CRITICAL")
        self._init_command_handlers()

    def _init_command_handlers(self) -> None:
        """Initialize all command handlers with shared dependencies."""
        self.command_handlers = {
            "print": PrintHandler(self.global_config, self.registry),
            "verify": VerifyHandler(self.global_config, self.registry),
            "show": ShowHandler(self.global_config, self.registry),
        }

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the CLI application.

        Parses arguments, loads the settings, handles global flags and
        routes to the appropriate handler. Illegal use and help requests
        exit through argparse's SystemExit.

        Args:
            argv: Arguments without the program name (sys.argv if None)

        Returns:
            Process exit code

        """
        args = None
        try:
            args = CLIParser(self.registry).parse_args(argv)
            self._load_settings(bool(getattr(args, "silent", False)))

            if args.version:
                print(f"{APP_NAME} v{__version__}")
                print(APP_COPYRIGHT)
                return EXIT_CODE_SUCCESS

            if args.debug:
                set_console_level("DEBUG")

            if not args.command:
                args.print_help()
                return EXIT_CODE_SUCCESS

            return self._execute_command(args)

        except KeyboardInterrupt:
            print("\nOperation cancelled by user", file=sys.stderr)
            return EXIT_CODE_ERROR
        except Exception as e:
            logger.debug("Unexpected error", exc_info=True)
            if not getattr(args, "silent", False):
                report_error(e, bool(getattr(args, "debug", False)))
            return EXIT_CODE_PANIC

    def _execute_command(self, args: Namespace) -> int:
        """Execute the specified command with the appropriate handler.

        Args:
            args: Parsed command-line arguments namespace.

        Returns:
            Exit code of the handler

        """
        handler = self.command_handlers[args.command]
        logger.debug("Running %s command", args.command)
        return handler.execute(args)
