"""Command handlers for the hash1 CLI."""

from .base import BaseCommandHandler
from .print import PrintHandler
from .show import ShowHandler
from .verify import VerifyHandler

__all__ = [
    "BaseCommandHandler",
    "PrintHandler",
    "ShowHandler",
    "VerifyHandler",
]
