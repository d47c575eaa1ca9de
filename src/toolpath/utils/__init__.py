"""Utility modules (process, log)."""

from .log import configure_logging
from .process import command_succeeds, run_command

__all__ = [
    "command_succeeds",
    "configure_logging",
    "run_command",
]
