"""Helpers shared by the command handlers."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, Optional

from admin.aliases import AliasStore
from cli.config import Settings
from common import console
from common.models.cluster import AliasConfig

logger = logging.getLogger(__name__)


def show_command_help_and_exit(args: argparse.Namespace, exit_code: int = 1) -> NoReturn:
    """Print the help of the invoked command and exit."""
    args.parser.print_help()
    sys.exit(exit_code)


def fatal(message: str, cause: Optional[BaseException] = None) -> NoReturn:
    """Report an unrecoverable error and exit with status 1."""
    if cause is not None:
        logger.debug(f"{message} {cause!r}", exc_info=cause)
        message = f"{message} {cause}"
    console.error(message)
    sys.exit(1)


def load_alias(settings: Settings, alias: str) -> AliasConfig:
    """Resolve an alias from the configuration, exiting if it is unknown."""
    try:
        return AliasStore(settings.config_file).get(alias)
    except (ValueError, OSError) as e:
        fatal("Unable to load alias configuration.", e)
