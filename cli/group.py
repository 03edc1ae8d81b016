"""Handler for 'group enable' and 'group disable'."""

from __future__ import annotations

import argparse
import logging

import httpx

from admin.aliases import split_aliased_url
from admin.client import new_admin_client
from cli.config import get_settings
from cli.utils import fatal, load_alias, show_command_help_and_exit
from common import console
from common.models.group import GroupMessage, GroupStatus

logger = logging.getLogger(__name__)

GROUP_EPILOG = """
examples:
  1. Enable group 'allcents'.
     mcadm group enable myminio allcents
  2. Disable group 'allcents'.
     mcadm group disable myminio allcents
"""


def cmd_group_status(args: argparse.Namespace) -> None:
    """Enable or disable a group on the cluster."""
    if len(args.args) != 2:
        show_command_help_and_exit(args, 1)

    settings = get_settings()
    aliased_url, group = args.args
    alias, _ = split_aliased_url(aliased_url)

    try:
        status = GroupStatus.from_command(args.group_command)
    except ValueError as e:
        fatal("Invalid group status name.", e)

    alias_config = load_alias(settings, alias)
    try:
        client = new_admin_client(alias_config, timeout=settings.request_timeout)
    except ValueError as e:
        fatal("Unable to initialize admin connection.", e)

    with client:
        try:
            client.set_group_status(group, status)
        except httpx.HTTPError as e:
            fatal("Unable to set group status.", e)

    logger.info(f"Group {group} on {alias} is now {status.value}")
    message = GroupMessage(op=args.group_command, group_name=group, group_status=status)
    if settings.json_output:
        console.print_json(message.to_json())
    else:
        console.success(str(message))
