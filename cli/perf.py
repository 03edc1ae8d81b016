"""Handler for 'perf'."""

from __future__ import annotations

import argparse
import logging

import httpx

from admin.aliases import RESERVED_ALIASES, split_aliased_url
from admin.client import new_admin_client
from cli.config import get_settings
from cli.utils import fatal, load_alias, show_command_help_and_exit
from common.models.speedtest import SpeedTestOptions
from common.utils import parse_duration, parse_size
from support.dispatcher import resolve_test_kinds
from support.perf import exec_support_perf
from support.portal import PortalClient, resolve_api_key

logger = logging.getLogger(__name__)

PERF_EPILOG = """
examples:
  1. Upload object storage, network, and drive performance analysis for cluster with alias 'myminio' to SUBNET
     mcadm perf myminio
  2. Run object storage, network, and drive performance tests on cluster with alias 'myminio', save and upload to SUBNET manually
     mcadm perf --airgap myminio
  3. Run only the drive performance test
     mcadm perf drive myminio
"""


def parse_perf_args(args: argparse.Namespace) -> tuple[str, str]:
    """Return (perf_type, aliased_url) from the positional arguments."""
    positional = args.args
    if len(positional) == 1:
        # 'drive', 'net' and 'object' would be ambiguous with the test selector
        if positional[0] in RESERVED_ALIASES:
            show_command_help_and_exit(args, 1)
        return "", positional[0]
    elif len(positional) == 2:
        return positional[0], positional[1]
    show_command_help_and_exit(args, 1)


def speedtest_options(args: argparse.Namespace) -> SpeedTestOptions:
    """Benchmark options from the perf flags."""
    return SpeedTestOptions(
        duration=parse_duration(args.duration),
        size=parse_size(args.size),
        concurrent=args.concurrent,
        bucket=args.bucket,
        filesize=parse_size(args.filesize),
        blocksize=parse_size(args.blocksize),
        serial=args.serial,
        verbose=args.verbose,
    )


def cmd_perf(args: argparse.Namespace) -> None:
    """Run performance tests and upload or save the report."""
    perf_type, aliased_url = parse_perf_args(args)
    try:
        resolve_test_kinds(perf_type)
    except ValueError:
        show_command_help_and_exit(args, 1)

    settings = get_settings()
    airgapped = settings.airgapped

    try:
        options = speedtest_options(args)
    except ValueError as e:
        fatal("Invalid perf test options.", e)

    alias, _ = split_aliased_url(aliased_url)
    alias_config = load_alias(settings, alias)

    try:
        api_key = resolve_api_key(alias, alias_config, args.api_key, airgapped)
    except ValueError as e:
        fatal(str(e))

    portal = PortalClient(settings.portal_url, timeout=settings.request_timeout)
    if not airgapped:
        try:
            portal.check_connectivity()
        except ConnectionError as e:
            fatal("Use --airgap to run the tests without uploading the results.", e)

    try:
        client = new_admin_client(alias_config, timeout=settings.request_timeout)
    except ValueError as e:
        fatal("Unable to initialize admin connection.", e)

    with client:
        try:
            exec_support_perf(
                client,
                portal,
                alias,
                perf_type,
                options,
                api_key=api_key,
                airgapped=airgapped,
                json_output=settings.json_output,
            )
        except httpx.HTTPError as e:
            fatal("Unable to get cluster information.", e)
        except OSError as e:
            fatal("Unable to write the performance report.", e)
        except ValueError as e:
            fatal("Invalid performance test result.", e)
