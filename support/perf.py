"""End-to-end flow of the perf command."""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import Optional

from admin.client import AdminClient
from admin.speedtest import run_drive_test, run_net_test, run_object_test
from common.models.perf import PerfTestType
from common.models.speedtest import SpeedTestOptions
from common.utils import sanitize_filename, utc_timestamp
from support.aggregator import convert_perf_results
from support.archive import zip_perf_result
from support.delivery import deliver_perf_result
from support.dispatcher import TestRunner, run_perf_tests
from support.portal import PortalClient, get_cluster_reg_info

logger = logging.getLogger(__name__)


def build_runners(
    client: AdminClient,
    options: SpeedTestOptions,
    json_output: bool,
) -> dict[PerfTestType, TestRunner]:
    """Bind the speedtest entry points to a client and options."""
    return {
        PerfTestType.NET: partial(run_net_test, client, options, json_output),
        PerfTestType.DRIVE: partial(run_drive_test, client, options, json_output),
        PerfTestType.OBJECT: partial(run_object_test, client, options, json_output),
    }


def perf_result_prefix(alias: str) -> str:
    """File name prefix for a report, e.g. 'myminio-perf_20260102150405'."""
    return f"{sanitize_filename(alias)}-perf_{utc_timestamp()}"


def exec_support_perf(
    client: AdminClient,
    portal: PortalClient,
    alias: str,
    perf_type: str,
    options: SpeedTestOptions,
    api_key: str,
    airgapped: bool,
    json_output: bool,
) -> Optional[Path]:
    """Run the tests, archive the report and deliver it.

    Returns the local archive path when the report was saved to disk, or
    None when it was uploaded (or when JSON output was requested, in which
    case nothing is saved or uploaded).
    """
    runners = build_runners(client, options, json_output)
    results = run_perf_tests(runners, perf_type, json_output=json_output)
    if json_output:
        return None

    prefix = perf_result_prefix(alias)
    result_filename = f"{prefix}.json"

    info = client.server_info()
    reg_info = get_cluster_reg_info(info, alias)
    tmp_path = zip_perf_result(convert_perf_results(results), result_filename, reg_info)
    logger.info(f"Performance results for {alias} archived at {tmp_path}")

    return deliver_perf_result(
        tmp_path,
        prefix,
        alias,
        api_key,
        airgapped=airgapped,
        portal=portal,
        deployment_id=info.deployment_id or None,
    )
