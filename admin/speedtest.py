"""Speedtest entry points used by the perf command.

Each entry point runs one kind of test through the admin API on a worker
thread, shows the outcome, and hands a ``PerfTestResult`` to the dispatcher
through a single-slot queue. In JSON mode the result is printed as a
single-kind report instead and nothing is handed off.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Any, Callable

import httpx

from admin.client import AdminClient
from common import console
from common.models.perf import PerfTestResult, PerfTestType
from common.models.speedtest import (
    DriveSpeedTestResult,
    NetperfResult,
    SpeedTestOptions,
    SpeedTestResult,
    SpeedTestStats,
)
from common.utils import format_count, format_duration, format_size
from support.aggregator import convert_perf_result

logger = logging.getLogger(__name__)

_PAYLOAD_FIELDS = {
    PerfTestType.DRIVE: "drive_result",
    PerfTestType.OBJECT: "object_result",
    PerfTestType.NET: "net_result",
}


def collect_result(kind: PerfTestType, call: Callable[[], Any]) -> PerfTestResult:
    """Run ``call`` and wrap its payload, or its failure, in a result."""
    try:
        payload = call()
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"{kind.value} performance test failed: {e}")
        return PerfTestResult(type=kind, error=str(e))
    except Exception as e:
        logger.exception(f"{kind.value} performance test failed unexpectedly")
        return PerfTestResult(type=kind, error=str(e) or type(e).__name__)
    return PerfTestResult(type=kind, **{_PAYLOAD_FIELDS[kind]: payload})


def _run_speedtest(
    kind: PerfTestType,
    label: str,
    call: Callable[[], Any],
    render: Callable[[PerfTestResult], None],
    json_output: bool,
    handoff: queue.Queue[PerfTestResult],
) -> None:
    finished = threading.Event()
    outcome: dict[str, PerfTestResult] = {}

    def worker() -> None:
        try:
            outcome["result"] = collect_result(kind, call)
        finally:
            finished.set()
        if not json_output:
            handoff.put(outcome["result"])

    threading.Thread(target=worker, name=f"speedtest-{kind.value}", daemon=True).start()

    if json_output:
        finished.wait()
    else:
        with console.console.status(label):
            finished.wait()

    if "result" not in outcome:
        raise RuntimeError(f"{kind.value} speedtest exited without a result")
    result = outcome["result"]

    if json_output:
        console.print_json(convert_perf_result(result).to_json())
        return

    if result.error:
        console.error(f"{kind.value} performance test failed: {result.error}")
    else:
        render(result)


def run_drive_test(
    client: AdminClient,
    options: SpeedTestOptions,
    json_output: bool,
    handoff: queue.Queue[PerfTestResult],
) -> None:
    """Measure read/write throughput of every drive."""
    _run_speedtest(
        PerfTestType.DRIVE,
        "Running drive speedtest...",
        lambda: client.drive_speedtest(options),
        lambda r: console.info(drive_test_result_text(r.drive_result or [])),
        json_output,
        handoff,
    )


def run_object_test(
    client: AdminClient,
    options: SpeedTestOptions,
    json_output: bool,
    handoff: queue.Queue[PerfTestResult],
) -> None:
    """Measure object PUT/GET throughput."""
    _run_speedtest(
        PerfTestType.OBJECT,
        f"Running object speedtest for {format_duration(options.duration)}...",
        lambda: client.object_speedtest(options),
        lambda r: console.info(object_test_result_text(r.object_result, options.verbose)),
        json_output,
        handoff,
    )


def run_net_test(
    client: AdminClient,
    options: SpeedTestOptions,
    json_output: bool,
    handoff: queue.Queue[PerfTestResult],
) -> None:
    """Measure network throughput between the servers."""
    _run_speedtest(
        PerfTestType.NET,
        f"Running network speedtest for {format_duration(options.duration)}...",
        lambda: client.netperf(options.duration),
        lambda r: console.info(net_test_result_text(r.net_result)),
        json_output,
        handoff,
    )


def _stats_line(name: str, stats: SpeedTestStats) -> str:
    return (
        f"{name}: {format_size(stats.throughput_per_sec)}/s, "
        f"{format_count(stats.objects_per_sec)} objs/s"
    )


def _server_lines(stats: SpeedTestStats) -> list[str]:
    lines = []
    for node in stats.servers:
        line = (
            f"   * {node.endpoint}: {format_size(node.throughput_per_sec)}/s "
            f"{format_count(node.objects_per_sec)} objs/s"
        )
        if node.err:
            line += f" Err: {node.err}"
        lines.append(line)
    return lines


def object_test_result_text(result: SpeedTestResult | None, verbose: bool = False) -> str:
    """Summary of an object test; per-server stats when verbose."""
    if result is None:
        return "Object speedtest returned no results"

    lines = [
        f"MinIO {result.version}, {result.servers} servers, {result.disks} drives, "
        f"{format_size(result.size)} objects, {result.concurrent} threads",
        _stats_line("PUT", result.put_stats),
    ]
    if verbose:
        lines.extend(_server_lines(result.put_stats))
    lines.append(_stats_line("GET", result.get_stats))
    if verbose:
        lines.extend(_server_lines(result.get_stats))
    return "\n".join(lines)


def drive_test_result_text(results: list[DriveSpeedTestResult]) -> str:
    lines = []
    for server in results:
        if server.error:
            lines.append(f"{server.endpoint}: Err: {server.error}")
            continue
        lines.append(f"{server.endpoint}:")
        for drive in server.drive_perf:
            if drive.error:
                lines.append(f"   * {drive.path}: Err: {drive.error}")
            else:
                lines.append(
                    f"   * {drive.path}: Read {format_size(drive.read_throughput)}/s, "
                    f"Write {format_size(drive.write_throughput)}/s"
                )
    return "\n".join(lines) if lines else "Drive speedtest returned no results"


def net_test_result_text(result: NetperfResult | None) -> str:
    if result is None or not result.node_results:
        return "Network speedtest returned no results"

    lines = [f"{'Endpoint':<40} {'RX':<14} {'TX':<14}"]
    for node in result.node_results:
        if node.error:
            lines.append(f"{node.endpoint:<40} Err: {node.error}")
        else:
            lines.append(
                f"{node.endpoint:<40} {format_size(node.rx) + '/s':<14} "
                f"{format_size(node.tx) + '/s':<14}"
            )
    return "\n".join(lines)
