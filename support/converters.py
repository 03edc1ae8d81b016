"""Map raw speedtest results to the report structures."""

from __future__ import annotations

from typing import Optional

from common.models.perf import (
    DriveTestResult,
    DriveTestResults,
    NetStats,
    NetTestResult,
    NetTestResults,
    ObjGETPerfResults,
    ObjGETStats,
    ObjPUTPerfResults,
    ObjPUTStats,
    ObjStats,
    ObjStatServer,
    ObjTestResults,
)
from common.models.speedtest import (
    DriveSpeedTestResult,
    NetperfResult,
    SpeedTestResult,
    SpeedTestStats,
    SpeedTestStatServer,
)


def convert_drive_test_result(result: DriveSpeedTestResult) -> DriveTestResult:
    return DriveTestResult(
        endpoint=result.endpoint,
        perf=[perf.model_copy() for perf in result.drive_perf],
        error=result.error,
    )


def convert_drive_test_results(
    results: Optional[list[DriveSpeedTestResult]],
) -> Optional[DriveTestResults]:
    if results is None:
        return None
    return DriveTestResults(results=[convert_drive_test_result(r) for r in results])


def convert_net_test_results(result: Optional[NetperfResult]) -> Optional[NetTestResults]:
    if result is None:
        return None
    return NetTestResults(
        results=[
            NetTestResult(
                endpoint=node.endpoint,
                perf=NetStats(tx=node.tx, rx=node.rx),
                error=node.error,
            )
            for node in result.node_results
        ]
    )


def convert_obj_stat_servers(servers: list[SpeedTestStatServer]) -> list[ObjStatServer]:
    return [
        ObjStatServer(
            endpoint=server.endpoint,
            perf=ObjStats(
                throughput=server.throughput_per_sec,
                objects_per_sec=server.objects_per_sec,
            ),
            error=server.err,
        )
        for server in servers
    ]


def convert_put_stats(stats: SpeedTestStats) -> ObjPUTStats:
    return ObjPUTStats(
        throughput=stats.throughput_per_sec,
        objects_per_sec=stats.objects_per_sec,
        response=stats.response.model_copy(),
    )


def convert_put_results(stats: SpeedTestStats) -> ObjPUTPerfResults:
    return ObjPUTPerfResults(
        perf=convert_put_stats(stats),
        servers=convert_obj_stat_servers(stats.servers),
    )


def convert_get_results(stats: SpeedTestStats) -> ObjGETPerfResults:
    """GET results are the PUT view of the stats plus time to first byte."""
    put_stats = convert_put_stats(stats)
    return ObjGETPerfResults(
        perf=ObjGETStats(**dict(put_stats), ttfb=stats.ttfb.model_copy()),
        servers=convert_obj_stat_servers(stats.servers),
    )


def convert_obj_test_results(result: Optional[SpeedTestResult]) -> Optional[ObjTestResults]:
    if result is None:
        return None
    return ObjTestResults(
        object_size=result.size,
        threads=result.concurrent,
        put_results=convert_put_results(result.put_stats),
        get_results=convert_get_results(result.get_stats),
    )
