"""Common data models for the admin and support commands."""

from common.models.cluster import AliasConfig, ClusterRegistrationInfo, InfoMessage
from common.models.group import GroupStatus, GroupMessage
from common.models.speedtest import (
    DriveSpeedTestResult,
    NetperfResult,
    SpeedTestOptions,
    SpeedTestResult,
)
from common.models.perf import PerfTestType, PerfTestResult, PerfTestOutput

__all__ = [
    "AliasConfig",
    "ClusterRegistrationInfo",
    "InfoMessage",
    "GroupStatus",
    "GroupMessage",
    "DriveSpeedTestResult",
    "NetperfResult",
    "SpeedTestOptions",
    "SpeedTestResult",
    "PerfTestType",
    "PerfTestResult",
    "PerfTestOutput",
]
