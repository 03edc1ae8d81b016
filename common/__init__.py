"""Common utilities and models shared by the admin and support commands."""

from common.models.cluster import AliasConfig, ClusterRegistrationInfo
from common.models.group import GroupStatus, GroupMessage
from common.models.perf import PerfTestType, PerfTestResult, PerfTestOutput

__all__ = [
    "AliasConfig",
    "ClusterRegistrationInfo",
    "GroupStatus",
    "GroupMessage",
    "PerfTestType",
    "PerfTestResult",
    "PerfTestOutput",
]
