"""Pytest configuration and shared fixtures."""

import os
import tempfile
import shutil
from pathlib import Path
from typing import Generator

import pytest

from admin.aliases import AliasStore
from common.models.cluster import AliasConfig, InfoMessage
from common.models.perf import PerfTestResult, PerfTestType
from common.models.speedtest import (
    DriveSpeedTestResult,
    NetperfResult,
    SpeedTestResult,
)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def work_dir(temp_dir: Path) -> Generator[Path, None, None]:
    """Run the test with a temporary current working directory."""
    cwd = os.getcwd()
    os.chdir(temp_dir)
    yield temp_dir
    os.chdir(cwd)


@pytest.fixture
def config_dir(temp_dir: Path) -> Path:
    """Configuration folder holding a 'myminio' alias."""
    path = temp_dir / "config"
    store = AliasStore(path / "config.yaml")
    store.set(
        "myminio",
        AliasConfig(
            url="http://localhost:9000",
            access_key="minioadmin",
            secret_key="minioadmin",
            api_key="test-api-key",
        ),
    )
    store.set("unregistered", AliasConfig(url="http://localhost:9001"))
    return path


@pytest.fixture
def sample_drive_data() -> list[dict]:
    """Drive speedtest results as streamed by the admin API."""
    return [
        {
            "version": "1",
            "endpoint": "http://node1:9000",
            "drivePerf": [
                {"path": "/data1", "readThroughput": 1073741824, "writeThroughput": 536870912},
                {"path": "/data2", "readThroughput": 1048576000, "writeThroughput": 524288000},
            ],
        },
        {
            "version": "1",
            "endpoint": "http://node2:9000",
            "drivePerf": [
                {"path": "/data1", "error": "drive not found"},
            ],
        },
    ]


@pytest.fixture
def sample_object_data() -> dict:
    """Final object speedtest result."""
    return {
        "version": "RELEASE.2026-01-01T00-00-00Z",
        "servers": 2,
        "disks": 8,
        "size": 67108864,
        "concurrent": 32,
        "PUTStats": {
            "throughputPerSec": 2147483648,
            "objectsPerSec": 32,
            "responseTime": {"avg": 900000, "p50": 850000, "p99": 1500000, "max": 2000000, "min": 100000},
            "servers": [
                {"endpoint": "http://node1:9000", "throughputPerSec": 1073741824, "objectsPerSec": 16},
                {"endpoint": "http://node2:9000", "throughputPerSec": 1073741824, "objectsPerSec": 16},
            ],
        },
        "GETStats": {
            "throughputPerSec": 4294967296,
            "objectsPerSec": 64,
            "responseTime": {"avg": 400000, "p50": 380000, "p99": 700000},
            "ttfb": {"avg": 20000, "p50": 18000, "p99": 40000, "max": 50000, "min": 5000},
            "servers": [
                {"endpoint": "http://node1:9000", "throughputPerSec": 2147483648, "objectsPerSec": 32},
                {
                    "endpoint": "http://node2:9000",
                    "throughputPerSec": 2147483648,
                    "objectsPerSec": 32,
                    "err": "slow drive",
                },
            ],
        },
    }


@pytest.fixture
def sample_net_data() -> dict:
    """Network speedtest result."""
    return {
        "nodeResults": [
            {"endpoint": "http://node1:9000", "tx": 1250000000, "rx": 1240000000},
            {"endpoint": "http://node2:9000", "tx": 0, "rx": 0, "error": "connection refused"},
        ]
    }


@pytest.fixture
def sample_info_data() -> dict:
    """Admin server info response."""
    return {
        "mode": "online",
        "deploymentID": "7a1c6f0e-2b1d-4c5e-9f3a-0d2b9c8e7f61",
        "buckets": {"count": 3},
        "objects": {"count": 1200},
        "usage": {"size": 5368709120},
        "servers": [
            {
                "state": "online",
                "endpoint": "node1:9000",
                "poolNumber": 1,
                "drives": [
                    {"path": "/data1", "totalspace": 1000, "usedspace": 100},
                    {"path": "/data2", "totalspace": 1000, "usedspace": 200},
                ],
            },
            {
                "state": "online",
                "endpoint": "node2:9000",
                "poolNumber": 1,
                "drives": [{"path": "/data1", "totalspace": 2000, "usedspace": 300}],
            },
        ],
    }


@pytest.fixture
def drive_result(sample_drive_data) -> PerfTestResult:
    return PerfTestResult(
        type=PerfTestType.DRIVE,
        drive_result=[DriveSpeedTestResult.model_validate(d) for d in sample_drive_data],
    )


@pytest.fixture
def object_result(sample_object_data) -> PerfTestResult:
    return PerfTestResult(
        type=PerfTestType.OBJECT,
        object_result=SpeedTestResult.model_validate(sample_object_data),
    )


@pytest.fixture
def net_result(sample_net_data) -> PerfTestResult:
    return PerfTestResult(
        type=PerfTestType.NET,
        net_result=NetperfResult.model_validate(sample_net_data),
    )


@pytest.fixture
def info_message(sample_info_data) -> InfoMessage:
    return InfoMessage.model_validate(sample_info_data)
