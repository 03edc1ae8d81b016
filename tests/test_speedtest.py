"""Unit tests for the speedtest entry points."""

import json
import queue
from unittest.mock import MagicMock

import httpx
import pytest

from admin.client import AdminClient
from admin.speedtest import (
    collect_result,
    drive_test_result_text,
    net_test_result_text,
    object_test_result_text,
    run_drive_test,
    run_net_test,
    run_object_test,
)
from common.models.perf import PerfTestType
from common.models.speedtest import (
    DriveSpeedTestResult,
    NetperfResult,
    SpeedTestOptions,
    SpeedTestResult,
)


@pytest.fixture
def admin_client(sample_drive_data, sample_object_data, sample_net_data) -> MagicMock:
    client = MagicMock(spec=AdminClient)
    client.drive_speedtest.return_value = [
        DriveSpeedTestResult.model_validate(d) for d in sample_drive_data
    ]
    client.object_speedtest.return_value = SpeedTestResult.model_validate(sample_object_data)
    client.netperf.return_value = NetperfResult.model_validate(sample_net_data)
    return client


@pytest.fixture
def handoff() -> queue.Queue:
    return queue.Queue(maxsize=1)


class TestCollectResult:
    def test_success(self):
        result = collect_result(PerfTestType.NET, lambda: NetperfResult())

        assert result.type == PerfTestType.NET
        assert result.net_result == NetperfResult()
        assert result.error is None

    def test_http_failure_becomes_error(self):
        def fail():
            raise httpx.ConnectError("connection refused")

        result = collect_result(PerfTestType.DRIVE, fail)

        assert result.drive_result is None
        assert result.error == "connection refused"


class TestEntryPoints:
    """Tests for run_*_test."""

    def test_drive_hands_off_result(self, admin_client, handoff, capsys):
        options = SpeedTestOptions(serial=True)

        run_drive_test(admin_client, options, False, handoff)

        result = handoff.get(timeout=5)
        assert result.type == PerfTestType.DRIVE
        assert len(result.drive_result) == 2
        admin_client.drive_speedtest.assert_called_once_with(options)
        out = capsys.readouterr().out
        assert "http://node1:9000:" in out
        assert "Err: drive not found" in out

    def test_object_hands_off_result(self, admin_client, handoff, capsys):
        run_object_test(admin_client, SpeedTestOptions(), False, handoff)

        result = handoff.get(timeout=5)
        assert result.type == PerfTestType.OBJECT
        assert result.object_result.size == 67108864
        assert "64 MiB objects, 32 threads" in capsys.readouterr().out

    def test_net_hands_off_result(self, admin_client, handoff, capsys):
        run_net_test(admin_client, SpeedTestOptions(duration=5), False, handoff)

        result = handoff.get(timeout=5)
        assert result.type == PerfTestType.NET
        admin_client.netperf.assert_called_once_with(5)
        assert "connection refused" in capsys.readouterr().out

    def test_failure_is_handed_off_as_error(self, admin_client, handoff, capsys):
        admin_client.netperf.side_effect = httpx.ReadTimeout("timed out")

        run_net_test(admin_client, SpeedTestOptions(), False, handoff)

        result = handoff.get(timeout=5)
        assert result.error == "timed out"
        assert result.net_result is None
        assert "net performance test failed" in capsys.readouterr().err

    def test_json_mode_prints_single_kind_report(self, admin_client, handoff, capsys):
        run_drive_test(admin_client, SpeedTestOptions(), True, handoff)

        assert handoff.empty()
        data = json.loads(capsys.readouterr().out)
        assert set(data) == {"drive"}
        assert data["drive"]["servers"][0]["endpoint"] == "http://node1:9000"

    def test_unexpected_failure_is_handed_off_as_error(self, admin_client, handoff, capsys):
        admin_client.object_speedtest.side_effect = RuntimeError("stream closed")

        run_object_test(admin_client, SpeedTestOptions(), False, handoff)

        result = handoff.get(timeout=5)
        assert result.type == PerfTestType.OBJECT
        assert result.error == "stream closed"
        assert result.object_result is None
        assert "object performance test failed: stream closed" in capsys.readouterr().err


class TestRendering:
    def test_object_short(self, sample_object_data):
        text = object_test_result_text(SpeedTestResult.model_validate(sample_object_data))

        lines = text.splitlines()
        assert lines[0] == (
            "MinIO RELEASE.2026-01-01T00-00-00Z, 2 servers, 8 drives, 64 MiB objects, 32 threads"
        )
        assert lines[1] == "PUT: 2 GiB/s, 32 objs/s"
        assert lines[2] == "GET: 4 GiB/s, 64 objs/s"

    def test_object_verbose(self, sample_object_data):
        text = object_test_result_text(
            SpeedTestResult.model_validate(sample_object_data), verbose=True
        )

        assert "   * http://node1:9000: 1 GiB/s 16 objs/s" in text
        assert "   * http://node2:9000: 2 GiB/s 32 objs/s Err: slow drive" in text

    def test_object_missing(self):
        assert "no results" in object_test_result_text(None)

    def test_drive_text(self, sample_drive_data):
        results = [DriveSpeedTestResult.model_validate(d) for d in sample_drive_data]

        text = drive_test_result_text(results)

        assert "   * /data1: Read 1 GiB/s, Write 512 MiB/s" in text
        assert "   * /data1: Err: drive not found" in text

    def test_drive_text_empty(self):
        assert "no results" in drive_test_result_text([])

    def test_net_text(self, sample_net_data):
        text = net_test_result_text(NetperfResult.model_validate(sample_net_data))

        lines = text.splitlines()
        assert lines[0].startswith("Endpoint")
        assert lines[1].startswith("http://node1:9000")
        assert "Err: connection refused" in lines[2]

    def test_net_text_empty(self):
        assert "no results" in net_test_result_text(NetperfResult())
