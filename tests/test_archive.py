"""Unit tests for the archive builder."""

import json
import os
import tempfile
import zipfile
from pathlib import Path
from unittest.mock import patch

import pytest

from common.models.cluster import ClusterRegistrationInfo
from common.models.perf import PerfTestOutput
from support.aggregator import convert_perf_results
from support.archive import CLUSTER_INFO_FILENAME, zip_perf_result
from support.portal import get_cluster_reg_info


@pytest.fixture
def reg_info(info_message) -> ClusterRegistrationInfo:
    return get_cluster_reg_info(info_message, "myminio")


@pytest.fixture
def isolated_tempdir(temp_dir: Path):
    """Point tempfile at a private directory for the test."""
    with patch.object(tempfile, "tempdir", str(temp_dir)):
        yield temp_dir


class TestZipPerfResult:
    """Tests for zip_perf_result."""

    def test_archive_has_two_entries(self, drive_result, object_result, net_result, reg_info):
        output = convert_perf_results([drive_result, object_result, net_result])

        path = zip_perf_result(output, "myminio-perf_20260102150405.json", reg_info)
        try:
            with zipfile.ZipFile(path) as archive:
                assert archive.namelist() == [
                    "myminio-perf_20260102150405.json",
                    CLUSTER_INFO_FILENAME,
                ]
        finally:
            os.unlink(path)

    def test_entries_decode_to_sources(self, drive_result, net_result, reg_info):
        output = convert_perf_results([drive_result, net_result])

        path = zip_perf_result(output, "report.json", reg_info)
        try:
            with zipfile.ZipFile(path) as archive:
                report = json.loads(archive.read("report.json"))
                info = json.loads(archive.read(CLUSTER_INFO_FILENAME))
        finally:
            os.unlink(path)

        assert PerfTestOutput.from_json(report) == output
        assert ClusterRegistrationInfo.model_validate(info) == reg_info

    def test_entries_are_newline_terminated(self, reg_info):
        path = zip_perf_result(PerfTestOutput(), "empty.json", reg_info)
        try:
            with zipfile.ZipFile(path) as archive:
                assert archive.read("empty.json") == b"{}\n"
                assert archive.read(CLUSTER_INFO_FILENAME).endswith(b"}\n")
        finally:
            os.unlink(path)

    def test_archive_is_written_to_temp_dir(self, isolated_tempdir, reg_info):
        path = zip_perf_result(PerfTestOutput(), "empty.json", reg_info)

        assert Path(path).parent == isolated_tempdir
        assert Path(path).name.startswith("perf-")
        assert Path(path).exists()

    def test_temp_file_creation_failure_propagates(self, reg_info):
        with patch("support.archive.tempfile.mkstemp", side_effect=OSError("no space left")):
            with pytest.raises(OSError, match="no space left"):
                zip_perf_result(PerfTestOutput(), "empty.json", reg_info)

    def test_failed_archive_is_removed(self, isolated_tempdir, reg_info):
        with patch("support.archive.write_json_to_zip", side_effect=OSError("disk error")):
            with pytest.raises(OSError):
                zip_perf_result(PerfTestOutput(), "empty.json", reg_info)

        assert list(isolated_tempdir.iterdir()) == []
