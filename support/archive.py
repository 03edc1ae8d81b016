"""Package performance reports into zip archives."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import zipfile

from pydantic import BaseModel

from common.models.cluster import ClusterRegistrationInfo
from common.models.perf import PerfTestOutput

logger = logging.getLogger(__name__)

CLUSTER_INFO_FILENAME = "cluster.info"
TEMP_ARCHIVE_PREFIX = "perf-"


def write_json_to_zip(archive: zipfile.ZipFile, obj: BaseModel, filename: str) -> None:
    """Write ``obj`` as a JSON document (newline terminated) to ``filename``."""
    payload = json.dumps(obj.model_dump(mode="json", by_alias=True, exclude_none=True))
    with archive.open(filename, "w") as entry:
        entry.write(payload.encode("utf-8") + b"\n")


def zip_perf_result(
    perf_output: PerfTestOutput,
    result_filename: str,
    reg_info: ClusterRegistrationInfo,
) -> str:
    """Write the report and registration info into a temporary zip archive.

    Returns the archive path. The caller owns the file from then on.
    """
    fd, tmp_path = tempfile.mkstemp(prefix=TEMP_ARCHIVE_PREFIX, suffix=".zip")
    try:
        with os.fdopen(fd, "wb") as tmp_file:
            with zipfile.ZipFile(tmp_file, "w", compression=zipfile.ZIP_DEFLATED) as archive:
                write_json_to_zip(archive, perf_output, result_filename)
                write_json_to_zip(archive, reg_info, CLUSTER_INFO_FILENAME)
    except Exception:
        os.unlink(tmp_path)
        raise

    logger.debug(f"Wrote performance archive {tmp_path}")
    return tmp_path
