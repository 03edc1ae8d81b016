"""Decide where a finished performance archive ends up."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Optional

import httpx

from common import console
from support.portal import PortalClient

logger = logging.getLogger(__name__)


def save_perf_result_file(tmp_path: str | Path, prefix: str) -> Path:
    """Move the temporary archive to ``<prefix>.zip`` in the working directory."""
    zip_path = Path.cwd() / f"{prefix}.zip"
    try:
        shutil.move(str(tmp_path), str(zip_path))
    except OSError as e:
        raise OSError(f"Error moving temp file {tmp_path} to {zip_path}: {e}") from e
    console.info(f"Performance report saved at {zip_path}")
    return zip_path


def deliver_perf_result(
    tmp_path: str | Path,
    prefix: str,
    alias: str,
    api_key: str,
    airgapped: bool,
    portal: PortalClient,
    deployment_id: Optional[str] = None,
) -> Optional[Path]:
    """Upload the archive, or keep it locally.

    Airgapped runs and failed uploads both save ``<prefix>.zip`` in the
    working directory and return its path. A successful upload removes the
    temporary archive and returns None.
    """
    if airgapped:
        return save_perf_result_file(tmp_path, prefix)

    upload_url = portal.upload_url("perf", f"{prefix}.zip")
    try:
        req_url, headers = portal.prepare_upload(upload_url, api_key, deployment_id)
        portal.upload_file(alias, tmp_path, req_url, headers)
    except (httpx.HTTPError, OSError, ValueError) as e:
        logger.warning(f"Upload of {tmp_path} failed: {e}")
        console.error(f"Unable to upload perf test results to SUBNET portal: {e}")
        return save_perf_result_file(tmp_path, prefix)

    try:
        os.unlink(tmp_path)
    except OSError as e:
        logger.warning(f"Unable to remove temporary archive {tmp_path}: {e}")
        console.warning(f"Unable to remove temporary file {tmp_path}: {e}")
    console.success("uploaded successfully to SUBNET.")
    return None
