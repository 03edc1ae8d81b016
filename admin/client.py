"""HTTP client for the cluster admin API."""

from __future__ import annotations

import json
import logging
from typing import Optional

import httpx

from common.models.cluster import AliasConfig, InfoMessage
from common.models.group import GroupStatus
from common.models.speedtest import (
    DriveSpeedTestResult,
    NetperfResult,
    SpeedTestOptions,
    SpeedTestResult,
)
from common.utils import format_duration

logger = logging.getLogger(__name__)

ADMIN_API_PREFIX = "/minio/admin/v3"


class AdminClient:
    """Synchronous admin API client.

    Request signing is left to ``auth``; any ``httpx.Auth`` implementation
    can be plugged in.
    """

    def __init__(
        self,
        base_url: str,
        auth: Optional[httpx.Auth] = None,
        timeout: float = 30.0,
        verify: bool = True,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.Client(
            base_url=self.base_url + ADMIN_API_PREFIX,
            auth=auth,
            timeout=timeout,
            verify=verify,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "AdminClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def set_group_status(self, group: str, status: GroupStatus) -> None:
        """Enable or disable a group."""
        logger.debug(f"Setting group {group} status to {status.value}")
        response = self._client.put(
            "/set-group-status",
            params={"group": group, "status": status.value},
        )
        response.raise_for_status()

    def server_info(self) -> InfoMessage:
        """Fetch cluster server info."""
        response = self._client.get("/info")
        response.raise_for_status()
        return InfoMessage.model_validate(response.json())

    def object_speedtest(self, options: SpeedTestOptions) -> SpeedTestResult:
        """Run the object PUT/GET speedtest and return the final result.

        The server streams intermediate results while the test progresses;
        the last document is the final one.
        """
        params = {
            "size": str(options.size),
            "concurrent": str(options.concurrent),
            "duration": format_duration(options.duration),
            "autotune": "false",
        }
        if options.bucket:
            params["bucket"] = options.bucket

        documents = self._stream_documents("/speedtest", params, options.duration)
        if not documents:
            raise ValueError("Object speedtest returned no results")
        return SpeedTestResult.model_validate(documents[-1])

    def drive_speedtest(self, options: SpeedTestOptions) -> list[DriveSpeedTestResult]:
        """Run the drive speedtest; one result per server."""
        params = {
            "serial": "true" if options.serial else "false",
            "blocksize": str(options.blocksize),
            "filesize": str(options.filesize),
        }
        documents = self._stream_documents("/speedtest/drive", params, options.duration)
        return [DriveSpeedTestResult.model_validate(d) for d in documents]

    def netperf(self, duration: float) -> NetperfResult:
        """Run the network speedtest between all servers."""
        response = self._client.post(
            "/speedtest/net",
            params={"duration": format_duration(duration)},
            timeout=self._long_timeout(duration),
        )
        response.raise_for_status()
        return NetperfResult.model_validate(response.json())

    def _long_timeout(self, duration: float) -> float:
        return duration + self.timeout

    def _stream_documents(self, path: str, params: dict, duration: float) -> list[dict]:
        """POST and read a newline-delimited stream of JSON documents."""
        documents = []
        with self._client.stream(
            "POST", path, params=params, timeout=self._long_timeout(duration)
        ) as response:
            response.raise_for_status()
            for line in response.iter_lines():
                line = line.strip()
                if not line:
                    continue
                try:
                    documents.append(json.loads(line))
                except json.JSONDecodeError as e:
                    raise ValueError(f"Malformed speedtest response from {path}: {e}") from e
        logger.debug(f"Received {len(documents)} documents from {path}")
        return documents


def new_admin_client(
    alias_config: AliasConfig,
    timeout: float = 30.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> AdminClient:
    """Create an admin client for an alias.

    Raises ValueError when the alias URL is not a usable endpoint.
    """
    try:
        url = httpx.URL(alias_config.url)
    except httpx.InvalidURL as e:
        raise ValueError(f"Invalid endpoint {alias_config.url}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise ValueError(f"Invalid endpoint {alias_config.url}")

    auth = None
    if alias_config.access_key and alias_config.secret_key:
        auth = httpx.BasicAuth(alias_config.access_key, alias_config.secret_key)

    return AdminClient(
        base_url=str(url),
        auth=auth,
        timeout=timeout,
        verify=not alias_config.insecure,
        transport=transport,
    )
