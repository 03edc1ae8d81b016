"""Client for the SUBNET support portal."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx

from common.models.cluster import (
    AliasConfig,
    ClusterInfo,
    ClusterRegistrationInfo,
    InfoMessage,
)

logger = logging.getLogger(__name__)

DEFAULT_PORTAL_URL = "https://subnet.min.io"
API_KEY_HEADER = "x-subnet-api-key"
DEPLOYMENT_ID_HEADER = "x-minio-deployment-id"


class PortalClient:
    """Uploads diagnostics to the support portal."""

    def __init__(
        self,
        base_url: str = DEFAULT_PORTAL_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout, transport=self._transport)

    def upload_url(self, upload_type: str, filename: str) -> str:
        """URL receiving uploads of the given type (e.g. 'perf')."""
        url = httpx.URL(f"{self.base_url}/api/{upload_type}/upload")
        return str(url.copy_merge_params({"filename": filename}))

    def prepare_upload(
        self,
        upload_url: str,
        api_key: str,
        deployment_id: Optional[str] = None,
    ) -> tuple[str, dict[str, str]]:
        """Request URL and authentication headers for an upload."""
        if not api_key:
            raise ValueError("An API key is required to upload to SUBNET")
        headers = {API_KEY_HEADER: api_key}
        if deployment_id:
            headers[DEPLOYMENT_ID_HEADER] = deployment_id
        return upload_url, headers

    def upload_file(
        self,
        alias: str,
        file_path: str | Path,
        req_url: str,
        headers: dict[str, str],
    ) -> str:
        """Upload a file as multipart form data; returns the response body.

        Raises httpx.HTTPError on transport failures and non-2xx responses.
        """
        file_path = Path(file_path)
        logger.info(f"Uploading {file_path.name} for {alias} to {req_url}")
        with self._client() as client, open(file_path, "rb") as f:
            files = {"file": (file_path.name, f, "application/zip")}
            response = client.post(req_url, files=files, headers=headers)
            response.raise_for_status()
            return response.text

    def check_connectivity(self) -> None:
        """Raise ConnectionError if the portal cannot be reached."""
        try:
            with self._client() as client:
                client.head(self.base_url)
        except httpx.HTTPError as e:
            raise ConnectionError(f"Unable to reach SUBNET at {self.base_url}: {e}") from e


def resolve_api_key(
    alias: str,
    alias_config: AliasConfig,
    api_key_flag: Optional[str],
    airgapped: bool,
) -> str:
    """API key used to upload reports for ``alias``.

    An explicit flag wins; airgapped runs need no key. Otherwise the key
    saved at registration is used, and an unregistered cluster is an error.
    """
    if api_key_flag:
        return api_key_flag
    if airgapped:
        return ""
    if alias_config.api_key:
        return alias_config.api_key
    raise ValueError(
        f"Cluster `{alias}` is not registered with SUBNET. "
        "Register it, pass --api-key, or use --airgap to save the report locally."
    )


def get_cluster_reg_info(info: InfoMessage, alias: str) -> ClusterRegistrationInfo:
    """Build the registration metadata shipped with reports."""
    pools = {server.pool_number for server in info.servers}
    drives = [drive for server in info.servers for drive in server.drives]

    return ClusterRegistrationInfo(
        deployment_id=info.deployment_id,
        cluster_name=alias,
        used_capacity=info.usage.size,
        info=ClusterInfo(
            minio_cluster_name=alias,
            no_of_server_pools=len(pools),
            no_of_servers=len(info.servers),
            no_of_drives=len(drives),
            no_of_buckets=info.buckets.count,
            no_of_objects=info.objects.count,
            total_drive_space=sum(d.total_space for d in drives),
            used_drive_space=sum(d.used_space for d in drives),
        ),
    )
