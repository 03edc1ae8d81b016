"""Cluster connection and registration models."""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class AliasConfig(BaseModel):
    """Connection details stored for a cluster alias."""
    url: str = Field(..., description="Cluster endpoint URL")
    access_key: Optional[str] = Field(default=None, description="Access key")
    secret_key: Optional[str] = Field(default=None, description="Secret key")
    api_key: Optional[str] = Field(
        default=None,
        description="Support portal API key saved when the cluster was registered"
    )
    insecure: bool = Field(default=False, description="Skip TLS certificate verification")


class DriveInfo(BaseModel):
    """Capacity of a single drive as reported by server info."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    path: str = Field(default="")
    total_space: int = Field(default=0, ge=0, alias="totalspace")
    used_space: int = Field(default=0, ge=0, alias="usedspace")


class ServerInfo(BaseModel):
    """One server of the cluster."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    endpoint: str = Field(default="")
    state: str = Field(default="")
    pool_number: int = Field(default=0, alias="poolNumber")
    drives: list[DriveInfo] = Field(default_factory=list)


class CountInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    count: int = Field(default=0, ge=0)


class UsageInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    size: int = Field(default=0, ge=0)


class InfoMessage(BaseModel):
    """Admin server info response (only the fields we use)."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    mode: str = Field(default="")
    deployment_id: str = Field(default="", alias="deploymentID")
    buckets: CountInfo = Field(default_factory=CountInfo)
    objects: CountInfo = Field(default_factory=CountInfo)
    usage: UsageInfo = Field(default_factory=UsageInfo)
    servers: list[ServerInfo] = Field(default_factory=list)


class ClusterInfo(BaseModel):
    """Cluster summary embedded in the registration info."""
    minio_cluster_name: str
    no_of_server_pools: int = 0
    no_of_servers: int = 0
    no_of_drives: int = 0
    no_of_buckets: int = 0
    no_of_objects: int = 0
    total_drive_space: int = 0
    used_drive_space: int = 0


class ClusterRegistrationInfo(BaseModel):
    """Cluster metadata shipped alongside performance reports."""
    deployment_id: str
    cluster_name: str
    used_capacity: int = 0
    info: ClusterInfo
