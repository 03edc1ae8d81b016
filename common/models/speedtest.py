"""Raw speedtest result shapes returned by the admin API."""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Timings(BaseModel):
    """Latency distribution in nanoseconds."""
    model_config = ConfigDict(populate_by_name=True)

    avg: int = Field(default=0, ge=0, description="Average")
    p50: int = Field(default=0, ge=0, description="50th percentile")
    p75: int = Field(default=0, ge=0, description="75th percentile")
    p95: int = Field(default=0, ge=0, description="95th percentile")
    p99: int = Field(default=0, ge=0, description="99th percentile")
    p999: int = Field(default=0, ge=0, description="99.9th percentile")
    l5p: int = Field(default=0, ge=0, description="Average of the slowest 5%")
    s5p: int = Field(default=0, ge=0, description="Average of the fastest 5%")
    max: int = Field(default=0, ge=0, description="Maximum")
    min: int = Field(default=0, ge=0, description="Minimum")


class SpeedTestStatServer(BaseModel):
    """Object speedtest stats reported by a single server."""
    model_config = ConfigDict(populate_by_name=True)

    endpoint: str = Field(default="")
    throughput_per_sec: int = Field(default=0, ge=0, alias="throughputPerSec")
    objects_per_sec: int = Field(default=0, ge=0, alias="objectsPerSec")
    err: Optional[str] = Field(default=None)


class SpeedTestStats(BaseModel):
    """Cluster-wide stats for one direction (PUT or GET) of the object test."""
    model_config = ConfigDict(populate_by_name=True)

    throughput_per_sec: int = Field(default=0, ge=0, alias="throughputPerSec")
    objects_per_sec: int = Field(default=0, ge=0, alias="objectsPerSec")
    response: Timings = Field(default_factory=Timings, alias="responseTime")
    ttfb: Timings = Field(default_factory=Timings)
    servers: list[SpeedTestStatServer] = Field(default_factory=list)


class SpeedTestResult(BaseModel):
    """Result of the object PUT/GET speedtest."""
    model_config = ConfigDict(populate_by_name=True)

    version: str = Field(default="")
    servers: int = Field(default=0, ge=0)
    disks: int = Field(default=0, ge=0)
    size: int = Field(default=0, ge=0, description="Object size in bytes")
    concurrent: int = Field(default=0, ge=0, description="Concurrent requests per server")
    put_stats: SpeedTestStats = Field(default_factory=SpeedTestStats, alias="PUTStats")
    get_stats: SpeedTestStats = Field(default_factory=SpeedTestStats, alias="GETStats")


class DrivePerf(BaseModel):
    """Read/write throughput of a single drive."""
    model_config = ConfigDict(populate_by_name=True)

    path: str = Field(default="")
    read_throughput: int = Field(default=0, ge=0, alias="readThroughput")
    write_throughput: int = Field(default=0, ge=0, alias="writeThroughput")
    error: Optional[str] = Field(default=None)


class DriveSpeedTestResult(BaseModel):
    """Drive speedtest result of one server."""
    model_config = ConfigDict(populate_by_name=True)

    version: str = Field(default="")
    endpoint: str = Field(default="")
    drive_perf: list[DrivePerf] = Field(default_factory=list, alias="drivePerf")
    error: Optional[str] = Field(default=None)


class NetperfNodeResult(BaseModel):
    """Network throughput measured on one node."""
    model_config = ConfigDict(populate_by_name=True)

    endpoint: str = Field(default="")
    tx: int = Field(default=0, ge=0, description="Transmitted bytes per second")
    rx: int = Field(default=0, ge=0, description="Received bytes per second")
    error: Optional[str] = Field(default=None)


class NetperfResult(BaseModel):
    """Result of the network speedtest."""
    model_config = ConfigDict(populate_by_name=True)

    node_results: list[NetperfNodeResult] = Field(default_factory=list, alias="nodeResults")


class SpeedTestOptions(BaseModel):
    """Benchmark knobs collected from the command line."""
    duration: float = Field(default=10, gt=0, description="Duration in seconds")
    size: int = Field(default=64 * 1024 ** 2, gt=0, description="Object size in bytes")
    concurrent: int = Field(default=32, gt=0, description="Concurrent requests per server")
    bucket: Optional[str] = Field(default=None, description="Pre-created bucket to use")
    filesize: int = Field(default=1024 ** 3, gt=0, description="Bytes read/written per drive")
    blocksize: int = Field(default=4 * 1024 ** 2, gt=0, description="Drive read/write block size")
    serial: bool = Field(default=False, description="Test drives one by one")
    verbose: bool = Field(default=False, description="Display per-server stats")
