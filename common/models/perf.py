"""Performance test results and the aggregated report written to archives."""

from __future__ import annotations

import json
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from common.models.speedtest import (
    DrivePerf,
    DriveSpeedTestResult,
    NetperfResult,
    SpeedTestResult,
    Timings,
)


class PerfTestType(str, Enum):
    """Kind of performance test."""
    DRIVE = "drive"
    OBJECT = "object"
    NET = "net"


class PerfTestResult(BaseModel):
    """Outcome of one benchmark run, tagged by its kind.

    Exactly one payload matching ``type`` is set, unless the run failed as a
    whole, in which case ``error`` describes why and no payload is present.
    """
    type: PerfTestType
    drive_result: Optional[list[DriveSpeedTestResult]] = None
    object_result: Optional[SpeedTestResult] = None
    net_result: Optional[NetperfResult] = None
    error: Optional[str] = None


class _ReportModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class DriveTestResult(_ReportModel):
    """Drive test result of one endpoint."""
    endpoint: str
    perf: list[DrivePerf] = Field(default_factory=list)
    error: Optional[str] = None


class DriveTestResults(_ReportModel):
    """Drive test results across all endpoints."""
    results: list[DriveTestResult] = Field(default_factory=list, alias="servers")


class ObjStats(_ReportModel):
    """Object throughput of one server."""
    throughput: int = Field(default=0, ge=0)
    objects_per_sec: int = Field(default=0, ge=0, alias="objectsPerSec")


class ObjStatServer(_ReportModel):
    """Server level object stats."""
    endpoint: str
    perf: ObjStats = Field(default_factory=ObjStats)
    error: Optional[str] = None


class ObjPUTStats(_ReportModel):
    """PUT stats of all the servers."""
    throughput: int = Field(default=0, ge=0)
    objects_per_sec: int = Field(default=0, ge=0, alias="objectsPerSec")
    response: Timings = Field(default_factory=Timings, alias="responseTime")


class ObjGETStats(ObjPUTStats):
    """GET stats of all the servers, with time to first byte."""
    ttfb: Timings = Field(default_factory=Timings)


class ObjPUTPerfResults(_ReportModel):
    perf: ObjPUTStats = Field(default_factory=ObjPUTStats)
    servers: list[ObjStatServer] = Field(default_factory=list)


class ObjGETPerfResults(_ReportModel):
    perf: ObjGETStats = Field(default_factory=ObjGETStats)
    servers: list[ObjStatServer] = Field(default_factory=list)


class ObjTestResults(_ReportModel):
    """Object PUT/GET test results."""
    object_size: int = Field(default=0, ge=0, alias="objectSize")
    threads: int = Field(default=0, ge=0)
    put_results: ObjPUTPerfResults = Field(default_factory=ObjPUTPerfResults, alias="PUT")
    get_results: ObjGETPerfResults = Field(default_factory=ObjGETPerfResults, alias="GET")


class NetStats(_ReportModel):
    tx: int = Field(default=0, ge=0)
    rx: int = Field(default=0, ge=0)


class NetTestResult(_ReportModel):
    """Network test result of one endpoint."""
    endpoint: str
    perf: NetStats = Field(default_factory=NetStats)
    error: Optional[str] = None


class NetTestResults(_ReportModel):
    """Network test results across all endpoints."""
    results: list[NetTestResult] = Field(default_factory=list, alias="servers")


class PerfTestOutput(_ReportModel):
    """Final output of the performance test(s).

    A field is set only for the kinds that were run; ``error`` collects
    failures of whole test runs.
    """
    object_results: Optional[ObjTestResults] = Field(default=None, alias="object")
    net_results: Optional[NetTestResults] = Field(default=None, alias="network")
    drive_results: Optional[DriveTestResults] = Field(default=None, alias="drive")
    error: Optional[str] = None

    def to_json(self) -> dict:
        """Convert to a JSON-serializable dict using the wire field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, data: dict) -> "PerfTestOutput":
        """Create a report from its JSON dict."""
        return cls.model_validate(data)

    def to_json_string(self, indent: int = 4) -> str:
        return json.dumps(self.to_json(), indent=indent)
