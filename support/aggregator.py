"""Fold per-test results into a single performance report."""

from __future__ import annotations

import logging
from typing import Iterable

from common.models.perf import PerfTestOutput, PerfTestResult, PerfTestType
from support.converters import (
    convert_drive_test_results,
    convert_net_test_results,
    convert_obj_test_results,
)

logger = logging.getLogger(__name__)


def update_perf_output(result: PerfTestResult, output: PerfTestOutput) -> None:
    """Store ``result`` in the field of ``output`` matching its kind.

    A later result of the same kind replaces an earlier one.
    """
    if result.type == PerfTestType.DRIVE:
        output.drive_results = convert_drive_test_results(result.drive_result)
    elif result.type == PerfTestType.OBJECT:
        output.object_results = convert_obj_test_results(result.object_result)
    elif result.type == PerfTestType.NET:
        output.net_results = convert_net_test_results(result.net_result)
    else:
        raise ValueError(f"Invalid test type {result.type!r}")

    if result.error:
        message = f"{result.type.value}: {result.error}"
        output.error = f"{output.error}; {message}" if output.error else message
        logger.debug(f"Recorded failed {result.type.value} test: {result.error}")


def convert_perf_result(result: PerfTestResult) -> PerfTestOutput:
    """Report holding a single test result."""
    output = PerfTestOutput()
    update_perf_output(result, output)
    return output


def convert_perf_results(results: Iterable[PerfTestResult]) -> PerfTestOutput:
    """Report holding every result, keyed by test kind."""
    output = PerfTestOutput()
    for result in results:
        update_perf_output(result, output)
    return output
