"""Run the requested performance tests one after another."""

from __future__ import annotations

import logging
import queue
from typing import Callable, Mapping, Optional

from common.models.perf import PerfTestResult, PerfTestType

logger = logging.getLogger(__name__)

# Order used when no test kind is requested
DEFAULT_TEST_ORDER = (PerfTestType.NET, PerfTestType.DRIVE, PerfTestType.OBJECT)

# A runner executes one test and puts its PerfTestResult on the handoff queue
# unless results are not being collected.
TestRunner = Callable[["queue.Queue[PerfTestResult]"], None]


def resolve_test_kinds(perf_type: str) -> list[PerfTestType]:
    """Tests to run for a requested kind; empty means all of them.

    Raises ValueError for an unknown kind.
    """
    if not perf_type:
        return list(DEFAULT_TEST_ORDER)
    try:
        return [PerfTestType(perf_type)]
    except ValueError:
        raise ValueError(f"Unknown performance test `{perf_type}`") from None


def run_perf_tests(
    runners: Mapping[PerfTestType, TestRunner],
    perf_type: str,
    json_output: bool = False,
) -> list[PerfTestResult]:
    """Run the tests sequentially, collecting one result after each.

    With ``json_output`` each runner prints its own result and nothing is
    collected.
    """
    handoff: queue.Queue[PerfTestResult] = queue.Queue(maxsize=1)
    results: list[PerfTestResult] = []

    for kind in resolve_test_kinds(perf_type):
        logger.info(f"Running {kind.value} performance test")
        try:
            runners[kind](handoff)
        except Exception as e:
            logger.error(f"{kind.value} performance test did not complete: {e}")
            if not json_output:
                results.append(_pending_result(handoff) or PerfTestResult(type=kind, error=str(e)))
            continue

        if not json_output:
            results.append(handoff.get())

    return results


def _pending_result(handoff: queue.Queue[PerfTestResult]) -> Optional[PerfTestResult]:
    """A result the runner handed off before failing, if any."""
    try:
        return handoff.get_nowait()
    except queue.Empty:
        return None
