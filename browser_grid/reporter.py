"""Collection and logging of per-target failures after a run."""

import logging
from collections.abc import Sequence

from browser_grid.models.result import (
    DisplayedFailure,
    FailureReport,
    TestFailure,
)
from browser_grid.models.target import Target
from browser_grid.state import BrowserState


class MissingResultsError(Exception):
    """Raised when failures are collected before a target has results."""

    def __init__(self, target: Target) -> None:
        super().__init__(f"no results for {target}")
        self.target = target


def displayed_error(failure: TestFailure) -> str:
    """Trim the error trace to end right after the error message.

    Falls back to the whole trace when the message does not occur in it.
    """
    message = failure.error_message
    trace = failure.error_trace or message
    if (index := trace.find(message)) == -1:
        return trace
    return trace[: index + len(message)]


def collect_failures(browsers: Sequence[BrowserState]) -> Sequence[FailureReport]:
    """Build a failure report for every target whose run had failures.

    Args:
        browsers: Target states in display order

    Returns:
        One report per failing target, in display order

    Raises:
        MissingResultsError: If any target has not ended with results yet

    """
    reports: list[FailureReport] = []
    for browser in browsers:
        if (results := browser.results) is None:
            raise MissingResultsError(browser.target)
        if results.failure_count <= 0:
            continue
        reports.append(
            FailureReport(
                label=browser.target.label,
                platform=browser.target.platform,
                failures=[
                    DisplayedFailure(
                        title=test.title, displayed_error=displayed_error(test)
                    )
                    for test in results.failed_tests
                ],
            )
        )
    return reports


def total_failures(browsers: Sequence[BrowserState]) -> int:
    """Sum the failure counts of all targets that have results."""
    return sum(
        browser.results.failure_count
        for browser in browsers
        if browser.results is not None
    )


def log_failures(log: logging.Logger, reports: Sequence[FailureReport]) -> None:
    """Log failure reports with numbered test titles and indented errors."""
    for report in reports:
        log.info("")
        log.info("   %s", report.label)
        log.info("   %s", report.platform)
        for number, failure in enumerate(report.failures, start=1):
            log.info("")
            log.info("    %d) %s", number, failure.title)
            for line in failure.displayed_error.splitlines():
                log.info("       %s", line)
    if reports:
        log.info("")
