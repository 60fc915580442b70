"""Tests for failure collection and reporting."""

import logging

import pytest

from browser_grid.models.result import (
    DisplayedFailure,
    FailureReport,
    RunResults,
    TestFailure,
)
from browser_grid.models.target import Target
from browser_grid.reporter import (
    MissingResultsError,
    collect_failures,
    displayed_error,
    log_failures,
    total_failures,
)
from browser_grid.state import BrowserState
from browser_grid.testing.factories import RunResultsFactory, TestFailureFactory

CHROME = Target(name="Chrome", version="70", platform="Windows 10")
FIREFOX = Target(name="Firefox", version="115", platform="Linux")


def ended(target: Target, results: RunResults) -> BrowserState:
    browser = BrowserState(target)
    browser.end(results)
    return browser


@pytest.mark.parametrize(
    ("message", "trace", "expected"),
    [
        (
            "expected 1 to equal 2",
            "AssertionError: expected 1 to equal 2\n    at Context.<anonymous>",
            "AssertionError: expected 1 to equal 2",
        ),
        ("", "Error\n    at foo", ""),
        ("boom", "", "boom"),
        ("not in trace", "Error: other\n    at bar", "Error: other\n    at bar"),
    ],
)
def test_displayed_error(message: str, trace: str, expected: str) -> None:
    """Trims the trace right after the first occurrence of the message."""
    failure = TestFailure(title="t", error_message=message, error_trace=trace)

    assert displayed_error(failure) == expected


def test_excludes_targets_without_failures() -> None:
    """Targets that passed produce no report."""
    browsers = [ended(CHROME, RunResultsFactory.build())]

    assert collect_failures(browsers) == []


def test_reports_failures_in_order() -> None:
    """A failing target's failures are reported in their original order."""
    first = TestFailure(
        title="suite first", error_message="bad", error_trace="Error: bad\n  at x"
    )
    second = TestFailure(
        title="suite second", error_message="worse", error_trace="Error: worse"
    )
    browsers = [
        ended(CHROME, RunResultsFactory.build()),
        ended(FIREFOX, RunResults(failure_count=2, failed_tests=[first, second])),
    ]

    reports = collect_failures(browsers)

    assert reports == [
        FailureReport(
            label="Firefox 115",
            platform="Linux",
            failures=[
                DisplayedFailure(title="suite first", displayed_error="Error: bad"),
                DisplayedFailure(title="suite second", displayed_error="Error: worse"),
            ],
        )
    ]


def test_reports_targets_in_display_order() -> None:
    """Reports follow the target order."""
    failures = TestFailureFactory.batch(size=1)
    browsers = [
        ended(FIREFOX, RunResults(failure_count=1, failed_tests=failures)),
        ended(CHROME, RunResults(failure_count=1, failed_tests=failures)),
    ]

    reports = collect_failures(browsers)

    assert [r.label for r in reports] == ["Firefox 115", "Chrome 70"]


def test_raises_when_target_has_no_results() -> None:
    """Collecting before every target ended is an error."""
    browsers = [ended(CHROME, RunResultsFactory.build()), BrowserState(FIREFOX)]

    with pytest.raises(MissingResultsError) as exc_info:
        collect_failures(browsers)

    assert exc_info.value.target == FIREFOX
    assert "no results for Firefox 115 on Linux" in str(exc_info.value)


def test_raises_for_failed_target_without_results() -> None:
    """A target failed by the cloud still needs results to be reported."""
    browser = BrowserState(CHROME)
    browser.fail()

    with pytest.raises(MissingResultsError):
        collect_failures([browser])


def test_total_failures() -> None:
    """Sums failure counts over targets with results."""
    browsers = [
        ended(CHROME, RunResults(failure_count=2)),
        ended(FIREFOX, RunResults(failure_count=3)),
        BrowserState(Target(name="opera", version="12", platform="Linux")),
    ]

    assert total_failures(browsers) == 5


def test_log_failures(caplog: pytest.LogCaptureFixture) -> None:
    """Logs label, platform, numbered titles and indented errors."""
    reports = [
        FailureReport(
            label="Chrome 70",
            platform="Windows 10",
            failures=[
                DisplayedFailure(title="a test", displayed_error="Error: x\nline 2"),
                DisplayedFailure(title="b test", displayed_error="Error: y"),
            ],
        )
    ]

    with caplog.at_level(logging.INFO):
        log_failures(logging.getLogger(), reports)

    assert "   Chrome 70" in caplog.messages
    assert "   Windows 10" in caplog.messages
    assert "    1) a test" in caplog.messages
    assert "    2) b test" in caplog.messages
    assert "       Error: x" in caplog.messages
    assert "       line 2" in caplog.messages


def test_log_failures_logs_nothing_without_reports(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """No reports produce no output."""
    with caplog.at_level(logging.INFO):
        log_failures(logging.getLogger(), [])

    assert caplog.records == []
