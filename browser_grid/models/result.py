"""Models for test run results reported per target."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Annotated

from pydantic import Field


@dataclass(frozen=True, kw_only=True)
class TestFailure:
    """A single failed test as reported by the test runner.

    The trace usually embeds the message as a prefix of the full stack.
    """

    __test__ = False

    title: str
    error_message: str = ""
    error_trace: str = ""


@dataclass(frozen=True, kw_only=True)
class RunResults:
    """Results attached to a target when its run ends."""

    failure_count: Annotated[int, Field(ge=0)] = 0
    failed_tests: Sequence[TestFailure] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.failure_count < 0:
            raise ValueError(
                f"failure_count must not be negative, got {self.failure_count}"
            )
        if self.failure_count < len(self.failed_tests):
            raise ValueError(
                f"failure_count {self.failure_count} is less than the "
                f"{len(self.failed_tests)} failed test(s) reported"
            )


@dataclass(frozen=True, kw_only=True)
class DisplayedFailure:
    """A failed test with the error text trimmed for display."""

    title: str
    displayed_error: str


@dataclass(frozen=True, kw_only=True)
class FailureReport:
    """Failures of one target, in the order they were reported."""

    label: str
    platform: str
    failures: Sequence[DisplayedFailure]
