"""Data models for mutation testing results."""

from __future__ import annotations

import enum
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field


class DetectionStatus(enum.Enum):
    """Outcome of running the test suite against one mutation."""

    KILLED = "KILLED"
    SURVIVED = "SURVIVED"
    TIMED_OUT = "TIMED_OUT"
    NON_VIABLE = "NON_VIABLE"
    MEMORY_ERROR = "MEMORY_ERROR"
    NOT_STARTED = "NOT_STARTED"
    STARTED = "STARTED"
    RUN_ERROR = "RUN_ERROR"
    NO_COVERAGE = "NO_COVERAGE"

    @property
    def is_detected(self) -> bool:
        return self in _DETECTED

    def __str__(self) -> str:
        return self.value


_DETECTED = frozenset({
    DetectionStatus.KILLED,
    DetectionStatus.TIMED_OUT,
    DetectionStatus.NON_VIABLE,
    DetectionStatus.MEMORY_ERROR,
    DetectionStatus.RUN_ERROR,
})


@dataclass(frozen=True)
class MutationDetails:
    """Where and how the code was mutated."""

    filename: str
    class_name: str  # fully qualified, e.g. "com.x.Foo"
    method: str
    method_desc: str  # "()V", "(I)Ljava/lang/String;"
    line_number: int
    mutator: str
    first_index: int
    block: int
    description: str


@dataclass(frozen=True)
class MutationResult:
    """Result of testing a single mutation."""

    details: MutationDetails
    status: DetectionStatus
    number_of_tests_run: int = 0
    killing_tests: list[str] = field(default_factory=list)  # all failing tests
    succeeding_tests: list[str] = field(default_factory=list)  # all passing tests
    explicit_killing_test: str | None = None

    @property
    def detected(self) -> bool:
        return self.status.is_detected

    @property
    def killing_test(self) -> str | None:
        """The test credited with the kill, if any."""
        if self.explicit_killing_test is not None:
            return self.explicit_killing_test
        if self.killing_tests:
            return self.killing_tests[0]
        return None


@dataclass
class ClassMutationResults:
    """A batch of results handed over by the engine, usually one class."""

    mutations: Sequence[MutationResult] = field(default_factory=list)

    @property
    def mutated_class(self) -> str | None:
        if not self.mutations:
            return None
        return self.mutations[0].details.class_name

    def __iter__(self) -> Iterator[MutationResult]:
        return iter(self.mutations)

    def __len__(self) -> int:
        return len(self.mutations)
