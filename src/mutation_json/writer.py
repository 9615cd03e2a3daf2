"""Streaming JSON writer for mutation testing results.

The report is a single JSON array written one record at a time as the
engine hands over batches::

    [{...},
    {...},
    {...}]

One record per line keeps ``wc -l`` and ``grep`` useful on large reports
while the whole file stays a valid JSON document.
"""

from __future__ import annotations

import enum
import json
import logging
from collections.abc import Iterable
from typing import Any, Callable, TextIO

from mutation_json.errors import SessionStateError, WriteFailure
from mutation_json.models import ClassMutationResults, MutationResult
from mutation_json.output import ResultOutputStrategy

logger = logging.getLogger(__name__)

RECORD_SEPARATOR = ",\n"


class SessionState(enum.Enum):
    IDLE = "idle"
    OPEN = "open"
    CLOSED = "closed"
    FAILED = "failed"


def _literal(value: Any) -> str:
    """Encode a scalar or list as compact JSON."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _field(name: str, value: Any) -> str:
    return f'"{name}":{_literal(value)}'


def _text(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _text_field(name: str, value: Any) -> str:
    return _field(name, _text(name, value))


class StreamingResultWriter:
    """Writes mutation results to ``out`` as one JSON array.

    Call :meth:`begin_session` once, :meth:`submit_batch` any number of
    times, then :meth:`end_session` once. ``out`` belongs to the writer
    from construction on and is closed by :meth:`end_session`.

    With ``full_mutation_matrix`` each record lists every killing and
    succeeding test; without it only the single credited killing test is
    written.
    """

    def __init__(self, out: TextIO, full_mutation_matrix: bool = False) -> None:
        self._out = out
        self._full_mutation_matrix = full_mutation_matrix
        self._state = SessionState.IDLE
        self._records_written = 0
        self._test_fields: Callable[[MutationResult], list[str]] = (
            _matrix_test_fields if full_mutation_matrix else _compact_test_fields
        )

    @classmethod
    def for_strategy(
        cls,
        strategy: ResultOutputStrategy,
        full_mutation_matrix: bool = False,
        name: str = "mutations.json",
    ) -> StreamingResultWriter:
        return cls(strategy.create_writer_for_file(name), full_mutation_matrix)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def records_written(self) -> int:
        return self._records_written

    @property
    def full_mutation_matrix(self) -> bool:
        return self._full_mutation_matrix

    def begin_session(self) -> None:
        self._require(SessionState.IDLE, "begin_session")
        self._write("[")
        self._state = SessionState.OPEN
        logger.debug("JSON report session started (full matrix: %s)", self._full_mutation_matrix)

    def submit_batch(self, batch: Iterable[MutationResult]) -> None:
        """Append every result in ``batch``, in order.

        May be called repeatedly with batches of any size; the engine
        decides how results are grouped.
        """
        self._require(SessionState.OPEN, "submit_batch")
        if isinstance(batch, ClassMutationResults) and batch.mutated_class:
            logger.debug("Writing %d results for %s", len(batch), batch.mutated_class)
        for result in batch:
            record = self.format_record(result)
            if self._records_written:
                record = RECORD_SEPARATOR + record
            self._write(record)
            self._records_written += 1

    def end_session(self) -> None:
        self._require(SessionState.OPEN, "end_session")
        self._write("]\n")
        try:
            self._out.close()
        except OSError as exc:
            self._fail(exc)
        self._state = SessionState.CLOSED
        logger.debug("JSON report session closed after %d records", self._records_written)

    # MutationResultListener interface
    run_start = begin_session
    handle_mutation_result = submit_batch
    run_end = end_session

    def format_record(self, result: MutationResult) -> str:
        """Serialize one result as a single-line JSON object."""
        details = result.details
        fields = [
            _field("detected", bool(result.detected)),
            _field("status", str(result.status)),
            _field("numberOfTestsRun", int(result.number_of_tests_run)),
            _text_field("sourcefile", details.filename),
            _text_field("mutatedClass", details.class_name),
            _text_field("mutatedMethod", details.method),
            _text_field("methodDescription", details.method_desc),
            _field("lineNumber", int(details.line_number)),
            _text_field("mutator", details.mutator),
            _field("index", int(details.first_index)),
            _field("block", int(details.block)),
        ]
        fields.extend(self._test_fields(result))
        fields.append(_text_field("description", details.description))
        return "{" + ",".join(fields) + "}"

    def _require(self, expected: SessionState, operation: str) -> None:
        if self._state is not expected:
            raise SessionStateError(
                f"{operation}() called in state {self._state.value!r}, "
                f"expected {expected.value!r}"
            )

    def _write(self, text: str) -> None:
        try:
            self._out.write(text)
        except (OSError, ValueError) as exc:
            # ValueError: write to a stream that was already closed
            self._fail(exc)

    def _fail(self, exc: Exception) -> None:
        self._state = SessionState.FAILED
        logger.error("Failed to write JSON report: %s", exc)
        raise WriteFailure(str(exc)) from exc


def _compact_test_fields(result: MutationResult) -> list[str]:
    killing_test = result.killing_test
    if killing_test is None:
        return []
    return [_text_field("killingTest", killing_test)]


def _matrix_test_fields(result: MutationResult) -> list[str]:
    fields = []
    for name, tests in (
        ("killingTests", result.killing_tests),
        ("succeedingTests", result.succeeding_tests),
    ):
        if tests:
            fields.append(_field(name, [_text(name, t) for t in tests]))
    return fields
