"""Streaming JSON reports for mutation testing results."""

from mutation_json.errors import ReportError, SessionStateError, WriteFailure
from mutation_json.listeners import MutationResultListener
from mutation_json.models import (
    ClassMutationResults,
    DetectionStatus,
    MutationDetails,
    MutationResult,
)
from mutation_json.writer import SessionState, StreamingResultWriter

__all__ = [
    "ClassMutationResults",
    "DetectionStatus",
    "MutationDetails",
    "MutationResult",
    "MutationResultListener",
    "ReportError",
    "SessionState",
    "SessionStateError",
    "StreamingResultWriter",
    "WriteFailure",
]
