"""Exceptions raised while producing a mutation report."""

from __future__ import annotations


class ReportError(Exception):
    """Base class for reporting errors."""


class WriteFailure(ReportError):
    """Writing to, flushing or closing the report stream failed.

    The partially written document is invalid once this is raised.
    """


class SessionStateError(ReportError):
    """A writer operation was called out of order."""
