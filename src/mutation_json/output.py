"""Destinations for report files."""

from __future__ import annotations

import os
from typing import Protocol, TextIO

from mutation_json.errors import WriteFailure


class ResultOutputStrategy(Protocol):
    def create_writer_for_file(self, name: str) -> TextIO: ...


class DirectoryResultOutputStrategy:
    """Creates report files inside a single directory."""

    def __init__(self, report_dir: str | os.PathLike[str]) -> None:
        self.report_dir = os.fspath(report_dir)

    def path_for(self, name: str) -> str:
        return os.path.join(self.report_dir, name)

    def create_writer_for_file(self, name: str) -> TextIO:
        """Open ``name`` for writing, creating the directory if needed."""
        path = self.path_for(name)
        try:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
            return open(path, "w", encoding="utf-8", newline="")
        except OSError as exc:
            raise WriteFailure(f"cannot open {path}: {exc}") from exc
