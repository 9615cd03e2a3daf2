"""Builds the JSON report listener from settings."""

from __future__ import annotations

from mutation_json.config import ReportSettings
from mutation_json.output import DirectoryResultOutputStrategy, ResultOutputStrategy
from mutation_json.writer import StreamingResultWriter


class JsonReportFactory:
    def name(self) -> str:
        return "JSON"

    def description(self) -> str:
        return "Streaming JSON mutation report"

    def create_listener(
        self,
        settings: ReportSettings,
        strategy: ResultOutputStrategy | None = None,
    ) -> StreamingResultWriter:
        if strategy is None:
            strategy = DirectoryResultOutputStrategy(settings.report_dir)
        return StreamingResultWriter.for_strategy(
            strategy,
            full_mutation_matrix=settings.full_mutation_matrix,
            name=settings.output_name,
        )
