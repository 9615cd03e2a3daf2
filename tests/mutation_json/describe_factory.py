"""Tests for mutation_json.factory — building the JSON report listener."""

import io
import json
from unittest.mock import MagicMock

from mutation_json.config import ReportSettings
from mutation_json.factory import JsonReportFactory
from mutation_json.models import DetectionStatus, MutationDetails, MutationResult
from mutation_json.writer import StreamingResultWriter


def _make_result() -> MutationResult:
    return MutationResult(
        details=MutationDetails(
            filename="Foo.java",
            class_name="com.x.Foo",
            method="bar",
            method_desc="()V",
            line_number=10,
            mutator="NegateConditionalsMutator",
            first_index=0,
            block=0,
            description="negate condition",
        ),
        status=DetectionStatus.KILLED,
        number_of_tests_run=1,
        killing_tests=["T1"],
    )


def describe_json_report_factory():
    def it_is_named_json():
        assert JsonReportFactory().name() == "JSON"
        assert JsonReportFactory().description()

    def it_asks_the_strategy_for_the_configured_file():
        strategy = MagicMock()
        strategy.create_writer_for_file.return_value = io.StringIO()
        settings = ReportSettings(output_name="custom.json", full_mutation_matrix=True)
        writer = JsonReportFactory().create_listener(settings, strategy)
        strategy.create_writer_for_file.assert_called_once_with("custom.json")
        assert isinstance(writer, StreamingResultWriter)
        assert writer.full_mutation_matrix is True

    def it_defaults_to_the_report_directory(tmp_path):
        settings = ReportSettings(report_dir=str(tmp_path / "reports"))
        writer = JsonReportFactory().create_listener(settings)
        writer.run_start()
        writer.handle_mutation_result([_make_result()])
        writer.run_end()
        written = (tmp_path / "reports" / "mutations.json").read_text(encoding="utf-8")
        assert written.endswith("]\n")
        assert json.loads(written)[0]["killingTest"] == "T1"
