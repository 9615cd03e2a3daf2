"""Tests for mutation_json.output — report file destinations."""

import os
from unittest.mock import patch

import pytest

from mutation_json.errors import WriteFailure
from mutation_json.output import DirectoryResultOutputStrategy


def describe_directory_result_output_strategy():
    def it_creates_missing_directories(tmp_path):
        report_dir = tmp_path / "reports" / "nested"
        strategy = DirectoryResultOutputStrategy(report_dir)
        with strategy.create_writer_for_file("mutations.json") as out:
            out.write("[]\n")
        assert (report_dir / "mutations.json").read_text(encoding="utf-8") == "[]\n"

    def it_writes_utf8_without_newline_translation(tmp_path):
        strategy = DirectoryResultOutputStrategy(str(tmp_path))
        with strategy.create_writer_for_file("out.json") as out:
            out.write("é,\n")
        assert (tmp_path / "out.json").read_bytes() == "é,\n".encode("utf-8")

    def it_joins_names_onto_report_dir(tmp_path):
        strategy = DirectoryResultOutputStrategy(tmp_path)
        assert strategy.path_for("mutations.json") == os.path.join(str(tmp_path), "mutations.json")

    def it_raises_write_failure_when_open_fails(tmp_path):
        strategy = DirectoryResultOutputStrategy(tmp_path)
        with patch("builtins.open", side_effect=PermissionError("denied")):
            with pytest.raises(WriteFailure, match="denied"):
                strategy.create_writer_for_file("mutations.json")

    def it_raises_write_failure_when_dir_is_a_file(tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        strategy = DirectoryResultOutputStrategy(blocker / "reports")
        with pytest.raises(WriteFailure):
            strategy.create_writer_for_file("mutations.json")
