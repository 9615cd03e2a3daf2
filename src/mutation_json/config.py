"""Report settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass
class ReportSettings:
    """Where the JSON report goes and how much detail it carries."""

    report_dir: str = "mutation-reports"
    full_mutation_matrix: bool = False
    output_name: str = "mutations.json"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ReportSettings:
        """Build settings from ``MUTATION_JSON_*`` variables.

        Unset or empty variables keep the defaults.
        """
        env = os.environ if environ is None else environ
        settings = cls()
        report_dir = env.get("MUTATION_JSON_REPORT_DIR")
        if report_dir:
            settings.report_dir = report_dir
        full_matrix = env.get("MUTATION_JSON_FULL_MATRIX")
        if full_matrix:
            settings.full_mutation_matrix = full_matrix.strip().lower() in _TRUTHY
        output_name = env.get("MUTATION_JSON_OUTPUT_NAME")
        if output_name:
            settings.output_name = output_name
        return settings
