"""Interface the mutation engine uses to hand over results."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from mutation_json.models import MutationResult


@runtime_checkable
class MutationResultListener(Protocol):
    """Receives results as the engine produces them.

    ``handle_mutation_result`` may be called many times per run; the
    engine decides how many results go into each batch.
    """

    def run_start(self) -> None: ...

    def handle_mutation_result(self, batch: Iterable[MutationResult]) -> None: ...

    def run_end(self) -> None: ...
