"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ConversionJob:
    """One planned conversion: a source file and its derived output path."""

    input_path: Path
    output_path: Path


@dataclass(frozen=True)
class ConversionOutcome:
    """Settled result of one conversion."""

    job: ConversionJob
    output_path: Path | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class BatchReport:
    """Per-file outcomes of a batch run."""

    outcomes: tuple[ConversionOutcome, ...] = ()

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> tuple[ConversionOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if outcome.ok)

    @property
    def failed(self) -> tuple[ConversionOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.ok)
