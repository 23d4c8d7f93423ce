"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ConversionOutcome:
    """Result of one conversion attempt."""

    input_path: str
    output_path: str
    succeeded: bool
    message: str


@dataclass(frozen=True)
class BatchReport:
    """Structured outcome of a whole batch run."""

    output_format: str
    files: tuple[str, ...]
    outcomes: tuple[ConversionOutcome, ...] = field(default_factory=tuple)

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)

    @property
    def failed(self) -> int:
        return len(self.outcomes) - self.succeeded
