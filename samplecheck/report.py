"""Progress and summary output for harness runs."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, TextIO

from .models import Outcome, OutcomeKind

_MARKERS: Dict[OutcomeKind, str] = {
    OutcomeKind.SUCCESS: ".",
    OutcomeKind.FAILURE: "x",
    OutcomeKind.MISSING: "?",
}

_PROGRESS_LABELS: Dict[OutcomeKind, str] = {
    OutcomeKind.SUCCESS: "succeeded",
    OutcomeKind.FAILURE: "failed",
    OutcomeKind.MISSING: "missing",
}


class ReportError(RuntimeError):
    """Raised when an outcome carries a kind the report does not know."""


@dataclass(frozen=True)
class RunSummary:
    """Aggregate counts across a run."""

    success: int
    failure: int
    missing: int

    @property
    def total(self) -> int:
        return self.success + self.failure + self.missing


def summarize(outcomes: Iterable[Outcome]) -> RunSummary:
    counts = {kind: 0 for kind in OutcomeKind}
    for outcome in outcomes:
        counts[_checked_kind(outcome)] += 1
    return RunSummary(
        success=counts[OutcomeKind.SUCCESS],
        failure=counts[OutcomeKind.FAILURE],
        missing=counts[OutcomeKind.MISSING],
    )


class ConsoleReporter:
    """Writes live progress lines and the final grid to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None, *, label_width: int = 15) -> None:
        self._stream = stream
        self.label_width = label_width

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def started(self, service: str, language_name: str) -> None:
        self._write(f">> {service} in {language_name} ...\n")

    def finished(self, outcome: Outcome) -> None:
        kind = _checked_kind(outcome)
        if kind is OutcomeKind.FAILURE and outcome.output:
            output = outcome.output
            self._write(output if output.endswith("\n") else output + "\n")
        self._write(f"<< {_PROGRESS_LABELS[kind]}\n")
        self.stream.flush()

    def summary(self, outcomes: Sequence[Outcome]) -> RunSummary:
        """Print one row per service with a marker per language, then the totals."""
        result = summarize(outcomes)
        last_service: Optional[str] = None
        row: List[str] = []
        for outcome in outcomes:
            if outcome.service != last_service:
                if row:
                    self._write("".join(row).rstrip() + "\n")
                row = [f"{outcome.service.rjust(self.label_width)}: "]
                last_service = outcome.service
            row.append(f"{outcome.language.name} {_MARKERS[_checked_kind(outcome)]} ")
        if row:
            self._write("".join(row).rstrip() + "\n")

        self._write("\n")
        self._write(
            f"Total: {result.success} succeeded / {result.failure} failed / "
            f"{result.missing} missing\n"
        )
        self.stream.flush()
        return result

    def _write(self, text: str) -> None:
        self.stream.write(text)


def write_json_report(path: Path, outcomes: Sequence[Outcome]) -> None:
    result = summarize(outcomes)
    data = {
        "outcomes": [
            {
                "service": outcome.service,
                "language": outcome.language.name,
                "kind": _checked_kind(outcome).value,
                "output": outcome.output,
            }
            for outcome in outcomes
        ],
        "totals": {
            "success": result.success,
            "failure": result.failure,
            "missing": result.missing,
        },
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def _checked_kind(outcome: Outcome) -> OutcomeKind:
    try:
        return OutcomeKind(outcome.kind)
    except ValueError as exc:
        raise ReportError(f"Unexpected outcome kind: {outcome.kind!r}") from exc


__all__ = [
    "ConsoleReporter",
    "ReportError",
    "RunSummary",
    "summarize",
    "write_json_report",
]
