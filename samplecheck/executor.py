"""Runs assembled programs and classifies the result."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Sequence, Tuple

from .logging import get_logger
from .models import Language, Outcome, OutcomeKind

# (argv) -> (exit status, combined stdout/stderr)
Runner = Callable[[Sequence[str]], Tuple[int, str]]


class Executor:
    """Runs a staged file through its language's executable.

    The language's ``build`` command is informational; the run executable is
    invoked on the source file directly. A non-zero exit is a ``failure``
    outcome, not an error.
    """

    def __init__(self, runner: Runner | None = None) -> None:
        self._runner = runner or self._default_runner
        self._logger = get_logger("executor")

    def execute(self, service: str, language: Language, path: Path) -> Outcome:
        args = [language.executable, str(path)]
        self._logger.debug("Running %s", " ".join(args))
        returncode, output = self._runner(args)
        kind = OutcomeKind.SUCCESS if returncode == 0 else OutcomeKind.FAILURE
        return Outcome(service=service, language=language, output=output, kind=kind)

    @staticmethod
    def _default_runner(args: Sequence[str]) -> Tuple[int, str]:
        completed = subprocess.run(
            list(args),
            check=False,
            text=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
        return completed.returncode, completed.stdout or ""


__all__ = ["Executor", "Runner"]
