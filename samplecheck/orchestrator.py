"""Drives assembly and execution across every service and language."""

from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from .assembler import TemplateAssembler
from .config import HarnessConfig
from .credentials import CredentialStore
from .executor import Executor
from .extractor import SampleExtractor
from .languages import LANGUAGES
from .logging import get_logger
from .models import Language, Outcome, OutcomeKind, TemplateMissing
from .report import ConsoleReporter


def discover_services(docs_root: Path) -> List[str]:
    """Return documented service names: directories under ``docs_root`` not starting with ``_``.

    Names are sorted so repeated runs visit services in the same order.
    """
    if not docs_root.is_dir():
        return []
    return sorted(
        entry.name
        for entry in docs_root.iterdir()
        if entry.is_dir() and not entry.name.startswith(("_", "."))
    )


class Orchestrator:
    """Assembles, runs and records one outcome per (service, language) pair."""

    def __init__(
        self,
        config: HarnessConfig,
        *,
        languages: Optional[Sequence[Language]] = None,
        credential_store: Optional[CredentialStore] = None,
        assembler: Optional[TemplateAssembler] = None,
        executor: Optional[Executor] = None,
        reporter: Optional[ConsoleReporter] = None,
    ) -> None:
        self.config = config
        self.languages = tuple(languages) if languages is not None else LANGUAGES
        self.credential_store = credential_store or CredentialStore(config.credentials_file)
        self.assembler = assembler or TemplateAssembler(
            config.templates_dir,
            config.staging_dir,
            SampleExtractor(config.docs_root, extension=config.sample_extension),
        )
        self.executor = executor or Executor()
        self.reporter = reporter or ConsoleReporter()
        self._logger = get_logger("orchestrator")

    def run(self) -> List[Outcome]:
        credentials = self.credential_store.load()
        services = discover_services(self.config.docs_root)
        self._logger.info(
            "Checking %d services in %d languages", len(services), len(self.languages)
        )

        outcomes: List[Outcome] = []
        for service in services:
            for language in self.languages:
                self.reporter.started(service, language.name)
                outcome = self.run_pair(credentials, service, language)
                outcomes.append(outcome)
                self.reporter.finished(outcome)
        return outcomes

    def run_pair(
        self,
        credentials: Mapping[str, str],
        service: str,
        language: Language,
    ) -> Outcome:
        result = self.assembler.assemble(credentials, service, language)
        if isinstance(result, TemplateMissing):
            return Outcome(service=service, language=language, output="", kind=OutcomeKind.MISSING)
        return self.executor.execute(service, language, result.path)


__all__ = ["Orchestrator", "discover_services"]
