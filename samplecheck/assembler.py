"""Assembles runnable programs from per-service, per-language templates."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .extractor import SampleExtractor, inject_credentials
from .logging import get_logger
from .models import Assembled, AssemblyResult, Language, TemplateMissing

TEMPLATE_SUFFIX = "j2"


@dataclass(frozen=True)
class TemplateContext:
    """Values a template renders against for one (service, language) pair."""

    service: str
    language: Language
    inject: Callable[[str], str]

    def as_dict(self) -> dict[str, object]:
        return {"service": self.service, "language": self.language, "inject": self.inject}


class TemplateAssembler:
    """Renders ``<service>.<ext>.j2`` into ``<staging_dir>/<service>.<ext>``.

    Templates call ``inject("name")`` to pull the named sample for the
    current service in the current language, with credentials substituted.
    """

    def __init__(
        self,
        templates_dir: Path,
        staging_dir: Path,
        extractor: SampleExtractor,
    ) -> None:
        self.templates_dir = templates_dir
        self.staging_dir = staging_dir
        self.extractor = extractor
        self._env = self._create_env(templates_dir)
        self._logger = get_logger("assembler")

    def template_name(self, service: str, language: Language) -> str:
        return f"{service}.{language.ext}.{TEMPLATE_SUFFIX}"

    def staging_path(self, service: str, language: Language) -> Path:
        return self.staging_dir / f"{service}.{language.ext}"

    def assemble(
        self,
        credentials: Mapping[str, str],
        service: str,
        language: Language,
    ) -> AssemblyResult:
        self.staging_dir.mkdir(parents=True, exist_ok=True)

        template_name = self.template_name(service, language)
        template_path = self.templates_dir / template_name
        if not template_path.is_file():
            self._logger.warning("Missing template for %s and %s.", service, language.name)
            self._logger.debug("Expected path: %s", template_path)
            return TemplateMissing(template_path)

        context = TemplateContext(
            service=service,
            language=language,
            inject=self._injector(credentials, service, language),
        )
        template = self._env.get_template(template_name)
        output = template.render(**context.as_dict())

        out_path = self.staging_path(service, language)
        out_path.write_text(output, encoding="utf-8")
        self._logger.debug("Assembled %s", out_path)
        return Assembled(out_path)

    def _injector(
        self,
        credentials: Mapping[str, str],
        service: str,
        language: Language,
    ) -> Callable[[str], str]:
        def inject(name: str) -> str:
            text = self.extractor.extract(service, str(name), language.syntax)
            return inject_credentials(text, credentials)

        return inject

    @staticmethod
    def _create_env(templates_dir: Path) -> Environment:
        loader = FileSystemLoader(str(templates_dir))
        return Environment(
            loader=loader,
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )


__all__ = ["TemplateAssembler", "TemplateContext"]
