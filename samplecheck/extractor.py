"""Extraction of language-tagged code blocks from documentation samples."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Mapping, Optional

from .logging import get_logger

_DIRECTIVE_PREFIX = ".. code-block::"
_ANY_BLOCK = re.compile(r"^\.\. code-block::.*$")


class SampleExtractor:
    """Reads ``<docs_root>/<service>/samples/<name>.<ext>`` and returns one language's block.

    A line ``.. code-block:: <syntax>`` starts capturing; any other
    ``.. code-block::`` line ends the scan. Every captured line loses the
    indentation of the first non-blank captured line, and blank lines at
    either end of the capture are dropped.
    """

    def __init__(self, docs_root: Path, *, extension: str = "rst") -> None:
        self.docs_root = docs_root
        self.extension = extension.lstrip(".")
        self._logger = get_logger("extractor")

    def sample_path(self, service: str, name: str) -> Path:
        return self.docs_root / service / "samples" / f"{name}.{self.extension}"

    def extract(self, service: str, name: str, syntax: str) -> str:
        sample_path = self.sample_path(service, name)
        if not sample_path.exists():
            self._logger.warning("The %s templates reference a missing code sample.", service)
            self._logger.warning("  Sample name: %s path: %s", name, sample_path)
            return ""

        opener = re.compile(rf"^{re.escape(_DIRECTIVE_PREFIX)} {re.escape(syntax)}$")
        relevant: List[str] = []
        in_section = False
        indent: Optional[int] = None

        try:
            lines = sample_path.read_text(encoding="utf-8").splitlines(keepends=True)
        except UnicodeDecodeError as exc:
            self._logger.warning("The %s sample for %s is not valid UTF-8: %s", service, name, exc)
            return ""
        for line in lines:
            bare = line.rstrip("\r\n")
            if _ANY_BLOCK.match(bare):
                if in_section:
                    # Later blocks, same tag included, are not merged in.
                    break
                in_section = bool(opener.match(bare))
            elif in_section:
                if indent is None and bare.strip():
                    indent = len(bare) - len(bare.lstrip())
                relevant.append(_dedent(line, indent))

        # reST needs a blank line after the directive; it is not part of the code.
        while relevant and not relevant[0].strip():
            relevant.pop(0)
        while relevant and not relevant[-1].strip():
            relevant.pop()

        if not relevant:
            self._logger.warning(
                "The %s sample for %s is missing a code block for %s.", service, name, syntax
            )
            return ""

        return "".join(relevant)


def _dedent(line: str, indent: Optional[int]) -> str:
    if not indent:
        return line
    leading = len(line) - len(line.lstrip(" \t"))
    if leading < indent:
        return line
    return line[indent:]


def inject_credentials(text: str, credentials: Mapping[str, str]) -> str:
    """Replace every literal ``{key}`` in ``text`` with its credential value."""
    for key, value in credentials.items():
        text = text.replace(f"{{{key}}}", value)
    return text


__all__ = ["SampleExtractor", "inject_credentials"]
