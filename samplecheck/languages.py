"""Catalog of the language bindings samples are verified in."""

from __future__ import annotations

from typing import Tuple

from .models import Language

# Declaration order is the order pairs are run and reported in.
LANGUAGES: Tuple[Language, ...] = (
    Language("C#", "csharp", "cs", "gcs", "mono"),
    Language("Java", "java", "java", "javac", "java"),
    Language("JavaScript", "javascript", "js", None, "node"),
    Language("PHP", "php", "php", None, "php"),
    Language("Python", "python", "py", None, "python"),
    Language("Ruby", "ruby", "rb", None, "ruby"),
)


def find_language(key: str) -> Language:
    """Return the catalog entry whose display name or file extension is ``key``.

    Matching ignores case and a leading dot on extensions.
    """
    wanted = key.strip().lower()
    for language in LANGUAGES:
        if wanted == language.name.lower() or wanted.lstrip(".") == language.ext:
            return language
    raise KeyError(f"Unknown language: {key!r}")


__all__ = ["LANGUAGES", "find_language"]
