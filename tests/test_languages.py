"""Tests for the language catalog."""

from __future__ import annotations

import pytest

from samplecheck.languages import LANGUAGES, find_language


def test_catalog_order() -> None:
    assert [language.ext for language in LANGUAGES] == ["cs", "java", "js", "php", "py", "rb"]


@pytest.mark.parametrize("key", ["Python", "python", "py", ".py", " PY "])
def test_find_language_by_name_or_extension(key: str) -> None:
    language = find_language(key)

    assert language.name == "Python"
    assert language.executable == "python"


def test_find_language_matches_csharp_display_name() -> None:
    assert find_language("C#").ext == "cs"


def test_find_language_unknown_raises() -> None:
    with pytest.raises(KeyError):
        find_language("cobol")
