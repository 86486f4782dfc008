"""Tests for template assembly."""

from __future__ import annotations

import logging

import pytest
from jinja2 import UndefinedError

from samplecheck.assembler import TemplateAssembler
from samplecheck.extractor import SampleExtractor
from samplecheck.languages import find_language
from samplecheck.models import Assembled, Language, TemplateMissing

PYTHON = find_language("Python")
RUBY = find_language("rb")


def _assembler(harness) -> TemplateAssembler:
    return TemplateAssembler(
        harness.root / "templates",
        harness.root / "assembled",
        SampleExtractor(harness.root / "docs"),
    )


def test_assemble_renders_samples_with_credentials(harness) -> None:
    harness.sample(
        "queues",
        "connect",
        """
        .. code-block:: python

            client = Client("{api_key}")

        .. code-block:: ruby

            client = Client.new("{api_key}")
        """,
    )
    harness.sample(
        "queues",
        "push",
        """
        .. code-block:: python

            client.push("{queue}")
        """,
    )
    harness.template(
        "queues",
        "py",
        """
        # {{ service }} in {{ language.name }}
        {{ inject("connect") }}{{ inject("push") }}print("done")
        """,
    )

    result = _assembler(harness).assemble({"api_key": "ABC123", "queue": "jobs"}, "queues", PYTHON)

    assert isinstance(result, Assembled)
    assert result.path == harness.root / "assembled" / "queues.py"
    assert result.path.read_text(encoding="utf-8") == (
        "# queues in Python\n"
        'client = Client("ABC123")\n'
        'client.push("jobs")\n'
        'print("done")\n'
    )


def test_assemble_signals_missing_template(harness) -> None:
    harness.template("queues", "py", "print(1)\n")

    result = _assembler(harness).assemble({}, "queues", RUBY)

    assert isinstance(result, TemplateMissing)
    assert result.path == harness.root / "templates" / "queues.rb.j2"
    assert not (harness.root / "assembled" / "queues.rb").exists()
    assert (harness.root / "assembled").is_dir()


def test_assemble_overwrites_previous_staging_file(harness) -> None:
    template = harness.template("queues", "py", "print(1)\n")
    assembler = _assembler(harness)
    assembler.assemble({}, "queues", PYTHON)

    template.write_text("print(2)\n", encoding="utf-8")
    result = assembler.assemble({}, "queues", PYTHON)

    assert isinstance(result, Assembled)
    assert result.path.read_text(encoding="utf-8") == "print(2)\n"


def test_assemble_missing_sample_renders_empty(harness) -> None:
    (harness.root / "docs" / "queues" / "samples").mkdir(parents=True)
    harness.template("queues", "py", 'before\n{{ inject("absent") }}after\n')

    result = _assembler(harness).assemble({}, "queues", PYTHON)

    assert isinstance(result, Assembled)
    assert result.path.read_text(encoding="utf-8") == "before\nafter\n"


def test_inject_is_bound_to_the_current_pair(harness) -> None:
    harness.sample(
        "alpha",
        "hello",
        """
        .. code-block:: python
            print("alpha")
        .. code-block:: ruby
            puts "alpha"
        """,
    )
    harness.sample(
        "beta",
        "hello",
        """
        .. code-block:: python
            print("beta")
        """,
    )
    harness.template("alpha", "rb", '{{ inject("hello") }}')
    harness.template("beta", "py", '{{ inject("hello") }}')
    assembler = _assembler(harness)

    alpha = assembler.assemble({}, "alpha", RUBY)
    beta = assembler.assemble({}, "beta", PYTHON)

    assert isinstance(alpha, Assembled) and isinstance(beta, Assembled)
    assert alpha.path.read_text(encoding="utf-8") == 'puts "alpha"\n'
    assert beta.path.read_text(encoding="utf-8") == 'print("beta")\n'


def test_template_errors_propagate(harness) -> None:
    harness.template("queues", "py", "{{ no_such_name.attr }}\n")

    with pytest.raises(UndefinedError):
        _assembler(harness).assemble({}, "queues", PYTHON)


def test_staging_path_uses_language_extension(harness) -> None:
    language = Language("Go", "go", "go", "go build", "go")

    assert _assembler(harness).staging_path("queues", language) == (
        harness.root / "assembled" / "queues.go"
    )


def test_missing_template_is_logged_as_warning(harness, caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="samplecheck"):
        _assembler(harness).assemble({}, "queues", RUBY)

    levels = {
        record.levelname
        for record in caplog.records
        if "Missing template" in record.getMessage()
    }
    assert levels == {"WARNING"}
