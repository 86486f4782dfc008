"""Core data models shared across samplecheck components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union


@dataclass(frozen=True)
class Language:
    """A supported language binding and how to run a program written in it."""

    name: str
    syntax: str
    ext: str
    build: Optional[str]
    executable: str


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    MISSING = "missing"


@dataclass(frozen=True)
class Outcome:
    """Result of assembling and running one (service, language) pair."""

    service: str
    language: Language
    output: str
    kind: OutcomeKind


@dataclass(frozen=True)
class Assembled:
    """An assembled program staged on disk."""

    path: Path


@dataclass(frozen=True)
class TemplateMissing:
    """No template exists for the requested pair."""

    path: Path


AssemblyResult = Union[Assembled, TemplateMissing]


__all__ = [
    "Assembled",
    "AssemblyResult",
    "Language",
    "Outcome",
    "OutcomeKind",
    "TemplateMissing",
]
