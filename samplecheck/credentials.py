"""Credential loading for templated samples."""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .logging import get_logger

EXAMPLE_SUFFIX = ".example"


class CredentialsError(RuntimeError):
    """Raised when the credentials file cannot be used."""


class MissingCredentialsError(CredentialsError):
    """Raised when the credentials file does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.example_path = example_path_for(path)
        super().__init__(f"Missing credentials: {path}")


def example_path_for(path: Path) -> Path:
    return path.with_name(path.name + EXAMPLE_SUFFIX)


class CredentialStore:
    """Loads a flat JSON mapping of secret names to values, once per process.

    See ``credentials.json.example`` next to the real file for the expected
    keys. The mapping is read-only after the first successful load.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._cache: Optional[Mapping[str, str]] = None
        self._logger = get_logger("credentials")

    def load(self) -> Mapping[str, str]:
        if self._cache is not None:
            return self._cache

        if not self.path.exists():
            self._logger.error("You don't have a credentials file!")
            self._logger.error("cp %s %s", example_path_for(self.path), self.path)
            raise MissingCredentialsError(self.path)

        try:
            data: Any = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise CredentialsError(f"Failed to parse {self.path.name}: {exc}") from exc

        if not isinstance(data, dict):
            raise CredentialsError(f"{self.path.name} must contain a JSON object")
        for key, value in data.items():
            if not isinstance(value, str):
                raise CredentialsError(f"{self.path.name}: value for {key!r} must be a string")

        self._cache = MappingProxyType(dict(data))
        self._logger.debug("Loaded %d credentials from %s", len(data), self.path)
        return self._cache


__all__ = [
    "CredentialStore",
    "CredentialsError",
    "MissingCredentialsError",
    "example_path_for",
]
