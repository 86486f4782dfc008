"""Configuration loading for samplecheck (samplecheck.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = "samplecheck.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class HarnessConfig:
    """Resolved locations and policy for one harness run."""

    root: Path
    docs_root: Path
    templates_dir: Path
    staging_dir: Path
    credentials_file: Path
    sample_extension: str = "rst"
    fail_on_missing: bool = False


def load_config(config_path: Path) -> HarnessConfig:
    """Load configuration from disk, falling back to defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    data: Dict[str, Any] = {}
    if config_file.exists():
        data = _read_config(config_file)

    sample_extension = _as_str(data.get("sample_extension")) or "rst"
    fail_on_missing = _as_bool(data.get("fail_on_missing"))

    return HarnessConfig(
        root=root,
        docs_root=_as_path(root, data.get("docs_root"), "docs"),
        templates_dir=_as_path(root, data.get("templates_dir"), "templates"),
        staging_dir=_as_path(root, data.get("staging_dir"), "assembled"),
        credentials_file=_as_path(root, data.get("credentials_file"), "credentials.json"),
        sample_extension=sample_extension.lstrip("."),
        fail_on_missing=bool(fail_on_missing),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _as_path(root: Path, value: Any, default: str) -> Path:
    text = _as_str(value) or default
    path = Path(text).expanduser()
    return path if path.is_absolute() else root / path


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and str(value) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "HarnessConfig", "load_config"]
