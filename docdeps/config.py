"""Configuration loading for docdeps (.docdeps.yml and build environment)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

import yaml

CONFIG_FILENAME = ".docdeps.yml"

MODE_INDEX = "index"
MODE_SUBSTRING = "substring"
MODES = (MODE_INDEX, MODE_SUBSTRING)

ENV_BASE_REF = "CACHED_COMMIT_REF"
ENV_HEAD_REF = "COMMIT_REF"
ENV_DEPLOY_URL = "DEPLOY_PRIME_URL"
ENV_ENABLED = "DOCDEPS_ENABLED"
ENV_MODE = "DOCDEPS_MODE"


class ConfigError(RuntimeError):
    """Raised when the configuration or build environment is unusable."""


@dataclass
class CheckConfig:
    """Settings for one include dependency check run."""

    enabled: bool = True
    mode: str = MODE_INDEX
    source_dir: str = "source"
    extensions: List[str] = field(default_factory=lambda: [".rst", ".txt"])
    exclude_dirs: List[str] = field(default_factory=lambda: [".git", "node_modules"])
    includes_dir: str = "includes"
    skip_prefixes: List[str] = field(default_factory=lambda: ["bundle"])
    skip_suffixes: List[str] = field(default_factory=lambda: [".bson"])
    ignored_link_dirs: List[str] = field(
        default_factory=lambda: ["includes", "images", "examples"]
    )

    def apply_environment(self, environment: "BuildEnvironment") -> "CheckConfig":
        """Return a copy with the environment's flag and mode overrides applied."""
        updated = self
        if environment.enabled is not None:
            updated = replace(updated, enabled=environment.enabled)
        if environment.mode is not None:
            updated = replace(updated, mode=_validate_mode(environment.mode))
        return updated


@dataclass
class BuildEnvironment:
    """Values supplied by the host build pipeline for a single run."""

    base_ref: Optional[str] = None
    head_ref: Optional[str] = None
    deploy_url: Optional[str] = None
    enabled: Optional[bool] = None
    mode: Optional[str] = None
    modified_files: Optional[List[str]] = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> "BuildEnvironment":
        """Read the build environment from process variables."""
        env = os.environ if environ is None else environ
        return cls(
            base_ref=_non_empty(env.get(ENV_BASE_REF)),
            head_ref=_non_empty(env.get(ENV_HEAD_REF)),
            deploy_url=_non_empty(env.get(ENV_DEPLOY_URL)),
            enabled=_as_bool(env.get(ENV_ENABLED)),
            mode=_non_empty(env.get(ENV_MODE)),
        )


def load_config(config_path: Path) -> CheckConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        return CheckConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = CheckConfig()
    enabled = _as_bool(data.get("enabled"))
    if enabled is not None:
        config.enabled = enabled
    mode = _as_str(data.get("mode"))
    if mode is not None:
        config.mode = _validate_mode(mode)
    source_dir = _as_str(data.get("source_dir"))
    if source_dir:
        config.source_dir = source_dir.strip("/")
    includes_dir = _as_str(data.get("includes_dir"))
    if includes_dir:
        config.includes_dir = includes_dir.strip("/")

    if "extensions" in data:
        config.extensions = [_as_extension(item) for item in _as_str_list(data["extensions"])]
    if "exclude_dirs" in data:
        config.exclude_dirs = _as_str_list(data["exclude_dirs"])
    if "skip_prefixes" in data:
        config.skip_prefixes = _as_str_list(data["skip_prefixes"])
    if "skip_suffixes" in data:
        config.skip_suffixes = _as_str_list(data["skip_suffixes"])
    if "ignored_link_dirs" in data:
        config.ignored_link_dirs = _as_str_list(data["ignored_link_dirs"])

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _validate_mode(value: str) -> str:
    mode = value.strip().lower()
    if mode not in MODES:
        raise ConfigError(
            f"Unknown addressing mode {value!r}; expected one of: {', '.join(MODES)}"
        )
    return mode


def _as_extension(value: str) -> str:
    lowered = value.strip().lower()
    return lowered if lowered.startswith(".") else f".{lowered}"


def _non_empty(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1", "on"}:
            return True
        if lowered in {"false", "no", "0", "off"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "BuildEnvironment",
    "CheckConfig",
    "ConfigError",
    "MODE_INDEX",
    "MODE_SUBSTRING",
    "MODES",
    "load_config",
]
