"""Load configuration from .gosecrules.toml and GOSECRULES_* env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from gosecrules.config.schema import (
    OUTPUT_FORMATS,
    GosecRulesConfig,
    OutputConfig,
    RulesConfig,
)

CONFIG_FILENAME = ".gosecrules.toml"

_TRUTHY = ("1", "true", "yes")


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    return cls(**{k: v for k, v in raw.items() if k in valid_fields})


def _split_ids(value: str) -> list[str]:
    return [r.strip() for r in value.split(",") if r.strip()]


def _merge_env_overrides(cfg: GosecRulesConfig) -> None:
    """Apply GOSECRULES_* environment variable overrides."""
    if val := os.environ.get("GOSECRULES_INCLUDE"):
        cfg.rules.include.extend(_split_ids(val))
    if val := os.environ.get("GOSECRULES_EXCLUDE"):
        cfg.rules.exclude.extend(_split_ids(val))
    if val := os.environ.get("GOSECRULES_TRACK_SUPPRESSIONS"):
        cfg.rules.track_suppressions = val.strip().lower() in _TRUTHY
    if val := os.environ.get("GOSECRULES_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]


def load_config(root: Path, config_override: Optional[str] = None) -> GosecRulesConfig:
    """Load, validate, and return a GosecRulesConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = GosecRulesConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = GosecRulesConfig(
            version=str(raw.get("version", "1.0")),
            rules=_build_section(raw, RulesConfig, "rules"),
            output=_build_section(raw, OutputConfig, "output"),
        )
        for name in ("include", "exclude"):
            ids = getattr(cfg.rules, name)
            if not isinstance(ids, list) or not all(isinstance(i, str) for i in ids):
                raise ConfigError(f"[rules] {name} must be a list of rule IDs")
        if not isinstance(cfg.rules.track_suppressions, bool):
            raise ConfigError("[rules] track_suppressions must be a boolean")
        if not isinstance(cfg.output.show_summary, bool):
            raise ConfigError("[output] show_summary must be a boolean")
        if cfg.output.format not in OUTPUT_FORMATS:
            raise ConfigError(f"Invalid output format: {cfg.output.format}")

    _merge_env_overrides(cfg)
    return cfg
