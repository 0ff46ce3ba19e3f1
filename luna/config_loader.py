"""Helpers for loading voice parameter overrides from YAML."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .config import ConfigError, VoiceConfig


def _load_mapping(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read voice params {path}: {exc.strerror}") from exc

    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse voice params {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Voice params must be defined as a mapping.")
    return data


def bundled_params_path() -> Path:
    """Path of the installed template listing every parameter and its default.

    Never read implicitly; users copy it and pass the copy with ``--config``.
    """
    return Path(__file__).with_name("voice_params.yaml")


def load_voice_config(path: str | Path) -> VoiceConfig:
    """Build a VoiceConfig from the overrides in ``path``."""

    return VoiceConfig.from_mapping(_load_mapping(Path(path)))


__all__ = ["bundled_params_path", "load_voice_config"]
