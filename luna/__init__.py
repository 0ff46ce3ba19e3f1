"""Speak a fixed phrase through the espeak-ng command-line synthesizer."""
from __future__ import annotations

from .config import ConfigError, VoiceConfig
from .speech import SpeechLaunchError, build_command, speak

__all__ = [
    "ConfigError",
    "SpeechLaunchError",
    "VoiceConfig",
    "build_command",
    "speak",
]
