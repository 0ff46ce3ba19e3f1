"""Voice parameters handed to the external synthesizer."""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping


class ConfigError(RuntimeError):
    """Raised when voice overrides cannot be applied."""


_INT_FIELDS = ("speed", "pitch", "amplitude", "capitals")


def _coerce_int(name: str, value: Any) -> int:
    # bool is an int subclass; reject it so "pitch: true" is not read as 1
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ConfigError(f"{name} must be an integer, got {value!r}") from exc
    raise ConfigError(f"{name} must be an integer, got {value!r}")


def _coerce_str(name: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{name} must be a non-empty string, got {value!r}")
    if "\0" in value:
        raise ConfigError(f"{name} must not contain NUL characters")
    return value


@dataclass(frozen=True, slots=True)
class VoiceConfig:
    """Holds the literal arguments for one espeak-ng run."""

    executable: str = "espeak-ng"
    voice: str = "en+f4"
    speed: int = 175
    pitch: int = 75
    amplitude: int = 300
    capitals: int = 0
    text: str = "hello world,this is luna"

    @classmethod
    def default(cls) -> "VoiceConfig":
        return cls()

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, Any]) -> "VoiceConfig":
        """Apply ``overrides`` on top of the defaults.

        Keys must name a field of this class. Integer fields also accept
        numeric strings, since YAML users tend to quote them.
        """
        known = {f.name for f in fields(cls)}
        bad_keys = [key for key in overrides if not isinstance(key, str)]
        if bad_keys:
            raise ConfigError(f"Voice parameter names must be strings, got {bad_keys!r}")
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigError(f"Unknown voice parameter(s): {', '.join(unknown)}")

        changes: dict[str, Any] = {}
        for name, value in overrides.items():
            if name in _INT_FIELDS:
                changes[name] = _coerce_int(name, value)
            else:
                changes[name] = _coerce_str(name, value)
        return replace(cls.default(), **changes)

    def argv(self) -> list[str]:
        """Return the ordered command line; the utterance is always last."""
        return [
            self.executable,
            "-v",
            self.voice,
            f"-s{self.speed}",
            f"-p{self.pitch}",
            f"-a{self.amplitude}",
            f"-k{self.capitals}",
            self.text,
        ]


__all__ = ["ConfigError", "VoiceConfig"]
