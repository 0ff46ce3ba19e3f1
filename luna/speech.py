"""Text-to-speech by shelling out to espeak-ng."""
from __future__ import annotations

import logging
import shlex
import subprocess

from .config import VoiceConfig

logger = logging.getLogger(__name__)

LAUNCH_FAILURE_MESSAGE = "error: failed to launch espeak-ng"


class SpeechLaunchError(RuntimeError):
    """The synthesizer process could not be spawned or awaited."""

    def __init__(self) -> None:
        super().__init__(LAUNCH_FAILURE_MESSAGE)


def build_command(config: VoiceConfig | None = None) -> list[str]:
    return (config or VoiceConfig.default()).argv()


def speak(config: VoiceConfig | None = None) -> subprocess.CompletedProcess:
    """Run the synthesizer and block until it exits.

    The child's output is captured and dropped. Its exit status is only
    logged; a non-zero status is not treated as a failure.
    """
    cmd = build_command(config)
    logger.debug("Launching synthesizer: %s", shlex.join(cmd))
    try:
        result = subprocess.run(cmd, capture_output=True)
    except (OSError, ValueError) as exc:
        logger.debug("Synthesizer launch failed: %r", exc)
        raise SpeechLaunchError() from exc

    logger.debug("Synthesizer exited with status %s", result.returncode)
    return result


__all__ = ["LAUNCH_FAILURE_MESSAGE", "SpeechLaunchError", "build_command", "speak"]
