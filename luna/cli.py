"""Say "hello world, this is luna" through espeak-ng.

Examples
--------
Speak the phrase:
    luna-speak

Show the exact command without running it:
    luna-speak --print-command

Override voice parameters from a YAML mapping:
    luna-speak --config my_voice.yaml -vv
"""

from __future__ import annotations

import argparse
import logging
import shlex
import sys

from .config import ConfigError, VoiceConfig
from .config_loader import bundled_params_path, load_voice_config
from .logging_utils import setup_logging
from .speech import SpeechLaunchError, build_command, speak

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="luna-speak",
        description="Speak a fixed phrase with espeak-ng.",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help=(
            "YAML file with voice parameter overrides "
            f"(template with every default: {bundled_params_path()})."
        ),
    )
    parser.add_argument(
        "--print-command",
        action="store_true",
        help="Print the synthesizer command line and exit without running it.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v for INFO, -vv for DEBUG).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_voice_config(args.config) if args.config else VoiceConfig.default()
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        raise SystemExit(2) from exc

    if args.print_command:
        print(shlex.join(build_command(config)))
        return 0

    try:
        result = speak(config)
    except SpeechLaunchError as exc:
        logger.debug("Launch failure detail", exc_info=exc.__cause__)
        print(str(exc), file=sys.stderr)
        raise SystemExit(1) from exc

    logger.info("Spoke %r (synthesizer status %s)", config.text, result.returncode)
    return 0
