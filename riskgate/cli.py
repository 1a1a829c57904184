"""Command-line linter - classifies files or stdin and prints JSON lines."""

import argparse
import json
import logging
import sys
from collections.abc import Iterator
from pathlib import Path

from riskgate.config.constants import DEFAULT_PRESET
from riskgate.infrastructure.logging.logger import setup_logging
from riskgate.services.classifier.classifier import classify
from riskgate.services.classifier.errors import ConfigurationError, InputTooLarge, UnknownPresetError
from riskgate.services.classifier.loader import load_config_file
from riskgate.services.classifier.models import ClassifierConfig
from riskgate.services.classifier.presets import get_preset

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="riskgate",
        description="Classify text with the layered risk classifier",
    )
    parser.add_argument("paths", nargs="*", help="Files to classify ('-' or none reads stdin)")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--preset", default=DEFAULT_PRESET, help="Preset name (default: %(default)s)")
    source.add_argument("--config", help="Path to a JSON classifier config")
    parser.add_argument("--lines", action="store_true", help="Classify each non-empty line separately")
    parser.add_argument("--max-input-size", type=int, default=None, help="Reject inputs longer than this")
    parser.add_argument("--only-rejected", action="store_true", help="Print rejected texts only")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: %(default)s)")
    return parser


def _load_config(args: argparse.Namespace) -> ClassifierConfig:
    config = load_config_file(args.config) if args.config else get_preset(args.preset)
    if args.max_input_size is not None:
        if args.max_input_size <= 0:
            raise ConfigurationError(f"--max-input-size must be positive, got {args.max_input_size}")
        config = config.model_copy(update={"max_input_size": args.max_input_size})
    return config


def _read_source(path: str) -> tuple[str, str]:
    """Return (name, content) for a path, or stdin for '-'."""
    if path == "-":
        return "<stdin>", sys.stdin.read()
    return path, Path(path).read_text(encoding="utf-8")


def _iter_texts(name: str, content: str, by_line: bool) -> Iterator[tuple[str, str]]:
    """Yield (source, text) pairs."""
    if not by_line:
        yield name, content
        return
    for number, line in enumerate(content.splitlines(), start=1):
        if line.strip():
            yield f"{name}:{number}", line


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)

    try:
        config = _load_config(args)
    except (ConfigurationError, UnknownPresetError, OSError, UnicodeDecodeError) as e:
        print(f"riskgate: {e}", file=sys.stderr)
        return EXIT_ERROR

    exit_code = EXIT_OK
    for path in args.paths or ["-"]:
        try:
            name, content = _read_source(path)
        except (OSError, UnicodeDecodeError) as e:
            print(f"riskgate: {path}: {e}", file=sys.stderr)
            return EXIT_ERROR

        for source, text in _iter_texts(name, content, args.lines):
            try:
                result = classify(text, config)
            except InputTooLarge as e:
                print(f"riskgate: {source}: {e}", file=sys.stderr)
                exit_code = EXIT_ERROR
                continue

            if not result.accepted and exit_code == EXIT_OK:
                exit_code = EXIT_REJECTED
            if args.only_rejected and result.accepted:
                continue
            record = {"source": source, **result.model_dump(mode="json")}
            print(json.dumps(record, ensure_ascii=False))

    logger.info("Finished with exit code %d", exit_code)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
