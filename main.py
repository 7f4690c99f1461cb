"""
Persian Content Classifier - command line entry point.

Classifies texts by Persian-script content and prints one report line per text.

Usage:
    python main.py "سلام دنیا" "hello"          # Classify arguments
    python main.py --file posts.txt --json      # One text per line, JSON output
    cat posts.txt | python main.py --stats      # Read stdin, print totals
    python main.py --only-relevant --file a.txt # Keep only Persian-routed texts
"""
import argparse
import io
import json
import logging
import os
import sys
from dataclasses import asdict

import yaml

from classifiers import Classifier


def setup_logging(config: dict):
    log_config = config.get("logging") or {}
    level_name = str(log_config.get("level") or "INFO").upper()
    log_level = getattr(logging, level_name, None)
    known_level = isinstance(log_level, int)
    if not known_level:
        log_level = logging.INFO
    log_file = log_config.get("file")

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )
    if not known_level:
        logger.warning(f"Unknown log level {level_name!r}, using INFO")


logger = logging.getLogger(__name__)


def load_config(path: str = "config.yaml") -> dict:
    """Load configuration from YAML file. A missing file means defaults."""
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"top level must be a mapping, got {type(config).__name__}")
    return config


def read_lines(path: str) -> list:
    """Non-empty lines of a UTF-8 file, one text per line."""
    with open(path, "r", encoding="utf-8") as f:
        return [line.rstrip("\n") for line in f if line.strip()]


def preview(text: str, limit: int = 60) -> str:
    text = " ".join(text.split())
    return text if len(text) <= limit else text[:limit - 3] + "..."


def format_line(text: str, result) -> str:
    return (
        f"{result.persian_percentage:>3}%  "
        f"persian={'yes' if result.is_persian else 'no':<3}  "
        f"has_char={'yes' if result.has_persian_char else 'no':<3}  "
        f"{preview(text)}"
    )


def format_json(text: str, result) -> str:
    return json.dumps({"text": text, **asdict(result)}, ensure_ascii=False)


class Stats:
    def __init__(self):
        self.total = 0
        self.relevant = 0
        self.with_persian_char = 0
        self.percentage_sum = 0

    def add(self, result):
        self.total += 1
        self.relevant += int(result.is_relevant)
        self.with_persian_char += int(result.has_persian_char)
        self.percentage_sum += result.persian_percentage

    def render(self) -> str:
        mean = self.percentage_sum / self.total if self.total else 0.0
        return "\n".join([
            "",
            "📊 Persian content statistics:",
            f"  Texts:              {self.total}",
            f"  Routed as Persian:  {self.relevant}",
            f"  With Persian chars: {self.with_persian_char}",
            f"  Mean percentage:    {mean:.1f}%",
        ])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Persian Content Classifier")
    parser.add_argument("texts", nargs="*", help="Texts to classify")
    parser.add_argument("--config", default="config.yaml", help="Config file path")
    parser.add_argument(
        "--file", action="append", default=[], metavar="PATH",
        help="Read texts from file, one per line (repeatable)",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON lines")
    parser.add_argument("--stats", action="store_true", help="Print totals at the end")
    parser.add_argument(
        "--only-relevant", action="store_true", help="Print only texts routed as Persian"
    )
    return parser


def main(argv=None, stdin=None, stdout=None) -> int:
    args = build_parser().parse_args(argv)
    stdout = stdout or sys.stdout

    try:
        config = load_config(args.config)
    except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as e:
        setup_logging({})
        logger.error(f"Cannot load config {args.config}: {e}")
        return 1
    setup_logging(config)
    if not config:
        logger.warning(f"Config {args.config} not found or empty, using defaults")

    try:
        classifier = Classifier(config.get("classification") or {})
    except ValueError as e:
        logger.error(f"Invalid classification config: {e}")
        return 1

    texts = list(args.texts)
    for path in args.file:
        try:
            texts.extend(read_lines(path))
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read {path}: {e}")
            return 1
    if not args.texts and not args.file:
        if stdin is None:
            stdin = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8")
        try:
            texts.extend(line.rstrip("\n") for line in stdin if line.strip())
        except UnicodeDecodeError as e:
            logger.error(f"Cannot read stdin as UTF-8: {e}")
            return 1

    stats = Stats()
    for text in texts:
        result = classifier.classify(text)
        stats.add(result)
        if args.only_relevant and not result.is_relevant:
            continue
        line = format_json(text, result) if args.json else format_line(text, result)
        print(line, file=stdout)

    logger.info(f"Classified {stats.total} texts, {stats.relevant} routed as Persian")
    if args.stats:
        print(stats.render(), file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
