"""
kannot CLI — Analyze text and print the annotation graph.
"""

import argparse
import sys
from typing import Optional

from kannot import __version__
from kannot.bridge.serialization import to_json
from kannot.core.config import BACKENDS, build_backend, load_settings
from kannot.core.errors import KannotError
from kannot.core.logging import configure_logging, get_logger
from kannot.data.sentence import Sentence
from kannot.proc.analyzers import ANALYZERS, Tagger
from kannot.proc.interfaces import AnalysisStage


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kannot",
        description="Analyze Korean text into a linked annotation graph",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"kannot {__version__}",
    )
    parser.add_argument(
        "text",
        nargs="+",
        help="Input paragraphs (use - to read stdin)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML settings file",
    )
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default=None,
        help="Analyzer backend (default: stub, or KANNOT_BACKEND env var)",
    )
    parser.add_argument(
        "--fixtures",
        type=str,
        default=None,
        help="Recorded analyzer output for the recorded backend",
    )
    parser.add_argument(
        "--stage",
        choices=[s.value for s in AnalysisStage],
        default=AnalysisStage.TAG.value,
        help="Analysis to run (default: tag)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json", "tree"],
        default="text",
        help="Output format: text (default), json (native schema), tree",
    )

    # Logging configuration
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["silent", "info", "verbose", "debug"],
        default=None,
        help="Log verbosity level (default: info, or KANNOT_LOG_LEVEL env var)",
    )
    parser.add_argument(
        "--log-channel",
        type=str,
        default=None,
        help="Comma-separated log channels to show (data,bridge,proc,system). Default: all",
    )
    return parser


def format_sentence(sentence: Sentence, fmt: str) -> str:
    """Render one sentence in the requested output format."""
    if fmt == "json":
        return to_json(sentence.to_native())
    if fmt == "tree":
        if sentence.syntax_tree is None:
            return f"{sentence.surface_string()}\n(no syntax tree)"
        return sentence.syntax_tree.get_tree_string()
    return sentence.single_line_string()


def run(args: argparse.Namespace) -> int:
    """Run the analysis described by parsed arguments."""
    settings = load_settings(args.config)
    if args.backend:
        settings.backend = args.backend
    if args.fixtures:
        settings.fixtures = args.fixtures
    if args.log_level:
        settings.log_level = args.log_level

    channels = None
    if args.log_channel:
        channels = [ch.strip() for ch in args.log_channel.split(",")]
    configure_logging(
        level=settings.log_level,
        format=settings.log_format,
        channels=channels,
        force=True,
    )

    texts = [sys.stdin.read() if t == "-" else t for t in args.text]

    backend = build_backend(settings)
    stage = AnalysisStage(args.stage)
    if stage == AnalysisStage.TAG:
        sentences = Tagger(backend).tag(*texts)
    else:
        sentences = ANALYZERS[stage](backend).analyze(*texts)

    for sentence in sentences:
        print(format_sentence(sentence, args.format))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except (KannotError, FileNotFoundError, ValueError) as e:
        get_logger().error("cli_failed", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
