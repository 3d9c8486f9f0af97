"""Entry point for ``python -m debate_sentiment``.

Provides a CLI that accepts a transcript URL or file and runs the
attribution and sentiment pipeline.  Uses stdlib :mod:`argparse`.

Subcommands:
    run       -- Default. Attribute, score, summarise, and chart.
    attribute -- Print the attributed utterances only.

Exit codes:
    0 -- Completed successfully (including zero utterances).
    1 -- An error occurred (file not found or undecodable, download failed,
         config error, emotion lexicon unavailable).
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from debate_sentiment.attributor import attribute_transcript
from debate_sentiment.config import ConfigError, Settings, load_settings, load_speaker_config
from debate_sentiment.exceptions import (
    FetchError,
    LexiconUnavailableError,
    TranscriptDecodeError,
)
from debate_sentiment.log import setup_logging
from debate_sentiment.pipeline import run_pipeline
from debate_sentiment.report import format_utterances, print_pipeline_result
from debate_sentiment.scraper import load_transcript_lines


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser with ``run`` and ``attribute`` subcommands."""
    parser = argparse.ArgumentParser(
        prog="debate-sentiment",
        description="Attribute a debate transcript to speakers and score its sentiment.",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- "run" subcommand (default) -----------------------------------
    run_parser = subparsers.add_parser(
        "run",
        help="Attribute, score, summarise, and chart a transcript.",
    )
    run_parser.add_argument(
        "source",
        type=str,
        help="Transcript URL, .html file, or plain-text file.",
    )
    run_parser.add_argument(
        "--speakers",
        type=str,
        default=None,
        help=(
            "Speaker-label JSON file "
            "(defaults to SPEAKER_CONFIG, then the packaged 2015 mapping)."
        ),
    )
    run_parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Directory for scores.csv and charts (defaults to OUTPUT_DIR).",
    )
    run_parser.add_argument(
        "--no-plots",
        action="store_true",
        default=False,
        help="Write the CSV export but skip the charts.",
    )
    run_parser.add_argument(
        "--window",
        type=_positive_int,
        default=1,
        help="Moving-average window for the timeline chart (default: 1).",
    )
    run_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )

    # --- "attribute" subcommand ---------------------------------------
    attr_parser = subparsers.add_parser(
        "attribute",
        help="Print the attributed utterances without scoring them.",
    )
    attr_parser.add_argument(
        "source",
        type=str,
        help="Transcript URL, .html file, or plain-text file.",
    )
    attr_parser.add_argument(
        "--speakers",
        type=str,
        default=None,
        help="Speaker-label JSON file.",
    )
    attr_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )

    return parser


def _resolve_command(
    parser: argparse.ArgumentParser,
    argv: list[str],
) -> argparse.Namespace:
    """Parse *argv*, routing anything that is not a subcommand to ``run``."""
    known_subcommands = {"run", "attribute"}
    if not argv:
        argv = ["run"]
    elif argv[0] in {"-h", "--help"}:
        pass
    elif argv[0] not in known_subcommands:
        argv = ["run", *argv]

    return parser.parse_args(argv)


def _handle_run(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the ``run`` subcommand."""
    speakers_path = args.speakers or settings.speaker_config
    output_dir = Path(args.output) if args.output else settings.output_dir

    try:
        speaker_config = load_speaker_config(speakers_path)
        result = run_pipeline(
            source=args.source,
            speaker_config=speaker_config,
            output_dir=output_dir,
            window=args.window,
            settings=settings,
            plots=not args.no_plots,
        )
    except (
        ConfigError,
        FetchError,
        LexiconUnavailableError,
        TranscriptDecodeError,
        FileNotFoundError,
        PermissionError,
    ) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print_pipeline_result(result)
    return 0


def _handle_attribute(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the ``attribute`` subcommand."""
    speakers_path = args.speakers or settings.speaker_config

    try:
        speaker_config = load_speaker_config(speakers_path)
        lines = load_transcript_lines(
            args.source,
            timeout=settings.request_timeout,
            user_agent=settings.user_agent,
        )
    except (
        ConfigError,
        FetchError,
        TranscriptDecodeError,
        FileNotFoundError,
        PermissionError,
    ) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    result = attribute_transcript("\n".join(lines), speaker_config, source=args.source)
    if result.utterances:
        print(format_utterances(result.utterances))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the debate-sentiment CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    parser = build_parser()
    args = _resolve_command(parser, argv if argv is not None else sys.argv[1:])

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    log_level = "DEBUG" if getattr(args, "verbose", False) else settings.log_level
    try:
        setup_logging(log_level)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.command == "attribute":
        return _handle_attribute(args, settings)

    return _handle_run(args, settings)


if __name__ == "__main__":
    raise SystemExit(main())
