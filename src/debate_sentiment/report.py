"""Console report for the debate sentiment pipeline.

Renders a :class:`~debate_sentiment.pipeline.PipelineResult` as plain
text: attribution counts, per-speaker sentiment and emotion tables,
each speaker's most negative and most positive turn, and a summary of
output files and warnings.

:func:`format_pipeline_result` returns the text;
:func:`print_pipeline_result` writes it to stdout.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable

from debate_sentiment.models.transcript import Utterance
from debate_sentiment.pipeline import PipelineResult
from debate_sentiment.sentiment import EMOTIONS
from debate_sentiment.stats import extremes

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_BANNER_WIDTH = 60
_SEPARATOR = "=" * _BANNER_WIDTH
_EXCERPT_LENGTH = 80


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def format_pipeline_result(result: PipelineResult) -> str:
    """Render a :class:`PipelineResult` for the console.

    Args:
        result: The pipeline result to format.

    Returns:
        A multi-line string.
    """
    lines: list[str] = []

    _append_banner(lines)
    _append_attribution(lines, result)
    _append_speaker_table(lines, result)
    _append_emotion_table(lines, result)
    _append_extremes(lines, result)
    _append_summary(lines, result)
    lines.append(_SEPARATOR)

    return "\n".join(lines)


def print_pipeline_result(result: PipelineResult) -> None:
    """Format and print a :class:`PipelineResult` to stdout."""
    sys.stdout.write(format_pipeline_result(result) + "\n")


def format_utterances(utterances: Iterable[Utterance]) -> str:
    """Render one ``[turn] Speaker: text`` line per utterance."""
    return "\n".join(f"[{u.turn_id}] {u.speaker}: {u.text}" for u in utterances)


# ---------------------------------------------------------------------------
# Internal formatters
# ---------------------------------------------------------------------------


def _append_banner(lines: list[str]) -> None:
    lines.append(_SEPARATOR)
    lines.append("  DEBATE SENTIMENT")
    lines.append(_SEPARATOR)


def _append_attribution(lines: list[str], result: PipelineResult) -> None:
    """Append the transcript and attribution counts."""
    attribution = result.attribution
    lines.append("")
    lines.append("--- ATTRIBUTION ---")
    lines.append(f"  Source: {result.source}")
    speakers = ", ".join(attribution.speakers) if attribution.speakers else "none"
    lines.append(f"  Speakers: {speakers}")
    lines.append(f"  Utterances: {len(attribution.utterances)}")
    lines.append(
        f"  Dropped lines: {attribution.noise_lines} noise, "
        f"{attribution.label_lines} label, "
        f"{attribution.other_lines} other speaker, "
        f"{attribution.preamble_lines} preamble"
    )


def _append_speaker_table(lines: list[str], result: PipelineResult) -> None:
    """Append compound-score statistics per speaker."""
    lines.append("")
    lines.append("--- SENTIMENT BY SPEAKER ---")

    if not result.summaries:
        lines.append("  No utterances to score.")
        return

    name_width = max(len("Speaker"), *(len(s.speaker) for s in result.summaries))
    lines.append(
        f"  {'Speaker':<{name_width}}  {'Turns':>5}  {'Words':>6}  "
        f"{'Min':>7}  {'Max':>7}  {'Mean':>7}  {'Median':>7}"
    )
    for s in result.summaries:
        lines.append(
            f"  {s.speaker:<{name_width}}  {s.utterance_count:>5}  {s.word_count:>6}  "
            f"{s.minimum:>7.3f}  {s.maximum:>7.3f}  {s.mean:>7.3f}  {s.median:>7.3f}"
        )


def _append_emotion_table(lines: list[str], result: PipelineResult) -> None:
    """Append mean NRC emotion frequencies per speaker."""
    if not result.emotion_summaries:
        return

    lines.append("")
    lines.append("--- EMOTIONS BY SPEAKER ---")

    name_width = max(len("Speaker"), *(len(s.speaker) for s in result.emotion_summaries))
    headers = "  ".join(f"{emotion[:5].title():>6}" for emotion in EMOTIONS)
    lines.append(f"  {'Speaker':<{name_width}}  {headers}  Dominant")
    for s in result.emotion_summaries:
        values = "  ".join(f"{s.means.get(emotion, 0.0):>6.3f}" for emotion in EMOTIONS)
        lines.append(f"  {s.speaker:<{name_width}}  {values}  {s.dominant or '-'}")


def _append_extremes(lines: list[str], result: PipelineResult) -> None:
    """Append each speaker's most negative and most positive turn."""
    if not result.summaries:
        return

    lines.append("")
    lines.append("--- EXTREMES ---")
    for summary in result.summaries:
        pair = extremes(result.scored, speaker=summary.speaker)
        if pair is None:
            continue
        lowest, highest = pair
        lines.append(f"  {summary.speaker}")
        lines.append(
            f"    Most negative (turn {lowest.turn_id}, {lowest.compound:.3f}): "
            f'"{_excerpt(lowest.utterance.text)}"'
        )
        lines.append(
            f"    Most positive (turn {highest.turn_id}, {highest.compound:.3f}): "
            f'"{_excerpt(highest.utterance.text)}"'
        )


def _append_summary(lines: list[str], result: PipelineResult) -> None:
    lines.append("")
    lines.append("--- SUMMARY ---")
    if result.csv_path is not None:
        lines.append(f"  Scores: {result.csv_path}")
    for path in result.plot_paths:
        lines.append(f"  Chart: {path}")
    lines.append(f"  Warnings: {len(result.warnings)}")
    for warning in result.warnings:
        lines.append(f"    - {warning}")
    lines.append(f"  Pipeline duration: {result.duration_seconds:.1f}s")


def _excerpt(text: str) -> str:
    """Shorten *text* to :data:`_EXCERPT_LENGTH` characters."""
    if len(text) <= _EXCERPT_LENGTH:
        return text
    return text[: _EXCERPT_LENGTH - 3].rstrip() + "..."
