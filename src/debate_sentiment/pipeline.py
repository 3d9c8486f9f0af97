"""Pipeline orchestrator for debate sentiment analysis.

Wires the stages together: transcript loading, speaker attribution,
lexicon scoring, per-speaker aggregation, and file output.  The entry
point is :func:`run_pipeline`, which returns a :class:`PipelineResult`
for the console report.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from debate_sentiment.attributor import attribute_transcript
from debate_sentiment.config import Settings
from debate_sentiment.export import write_scores_csv
from debate_sentiment.models.speakers import SpeakerConfig
from debate_sentiment.models.transcript import AttributionResult
from debate_sentiment.plots import plot_sentiment_timeline, plot_speaker_distribution
from debate_sentiment.scraper import load_transcript_lines
from debate_sentiment.sentiment import ScoredUtterance, score_utterances
from debate_sentiment.stats import (
    EmotionSummary,
    SpeakerSummary,
    summarize_by_speaker,
    summarize_emotions,
)

logger = logging.getLogger(__name__)

SCORES_FILENAME = "scores.csv"
TIMELINE_FILENAME = "sentiment_timeline.png"
DISTRIBUTION_FILENAME = "speaker_distribution.png"


@dataclass
class PipelineResult:
    """Aggregated result from a full pipeline run.

    Attributes:
        source: The transcript URL or file path.
        attribution: Output of the attribution stage.
        scored: Scored utterances in turn order.
        summaries: Per-speaker statistics, in first-appearance order.
        emotion_summaries: Per-speaker mean NRC emotion frequencies.
        warnings: Non-fatal warnings from any stage.
        csv_path: Where the scores were exported, if an output directory
            was given.
        plot_paths: Charts written, in the order they were drawn.
        duration_seconds: Wall-clock time for the whole run.
    """

    source: str
    attribution: AttributionResult = field(default_factory=AttributionResult)
    scored: list[ScoredUtterance] = field(default_factory=list)
    summaries: list[SpeakerSummary] = field(default_factory=list)
    emotion_summaries: list[EmotionSummary] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    csv_path: Path | None = None
    plot_paths: list[Path] = field(default_factory=list)
    duration_seconds: float = 0.0


def run_pipeline(
    source: str | Path,
    speaker_config: SpeakerConfig,
    output_dir: Path | None = None,
    window: int = 1,
    settings: Settings | None = None,
    plots: bool = True,
) -> PipelineResult:
    """Run the full transcript-to-sentiment pipeline.

    Stages:

    1. **Load** -- fetch or read the transcript lines.
    2. **Attribute** -- assign lines to speakers and merge them into turns.
    3. **Score** -- VADER sentiment and NRC emotions for every turn.
    4. **Summarise** -- per-speaker min/max/mean/median and mean
       emotion frequencies.
    5. **Write** -- CSV export and charts into *output_dir*; skipped when
       *output_dir* is ``None``.

    A transcript with no recognisable speaker labels is not an error: the
    result simply has zero utterances and stages 3-5 are skipped.  A chart
    that fails to render is recorded as a warning.

    Args:
        source: URL, HTML file, or plain-text file.
        speaker_config: Label mapping used for attribution.
        output_dir: Directory for ``scores.csv`` and the charts.
        window: Moving-average window for the timeline chart.
        settings: Request settings; defaults to :class:`Settings` defaults.
        plots: Draw charts when writing output.

    Returns:
        A :class:`PipelineResult`.

    Raises:
        FileNotFoundError: If a file *source* does not exist.
        FetchError: If a URL *source* cannot be downloaded.
        TranscriptDecodeError: If a plain-text file is not valid UTF-8.
        LexiconUnavailableError: If the NRC emotion lexicon cannot be loaded.
    """
    start_time = time.monotonic()
    settings = settings or Settings()
    source_label = str(source)

    result = PipelineResult(source=source_label)

    # ------------------------------------------------------------------
    # Stage 1: Load
    # ------------------------------------------------------------------
    logger.info("Stage 1: Loading transcript from %s", source_label)

    lines = load_transcript_lines(
        source,
        timeout=settings.request_timeout,
        user_agent=settings.user_agent,
    )

    logger.info("Stage 1 complete: %d line(s)", len(lines))

    # ------------------------------------------------------------------
    # Stage 2: Attribute
    # ------------------------------------------------------------------
    logger.info("Stage 2: Attributing lines to speakers")

    attribution = attribute_transcript("\n".join(lines), speaker_config, source=source_label)
    result.attribution = attribution

    for warning in attribution.warnings:
        result.warnings.append(f"Line {warning.line_index}: {warning.message}")

    logger.info(
        "Stage 2 complete: %d speaker(s), %d utterance(s)",
        len(attribution.speakers),
        len(attribution.utterances),
    )

    if not attribution.utterances:
        logger.info("No utterances found, skipping scoring")
        result.duration_seconds = time.monotonic() - start_time
        return result

    # ------------------------------------------------------------------
    # Stage 3: Score
    # ------------------------------------------------------------------
    logger.info("Stage 3: Scoring utterances")
    result.scored = score_utterances(attribution.utterances)

    # ------------------------------------------------------------------
    # Stage 4: Summarise
    # ------------------------------------------------------------------
    result.summaries = summarize_by_speaker(result.scored)
    result.emotion_summaries = summarize_emotions(result.scored)
    for summary in result.summaries:
        logger.info(
            "%s: %d turn(s), mean %.3f, median %.3f",
            summary.speaker,
            summary.utterance_count,
            summary.mean,
            summary.median,
        )
    for emotions in result.emotion_summaries:
        logger.debug("%s: dominant emotion %s", emotions.speaker, emotions.dominant or "none")

    # ------------------------------------------------------------------
    # Stage 5: Write
    # ------------------------------------------------------------------
    if output_dir is not None:
        _write_outputs(result, Path(output_dir), window=window, plots=plots)

    result.duration_seconds = time.monotonic() - start_time
    logger.info("Pipeline complete in %.2fs", result.duration_seconds)
    return result


def _write_outputs(result: PipelineResult, output_dir: Path, window: int, plots: bool) -> None:
    """Export scores and draw charts, recording chart failures as warnings."""
    logger.info("Stage 5: Writing output to %s", output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    result.csv_path = write_scores_csv(result.scored, output_dir / SCORES_FILENAME)

    if not plots:
        return

    charts = (
        (TIMELINE_FILENAME, lambda path: plot_sentiment_timeline(result.scored, path, window=window)),
        (DISTRIBUTION_FILENAME, lambda path: plot_speaker_distribution(result.scored, path)),
    )
    for filename, draw in charts:
        try:
            written = draw(output_dir / filename)
        except (OSError, ValueError) as exc:
            msg = f"Failed to draw {filename}: {exc}"
            result.warnings.append(msg)
            logger.warning(msg)
            continue
        if written is not None:
            result.plot_paths.append(written)
