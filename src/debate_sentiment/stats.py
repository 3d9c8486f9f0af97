"""Per-speaker summary statistics over scored utterances."""

from __future__ import annotations

import statistics
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from debate_sentiment.sentiment import EMOTIONS, ScoredUtterance


@dataclass(frozen=True)
class SpeakerSummary:
    """Compound-score statistics for one speaker.

    Attributes:
        speaker: Canonical speaker name.
        utterance_count: Number of turns the speaker took.
        word_count: Total words across those turns.
        minimum: Lowest compound score.
        maximum: Highest compound score.
        mean: Mean compound score.
        median: Median compound score.
    """

    speaker: str
    utterance_count: int
    word_count: int
    minimum: float
    maximum: float
    mean: float
    median: float


def summarize_by_speaker(scored: Iterable[ScoredUtterance]) -> list[SpeakerSummary]:
    """Summarise compound scores per speaker, in first-appearance order."""
    by_speaker: dict[str, list[ScoredUtterance]] = {}
    for item in scored:
        by_speaker.setdefault(item.speaker, []).append(item)

    summaries: list[SpeakerSummary] = []
    for speaker, items in by_speaker.items():
        values = [item.compound for item in items]
        summaries.append(
            SpeakerSummary(
                speaker=speaker,
                utterance_count=len(items),
                word_count=sum(item.word_count for item in items),
                minimum=min(values),
                maximum=max(values),
                mean=statistics.fmean(values),
                median=statistics.median(values),
            )
        )
    return summaries


@dataclass(frozen=True)
class EmotionSummary:
    """Mean NRC emotion frequencies for one speaker.

    Attributes:
        speaker: Canonical speaker name.
        utterance_count: Number of turns averaged.
        means: Mean frequency per emotion, keyed and ordered by
            :data:`~debate_sentiment.sentiment.EMOTIONS`.
    """

    speaker: str
    utterance_count: int
    means: dict[str, float] = field(default_factory=dict, hash=False)

    @property
    def dominant(self) -> str | None:
        """The highest-scoring emotion, or ``None`` if every mean is zero."""
        best = max(self.means, key=self.means.__getitem__, default=None)
        if best is None or self.means[best] <= 0.0:
            return None
        return best


def summarize_emotions(scored: Iterable[ScoredUtterance]) -> list[EmotionSummary]:
    """Average each speaker's emotion frequencies, in first-appearance order.

    Emotions missing from an utterance count as zero.
    """
    by_speaker: dict[str, list[ScoredUtterance]] = {}
    for item in scored:
        by_speaker.setdefault(item.speaker, []).append(item)

    return [
        EmotionSummary(
            speaker=speaker,
            utterance_count=len(items),
            means={
                emotion: statistics.fmean(item.emotions.get(emotion, 0.0) for item in items)
                for emotion in EMOTIONS
            },
        )
        for speaker, items in by_speaker.items()
    ]


def extremes(
    scored: Iterable[ScoredUtterance],
    speaker: str | None = None,
) -> tuple[ScoredUtterance, ScoredUtterance] | None:
    """Return the most negative and most positive utterances.

    Args:
        scored: Scored utterances.
        speaker: Restrict to this speaker; ``None`` considers everyone.

    Returns:
        ``(most_negative, most_positive)``, or ``None`` if nothing
        qualifies.  Ties go to the earliest turn.
    """
    candidates = [s for s in scored if speaker is None or s.speaker == speaker]
    if not candidates:
        return None
    return (
        min(candidates, key=lambda s: s.compound),
        max(candidates, key=lambda s: s.compound),
    )


def rolling_mean(values: Sequence[float], window: int) -> list[float]:
    """Trailing moving average; the first points average what is available.

    Raises:
        ValueError: If *window* is less than 1.
    """
    if window < 1:
        raise ValueError(f"window must be at least 1, got {window}")

    result: list[float] = []
    total = 0.0
    for idx, value in enumerate(values):
        total += value
        if idx >= window:
            total -= values[idx - window]
        result.append(total / min(idx + 1, window))
    return result
