"""CSV export of scored utterances."""

from __future__ import annotations

import csv
from collections.abc import Iterable
from pathlib import Path

from debate_sentiment.sentiment import EMOTIONS, ScoredUtterance

CSV_COLUMNS = (
    "turn_id",
    "speaker",
    "word_count",
    "compound",
    "positive",
    "neutral",
    "negative",
    *EMOTIONS,
    "text",
)


def write_scores_csv(scored: Iterable[ScoredUtterance], path: str | Path) -> Path:
    """Write one row per scored utterance, in turn order.

    Each row carries the VADER scores followed by one column per NRC
    emotion.

    Parent directories are created as needed.

    Returns:
        The path written.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    with open(out, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_COLUMNS)
        for item in scored:
            writer.writerow(
                [
                    item.turn_id,
                    item.speaker,
                    item.word_count,
                    f"{item.compound:.4f}",
                    f"{item.positive:.3f}",
                    f"{item.neutral:.3f}",
                    f"{item.negative:.3f}",
                    *(f"{item.emotions.get(emotion, 0.0):.3f}" for emotion in EMOTIONS),
                    item.utterance.text,
                ]
            )
    return out
