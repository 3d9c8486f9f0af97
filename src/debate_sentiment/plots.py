"""Charts of utterance sentiment.

Both charts are written straight to image files with the non-interactive
``Agg`` backend, so they work on headless machines.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from debate_sentiment.sentiment import ScoredUtterance  # noqa: E402
from debate_sentiment.stats import rolling_mean  # noqa: E402

logger = logging.getLogger(__name__)

_DPI = 160


def _by_speaker(scored: Sequence[ScoredUtterance]) -> dict[str, list[ScoredUtterance]]:
    groups: dict[str, list[ScoredUtterance]] = {}
    for item in scored:
        groups.setdefault(item.speaker, []).append(item)
    return groups


def plot_sentiment_timeline(
    scored: Sequence[ScoredUtterance],
    out_path: str | Path,
    window: int = 1,
) -> Path | None:
    """Plot compound sentiment against turn order, one line per speaker.

    Args:
        scored: Scored utterances.
        out_path: Image file to write (format from the suffix).
        window: Trailing moving-average window applied per speaker;
            ``1`` plots raw scores.

    Returns:
        The path written, or ``None`` when *scored* is empty.
    """
    if not scored:
        return None

    out = Path(out_path)
    fig, ax = plt.subplots(figsize=(12, 4))
    try:
        for speaker, items in _by_speaker(scored).items():
            turns = np.array([item.turn_id for item in items], dtype=np.int32)
            values = np.array(
                rolling_mean([item.compound for item in items], window),
                dtype=np.float32,
            )
            ax.plot(turns, values, marker="o", markersize=3, label=speaker)

        ax.axhline(0.0, color="grey", linewidth=0.8, linestyle="--")
        ax.set_xlabel("Turn")
        ax.set_ylabel("Compound sentiment")
        ax.set_ylim(-1.05, 1.05)
        title = "Sentiment by turn"
        if window > 1:
            title += f" ({window}-turn moving average)"
        ax.set_title(title)
        ax.legend()
        fig.tight_layout()
        fig.savefig(out, dpi=_DPI)
    finally:
        plt.close(fig)

    logger.info("Wrote sentiment timeline to %s", out)
    return out


def plot_speaker_distribution(
    scored: Sequence[ScoredUtterance],
    out_path: str | Path,
) -> Path | None:
    """Box plot of compound scores per speaker.

    Returns:
        The path written, or ``None`` when *scored* is empty.
    """
    if not scored:
        return None

    out = Path(out_path)
    groups = _by_speaker(scored)
    data = [np.array([item.compound for item in items], dtype=np.float32) for items in groups.values()]

    fig, ax = plt.subplots(figsize=(8, 4))
    try:
        ax.boxplot(data)
        ax.set_xticks(range(1, len(groups) + 1))
        ax.set_xticklabels(list(groups))
        ax.axhline(0.0, color="grey", linewidth=0.8, linestyle="--")
        ax.set_ylabel("Compound sentiment")
        ax.set_ylim(-1.05, 1.05)
        ax.set_title("Sentiment distribution by speaker")
        fig.tight_layout()
        fig.savefig(out, dpi=_DPI)
    finally:
        plt.close(fig)

    logger.info("Wrote speaker distribution to %s", out)
    return out
