"""Lexicon-based sentiment and emotion scoring of utterances.

Each :class:`~debate_sentiment.models.transcript.Utterance` is scored with
two lexicons:

* VADER (``vaderSentiment``), a rule-based lexicon tuned for short informal
  text.  VADER reports the share of positive, neutral, and negative tokens
  plus a normalised ``compound`` valence in ``[-1, 1]``; the compound score
  is what the per-speaker statistics and charts use.
* The NRC Word-Emotion Association Lexicon (``NRCLex``), which counts the
  words associated with Plutchik's eight basic emotions.  Frequencies are
  relative to all affect words found, so a turn with no emotive words
  scores zero everywhere.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Protocol

from nrclex import NRCLex
from textblob.exceptions import MissingCorpusError
from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from debate_sentiment.exceptions import LexiconUnavailableError
from debate_sentiment.models.transcript import Utterance

logger = logging.getLogger(__name__)

EMOTIONS = (
    "anger",
    "anticipation",
    "disgust",
    "fear",
    "joy",
    "sadness",
    "surprise",
    "trust",
)


class PolarityScorer(Protocol):
    """Anything exposing VADER's ``polarity_scores`` method."""

    def polarity_scores(self, text: str) -> dict[str, float]: ...


class EmotionScorer(Protocol):
    """Maps text to per-emotion frequencies keyed by :data:`EMOTIONS`."""

    def affect_frequencies(self, text: str) -> Mapping[str, float]: ...


class NRCEmotionScorer:
    """Emotion frequencies from the NRC lexicon via :class:`nrclex.NRCLex`.

    Raises :class:`LexiconUnavailableError` when TextBlob's tokeniser
    corpora are missing.
    """

    def affect_frequencies(self, text: str) -> dict[str, float]:
        try:
            frequencies = NRCLex(text.lower()).affect_frequencies
        except (MissingCorpusError, LookupError) as exc:
            raise LexiconUnavailableError(
                "NRC emotion lexicon needs the TextBlob corpora; "
                "run `python -m textblob.download_corpora`"
            ) from exc
        scores = {emotion: float(frequencies.get(emotion, 0.0)) for emotion in EMOTIONS}
        # Older NRCLex releases key anticipation as "anticip".
        if not scores["anticipation"]:
            scores["anticipation"] = float(frequencies.get("anticip", 0.0))
        return scores


@dataclass(frozen=True)
class ScoredUtterance:
    """An utterance with its lexicon scores.

    Attributes:
        utterance: The scored turn.
        compound: Normalised overall valence, ``-1`` (negative) to ``1``.
        positive: Proportion of the text scored positive.
        neutral: Proportion of the text scored neutral.
        negative: Proportion of the text scored negative.
        emotions: NRC frequency for each name in :data:`EMOTIONS`.
    """

    utterance: Utterance
    compound: float
    positive: float
    neutral: float
    negative: float
    emotions: dict[str, float] = field(default_factory=dict, hash=False)

    @property
    def speaker(self) -> str:
        return self.utterance.speaker

    @property
    def turn_id(self) -> int:
        return self.utterance.turn_id

    @property
    def word_count(self) -> int:
        return len(self.utterance.text.split())


_analyzer: SentimentIntensityAnalyzer | None = None
_emotion_scorer: NRCEmotionScorer | None = None


def _default_analyzer() -> SentimentIntensityAnalyzer:
    # Loading the lexicon reads several files; do it once per process.
    global _analyzer
    if _analyzer is None:
        _analyzer = SentimentIntensityAnalyzer()
    return _analyzer


def _default_emotion_scorer() -> EmotionScorer:
    global _emotion_scorer
    if _emotion_scorer is None:
        _emotion_scorer = NRCEmotionScorer()
    return _emotion_scorer


def score_utterance(
    utterance: Utterance,
    analyzer: PolarityScorer | None = None,
    emotion_scorer: EmotionScorer | None = None,
) -> ScoredUtterance:
    """Score a single utterance.

    Args:
        utterance: The turn to score.
        analyzer: Scorer to use; defaults to a shared VADER analyzer.
        emotion_scorer: Emotion scorer to use; defaults to the NRC lexicon.

    Returns:
        A :class:`ScoredUtterance`.

    Raises:
        LexiconUnavailableError: If the default NRC scorer cannot load.
    """
    scorer = analyzer if analyzer is not None else _default_analyzer()
    emotions = emotion_scorer if emotion_scorer is not None else _default_emotion_scorer()
    scores = scorer.polarity_scores(utterance.text)
    frequencies = emotions.affect_frequencies(utterance.text)
    return ScoredUtterance(
        utterance=utterance,
        compound=float(scores["compound"]),
        positive=float(scores["pos"]),
        neutral=float(scores["neu"]),
        negative=float(scores["neg"]),
        emotions={emotion: float(frequencies.get(emotion, 0.0)) for emotion in EMOTIONS},
    )


def score_utterances(
    utterances: Iterable[Utterance],
    analyzer: PolarityScorer | None = None,
    emotion_scorer: EmotionScorer | None = None,
) -> list[ScoredUtterance]:
    """Score every utterance, preserving order."""
    scored = [
        score_utterance(u, analyzer=analyzer, emotion_scorer=emotion_scorer) for u in utterances
    ]
    logger.info("Scored %d utterance(s)", len(scored))
    return scored
