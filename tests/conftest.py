"""Shared fixtures for debate-sentiment tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from debate_sentiment.models.speakers import SpeakerConfig

_ENV_VARS = (
    "LOG_LEVEL",
    "OUTPUT_DIR",
    "REQUEST_TIMEOUT",
    "USER_AGENT",
    "SPEAKER_CONFIG",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all debate-sentiment environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("debate_sentiment.config.load_dotenv", lambda *_a, **_kw: None)
    for key in _ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def debate_config() -> SpeakerConfig:
    """A two-debater mapping with a moderator and audience under ``Other``."""
    return SpeakerConfig(
        speakers={
            "David Dimbleby": ["DAVID DIMBLEBY:", "DD:"],
            "Ed Milliband": ["ED MILLIBAND:", "EM:"],
        },
        other_labels=["AUDIENCE MEMBER:", "AUDIO DESCRIPTION:"],
    )


@pytest.fixture()
def sample_transcript() -> str:
    """A short transcript exercising preamble, noise, labels, and ``Other``."""
    return "\n".join(
        [
            "Question Time Election Special",
            "Transcript",
            "",
            "DAVID DIMBLEBY:",
            "Good evening and welcome.",
            "We have a wonderful audience tonight.",
            "Page 1",
            "AUDIENCE MEMBER:",
            "Why should we trust you?",
            "ED MILLIBAND:",
            "Because I am honest",
            "",
            "and I have a terrible record of losing.",
            "DD:",
            "Thank you.",
        ]
    )


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Reset the root logger after each test to prevent handler leaks."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)


class _KeywordEmotions:
    """A tiny keyword lexicon standing in for NRC outside ``nrc_lexicon`` tests."""

    _WORDS = {
        "angry": "anger",
        "hope": "anticipation",
        "afraid": "fear",
        "wonderful": "joy",
        "terrible": "sadness",
        "trust": "trust",
        "honest": "trust",
    }

    def affect_frequencies(self, text: str) -> dict[str, float]:
        hits = [self._WORDS[w] for w in text.lower().split() if w in self._WORDS]
        return {emotion: hits.count(emotion) / len(hits) for emotion in set(hits)}


@pytest.fixture(autouse=True)
def _keyword_emotion_scorer(
    request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Keep tests off the real NRC lexicon, which needs downloaded corpora."""
    if request.node.get_closest_marker("nrc_lexicon") is None:
        monkeypatch.setattr(
            "debate_sentiment.sentiment._default_emotion_scorer", lambda: _KeywordEmotions()
        )
